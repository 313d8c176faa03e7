import unittest

from gsheettsv.errors import NotFoundError
from gsheettsv.export import ExportResult


class TestExportResult(unittest.TestCase):
    def test_success_defaults(self) -> None:
        r = ExportResult(status="success", url="u", status_code=200, bytes_written=3)
        self.assertTrue(r.ok)
        self.assertIsNone(r.error_type)
        self.assertIsNone(r.error_details)

    def test_failed_copies_error(self) -> None:
        err = NotFoundError("gone", details={"status_code": 404})
        r = ExportResult.failed("u", err, status_code=404)
        self.assertFalse(r.ok)
        self.assertEqual(r.status, "failed")
        self.assertEqual(r.error_type, "NotFoundError")
        self.assertEqual(r.error_message, "gone")
        self.assertEqual(r.error_details, {"status_code": 404})
        self.assertEqual(r.bytes_written, 0)


if __name__ == "__main__":
    unittest.main()
