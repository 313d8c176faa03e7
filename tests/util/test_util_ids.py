import unittest

from gsheettsv.util.ids import parse_file_id


class TestUtilIds(unittest.TestCase):
    def test_plain_id_is_returned_as_is(self) -> None:
        self.assertEqual(parse_file_id("1AbC-d_E"), "1AbC-d_E")

    def test_edit_url(self) -> None:
        url = "https://docs.google.com/spreadsheets/d/1AbC-d_E/edit#gid=123"
        self.assertEqual(parse_file_id(url), "1AbC-d_E")

    def test_export_url(self) -> None:
        url = "https://docs.google.com/spreadsheets/d/XYZ/export?format=tsv&gid=0"
        self.assertEqual(parse_file_id(url), "XYZ")

    def test_other_urls_are_untouched(self) -> None:
        url = "https://docs.google.com/document/d/DOC/edit"
        self.assertEqual(parse_file_id(url), url)


if __name__ == "__main__":
    unittest.main()
