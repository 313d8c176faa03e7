import io
import logging
import unittest

from gsheettsv.util.log import configure_logging


class TestConfigureLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.root = logging.getLogger()
        self.saved_handlers = list(self.root.handlers)
        self.saved_level = self.root.level

    def tearDown(self) -> None:
        self.root.handlers[:] = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_single_handler_on_given_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)
        configure_logging(stream=stream)

        self.assertEqual(len(self.root.handlers), 1)
        self.assertEqual(self.root.level, logging.INFO)

        logging.getLogger("gsheettsv.test").info("hello")
        self.assertIn("[INFO] [gsheettsv.test] hello", stream.getvalue())

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, stream=io.StringIO())
        self.assertEqual(self.root.level, logging.DEBUG)

    def test_library_loggers_are_quieted(self) -> None:
        configure_logging(stream=io.StringIO())
        self.assertEqual(logging.getLogger("urllib3").level, logging.WARNING)
        self.assertEqual(logging.getLogger("google").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
