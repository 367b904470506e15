import datetime
import logging
import os
import tempfile
import unittest

from tagindex.utility.formatter import format_bytes, format_integer, format_rate
from tagindex.utility.logging.scoped_logger import ScopedLogger, TimedLogger
from tagindex.utility.logging.utility import setup_logger
from tests.utility import logging_test_name


class TestLogging(unittest.TestCase):
    def setUp(self) -> None:
        setup_logger()
        logging_test_name(self)

    def tearDown(self) -> None:
        setup_logger()

    def test_scoped_logger(self):
        with self.assertLogs(level=logging.INFO) as logs:
            with ScopedLogger("some work") as timer:
                pass

        self.assertIsInstance(timer.elapsed(), datetime.timedelta)
        self.assertEqual(len(logs.output), 2)
        self.assertIn("beginning some work", logs.output[0])
        self.assertIn("completed some work in", logs.output[1])

    def test_timed_logger_not_completed(self):
        timer = TimedLogger("unfinished work")
        timer.begin()

        with self.assertRaises(ValueError):
            timer.elapsed()

    def test_unknown_logging_level(self):
        with self.assertRaises(ValueError):
            setup_logger(logging_level="LOUD")

    def test_file_logging(self):
        with tempfile.TemporaryDirectory() as directory:
            log_path = os.path.join(directory, "tagindex.log")
            setup_logger(log_paths=(log_path,), logging_level="DEBUG")
            logging.debug("written to file")

            for handler in logging.getLogger().handlers:
                handler.flush()

            with open(log_path) as f:
                self.assertIn("written to file", f.read())

            for handler in logging.getLogger().handlers:
                handler.close()

    def test_formatter(self):
        self.assertEqual(format_bytes(512), "512B")
        self.assertEqual(format_bytes(2048), "2K")
        self.assertEqual(format_bytes(3 * 1024 * 1024), "3.0M")
        self.assertEqual(format_integer(1234567), "1,234,567")
        self.assertEqual(format_rate(100, 0.5), "200/s")
        self.assertEqual(format_rate(100, 0), "inf/s")
