import datetime
import logging
import time
from typing import Optional


class ScopedLogger:
    """Logs when a block begins and completes, the elapsed time stays readable afterwards"""

    def __init__(self, message: str, logging_level=logging.INFO):
        self.timer = TimedLogger(message=message, logging_level=logging_level)

    def __enter__(self) -> "TimedLogger":
        self.timer.begin()
        return self.timer

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.end()


class TimedLogger:
    def __init__(self, message: str, logging_level=logging.INFO):
        self.message = message
        self.logging_level = logging_level
        self.timer: Optional[int] = None
        self.elapsed_ns: Optional[int] = None

    def begin(self):
        self.timer = time.perf_counter_ns()
        self.elapsed_ns = None
        logging.log(self.logging_level, f"beginning {self.message}")

    def end(self):
        self.elapsed_ns = time.perf_counter_ns() - self.timer
        logging.log(self.logging_level, f"completed {self.message} in {self.elapsed()}")

    def elapsed(self) -> datetime.timedelta:
        if self.elapsed_ns is None:
            raise ValueError(f"{self.message} is not completed yet")

        return datetime.timedelta(microseconds=self.elapsed_ns // 1000)
