# logger_utils.py - logging setup plus timing/metric helpers

import logging
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# file lines look like: [YYYY-MM-DD HH:MM:SS] INFO    | message
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "suggestion_builder"

logger = logging.getLogger(__name__)


def setup_logging(level="INFO", log_file: Optional[str] = None, use_color: bool = True) -> logging.Logger:
    """
    Configure the package logger.
    Console output goes through rich; log_file (optional) gets plain lines.
    Calling again replaces the handlers instead of stacking them.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    # stderr so suggestion output on stdout stays clean
    console = Console(stderr=True, no_color=not use_color)
    root.addHandler(RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True))

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(fh)

    return root


class Log:
    """Metric helpers on top of the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts etc).
        Example: suggest done: 0.002s
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure execution time of a code block:
            with Log.time_block("suggest"):
                gen.suggest()
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
