# logger_utils.py - logging setup and timing helper

import logging
import time
from typing import Optional

PACKAGE_LOGGER = "trie_dictionary"
LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = PACKAGE_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """
    Return a named logger. The first call attaches one stream handler to the
    package logger so every module's records share the same format.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
    if level:
        root.setLevel(level.upper())
    return logging.getLogger(name)


def configure_logging(config) -> logging.Logger:
    """
    Opt-in setup for applications: attach the package handler and apply
    config["log_level"]. Library code never calls this.
    """
    return get_logger(PACKAGE_LOGGER, config.get("log_level"))


class Log:
    @staticmethod
    def time_block(label, logger: Optional[logging.Logger] = None):
        """
        Measure a code block and log how long it took.
            with Log.time_block("load"):
                build()
        """
        return _Timer(label, logger or logging.getLogger(PACKAGE_LOGGER))


class _Timer:
    """Context manager used by Log.time_block."""

    def __init__(self, label, logger: logging.Logger):
        self.label = label
        self.logger = logger
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        if exc_type is None:
            self.logger.info("%s done: %ss", self.label, self.elapsed)
        else:
            self.logger.warning("%s failed after %ss: %s", self.label, self.elapsed, exc)
        return False
