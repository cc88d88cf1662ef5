# tasks_api/core/logging_config.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Send everything to stdout in one format. Safe to call once per app."""
    root = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    if root.handlers:
        root.setLevel(level)
        return
    root.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
