# src/tasklist/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "tasklist.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ForeignRecordFilter(logging.Filter):
    """
    The console shows the task list itself, so only tasklist.* records pass
    at the handler level; records from anywhere else (python-dotenv, captured
    warnings) need `foreign_level` or higher.
    """

    def __init__(self, foreign_level: int = logging.ERROR) -> None:
        super().__init__()
        self.foreign_level = foreign_level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.partition(".")[0] == "tasklist":
            return True
        return record.levelno >= self.foreign_level


def _handler(handler: logging.Handler, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasklist",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Replace the root handlers with a filtered stderr handler and a log file
    under `log_dir`. Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    console = _handler(logging.StreamHandler(sys.stderr), console_level, fmt)
    console.addFilter(_ForeignRecordFilter())

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.setLevel(min(console_level, file_level))
    root.addHandler(console)
    root.addHandler(_handler(logging.FileHandler(log_file, encoding="utf-8"), file_level, fmt))

    logging.captureWarnings(True)
    return log_file
