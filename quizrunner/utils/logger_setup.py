# quizrunner/utils/logger_setup.py
from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


class _ColorFormatter(logging.Formatter):
    COLORS = {
        logging.DEBUG: "\033[90m",     # gray
        logging.INFO: "\033[94m",      # blue
        logging.WARNING: "\033[93m",   # yellow
        logging.ERROR: "\033[91m",     # red
        logging.CRITICAL: "\033[95m",  # magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    *,
    console_level: str = "WARNING",
    log_file: Optional[str] = None,
    file_level: str = "DEBUG",
) -> None:
    """Console goes to stderr so it never mixes with the quiz prompts."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(getattr(logging, console_level.upper(), logging.WARNING))
    ch.setFormatter(_ColorFormatter(fmt="[%(levelname)s] %(message)s"))
    root.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        fh.setLevel(getattr(logging, file_level.upper(), logging.DEBUG))
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    root.debug("Logging initialized. log_file=%s", log_file)
