# core/logging_utils.py
from __future__ import annotations
import logging, logging.handlers, os, sys
from pathlib import Path
from typing import Optional

from core.settings_utils import data_dir

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_BYTES = 2 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 3

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    log_level: Optional[str] = None,
    log_dir: str | os.PathLike | None = None,
    enable_console: bool = True,
) -> Path:
    """
    Console + rotating file logging on the root logger.
    Level comes from LOG_LEVEL unless given. Returns the log file path.
    """
    log_level = (log_level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    log_path = Path(log_dir) if log_dir else data_dir() / "logs"
    log_path.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level, logging.INFO))
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if enable_console and sys.stdout is not None:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(fmt)
        root.addHandler(console)

    log_file = log_path / "passgen.log"
    fh = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=DEFAULT_MAX_BYTES,
        backupCount=DEFAULT_BACKUP_COUNT,
        encoding="utf-8",
    )
    fh.setFormatter(fmt)
    root.addHandler(fh)

    root.info("Logging initialized (%s).", log_level)
    return log_file
