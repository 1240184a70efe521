"""
Logging configuration for the Contacts API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Every module then logs through
``logging.getLogger(__name__)`` and inherits this configuration,
including the uvicorn loggers when the app is served by ``run.py``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send every record to stderr, and to ``logfile`` when given.

    ``level`` is matched against the names in :mod:`logging` without
    regard to case; a name that is not a level (``"loud"``) gives
    ``INFO``.  The log file's directory is created if missing.  Does
    nothing if the root logger already has handlers, so calling
    ``create_app`` several times never duplicates output.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or by a previous create_app().
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger(__name__).debug("Logging configured at level %s", logging.getLevelName(numeric_level))
