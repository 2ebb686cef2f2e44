"""
Logging setup for the Todo API.

``setup_logging`` is called by every ``create_app``.  The root logger's
level always follows ``LOG_LEVEL``, even when uvicorn or the test runner
attached handlers first.  Our own console handler is added only when the
root logger has none, and a file handler is added once per ``LOG_FILE``
path.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler_for(root: logging.Logger, path: Path) -> Optional[logging.FileHandler]:
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path:
            return handler
    return None


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``level`` to the root logger and make sure it has somewhere to write.

    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    if not root.handlers:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)

    if logfile:
        path = Path(logfile).resolve()
        if _file_handler_for(root, path) is None:
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
