"""
Centralized logging configuration.

Modules keep using ``logging.getLogger(__name__)``; ``setup_logging`` only
installs the root handler, once, when the application starts.
"""
import logging
import sys
from typing import Optional

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once."""
    global _initialized
    if _initialized:
        return
    from tripledger.core.config import settings

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    root.addHandler(handler)
    _initialized = True
