"""
Logging for the ``txn_dashboard`` package.

Entry points (the Streamlit app) call ``configure_logging()`` once. Library
modules only call ``get_logger("txn_dashboard.<module>")`` and never attach
handlers of their own.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "txn_dashboard"
_CONFIGURED = False


def _parse_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    env_val = (os.getenv("TXN_DASHBOARD_LOG_LEVEL") or "").strip().upper()
    if env_val.isdigit():
        return int(env_val)
    numeric = getattr(logging, env_val, None) if env_val else None
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = None, *, stream: IO[str] = sys.stderr) -> None:
    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    logger.setLevel(_parse_level(level))
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    _CONFIGURED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    root = logging.getLogger(_PKG_LOGGER_NAME)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name or _PKG_LOGGER_NAME)
