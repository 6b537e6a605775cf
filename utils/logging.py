# utils/logging.py
"""
Logging helpers for the rebrand tool.

Stdout is reserved for the per-entry report lines, so diagnostics go to
stderr through a single handler attached to the ``rebrand`` logger.

Configuration:
- LOG_LEVEL environment variable sets the initial level (default WARNING)
- set_verbose() lowers the level to DEBUG for --verbose runs
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "rebrand"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def level_from_env(default: int = logging.WARNING) -> int:
    """Read LOG_LEVEL as a level name, falling back to default for unknown names."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "").strip().upper())
    return level if isinstance(level, int) else default


def _configure_root() -> logging.Logger:
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level_from_env())
    root.propagate = False

    _configured = True
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger nested under the ``rebrand`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        logging.Logger sharing the rebrand stderr handler
    """
    root = _configure_root()
    if not name or name == ROOT_LOGGER_NAME:
        return root
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_verbose(verbose: bool) -> None:
    """Switch the rebrand loggers to DEBUG when verbose output is requested."""
    if verbose:
        _configure_root().setLevel(logging.DEBUG)
