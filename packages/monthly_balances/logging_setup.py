"""Centralized logging configuration for the ``monthly_balances`` package.

- ``configure_logging(...)`` attaches one ``StreamHandler`` to the package
  root logger (``"monthly_balances"``). The CLI calls it once at startup.
- ``get_logger(name)`` returns a named logger and makes sure the package root
  has a ``NullHandler`` while nothing has been configured.

Library modules never attach handlers of their own; they call
``get_logger("monthly_balances.<module>")`` and leave output to the host.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "monthly_balances"
_LEVEL_ENV_VAR = "MONTHLY_BALANCES_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def level_from_name(name: str) -> int | None:
    """Resolve a numeric string or standard level name; ``None`` if unknown."""

    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        parsed = level_from_name(level)
        if parsed is not None:
            return parsed
    env_val = os.getenv(_LEVEL_ENV_VAR)
    if env_val:
        parsed = level_from_name(env_val)
        if parsed is not None:
            return parsed
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger exactly once.

    Parameters
    ----------
    level:
        ``int`` or level name (``"DEBUG"``, ``"INFO"``...). When ``None`` the
        ``MONTHLY_BALANCES_LOG_LEVEL`` environment variable is consulted,
        falling back to ``logging.WARNING`` so a plain run stays quiet.
    fmt:
        Optional format string for the handler.
    stream:
        Destination stream; ``sys.stderr`` when omitted.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers installed by :func:`configure_logging`.

    Used by tests and embedding hosts that invoke the CLI more than once in
    a single process.
    """

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, with a silent default for library use."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "level_from_name", "reset_logging"]
