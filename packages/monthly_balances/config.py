"""Run settings for ``monthly_balances``.

Settings come from explicit overrides (CLI options, API callers) layered over
environment variables:

- ``MONTHLY_BALANCES_CARRY_FORWARD``: ``1/true/yes`` to start each month from
  the previous month's ending balance, ``0/false/no`` (default) to start
  every month at zero.
- ``MONTHLY_BALANCES_MAX_WORKERS``: number of threads used to fold customer
  ledgers (default ``1``, sequential).
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CARRY_FORWARD_ENV_VAR = "MONTHLY_BALANCES_CARRY_FORWARD"
MAX_WORKERS_ENV_VAR = "MONTHLY_BALANCES_MAX_WORKERS"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class Settings(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    carry_forward: bool = False
    max_workers: int = Field(default=1, ge=1, le=64)


def _env_bool(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be one of 1/true/yes or 0/false/no, got {raw!r}")


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings(
    *,
    carry_forward: bool | None = None,
    max_workers: int | None = None,
) -> Settings:
    """Build :class:`Settings` from the environment plus explicit overrides.

    ``None`` overrides fall through to the environment, then to defaults.
    Raises ``ValueError`` (``pydantic.ValidationError`` included) on bad
    values.
    """

    values: dict[str, Any] = {}
    env_carry = _env_bool(CARRY_FORWARD_ENV_VAR)
    env_workers = _env_int(MAX_WORKERS_ENV_VAR)

    if carry_forward is not None:
        values["carry_forward"] = carry_forward
    elif env_carry is not None:
        values["carry_forward"] = env_carry

    if max_workers is not None:
        values["max_workers"] = max_workers
    elif env_workers is not None:
        values["max_workers"] = env_workers

    return Settings(**values)


__all__ = ["CARRY_FORWARD_ENV_VAR", "MAX_WORKERS_ENV_VAR", "Settings", "load_settings"]
