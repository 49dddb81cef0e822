"""Exception taxonomy for ``monthly_balances``.

Only two failure modes leave a module boundary: a single malformed input
record (recovered by the parser, which drops the record) and an I/O resource
that cannot be opened or written (raised by :mod:`monthly_balances.csv_io`
and turned into an exit status by the CLI).
"""

from __future__ import annotations

from os import PathLike
from typing import Literal


class MonthlyBalancesError(Exception):
    """Base class for errors raised by this package."""


class MalformedRecordError(MonthlyBalancesError, ValueError):
    """A raw input record failed validation and cannot become a transaction."""

    def __init__(self, reason: str, record: tuple[str, ...] | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.record = record


class ResourceUnavailableError(MonthlyBalancesError):
    """The input could not be read or the output could not be written."""

    def __init__(
        self,
        path: str | PathLike[str],
        role: Literal["input", "output"],
        detail: str,
    ) -> None:
        super().__init__(f"cannot use {role} file {str(path)!r}: {detail}")
        self.path = path
        self.role = role
        self.detail = detail


__all__ = ["MalformedRecordError", "MonthlyBalancesError", "ResourceUnavailableError"]
