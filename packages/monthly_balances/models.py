"""Data models for ``monthly_balances``.

The pipeline is strictly forward: raw records become :class:`Transaction`
values, transactions are grouped into one :class:`CustomerLedger` per
customer inside a :class:`LedgerStore`, each ledger derives its per-month
:class:`MonthlyBalance` buckets, and the store is finally flattened into
:class:`OutputRow` values.

Amounts are integer minor units (cents). There is no currency or timezone
handling.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import NamedTuple, TypeAlias

# Sentinels for a bucket that has not folded anything yet. The first fold
# always replaces both.
MIN_SENTINEL = sys.maxsize
MAX_SENTINEL = -sys.maxsize - 1

Period: TypeAlias = tuple[int, int]
"""A ``(year, month)`` bucket key."""


class LedgerDate(NamedTuple):
    """A calendar date validated structurally rather than against a calendar.

    Field order makes tuple comparison chronological. Days are only checked
    to be within ``1..31``, so ``02/30/2021`` is representable and sorts after
    ``02/28/2021``.
    """

    year: int
    month: int
    day: int

    @property
    def period(self) -> Period:
        return (self.year, self.month)

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.day:02d}/{self.year:04d}"


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single parsed ledger entry. Negative amounts are debits."""

    customer_id: str
    date: LedgerDate
    amount: int


@dataclass(slots=True)
class MonthlyBalance:
    """Running statistics for one customer-month bucket.

    ``ending_balance`` is the last running balance folded into the bucket,
    which is not necessarily between ``min_balance`` and ``max_balance``
    until at least one transaction has been folded.
    """

    min_balance: int = MIN_SENTINEL
    max_balance: int = MAX_SENTINEL
    ending_balance: int = 0

    def fold(self, amount: int) -> None:
        self.ending_balance += amount
        if self.ending_balance > self.max_balance:
            self.max_balance = self.ending_balance
        if self.ending_balance < self.min_balance:
            self.min_balance = self.ending_balance


@dataclass(slots=True)
class CustomerLedger:
    """One customer's raw transactions plus their derived monthly balances.

    ``balances`` is keyed by ``year`` and then ``month``.
    """

    customer_id: str
    transactions: list[Transaction] = field(default_factory=list)
    balances: dict[int, dict[int, MonthlyBalance]] = field(default_factory=dict)

    def bucket(self, year: int, month: int) -> MonthlyBalance:
        """Return the bucket for ``(year, month)``, creating it when missing."""

        months = self.balances.setdefault(year, {})
        balance = months.get(month)
        if balance is None:
            balance = months[month] = MonthlyBalance()
        return balance

    def balance_for(self, year: int, month: int) -> MonthlyBalance | None:
        return self.balances.get(year, {}).get(month)

    def iter_balances(self) -> Iterator[tuple[int, int, MonthlyBalance]]:
        for year, months in self.balances.items():
            for month, balance in months.items():
                yield year, month, balance


class LedgerStore:
    """All customer ledgers for a single run, keyed by customer ID.

    A store is created per run and passed explicitly through the pipeline.
    Creation of a ledger happens under a lock so concurrent grouping cannot
    produce two ledgers for one customer; callers then mutate the ledger they
    were handed in place.
    """

    def __init__(self) -> None:
        self._ledgers: dict[str, CustomerLedger] = {}
        self._lock = threading.Lock()

    def ledger_for(self, customer_id: str) -> CustomerLedger:
        with self._lock:
            ledger = self._ledgers.get(customer_id)
            if ledger is None:
                ledger = self._ledgers[customer_id] = CustomerLedger(customer_id)
            return ledger

    def get(self, customer_id: str) -> CustomerLedger | None:
        with self._lock:
            return self._ledgers.get(customer_id)

    def balance(self, customer_id: str, year: int, month: int) -> MonthlyBalance | None:
        """Look up a bucket by ``(customer_id, year, month)``."""

        ledger = self.get(customer_id)
        return ledger.balance_for(year, month) if ledger is not None else None

    def ledgers(self) -> list[CustomerLedger]:
        with self._lock:
            return list(self._ledgers.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._ledgers)

    def __contains__(self, customer_id: object) -> bool:
        with self._lock:
            return customer_id in self._ledgers


@dataclass(frozen=True, slots=True)
class OutputRow:
    """One line of the report, produced by :mod:`monthly_balances.report`."""

    customer_id: str
    month: int
    year: int
    min_balance: int
    max_balance: int
    ending_balance: int


__all__ = [
    "MAX_SENTINEL",
    "MIN_SENTINEL",
    "CustomerLedger",
    "LedgerDate",
    "LedgerStore",
    "MonthlyBalance",
    "OutputRow",
    "Period",
    "Transaction",
]
