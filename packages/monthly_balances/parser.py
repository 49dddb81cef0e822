"""Transaction parser: raw record tuples -> :class:`Transaction` values.

A record is ``(customer_id, date, amount)`` with the date in ``MM/DD/YYYY``
form and the amount an integer number of minor units. Records that fail any
check are dropped individually; a bad row never aborts the run.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .errors import MalformedRecordError
from .logging_setup import get_logger
from .models import LedgerDate, Transaction

logger = get_logger("monthly_balances.parser")

EXPECTED_FIELDS = 3
MIN_YEAR = 1900
MAX_YEAR = 2050

# Signed 64-bit range.
MIN_AMOUNT = -(2**63)
MAX_AMOUNT = 2**63 - 1

_DATE_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})", re.ASCII)
_AMOUNT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_date(text: str) -> LedgerDate:
    """Parse ``MM/DD/YYYY`` into a :class:`LedgerDate`.

    Month must be 1-12, day 1-31 and year 1900-2050. The day is not checked
    against the length of the month.
    """

    m = _DATE_RE.fullmatch(text.strip())
    if m is None:
        raise MalformedRecordError(f"date is not MM/DD/YYYY: {text!r}")
    month, day, year = (int(g) for g in m.groups())
    if not 1 <= month <= 12:
        raise MalformedRecordError(f"month out of range: {text!r}")
    if not 1 <= day <= 31:
        raise MalformedRecordError(f"day out of range: {text!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise MalformedRecordError(f"year out of range: {text!r}")
    return LedgerDate(year, month, day)


def parse_amount(text: str) -> int:
    s = text.strip()
    if _AMOUNT_RE.fullmatch(s) is None:
        raise MalformedRecordError(f"amount is not an integer: {text!r}")
    amount = int(s)
    if not MIN_AMOUNT <= amount <= MAX_AMOUNT:
        raise MalformedRecordError(f"amount does not fit a 64-bit integer: {text!r}")
    return amount


def parse_record(record: Sequence[str]) -> Transaction:
    """Validate one raw record and build a :class:`Transaction`.

    Raises :class:`MalformedRecordError` describing the first failed check.
    """

    fields = tuple(record)
    if len(fields) != EXPECTED_FIELDS:
        raise MalformedRecordError(
            f"expected {EXPECTED_FIELDS} fields, got {len(fields)}", fields
        )
    customer_id, date_raw, amount_raw = (f.strip() for f in fields)
    if not customer_id or not date_raw or not amount_raw:
        raise MalformedRecordError("empty field", fields)
    try:
        date = parse_date(date_raw)
        amount = parse_amount(amount_raw)
    except MalformedRecordError as exc:
        raise MalformedRecordError(exc.reason, fields) from exc
    return Transaction(customer_id=customer_id, date=date, amount=amount)


def parse_transactions(records: Iterable[Sequence[str]]) -> list[Transaction]:
    """Parse every record, skipping malformed ones, preserving input order."""

    transactions: list[Transaction] = []
    skipped = 0
    for lineno, record in enumerate(records, start=1):
        try:
            transactions.append(parse_record(record))
        except MalformedRecordError as exc:
            skipped += 1
            logger.debug("skipping record %d: %s", lineno, exc.reason)
    logger.info("parsed %d transactions (%d skipped)", len(transactions), skipped)
    return transactions


__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "parse_amount",
    "parse_date",
    "parse_record",
    "parse_transactions",
]
