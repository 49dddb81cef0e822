"""Report formatter: flatten a populated store into sorted output lines.

Rows are ordered by customer ID, then year, then month. Each row serializes
as ``customerID,month/year,min,max,ending`` with an unpadded month and a
four-digit year.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import LedgerStore, OutputRow


def _sort_key(row: OutputRow) -> tuple[bytes, int, int]:
    return (row.customer_id.encode("utf-8"), row.year, row.month)


def flatten(store: LedgerStore) -> list[OutputRow]:
    rows = [
        OutputRow(
            customer_id=ledger.customer_id,
            month=month,
            year=year,
            min_balance=balance.min_balance,
            max_balance=balance.max_balance,
            ending_balance=balance.ending_balance,
        )
        for ledger in store.ledgers()
        for year, month, balance in ledger.iter_balances()
    ]
    rows.sort(key=_sort_key)
    return rows


def format_row(row: OutputRow) -> str:
    return (
        f"{row.customer_id},{row.month}/{row.year:04d},"
        f"{row.min_balance},{row.max_balance},{row.ending_balance}"
    )


def format_lines(rows: Iterable[OutputRow]) -> list[str]:
    """Serialize rows in the given order, one newline-terminated line each."""

    return [format_row(row) + "\n" for row in rows]


__all__ = ["flatten", "format_lines", "format_row"]
