"""Public orchestration for ``monthly_balances``.

Both entry points build a fresh :class:`~monthly_balances.models.LedgerStore`
per call and thread it through parse -> aggregate -> flatten -> format.
Nothing is kept between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from os import PathLike

from .aggregator import aggregate
from .config import Settings
from .csv_io import read_records, write_lines
from .logging_setup import get_logger
from .models import LedgerStore
from .parser import parse_transactions
from .report import flatten, format_lines

logger = get_logger("monthly_balances.api")


def build_report(
    records: Iterable[Sequence[str]],
    *,
    settings: Settings | None = None,
) -> list[str]:
    """Turn raw ``(customer_id, date, amount)`` records into report lines.

    Malformed records are skipped. The result is sorted by customer, year and
    month, and every line ends with ``"\\n"``.
    """

    transactions = parse_transactions(records)
    store = aggregate(transactions, store=LedgerStore(), settings=settings)
    rows = flatten(store)
    logger.info("built %d report rows for %d customers", len(rows), len(store))
    return format_lines(rows)


def run_report(
    input_path: str | PathLike[str],
    output_path: str | PathLike[str],
    *,
    settings: Settings | None = None,
) -> int:
    """Read ``input_path``, write the monthly report to ``output_path``.

    Returns the number of rows written. Raises
    :class:`~monthly_balances.errors.ResourceUnavailableError` when either
    file cannot be used; the output is not touched if the input fails.
    """

    records = read_records(input_path)
    lines = build_report(records, settings=settings)
    return write_lines(output_path, lines)


__all__ = ["build_report", "run_report"]
