"""Balance aggregator: group transactions per customer, fold monthly balances.

Aggregation runs in two passes over an explicitly passed
:class:`~monthly_balances.models.LedgerStore`:

1. Grouping files each transaction into its customer's ledger in arrival
   order.
2. Folding sorts each ledger chronologically and accumulates a running
   balance per ``(year, month)`` bucket, tracking the minimum and maximum
   balance seen after every transaction.

On a shared date the larger amount folds first, so credits land before
debits. That ordering changes the intermediate balances (and therefore the
min/max) whenever same-day transactions straddle zero.

By default each month starts from zero. With ``carry_forward`` a new month
starts from the customer's previous closing balance instead.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import Settings
from .logging_setup import get_logger
from .models import CustomerLedger, LedgerDate, LedgerStore, Period, Transaction
from .parser import MAX_YEAR, MIN_YEAR
from .pmap import p_map

logger = get_logger("monthly_balances.aggregator")


def fold_order(tx: Transaction) -> tuple[LedgerDate, int]:
    """Sort key: chronological, larger amount first on a shared date."""

    return (tx.date, -tx.amount)


def _resolve_period(tx: Transaction) -> Period | None:
    date = tx.date
    if not isinstance(date, LedgerDate):
        return None
    if not (1 <= date.month <= 12 and MIN_YEAR <= date.year <= MAX_YEAR):
        return None
    return date.period


def group_transactions(store: LedgerStore, transactions: Iterable[Transaction]) -> LedgerStore:
    """File every transaction under its customer's ledger, in arrival order."""

    count = 0
    for tx in transactions:
        store.ledger_for(tx.customer_id).transactions.append(tx)
        count += 1
    logger.debug("grouped %d transactions into %d ledgers", count, len(store))
    return store


def fold_ledger(ledger: CustomerLedger, *, carry_forward: bool = False) -> CustomerLedger:
    """Recompute ``ledger.balances`` from ``ledger.transactions``.

    Existing balances are discarded first, so folding the same ledger twice
    gives the same result. Transactions whose date does not resolve to a
    valid ``(year, month)`` are logged and skipped.
    """

    ledger.balances.clear()

    resolvable: list[tuple[Period, Transaction]] = []
    for tx in ledger.transactions:
        period = _resolve_period(tx)
        if period is None:
            logger.warning(
                "skipping transaction for %s with unresolvable date %r",
                ledger.customer_id,
                tx.date,
            )
            continue
        resolvable.append((period, tx))
    resolvable.sort(key=lambda item: fold_order(item[1]))

    carried = 0
    for (year, month), tx in resolvable:
        is_new = ledger.balance_for(year, month) is None
        bucket = ledger.bucket(year, month)
        if is_new and carry_forward:
            bucket.ending_balance = carried
        bucket.fold(tx.amount)
        carried = bucket.ending_balance

    return ledger


def aggregate(
    transactions: Iterable[Transaction],
    *,
    store: LedgerStore | None = None,
    settings: Settings | None = None,
) -> LedgerStore:
    """Group then fold ``transactions`` into ``store`` (a fresh one by default).

    Folding for a customer only begins after every transaction has been
    grouped. Ledgers are independent, so with ``settings.max_workers > 1``
    they are folded on a thread pool, one ledger per task.
    """

    if settings is None:
        settings = Settings()
    store = store if store is not None else LedgerStore()

    group_transactions(store, transactions)

    def _fold(ledger: CustomerLedger) -> CustomerLedger:
        return fold_ledger(ledger, carry_forward=settings.carry_forward)

    p_map(store.ledgers(), _fold, concurrency=settings.max_workers)
    return store


__all__ = ["aggregate", "fold_ledger", "fold_order", "group_transactions"]
