"""Public interface for the ``monthly_balances`` package.

Symbol re-exports only; the pipeline lives in ``parser``, ``aggregator`` and
``report`` and is orchestrated by ``api``.
"""

from .aggregator import aggregate, fold_ledger, group_transactions
from .api import build_report, run_report
from .config import Settings, load_settings
from .errors import MalformedRecordError, MonthlyBalancesError, ResourceUnavailableError
from .models import (
    CustomerLedger,
    LedgerDate,
    LedgerStore,
    MonthlyBalance,
    OutputRow,
    Transaction,
)
from .parser import parse_record, parse_transactions
from .report import flatten, format_lines, format_row

__all__ = [
    # API
    "build_report",
    "run_report",
    "parse_record",
    "parse_transactions",
    "aggregate",
    "group_transactions",
    "fold_ledger",
    "flatten",
    "format_row",
    "format_lines",
    # Config
    "Settings",
    "load_settings",
    # Models
    "Transaction",
    "LedgerDate",
    "MonthlyBalance",
    "CustomerLedger",
    "LedgerStore",
    "OutputRow",
    # Errors
    "MonthlyBalancesError",
    "MalformedRecordError",
    "ResourceUnavailableError",
]
