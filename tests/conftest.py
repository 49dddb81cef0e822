"""Pytest configuration shared by the ``monthly_balances`` test suite.

Tests must not pick up a developer's environment: settings and logging read
``MONTHLY_BALANCES_*`` variables and the CLI loads ``.env`` from the current
directory. An autouse fixture clears those variables, runs each test from its
own temporary directory, and detaches any logging handlers the CLI installed.
"""

from __future__ import annotations

import csv
import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Make sure the workspace `packages/` dir is on sys.path so `monthly_balances` is importable
_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR), str(_ROOT)] if p not in sys.path]

from monthly_balances.logging_setup import reset_logging  # noqa: E402

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in list(os.environ):
        if name.startswith("MONTHLY_BALANCES_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # load_dotenv writes straight into os.environ, outside monkeypatch.
    for name in list(os.environ):
        if name.startswith("MONTHLY_BALANCES_"):
            os.environ.pop(name, None)
    reset_logging()


@pytest.fixture
def fixture_csv() -> Path:
    """90 rows for three customers (C108, C231, C512)."""

    return DATA_DIR / "transactions_90.csv"


@pytest.fixture
def fixture_records(fixture_csv: Path) -> list[tuple[str, ...]]:
    with fixture_csv.open(encoding="utf-8", newline="") as f:
        return [tuple(row) for row in csv.reader(f)]
