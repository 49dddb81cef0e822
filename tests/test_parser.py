import pytest

from monthly_balances import MalformedRecordError, Transaction, parse_record, parse_transactions
from monthly_balances.models import LedgerDate
from monthly_balances.parser import parse_amount, parse_date


def test_fixture_parses_every_row(fixture_records):
    transactions = parse_transactions(fixture_records)
    assert len(transactions) == 90
    assert {t.customer_id for t in transactions} == {"C108", "C231", "C512"}


def test_parse_record_trims_fields():
    tx = parse_record(("  C512 ", " 6/11/2021", "  -400  "))
    assert tx == Transaction(customer_id="C512", date=LedgerDate(2021, 6, 11), amount=-400)


def test_output_preserves_input_order():
    records = [
        ("B", "03/01/2021", "5"),
        ("A", "01/01/2021", "7"),
        ("B", "02/01/2021", "-3"),
    ]
    assert [t.amount for t in parse_transactions(records)] == [5, 7, -3]


@pytest.mark.parametrize(
    "bad_date",
    ["13/01/2022", "00/10/2022", "01/32/2022", "01/00/2022", "01/10/1899", "01/10/2051",
     "2022-01-10", "01/10/22", "Jan 10 2022", "1/1/2022/1"],
)
def test_invalid_dates_rejected(bad_date):
    with pytest.raises(MalformedRecordError):
        parse_date(bad_date)


def test_day_is_checked_structurally():
    assert parse_date("02/31/2021") == LedgerDate(2021, 2, 31)
    assert parse_date("1/5/1900") == LedgerDate(1900, 1, 5)
    assert parse_date("12/31/2050") == LedgerDate(2050, 12, 31)


@pytest.mark.parametrize("bad_amount", ["12.50", "1e3", "abc", "--5", "5-", "1,000"])
def test_invalid_amounts_rejected(bad_amount):
    with pytest.raises(MalformedRecordError):
        parse_amount(bad_amount)


def test_amount_accepts_sign_and_large_values():
    assert parse_amount("+42") == 42
    assert parse_amount("-2000000") == -2000000
    assert parse_amount(str(2**63 - 1)) == 2**63 - 1
    with pytest.raises(MalformedRecordError):
        parse_amount(str(2**63))


@pytest.mark.parametrize(
    "record",
    [
        ("C1", "01/01/2022"),
        ("C1", "01/01/2022", "10", "extra"),
        ("", "01/01/2022", "10"),
        ("C1", "  ", "10"),
        ("C1", "01/01/2022", ""),
        (),
    ],
)
def test_structural_problems_rejected(record):
    with pytest.raises(MalformedRecordError) as info:
        parse_record(record)
    assert info.value.record == tuple(record)


def test_five_invalid_dates_are_skipped(fixture_records):
    records = list(fixture_records)
    for i in (0, 17, 33, 60, 89):
        cid, _date, amount = records[i]
        records[i] = (cid, "13/45/2022", amount)
    assert len(parse_transactions(records)) == 85


def test_five_invalid_amounts_are_skipped(fixture_records):
    records = list(fixture_records)
    for i in (2, 10, 45, 70, 88):
        cid, date, _amount = records[i]
        records[i] = (cid, date, "twelve")
    assert len(parse_transactions(records)) == 85


def test_empty_input_yields_nothing():
    assert parse_transactions([]) == []


def test_skipped_records_are_logged(caplog):
    caplog.set_level("DEBUG", logger="monthly_balances")
    parse_transactions([("C1", "bad", "1"), ("C1", "01/01/2022", "1")])
    assert "skipping record 1" in caplog.text
    assert "parsed 1 transactions (1 skipped)" in caplog.text
