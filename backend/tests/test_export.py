import csv
from datetime import date
from decimal import Decimal
from io import StringIO

import pytest

from savings.services.export import DAILY_HEADERS, build_daily_rows, write_csv, write_xlsx
from savings.services.interest import LedgerEntry, RateEntry, calculate_balance

TXS = [
    LedgerEntry(type="deposit", amount=Decimal("10000.00"), date=date(2024, 1, 1), description="Initial deposit"),
    LedgerEntry(type="withdrawal", amount=Decimal("2000.00"), date=date(2024, 1, 15), description="Rent"),
]
RATES = [RateEntry(rate=Decimal("5.0"), effective_date=date(2024, 1, 1))]


def test_daily_rows_cover_every_day_and_end_on_calculated_balance():
    end = date(2024, 2, 3)
    rows = build_daily_rows(TXS, RATES, end)
    res = calculate_balance(TXS, RATES, end)

    assert len(rows) == 34
    assert rows[0].day == date(2024, 1, 1)
    assert rows[0].daily_interest == Decimal("1.3699")
    assert rows[0].tx_types == "deposit"
    assert rows[14].tx_types == "withdrawal"
    assert rows[14].descriptions == "Rent"

    last = rows[-1]
    assert last.day == end
    assert (last.balance, last.principal, last.accrued_interest) == (res.balance, res.principal, res.accrued_interest)


def test_daily_rows_show_month_end_compounding():
    rows = {r.day: r for r in build_daily_rows(TXS, RATES, date(2024, 2, 3))}
    jan31 = rows[date(2024, 1, 31)]

    assert jan31.accrued_interest == Decimal("0.00")
    assert jan31.principal == Decimal("8037.81")


def test_csv_has_daily_section_then_ledger_and_rates():
    out = StringIO()
    write_csv(TXS, RATES, date(2024, 1, 3), out)

    lines = list(csv.reader(StringIO(out.getvalue())))

    assert lines[0] == DAILY_HEADERS
    assert lines[1][:6] == ["2024-01-01", "10001.37", "5.00", "1.3699", "10000.00", "1.37"]
    assert lines[3][0] == "2024-01-03"
    assert lines[3][1] == "10002.74"

    assert ["Transactions Summary"] in lines
    assert ["Interest Rates"] in lines
    rate_idx = lines.index(["Interest Rates"])
    assert lines[rate_idx + 2][:2] == ["5.0", "2024-01-01"]


def test_xlsx_has_daily_transactions_and_rates_sheets(tmp_path):
    pytest.importorskip("openpyxl")
    from openpyxl import load_workbook

    out = tmp_path / "savings.xlsx"
    write_xlsx(TXS, RATES, date(2024, 1, 10), str(out))

    wb = load_workbook(out)
    assert wb.sheetnames == ["Daily", "Transactions", "Rates"]

    ws = wb["Daily"]
    assert ws["A3"].value == "Date"
    assert ws["B4"].value == pytest.approx(10001.37)
    assert ws["D4"].value == pytest.approx(1.3699)

    tx_ws = wb["Transactions"]
    assert tx_ws["B2"].value == "deposit"
    assert tx_ws["C3"].value == pytest.approx(2000.0)
