from __future__ import annotations

import csv
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal

import xlsxwriter

from savings.services.interest import d2, iter_days
from savings.services.rates import sort_rates
from savings.utils.dates import as_date, format_date_local

Q4 = Decimal("0.0001")

DAILY_HEADERS = [
    "Date",
    "Balance",
    "Daily Interest Rate (%)",
    "Daily Interest Amount",
    "Principal",
    "Accrued Interest (Month)",
    "Transaction Type",
    "Transaction Amount",
    "Description",
]


@dataclass(frozen=True)
class DailyRow:
    day: date
    balance: Decimal
    rate_percent: Decimal
    daily_interest: Decimal
    principal: Decimal
    accrued_interest: Decimal
    tx_types: str
    tx_amounts: str
    descriptions: str


def build_daily_rows(transactions, rates, end) -> list[DailyRow]:
    rows: list[DailyRow] = []
    for snap in iter_days(transactions, rates, end):
        rows.append(
            DailyRow(
                day=snap.day,
                balance=d2(snap.balance + snap.accrued_interest),
                rate_percent=snap.rate_percent,
                daily_interest=snap.daily_interest.quantize(Q4),
                principal=d2(snap.principal),
                accrued_interest=d2(snap.accrued_interest),
                tx_types="; ".join(e.type for e in snap.entries),
                tx_amounts="; ".join(str(e.amount) for e in snap.entries),
                descriptions="; ".join(e.description or "" for e in snap.entries),
            )
        )
    return rows


def write_csv(transactions, rates, end, out) -> None:
    """Daily schedule, then the raw ledger and the rate schedule, as CSV text."""
    w = csv.writer(out, lineterminator="\n")

    w.writerow(DAILY_HEADERS)
    for row in build_daily_rows(transactions, rates, end):
        w.writerow(
            [
                format_date_local(row.day),
                f"{row.balance:.2f}",
                f"{row.rate_percent:.2f}",
                f"{row.daily_interest:.4f}",
                f"{row.principal:.2f}",
                f"{row.accrued_interest:.2f}",
                row.tx_types,
                row.tx_amounts,
                row.descriptions,
            ]
        )

    w.writerow([])
    w.writerow(["Transactions Summary"])
    w.writerow(["Type", "Date", "Amount", "Description", "Created At"])
    for t in transactions:
        w.writerow([t.type, format_date_local(as_date(t.date)), str(t.amount), t.description or "", _created(t)])

    w.writerow([])
    w.writerow(["Interest Rates"])
    w.writerow(["Rate (%)", "Effective Date", "Created At"])
    for r in sort_rates(rates):
        w.writerow([str(r.rate), format_date_local(as_date(r.effective_date)), _created(r)])


def _created(row) -> str:
    v = getattr(row, "created_at", None)
    return "" if v is None else str(v)


def write_xlsx(transactions, rates, end, out_file) -> None:
    rows = build_daily_rows(transactions, rates, end)

    wb = xlsxwriter.Workbook(out_file, {"in_memory": True})
    base_font = "Calibri"

    meta_label = wb.add_format({"bold": True, "font_name": base_font, "font_size": 11, "font_color": "#334155"})
    subtle = wb.add_format({"font_name": base_font, "font_size": 10, "font_color": "#64748b"})
    header = wb.add_format(
        {
            "bold": True,
            "font_name": base_font,
            "font_size": 11,
            "bg_color": "#F1F5F9",
            "border": 1,
            "align": "center",
            "valign": "vcenter",
        }
    )
    date_fmt = wb.add_format({"font_name": base_font, "font_size": 11, "num_format": "yyyy-mm-dd", "border": 1})
    money2 = wb.add_format(
        {"font_name": base_font, "font_size": 11, "num_format": "#,##0.00", "border": 1, "align": "right"}
    )
    money4 = wb.add_format(
        {"font_name": base_font, "font_size": 11, "num_format": "#,##0.0000", "border": 1, "align": "right"}
    )
    rate4 = wb.add_format(
        {"font_name": base_font, "font_size": 11, "num_format": "0.0000", "border": 1, "align": "right"}
    )
    text_cell = wb.add_format({"font_name": base_font, "font_size": 11, "border": 1, "align": "left"})

    ws = wb.add_worksheet("Daily")
    ws.set_column(0, 0, 12)
    ws.set_column(1, 5, 18)
    ws.set_column(6, 7, 18)
    ws.set_column(8, 8, 36)

    ws.write(0, 0, "Through", meta_label)
    ws.write(0, 1, format_date_local(as_date(end)), subtle)
    ws.write(0, 3, "Generated", meta_label)
    ws.write(0, 4, datetime.now().strftime("%Y-%m-%d %H:%M"), subtle)

    ws.set_row(2, 18)
    for c, h in enumerate(DAILY_HEADERS):
        ws.write(2, c, h, header)
    ws.freeze_panes(3, 1)

    r = 3
    for row in rows:
        ws.write_datetime(r, 0, datetime.combine(row.day, time.min), date_fmt)
        ws.write_number(r, 1, float(row.balance), money2)
        ws.write_number(r, 2, float(row.rate_percent), rate4)
        ws.write_number(r, 3, float(row.daily_interest), money4)
        ws.write_number(r, 4, float(row.principal), money2)
        ws.write_number(r, 5, float(row.accrued_interest), money2)
        ws.write(r, 6, row.tx_types, text_cell)
        ws.write(r, 7, row.tx_amounts, text_cell)
        ws.write(r, 8, row.descriptions, text_cell)
        r += 1

    if r > 3:
        ws.autofilter(2, 0, r - 1, len(DAILY_HEADERS) - 1)
        ws.set_landscape()
        ws.fit_to_pages(1, 0)

    tx_ws = wb.add_worksheet("Transactions")
    tx_ws.set_column(0, 1, 12)
    tx_ws.set_column(2, 2, 18)
    tx_ws.set_column(3, 3, 36)
    for c, h in enumerate(["Date", "Type", "Amount", "Description"]):
        tx_ws.write(0, c, h, header)
    tx_ws.freeze_panes(1, 0)

    tr = 1
    for t in sorted(transactions, key=lambda t: as_date(t.date)):
        tx_ws.write_datetime(tr, 0, datetime.combine(as_date(t.date), time.min), date_fmt)
        tx_ws.write(tr, 1, t.type, text_cell)
        tx_ws.write_number(tr, 2, float(t.amount), money2)
        tx_ws.write(tr, 3, t.description or "", text_cell)
        tr += 1

    rate_ws = wb.add_worksheet("Rates")
    rate_ws.set_column(0, 1, 16)
    for c, h in enumerate(["Effective Date", "Rate %"]):
        rate_ws.write(0, c, h, header)
    rate_ws.freeze_panes(1, 0)

    rr = 1
    for rt in sort_rates(rates):
        rate_ws.write_datetime(rr, 0, datetime.combine(as_date(rt.effective_date), time.min), date_fmt)
        rate_ws.write_number(rr, 1, float(rt.rate), rate4)
        rr += 1

    wb.close()
