from io import BytesIO, StringIO
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response, StreamingResponse
from sqlalchemy.orm import Session

from savings.api.deps import db
from savings.services.export import write_csv, write_xlsx
from savings.services.ledger import load_rates, load_transactions
from savings.utils.dates import format_date_local, parse_date
from savings.utils.timezone import today_local

router = APIRouter(prefix="/export", tags=["export"])


@router.get("")
def export(
    date: str | None = Query(None),
    format: Literal["csv", "xlsx"] = Query("csv"),
    s: Session = Depends(db),
):
    end = parse_date(date) if date else today_local()
    txs = load_transactions(s)
    if not txs:
        raise HTTPException(status_code=404, detail="no_transactions")
    rates = load_rates(s)

    stem = f"savings-daily-{format_date_local(end)}"

    if format == "xlsx":
        buf = BytesIO()
        write_xlsx(txs, rates, end, buf)
        buf.seek(0)
        return StreamingResponse(
            buf,
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": f'attachment; filename="{stem}.xlsx"'},
        )

    out = StringIO()
    write_csv(txs, rates, end, out)
    return Response(
        content=out.getvalue(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{stem}.csv"'},
    )
