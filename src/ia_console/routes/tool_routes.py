"""
Operator helper routes.
GET /tools/days-since?date=MM/DD/YYYY  — whole days elapsed since a date (YYYY-MM-DD also accepted)
"""
from datetime import date, datetime

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

router = APIRouter(prefix="/tools", tags=["Tools"])

DATE_FORMATS = ("%m/%d/%Y", "%Y-%m-%d")


def parse_date(value: str) -> date | None:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError:
            continue
    return None


def days_since(value: date, today: date | None = None) -> int:
    return ((today or date.today()) - value).days


@router.get("/days-since")
def get_days_since(date_str: str = Query(..., alias="date")):
    parsed = parse_date(date_str)
    if parsed is None:
        return JSONResponse(
            status_code=400,
            content={"message": "Expected a date as MM/DD/YYYY or YYYY-MM-DD", "field": "date"},
        )
    return {"date": parsed.isoformat(), "days": days_since(parsed)}
