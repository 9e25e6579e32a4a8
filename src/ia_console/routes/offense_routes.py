"""
Offense catalog routes.
GET /offenses             — full catalog, optionally filtered (?search=, ?category=)
GET /offenses/categories  — catalog grouped by category for the selector panel
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from ia_console.database import get_db
from ia_console.models.offense import Offense
from ia_console.dao.offense_dao import list_offenses, search_offenses, group_by_category

router = APIRouter(prefix="/offenses", tags=["Offenses"])


def serialize_offense(o: Offense) -> dict:
    return {
        "id"         : o.id,
        "code"       : o.code,
        "description": o.description,
        "punishment" : o.punishment,
        "category"   : o.category,
    }


@router.get("")
def get_offenses(
    search: str | None = Query(None),
    category: str | None = Query(None),
    db: Session = Depends(get_db),
):
    if search or category:
        offenses = search_offenses(db, search, category)
    else:
        offenses = list_offenses(db)
    return [serialize_offense(o) for o in offenses]


@router.get("/categories")
def get_offense_categories(search: str | None = Query(None), db: Session = Depends(get_db)):
    offenses = search_offenses(db, search) if search else list_offenses(db)
    return [
        {"category": category, "offenses": [serialize_offense(o) for o in group]}
        for category, group in group_by_category(offenses).items()
    ]
