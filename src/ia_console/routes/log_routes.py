"""
Log routes.
POST /logs           — store a log record as given
POST /logs/generate  — validate, compose the message, log it, return it
"""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from ia_console.database import get_db
from ia_console.dao.log_dao import insert_log
from ia_console.exceptions import FieldError
from ia_console.models.log_record import LogRecord
from ia_console.services.generation import generate_and_log
from ia_console.services.text_generation import get_text_generator
from ia_console.services.validator import validate_generation, validate_log_create

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/logs", tags=["Logs"])

INTERNAL_ERROR = {"message": "Internal server error"}


def error_response(error: FieldError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": error.message, "field": error.field})


def serialize_log(l: LogRecord) -> dict:
    return {
        "id"              : l.id,
        "hrId"            : l.hr_id,
        "userId"          : l.user_id,
        "ticketNumber"    : l.ticket_number,
        "action"          : l.action.value,
        "duration"        : l.duration,
        "offenses"        : l.offenses,
        "notes"           : l.notes,
        "createdAt"       : l.created_at.isoformat() if l.created_at else None,
        "generatedMessage": l.generated_message,
    }


@router.post("", status_code=201)
def create_log(payload: Any = Body(None), db: Session = Depends(get_db)):
    result = validate_log_create(payload)
    if not result.ok:
        return error_response(result.error)

    data = result.value.model_dump()
    record = insert_log(db, data)
    return serialize_log(record)


@router.post("/generate")
def generate_message(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    text_generator=Depends(get_text_generator),
):
    result = validate_generation(payload)
    if not result.ok:
        return error_response(result.error)

    req = result.value
    try:
        message, _ = generate_and_log(db, req, text_generator=text_generator if req.use_ai else None)
    except Exception:
        # Detail stays in the server log; the client only sees the generic message
        logger.exception("Generation failed for hr=%s user=%s ai=%s", req.hr_id, req.user_id, req.use_ai)
        return JSONResponse(status_code=500, content=INTERNAL_ERROR)

    return {"message": message}
