"""
Generate-and-log flow behind POST /logs/generate.

    RECEIVED → VALIDATED → OFFENSES_RESOLVED → COMPOSED → LOGGED → RESPONDED

Validation happens in the route. Everything here runs on an already-typed
GenerationRequest; any exception (text generation, persistence) propagates to
the route, which turns it into an opaque 500.
"""
import logging
from datetime import datetime

from sqlalchemy.orm import Session
from ia_console.dao.log_dao import insert_log
from ia_console.dao.offense_dao import resolve_offenses
from ia_console.models.log_record import LogRecord
from ia_console.schemas import GenerationRequest
from ia_console.services.composer import TextGenerator, compose

logger = logging.getLogger(__name__)


def generate_and_log(
    db: Session,
    req: GenerationRequest,
    text_generator: TextGenerator | None = None,
    now: datetime | None = None,
) -> tuple[str, LogRecord]:
    offenses = resolve_offenses(db, req.offense_ids)

    message = compose(req, offenses, now=now, text_generator=text_generator)

    # A persistence failure here fails the request even though a message exists
    record = insert_log(db, {
        "hr_id": req.hr_id,
        "user_id": req.user_id,
        "ticket_number": req.ticket_number,
        "action": req.action,
        "duration": req.duration,
        "offenses": [o.code for o in offenses],
        "notes": req.notes,
        "generated_message": message,
    })
    logger.info("Generated %s message for user=%s (log id=%s, ai=%s, %d offenses)",
                req.action.value, req.user_id, record.id, req.use_ai, len(offenses))
    return message, record
