import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ia_console.exceptions import PersistenceError
from ia_console.models.log_record import LogRecord

logger = logging.getLogger(__name__)


def insert_log(db: Session, log_data: dict) -> LogRecord:
    """Append one log record. The table is insert-only; nothing here updates rows."""
    record = LogRecord(**{k: v for k, v in log_data.items() if hasattr(LogRecord, k)})
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Log insert failed for hr_id=%s user_id=%s: %s",
                     log_data.get("hr_id"), log_data.get("user_id"), e)
        raise PersistenceError("Failed to persist log record") from e

    logger.info("LOG [%s] id=%s hr=%s user=%s offenses=%s",
                record.action.value, record.id, record.hr_id, record.user_id, record.offenses)
    return record
