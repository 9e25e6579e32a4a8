import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, JSON, event, func
from ia_console.database import Base, install_log_immutability


IDENTIFIER_MAX_LENGTH = 128  # hr_id, user_id, ticket_number, duration


class LogAction(str, enum.Enum):
    PUNISHMENT = "Punishment"
    REVOKE = "Revoke"


class LogRecord(Base):
    """
    INSERT-only table. DB-level triggers (see database.install_log_immutability)
    reject any UPDATE or DELETE on SQLite and MySQL.
    """
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    hr_id = Column(String(IDENTIFIER_MAX_LENGTH), nullable=False)
    user_id = Column(String(IDENTIFIER_MAX_LENGTH), nullable=False)
    ticket_number = Column(String(IDENTIFIER_MAX_LENGTH), nullable=True)
    action = Column(Enum(LogAction, values_callable=lambda e: [m.value for m in e]), nullable=False)
    duration = Column(String(IDENTIFIER_MAX_LENGTH), nullable=True)
    offenses = Column(JSON, nullable=False, default=list)    # offense codes, snapshotted at generation time
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    generated_message = Column(Text, nullable=True)


event.listen(LogRecord.__table__, "after_create", install_log_immutability)
