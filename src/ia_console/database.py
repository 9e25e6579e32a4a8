from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool
from ia_console.config import settings


def _engine_kwargs(url: str) -> dict:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 20}
    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # In-memory DB lives inside one connection; share it across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def get_db():
    """FastAPI dependency — yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


_IMMUTABILITY_DDL = {
    "sqlite": [
        """
        CREATE TRIGGER IF NOT EXISTS prevent_log_mutation
        BEFORE UPDATE ON logs
        BEGIN
            SELECT RAISE(ABORT, 'logs is append-only: UPDATE not allowed');
        END
        """,
        """
        CREATE TRIGGER IF NOT EXISTS prevent_log_delete
        BEFORE DELETE ON logs
        BEGIN
            SELECT RAISE(ABORT, 'logs is append-only: DELETE not allowed');
        END
        """,
    ],
    "mysql": [
        "DROP TRIGGER IF EXISTS prevent_log_mutation",
        """
        CREATE TRIGGER prevent_log_mutation
        BEFORE UPDATE ON logs
        FOR EACH ROW
        SIGNAL SQLSTATE '45000'
        SET MESSAGE_TEXT = 'logs is append-only: UPDATE not allowed'
        """,
        "DROP TRIGGER IF EXISTS prevent_log_delete",
        """
        CREATE TRIGGER prevent_log_delete
        BEFORE DELETE ON logs
        FOR EACH ROW
        SIGNAL SQLSTATE '45000'
        SET MESSAGE_TEXT = 'logs is append-only: DELETE not allowed'
        """,
    ],
}


def install_log_immutability(target, connection, **_):
    """
    Install DB-level triggers on logs so the table stays append-only.
    Hooked to the table's after_create event, so it runs once per CREATE TABLE.
    Dialects without an entry are left unguarded.
    """
    for statement in _IMMUTABILITY_DDL.get(connection.dialect.name, []):
        connection.exec_driver_sql(statement)
