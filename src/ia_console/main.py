import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from ia_console.database import engine, SessionLocal, Base, get_db
from ia_console.config import settings
from ia_console.models.offense import Offense
from ia_console.models.log_record import LogRecord  # noqa: F401
from ia_console.dao.offense_dao import seed_once
from ia_console.routes.offense_routes import router as offense_router
from ia_console.routes.log_routes import router as log_router, INTERNAL_ERROR
from ia_console.routes.tool_routes import router as tool_router
import uvicorn

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)
logger = logging.getLogger(__name__)


def _seed_catalog():
    """Runs once before the app takes traffic; redundant calls are no-ops."""
    db: Session = SessionLocal()
    try:
        seed_once(db)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")
    _seed_catalog()
    yield


app = FastAPI(
    title="IA Action Console",
    description="Internal Affairs disciplinary message generator: FastAPI + SQLAlchemy + LangChain OpenAI",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(offense_router)
app.include_router(log_router)
app.include_router(tool_router)


_LOCATIONS = {"body", "query", "path", "header", "cookie"}


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Same {message, field} shape as the body validators, first error only
    err = exc.errors()[0]
    loc = [p for p in err.get("loc", ()) if isinstance(p, str) and p not in _LOCATIONS]
    return JSONResponse(
        status_code=400,
        content={"message": err.get("msg", "Invalid request"), "field": ".".join(loc) or "body"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=INTERNAL_ERROR)


@app.get("/health")
def health(db: Session = Depends(get_db)):
    return {"status": "ok", "offenses": db.query(Offense).count()}


def start():
    """Entry point for the ia-console script"""
    uvicorn.run("ia_console.main:app", host=settings.app_host, port=settings.app_port, reload=settings.debug)
