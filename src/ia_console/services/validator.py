"""
Boundary validation for request bodies.

Each validator returns a ValidationResult instead of raising: either a typed
request value, or the single FieldError the caller should report. When a body
has several problems the reported one is chosen by a fixed field precedence,
so the same input always yields the same error.
"""
import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from ia_console.exceptions import FieldError
from ia_console.schemas import GenerationRequest, LogCreate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

GENERATION_FIELD_ORDER = (
    "hrId", "userId", "action", "offenseIds", "ticketNumber", "duration", "notes", "useAi",
)
LOG_CREATE_FIELD_ORDER = (
    "hrId", "userId", "action", "offenses", "ticketNumber", "duration", "notes", "generatedMessage",
)


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    value: T | None = None
    error: FieldError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _message(field: str, err: dict) -> str:
    if err["type"] in ("missing", "string_too_short"):
        return f"{field} is required"
    if err["type"] == "string_too_long":
        return f"{field} must be at most {err['ctx']['max_length']} characters"
    if len(err["loc"]) > 1:
        return f"{field}[{err['loc'][1]}]: {err['msg']}"
    return err["msg"]


def _first_error(errors: list[dict], precedence: tuple[str, ...]) -> FieldError:
    def rank(indexed: tuple[int, dict]) -> tuple[int, int]:
        position, err = indexed
        field = str(err["loc"][0]) if err["loc"] else "body"
        return (precedence.index(field) if field in precedence else len(precedence), position)

    _, err = min(enumerate(errors), key=rank)
    field = str(err["loc"][0]) if err["loc"] else "body"
    return FieldError(field=field, message=_message(field, err))


def _validate(schema: type[T], raw: Any, precedence: tuple[str, ...]) -> ValidationResult[T]:
    if not isinstance(raw, dict):
        return ValidationResult(error=FieldError(field="body", message="Request body must be a JSON object"))
    try:
        return ValidationResult(value=schema.model_validate(raw))
    except ValidationError as e:
        error = _first_error(e.errors(), precedence)
        logger.info("Rejected %s: %s (%s)", schema.__name__, error.field, error.message)
        return ValidationResult(error=error)


def validate_generation(raw: Any) -> ValidationResult[GenerationRequest]:
    return _validate(GenerationRequest, raw, GENERATION_FIELD_ORDER)


def validate_log_create(raw: Any) -> ValidationResult[LogCreate]:
    return _validate(LogCreate, raw, LOG_CREATE_FIELD_ORDER)
