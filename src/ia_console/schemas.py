"""
Request contracts, one per endpoint. Wire names are camelCase (hrId, offenseIds),
Python attributes snake_case.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel
from ia_console.models.log_record import IDENTIFIER_MAX_LENGTH, LogAction


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
        frozen=True,
    )


class GenerationRequest(_CamelModel):
    """One case to render. Transient, never persisted as-is."""
    hr_id: str = Field(min_length=1, max_length=IDENTIFIER_MAX_LENGTH)
    user_id: str = Field(min_length=1, max_length=IDENTIFIER_MAX_LENGTH)
    action: LogAction
    offense_ids: list[StrictInt] = Field(default_factory=list)    # UI selection order, duplicates kept
    ticket_number: str | None = Field(None, max_length=IDENTIFIER_MAX_LENGTH)
    duration: str | None = Field(None, max_length=IDENTIFIER_MAX_LENGTH)
    notes: str | None = None
    use_ai: StrictBool = False

    @field_validator("ticket_number", "duration", "notes")
    @classmethod
    def _blank_is_absent(cls, v: str | None) -> str | None:
        return v or None


class LogCreate(_CamelModel):
    """Body of POST /logs: a log record minus id and createdAt."""
    hr_id: str = Field(min_length=1, max_length=IDENTIFIER_MAX_LENGTH)
    user_id: str = Field(min_length=1, max_length=IDENTIFIER_MAX_LENGTH)
    action: LogAction
    offenses: list[StrictStr] = Field(default_factory=list)
    ticket_number: str | None = Field(None, max_length=IDENTIFIER_MAX_LENGTH)
    duration: str | None = Field(None, max_length=IDENTIFIER_MAX_LENGTH)
    notes: str | None = None
    generated_message: str | None = None

    @field_validator("ticket_number", "duration", "notes")
    @classmethod
    def _blank_is_absent(cls, v: str | None) -> str | None:
        return v or None
