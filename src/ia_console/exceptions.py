from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A user-correctable input problem, attributed to one request field."""
    field: str
    message: str


class PersistenceError(Exception):
    """The log store rejected or failed an insert."""


class TextGenerationError(Exception):
    """No text generator is available for an AI-assisted request."""
