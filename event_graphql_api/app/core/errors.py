"""
Error types shared by the stores, services and the API gateway.

Every error the application raises on purpose derives from
``ApiError`` and carries the HTTP status the gateway should answer
with.  Anything else reaching the gateway is reported as a 500.
"""

from pydantic import ValidationError


class ApiError(Exception):
    """Base class for errors rendered into the JSON error envelope."""

    status = 500

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    def to_envelope(self) -> dict:
        return error_envelope(self.message, self.status)


class RecordValidationError(ApiError):
    """A required field is missing or a value cannot be coerced."""

    status = 400


class NotFoundError(ApiError):
    """A referenced record does not exist."""

    status = 404


class ConflictError(ApiError):
    """A uniqueness constraint would be violated."""

    status = 409


def error_envelope(message: str, status: int) -> dict:
    """Build the ``{"error": {"message", "id"}}`` body used for every failure."""
    return {"error": {"message": message, "id": status}}


def validation_error(model_name: str, exc: ValidationError) -> RecordValidationError:
    """Turn a pydantic error into ``"<Model> validation failed: field: reason"``."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "value"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return RecordValidationError(f"{model_name} validation failed: " + "; ".join(problems))
