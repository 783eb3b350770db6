"""Model construction that reports failures as InvalidInputError.

Models are built before any storage access, so a rejected call never
leaves a partially written row behind.
"""

from datetime import date
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .dates import parse_iso_date
from .errors import InvalidInputError

ModelT = TypeVar("ModelT", bound=BaseModel)

FIELD_MESSAGES = {
    "name": "Name cannot be empty",
    "alcohol_percentage": "Alcohol percentage must be between 0 and 100",
    "volume_ml": "Volume must be positive",
    "daily_target": "Daily target must be non-negative",
    "weekly_target": "Weekly target must be non-negative",
}

DATE_FIELDS = ("date", "start_date", "end_date")


def build_model(model_cls: type[ModelT], **fields: Any) -> ModelT:
    """Construct a model, translating the first validation error.

    Raises:
        InvalidInputError: If any field violates the model's constraints
    """
    try:
        return model_cls(**fields)
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        if field in DATE_FIELDS:
            message = f"Invalid date format: {fields.get(field)!r}"
        else:
            message = FIELD_MESSAGES.get(field, f"Invalid value for {field}")
        raise InvalidInputError(message) from e


def require_iso_date(value: str) -> date:
    """Parse an ISO date or raise InvalidInputError."""
    parsed = parse_iso_date(value)
    if parsed is None:
        raise InvalidInputError(f"Invalid date format: {value!r}")
    return parsed
