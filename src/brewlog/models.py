"""Core data models for BrewLog."""

from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from .dates import now_iso, parse_iso_date

# Fields exposed to host bindings, in wire order.
ENTRY_EXPORT_FIELDS = ("id", "name", "alcohol_percentage", "volume_ml", "date", "notes")


def new_id() -> str:
    """Generate a fresh opaque identifier."""
    return str(uuid4())


def _check_iso_date(value: str) -> str:
    if parse_iso_date(value) is None:
        raise ValueError("must be a YYYY-MM-DD date")
    return value


class EntryFields(BaseModel):
    """The user-editable fields of a beer entry."""

    name: str = Field(min_length=1)
    alcohol_percentage: float = Field(ge=0, le=100, allow_inf_nan=False)
    volume_ml: float = Field(gt=0, allow_inf_nan=False)
    notes: str = ""


class BeerEntry(EntryFields):
    """One logged consumption event."""

    id: str = Field(default_factory=new_id)
    date: str
    created_at: str = Field(default_factory=now_iso)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return _check_iso_date(v)

    def to_export(self) -> dict:
        """Return the wire representation, without created_at."""
        data = self.model_dump()
        return {field: data[field] for field in ENTRY_EXPORT_FIELDS}


class ConsumptionGoal(BaseModel):
    """The single active consumption target."""

    id: str = Field(default_factory=new_id)
    daily_target: float = Field(ge=0, allow_inf_nan=False)
    weekly_target: float = Field(ge=0, allow_inf_nan=False)
    start_date: str
    end_date: str
    created_at: str = Field(default_factory=now_iso)

    @field_validator("start_date", "end_date")
    @classmethod
    def validate_dates(cls, v: str) -> str:
        return _check_iso_date(v)


class Baseline(BaseModel):
    """Historical average consumption over a date range."""

    average_daily: float
    average_weekly: float
    calculated_date: str = Field(default_factory=now_iso)


class ProgressStats(BaseModel):
    """Average consumption for a period, compared against a baseline."""

    current_daily_average: float
    current_weekly_average: float
    reduction_percentage: float = 0.0
    period_start: str
    period_end: str
