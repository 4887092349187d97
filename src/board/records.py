"""
Record types for the three community board resources.

Records are parsed at the network boundary so the views never see a
half-shaped dict. Unknown fields sent by the server are kept as extras.
"""

from datetime import date, datetime, time, timezone
from typing import Any, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.board.errors import ParseError

RecordT = TypeVar("RecordT", bound="BoardRecord")


def parse_timestamp(value: Any) -> Any:
    """
    Parse an ISO date or datetime string into an aware UTC datetime.

    Accepts "2025-01-01" as well as "2025-01-01T00:00:00.000Z".
    Non-string values are left for pydantic to validate.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    return value


def to_form_date(value: Optional[datetime]) -> str:
    """Normalise a record date to the YYYY-MM-DD form used by date inputs."""
    if value is None:
        return ""
    return value.astimezone(timezone.utc).date().isoformat()


class BoardRecord(BaseModel):
    """Fields shared by every record the remote API returns."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., alias="_id", description="Server-assigned identifier.")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, (int, float)):
            return str(v)
        return v

    def get(self, name: str, default: Any = None) -> Any:
        """Read a field by its wire name, falling back to extras."""
        if name == "_id":
            return self.id
        value = getattr(self, name, None)
        if value is None and self.model_extra:
            value = self.model_extra.get(name)
        return default if value is None else value


class JobPosting(BoardRecord):
    """A job posting under /hire."""

    serviceType: str
    location: str
    lastDate: datetime
    contactName: str
    contactPhone: str
    description: Optional[str] = None
    salary: Optional[Union[int, float]] = None
    imageUrl: Optional[str] = None
    poster: Optional[str] = None

    @field_validator("lastDate", mode="before")
    @classmethod
    def parse_last_date(cls, v: Any) -> Any:
        return parse_timestamp(v)

    @field_validator("poster", mode="before")
    @classmethod
    def flatten_poster(cls, v: Any) -> Any:
        # The API may populate the poster reference into a sub-document
        if isinstance(v, dict):
            return v.get("_id")
        return v


class LocalAlert(BoardRecord):
    """A neighbourhood alert under /local-alerts."""

    message: str
    location: str
    date: datetime
    description: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return parse_timestamp(v)


class CommunityEvent(BoardRecord):
    """A community event under /events."""

    title: str
    description: str
    date: datetime
    location: str
    eventType: Optional[str] = None
    imageUrl: Optional[str] = None
    organizer: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return parse_timestamp(v)

    @field_validator("organizer", mode="before")
    @classmethod
    def flatten_organizer(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return v.get("_id")
        return v


def parse_record(model: Type[RecordT], payload: Any) -> RecordT:
    """Parse one record, raising ParseError when the shape is wrong."""
    if not isinstance(payload, dict):
        raise ParseError(
            f"Expected a {model.__name__} object, got {type(payload).__name__}"
        )
    try:
        return model.model_validate(payload)
    except (ValidationError, ValueError) as e:
        raise ParseError(f"Invalid {model.__name__}: {e}") from e


def parse_records(model: Type[RecordT], payload: Any) -> List[RecordT]:
    """Parse a list response into records."""
    if not isinstance(payload, list):
        raise ParseError(
            f"Expected a list of {model.__name__} records, got {type(payload).__name__}"
        )
    return [parse_record(model, item) for item in payload]
