"""Shared schema base classes and helpers."""

from datetime import date, datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising attributes as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> Dict[str, Any]:
        """Return the UI record for the service layer (only fields that were set)."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class RecordRead(CamelModel):
    """Base for records returned by the API."""

    id: int = Field(..., alias="Id")


class ErrorResponse(BaseModel):
    """Body returned for every service error."""

    detail: str
    error: str


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse an ISO date or timestamp string to a ``date``."""
    if not value:
        return None
    text = value.strip().replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return date.fromisoformat(text[:10])
