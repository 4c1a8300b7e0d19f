"""
Pydantic schemas for crops.

Validation mirrors the crop form: name, variety and planted date are
required, the area must be positive and the expected harvest, when
given, must fall after the planting date.
"""

from typing import Literal, Optional

from pydantic import Field, model_validator

from .common import CamelModel, RecordRead, parse_date


class CropCreate(CamelModel):
    """Schema for creating or fully updating a crop."""

    name: str = Field(..., min_length=1)
    variety: str = Field(..., min_length=1)
    planted_date: str
    area: float = Field(..., gt=0)
    status: Literal["planted", "growing", "flowering", "ready", "harvested"] = "planted"
    expected_harvest: Optional[str] = None
    farm_id: int

    @model_validator(mode="after")
    def check_dates(self) -> "CropCreate":
        planted = parse_date(self.planted_date)
        harvest = parse_date(self.expected_harvest)
        if harvest is not None and planted is not None and harvest <= planted:
            raise ValueError("Expected harvest date must be after planting date")
        return self


class CropRead(RecordRead):
    """Schema for reading a crop."""

    name: Optional[str] = None
    variety: Optional[str] = None
    planted_date: Optional[str] = None
    area: Optional[float] = None
    status: Optional[str] = None
    expected_harvest: Optional[str] = None
    farm_id: Optional[int] = None
