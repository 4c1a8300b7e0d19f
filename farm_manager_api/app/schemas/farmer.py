"""
Pydantic schemas for farmers.

A farmer carries contact details, a summary of their main farm, the
list of primary crops and a small block of statistics maintained by
the backend.
"""

from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .common import CamelModel, RecordRead


class FarmerStats(CamelModel):
    total_farms: int = 1
    active_crops: int = 0
    pending_tasks: int = 0


class FarmerCreate(CamelModel):
    """Schema for creating or fully updating a farmer."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    farm_name: Optional[str] = None
    farm_location: Optional[str] = None
    farm_size: Optional[float] = Field(None, ge=0)
    experience: Optional[int] = Field(None, ge=0)
    primary_crops: List[str] = Field(default_factory=list)
    status: Literal["active", "inactive", "pending"] = "active"

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("Email must contain '@'")
        return v.strip()

    @field_validator("primary_crops")
    @classmethod
    def strip_crops(cls, v: List[str]) -> List[str]:
        return [crop.strip() for crop in v if crop and crop.strip()]


class FarmerRead(RecordRead):
    """Schema for reading a farmer."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    farm_name: Optional[str] = None
    farm_location: Optional[str] = None
    farm_size: Optional[float] = None
    experience: Optional[int] = None
    primary_crops: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    member_since: Optional[str] = None
    stats: FarmerStats = Field(default_factory=FarmerStats)
