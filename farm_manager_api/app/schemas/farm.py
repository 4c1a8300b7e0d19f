"""Pydantic schemas for farms."""

from typing import List, Literal, Optional

from pydantic import Field

from .common import CamelModel, RecordRead


class FarmCreate(CamelModel):
    """Schema for creating or fully updating a farm."""

    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    size: float = Field(..., gt=0)
    status: Literal["active", "inactive", "planning"] = "active"
    description: Optional[str] = ""
    valuation: Optional[float] = Field(None, ge=0)
    farm_types: List[str] = Field(default_factory=list)
    rating: int = Field(0, ge=0, le=5)


class FarmRead(RecordRead):
    """Schema for reading a farm."""

    name: Optional[str] = None
    location: Optional[str] = None
    size: Optional[float] = None
    status: Optional[str] = None
    description: Optional[str] = None
    valuation: Optional[float] = None
    farm_types: List[str] = Field(default_factory=list)
    rating: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
