"""Pydantic schemas for weather observations and snapshots."""

from typing import List, Optional

from pydantic import Field

from .common import CamelModel, RecordRead


class WeatherCreate(CamelModel):
    """Schema for recording a weather observation."""

    location: str = Field(..., min_length=1)
    temperature: float
    condition: str
    humidity: Optional[int] = Field(None, ge=0, le=100)
    wind_speed: Optional[float] = Field(None, ge=0)
    visibility: Optional[float] = Field(None, ge=0)
    forecast_day: Optional[str] = None
    forecast_condition: Optional[str] = None
    forecast_high: Optional[float] = None
    forecast_low: Optional[float] = None
    alerts: List[str] = Field(default_factory=list)


class WeatherRead(RecordRead):
    location: Optional[str] = None
    temperature: Optional[float] = None
    condition: Optional[str] = None
    humidity: Optional[int] = None
    wind_speed: Optional[float] = None
    visibility: Optional[float] = None
    forecast_day: Optional[str] = None
    forecast_condition: Optional[str] = None
    forecast_high: Optional[float] = None
    forecast_low: Optional[float] = None
    alerts: List[str] = Field(default_factory=list)


class ForecastDay(CamelModel):
    day: Optional[str] = None
    condition: Optional[str] = None
    high: Optional[float] = None
    low: Optional[float] = None


class WeatherSnapshot(CamelModel):
    """Current conditions plus a forecast sequence."""

    location: Optional[str] = None
    temperature: Optional[float] = None
    condition: Optional[str] = None
    humidity: Optional[int] = None
    wind_speed: Optional[float] = None
    visibility: Optional[float] = None
    alerts: List[str] = Field(default_factory=list)
    forecast: List[ForecastDay] = Field(default_factory=list)
