"""Pydantic models for weather lookups."""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field


class WeatherSummary(BaseModel):
    city: Optional[str] = Field(None, description="City or location name")
    condition: Optional[str] = Field(None, description="Short condition text")
    temperature: Optional[Union[float, str]] = None
    humidity: Optional[Union[float, str]] = None
    wind: Optional[Union[float, str]] = None
    updated_at: Optional[Union[float, str]] = Field(None, description="Observation time as reported upstream")


class WeatherUpdatesPage(BaseModel):
    query: str = Field("", description="City searched for")
    weather: Optional[Any] = Field(None, description="Raw weather payload")
    summary: Optional[WeatherSummary] = None
    error: Optional[str] = None


class WeatherLookupResponse(BaseModel):
    data: Optional[Any] = Field(None, description="Raw weather payload")
    summary: Optional[WeatherSummary] = None
