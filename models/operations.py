"""Pydantic models for the baggage, checked-in, NOTAM and safety-measures pages."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaggageRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    passenger_id: Optional[Any] = None
    tag: Optional[Any] = None
    flight_number: Optional[Any] = None
    destination: Optional[Any] = None
    type: Optional[Any] = None
    weight: Optional[Any] = None
    max_weight: Optional[Any] = None
    status: Optional[Any] = None
    check_in_at: Optional[Any] = None
    loaded_at: Optional[Any] = None
    unloaded_at: Optional[Any] = None
    status_key: str = Field("pending", description="Lowercased status used for badge styling")
    is_overweight: bool = Field(False, description="Weight exceeds the allowed maximum")
    overweight_by: Optional[float] = Field(None, description="Excess weight in kg")


class BaggageSummary(BaseModel):
    total: int = 0
    loaded_count: int = 0
    overweight_count: int = 0
    total_weight: float = 0.0


class BaggagePage(BaseModel):
    baggages: List[BaggageRecord] = Field(default_factory=list)
    summary: BaggageSummary = Field(default_factory=BaggageSummary)
    error: Optional[str] = None


class CheckedInPassenger(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    user_id: Optional[Any] = None
    flight_number: Optional[Any] = None
    passenger_status: Optional[Any] = None
    airline_code: Optional[Any] = None
    aircraft_code: Optional[Any] = None
    origin_code: Optional[Any] = None
    destination_code: Optional[Any] = None
    gate_code: Optional[Any] = None
    baggage_code: Optional[Any] = None
    status_key: str = Field("checked-in", description="Lowercased passenger status")


class CheckedInSummary(BaseModel):
    total: int = 0
    checked_in_count: int = 0
    cancelled_count: int = 0
    destination_count: int = 0


class CheckedInPage(BaseModel):
    passengers: List[CheckedInPassenger] = Field(default_factory=list)
    summary: CheckedInSummary = Field(default_factory=CheckedInSummary)
    error: Optional[str] = None


class NOTAMRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    airport_id: Optional[Any] = Field(None, description="Airport identifier")
    city: Optional[Any] = None
    message: Optional[Any] = Field(None, description="Free-text NOTAM message")
    created_at: Optional[Any] = None
    updated_at: Optional[Any] = None
    marker: str = Field("Advisory", description="Badge label: Critical, Caution or Advisory")


class NOTAMPage(BaseModel):
    notams: List[NOTAMRecord] = Field(default_factory=list)
    error: Optional[str] = None


class SafetyGuideline(BaseModel):
    airport_id: str = Field("N/A", description="Airport identifier")
    city: str = Field("Unknown", description="City served by the airport")
    severity: str = Field(..., description="critical, caution or normal")
    summary: str = Field("", description="NOTAM message truncated to 220 characters")
    recommendations: List[str] = Field(default_factory=list, description="Recommended actions, in order")


class SafetyMeasuresPage(BaseModel):
    guidelines: List[SafetyGuideline] = Field(default_factory=list)
    error: Optional[str] = None
