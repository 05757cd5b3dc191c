"""Pydantic models for flight schedule pages."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FlightRecord(BaseModel):
    """Flight as returned by the flights webhook; every field passes through untouched."""

    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = Field(None, description="Upstream flight identifier")
    flight_number: Optional[Any] = Field(None, description="Flight number (e.g. PR 102)")
    airline_code: Optional[Any] = Field(None, description="Airline code")
    origin_code: Optional[Any] = Field(None, description="Origin airport code")
    destination_code: Optional[Any] = Field(None, description="Destination airport code")
    aircraft_icao_code: Optional[Any] = Field(None, description="Aircraft type ICAO code")
    scheduled_departure_time: Optional[Any] = Field(None, description="Scheduled departure timestamp")
    scheduled_arrival_time: Optional[Any] = Field(None, description="Scheduled arrival timestamp")
    fk_id_terminal_code: Optional[Any] = Field(None, description="Terminal code")
    fk_id_gate_code: Optional[Any] = Field(None, description="Gate code")
    fk_id_belt_code: Optional[Any] = Field(None, description="Baggage belt code")
    fk_id_status_code: Optional[Any] = Field(None, description="Flight phase tag (e.g. 3-ARR, 2-DEP)")


class FlightPage(BaseModel):
    flights: List[FlightRecord] = Field(default_factory=list, description="Flights on this page")
    current_page: int = Field(1, description="Current page (1-based)")
    last_page: int = Field(1, description="Last available page")
    total: int = Field(0, description="Total flights matching the view")
    per_page: int = Field(15, description="Page size")
    error: Optional[str] = Field(None, description="Upstream error message, if any")
