"""Pydantic models for booking dispatch."""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    id: Union[int, str]
    name: str = ""
    email: str


class FlightSelection(BaseModel):
    id: Union[int, str] = Field(..., description="Upstream flight identifier")
    flight_number: str
    airline_code: str
    origin_code: str
    destination_code: str
    aircraft_icao_code: str
    scheduled_departure_time: str
    scheduled_arrival_time: str
    fk_id_terminal_code: Optional[str] = None
    fk_id_gate_code: Optional[str] = None
    fk_id_status_code: Optional[str] = None


class SendFlightRequest(BaseModel):
    flight: FlightSelection
    search_context: Optional[Dict[str, Any]] = None


class SendFlightResponse(BaseModel):
    message: str
    details: Optional[Any] = None
