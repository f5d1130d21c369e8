"""
Data models for trip planning: request, quote and confirmation snapshot
"""
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, model_validator

from models.catalog import Hotel, ItineraryItem


# Raw form input; normalised by the pricing engine on every computation
RawNumber = Union[int, float, str, None]


class PricingMode(str, Enum):
    """How a transport option is billed"""
    FULL_DAY = "fullDay"
    PER_KM = "perKm"


class TripRequest(BaseModel):
    """
    Everything the booking form has collected so far.

    Any field may still be unset; a partially filled request always prices
    (to zero where information is missing).
    """
    check_in: Optional[date] = Field(default=None, description="Check-in date")
    check_out: Optional[date] = Field(default=None, description="Check-out date")
    guests: RawNumber = Field(default=1, description="Number of guests as entered")
    hotel_id: Optional[str] = Field(default=None, description="Selected hotel id")
    transport_type: Optional[str] = Field(default=None, description="Selected transport option type")
    pricing_mode: PricingMode = Field(default=PricingMode.FULL_DAY, description="Transport billing mode")
    km_per_day: RawNumber = Field(default=50, description="Estimated kilometers per day as entered")

    @model_validator(mode="after")
    def clamp_check_out(self) -> "TripRequest":
        # check-out can never precede check-in
        if self.check_in and self.check_out and self.check_out < self.check_in:
            self.check_out = self.check_in
        return self


class CostBreakdown(BaseModel):
    nights: int = Field(default=0, description="Number of nights billed")
    hotel_cost: float = Field(default=0.0, description="Hotel price per night times nights")
    guest_surcharge: float = Field(default=0.0, description="Tiered per-guest charge")
    transport_cost: float = Field(default=0.0, description="Transport charge for the stay")
    total: float = Field(default=0.0, description="Sum of all components")


class Quote(CostBreakdown):
    """Cost breakdown plus the generated day-by-day itinerary"""
    timetable: Dict[int, List[ItineraryItem]] = Field(default_factory=dict)


class TransportSummary(BaseModel):
    type: str
    pricing_mode: PricingMode
    rate: Optional[float] = Field(default=None, description="pricePerDay or pricePerKm, per mode")
    km_per_day: Optional[int] = Field(default=None, description="Only set in perKm mode")


class BookingConfirmation(BaseModel):
    """Display-only snapshot taken when the user confirms; never persisted"""
    destination_name: str
    check_in: date
    check_out: date
    nights: int
    guests: int
    hotel: Optional[Hotel] = None
    transport: Optional[TransportSummary] = None
    quote: Quote
    confirmed_at: datetime = Field(default_factory=datetime.now)

    @property
    def total(self) -> float:
        return self.quote.total
