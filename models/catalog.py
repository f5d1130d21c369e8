"""
Data models for the destination catalog (read-only dataset)
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


_CATALOG_CONFIG = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


class ItineraryItem(BaseModel):
    time: str
    activity: str
    duration: str = ""
    description: str = ""

    model_config = _CATALOG_CONFIG


class Hotel(BaseModel):
    id: str
    name: str = ""
    rating: float = Field(default=0.0, description="Guest rating out of 5")
    price_per_night: float = Field(default=0.0, ge=0, alias="pricePerNight")
    amenities: List[str] = Field(default_factory=list, description="Amenity tags")
    images: List[str] = Field(default_factory=list)
    description: Optional[str] = None

    model_config = _CATALOG_CONFIG


class TransportOption(BaseModel):
    """
    A vehicle or transfer offered at a destination.

    `type` is the option's key. Either price may be missing; an option is
    only usable in the pricing mode whose price it carries.
    """
    type: str
    price_per_day: Optional[float] = Field(default=None, ge=0, alias="pricePerDay")
    price_per_km: Optional[float] = Field(default=None, ge=0, alias="pricePerKm")
    description: str = ""
    includes: List[str] = Field(default_factory=list)

    model_config = _CATALOG_CONFIG


class Transportation(BaseModel):
    taxi_options: List[TransportOption] = Field(default_factory=list, alias="taxiOptions")
    other_options: List[TransportOption] = Field(default_factory=list, alias="otherOptions")

    model_config = _CATALOG_CONFIG


class Destination(BaseModel):
    id: int
    name: str
    description: str = ""
    location: str = ""
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    images: List[str] = Field(default_factory=list)
    category: str = ""
    rating: float = 0.0
    reviews: int = 0
    highlights: List[str] = Field(default_factory=list)

    # Detail view
    detailed_description: Optional[str] = Field(default=None, alias="detailedDescription")
    timings: Optional[str] = None
    entry_fee: Optional[str] = Field(default=None, alias="entryFee")
    best_time_to_visit: Optional[str] = Field(default=None, alias="bestTimeToVisit")
    nearby_attractions: List[str] = Field(default_factory=list, alias="nearbyAttractions")
    how_to_reach: Optional[str] = Field(default=None, alias="howToReach")
    tips: List[str] = Field(default_factory=list)

    # Collections consumed by the pricing engine
    transportation: Transportation = Field(default_factory=Transportation)
    # Insertion order of the keys is significant (itinerary cycling)
    suggested_itinerary: Dict[str, List[ItineraryItem]] = Field(
        default_factory=dict, alias="suggestedItinerary"
    )
    hotels: List[Hotel] = Field(default_factory=list)

    model_config = _CATALOG_CONFIG


class Experience(BaseModel):
    id: int
    name: str
    description: str = ""
    category: str = ""
    duration: Optional[str] = None
    best_time: Optional[str] = Field(default=None, alias="bestTime")
    highlights: List[str] = Field(default_factory=list)
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    model_config = _CATALOG_CONFIG


class Dataset(BaseModel):
    """The whole bundled document, loaded once at startup."""
    destinations: List[Destination] = Field(default_factory=list)
    experiences: List[Experience] = Field(default_factory=list)

    model_config = _CATALOG_CONFIG
