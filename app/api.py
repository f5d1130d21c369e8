import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from agents.booking.agent import confirm_booking
from agents.booking.policies import missing_confirmation_fields
from app.settings import settings
from models.catalog import Destination, Experience
from models.trip import BookingConfirmation, Quote, TripRequest
from services.dataset import get_dataset
from services.logging import configure_logging
from tools.amenities import amenity_icons
from tools.catalog import CATEGORIES, filter_destinations, find_destination, transport_options
from tools.currency import format_price
from tools.pricing import available_pricing_modes, build_quote

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Explore Gujarat API", version="0.1.0")


class QuoteResponse(BaseModel):
    quote: Quote
    formatted_total: str


def _get_destination(destination_id: int) -> Destination:
    destination = find_destination(get_dataset().destinations, destination_id)
    if destination is None:
        raise HTTPException(status_code=404, detail=f"Destination {destination_id} not found")
    return destination


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/categories")
def categories() -> List[Dict[str, str]]:
    return [{"value": value, "label": label} for value, label in CATEGORIES]


@app.get("/destinations", response_model=List[Destination], response_model_by_alias=True)
def list_destinations(search: Optional[str] = None, category: str = "all"):
    return filter_destinations(get_dataset().destinations, search_term=search, category=category)


@app.get("/destinations/{destination_id}", response_model=Destination, response_model_by_alias=True)
def get_destination(destination_id: int):
    return _get_destination(destination_id)


@app.get("/destinations/{destination_id}/hotels")
def list_hotels(destination_id: int) -> List[Dict[str, Any]]:
    destination = _get_destination(destination_id)
    return [
        {
            **hotel.model_dump(by_alias=True),
            "amenityIcons": amenity_icons(hotel.amenities),
            "formattedPrice": format_price(hotel.price_per_night, settings.currency),
        }
        for hotel in destination.hotels
    ]


@app.get("/destinations/{destination_id}/transport")
def list_transport(destination_id: int) -> List[Dict[str, Any]]:
    destination = _get_destination(destination_id)
    return [
        {
            **option.model_dump(by_alias=True),
            "pricingModes": [mode.value for mode in available_pricing_modes(option)],
        }
        for option in transport_options(destination)
    ]


@app.get("/experiences", response_model=List[Experience], response_model_by_alias=True)
def list_experiences():
    return get_dataset().experiences


@app.post("/destinations/{destination_id}/quote", response_model=QuoteResponse)
def quote(destination_id: int, req: TripRequest):
    destination = _get_destination(destination_id)
    result = build_quote(req, destination)
    return QuoteResponse(quote=result, formatted_total=format_price(result.total, settings.currency))


@app.post("/destinations/{destination_id}/confirm", response_model=BookingConfirmation)
def confirm(destination_id: int, req: TripRequest):
    destination = _get_destination(destination_id)
    confirmation = confirm_booking(destination, req)
    if confirmation is None:
        missing = ", ".join(missing_confirmation_fields(req, destination.hotels))
        raise HTTPException(status_code=409, detail=f"Cannot confirm booking; missing: {missing}")
    return confirmation
