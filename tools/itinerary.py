"""Day-by-day itinerary generation"""
from typing import Dict, List

from models.catalog import Destination, ItineraryItem

DEFAULT_ITINERARY_ITEM = ItineraryItem(
    time="all day",
    activity="Explore nearby attractions or relax",
    duration="Flexible",
    description="Visit local markets, nearby sites, or enjoy hotel amenities.",
)


def generate_timetable(destination: Destination, nights: int) -> Dict[int, List[ItineraryItem]]:
    """
    Build a timetable for days 1..nights by cycling through the destination's
    itinerary templates in their insertion order.

    Day d uses template number (d - 1) mod K. Days whose template is missing
    or empty get a single "explore nearby" item, so every day has content.
    """
    templates = destination.suggested_itinerary
    keys = list(templates)
    timetable: Dict[int, List[ItineraryItem]] = {}

    for day in range(1, nights + 1):
        items = templates[keys[(day - 1) % len(keys)]] if keys else []
        timetable[day] = list(items) if items else [DEFAULT_ITINERARY_ITEM]

    return timetable
