"""Catalog lookup and filter helpers"""
import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from models.catalog import Destination, Hotel, TransportOption

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"

CATEGORIES: List[Tuple[str, str]] = [
    (ALL_CATEGORIES, "All Categories"),
    ("historical", "Historical Sites"),
    ("religious", "Religious Places"),
    ("natural", "Natural Wonders"),
    ("wildlife", "Wildlife"),
    ("cultural", "Cultural Sites"),
    ("beach", "Beaches"),
    ("monument", "Monuments"),
    ("hillstation", "Hill Stations"),
]


def _matches_search(destination: Destination, term: str) -> bool:
    return (
        term in destination.name.lower()
        or term in destination.location.lower()
        or term in destination.description.lower()
    )


def filter_destinations(
    destinations: Iterable[Destination],
    search_term: Optional[str] = None,
    category: Optional[str] = ALL_CATEGORIES,
) -> List[Destination]:
    """
    Landing page filter.

    Search text is a case-insensitive substring match on name, location or
    description; category is an exact match unless it is "all". Order of
    the input is preserved.
    """
    term = (search_term or "").strip().lower()
    filtered = list(destinations)

    if term:
        filtered = [d for d in filtered if _matches_search(d, term)]

    if category and category != ALL_CATEGORIES:
        filtered = [d for d in filtered if d.category == category]

    return filtered


def find_destination(destinations: Iterable[Destination], destination_id: int) -> Optional[Destination]:
    for destination in destinations:
        if destination.id == destination_id:
            return destination
    logger.debug("destination not found: id=%s", destination_id)
    return None


def find_hotel(hotels: Iterable[Hotel], hotel_id: Optional[str]) -> Optional[Hotel]:
    if not hotel_id:
        return None
    for hotel in hotels:
        if hotel.id == hotel_id:
            return hotel
    logger.debug("hotel not found: id=%s", hotel_id)
    return None


def transport_options(destination: Destination) -> List[TransportOption]:
    """Taxi options first, then the other options, as one list."""
    return [*destination.transportation.taxi_options, *destination.transportation.other_options]


def find_transport(options: Sequence[TransportOption], transport_type: Optional[str]) -> Optional[TransportOption]:
    if not transport_type:
        return None
    for option in options:
        if option.type == transport_type:
            return option
    logger.debug("transport option not found: type=%s", transport_type)
    return None


def duplicate_transport_types(destination: Destination) -> List[str]:
    """Transport types that appear more than once across taxi and other options."""
    seen: Set[str] = set()
    duplicates: List[str] = []
    for option in transport_options(destination):
        if option.type in seen and option.type not in duplicates:
            duplicates.append(option.type)
        seen.add(option.type)
    return duplicates


def toggle_favorite(favorites: Set[int], destination_id: int) -> Set[int]:
    """Return a new favorites set with `destination_id` flipped."""
    updated = set(favorites)
    if destination_id in updated:
        updated.remove(destination_id)
    else:
        updated.add(destination_id)
    return updated
