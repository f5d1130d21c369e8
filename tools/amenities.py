"""Amenity tag -> icon name lookup for hotel cards"""
from typing import Dict, List

DEFAULT_AMENITY_ICON = "shield-check"

AMENITY_ICONS: Dict[str, str] = {
    "wifi": "wifi",
    "swimming pool": "waves",
    "restaurant": "utensils-crossed",
    "gym": "dumbbell",
    "parking": "parking-square",
    "basic breakfast": "coffee",
    "spa": "bath",
    "room service": "bed-double",
    "security": "shield-check",
    "safari booking desk": "map",
    "garden": "leaf",
    "campfire": "flame",
    "desert safari": "map",
    "temple shuttle": "bus",
    "sea view": "waves",
    "temple view": "shield-check",
    "shuttle service": "bus",
    "ac tents": "shield-check",
    "cultural shows": "shield-check",
    "guided tours": "map",
    "local guide": "map",
}


def amenity_icon(amenity: str) -> str:
    return AMENITY_ICONS.get(amenity.strip().lower(), DEFAULT_AMENITY_ICON)


def amenity_icons(amenities: List[str]) -> Dict[str, str]:
    """Icon for every tag, keyed by the tag as written in the dataset."""
    return {amenity: amenity_icon(amenity) for amenity in amenities}
