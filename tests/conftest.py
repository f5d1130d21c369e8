import pytest

from models.catalog import Destination


def _item(activity: str) -> dict:
    return {"time": "09:00", "activity": activity, "duration": "2 hours", "description": activity}


@pytest.fixture
def destination() -> Destination:
    return Destination.model_validate(
        {
            "id": 7,
            "name": "Dwarka",
            "description": "Ancient kingdom of Krishna on the western tip of Saurashtra",
            "location": "Devbhoomi Dwarka",
            "category": "religious",
            "transportation": {
                "taxiOptions": [
                    {"type": "Sedan", "pricePerDay": 1500, "pricePerKm": 10, "description": "AC sedan"},
                    {"type": "Day Cab", "pricePerDay": 2000, "description": "Full day only"},
                ],
                "otherOptions": [
                    {"type": "Auto", "pricePerKm": 10, "description": "Auto rickshaw"},
                ],
            },
            "suggestedItinerary": {
                "1": [_item("Dwarkadhish Temple"), _item("Gomti Ghat")],
                "2": [_item("Bet Dwarka")],
            },
            "hotels": [
                {"id": "h-2000", "name": "Hotel Gomti", "pricePerNight": 2000, "amenities": ["WiFi"]},
                {"id": "h-5000", "name": "Dwarka Residency", "pricePerNight": 5000, "amenities": ["Spa", "Gym"]},
            ],
        }
    )


@pytest.fixture
def bare_destination() -> Destination:
    return Destination(id=99, name="Empty Place")
