from typing import Iterable, List

from models.catalog import Hotel
from models.trip import TripRequest
from tools.catalog import find_hotel


def missing_confirmation_fields(request: TripRequest, hotels: Iterable[Hotel]) -> List[str]:
    """Fields that must be filled before a booking can be confirmed."""
    missing = []
    if request.check_in is None:
        missing.append("check_in")
    if request.check_out is None:
        missing.append("check_out")
    if find_hotel(hotels, request.hotel_id) is None:
        missing.append("hotel_id")
    return missing


def can_confirm(request: TripRequest, hotels: Iterable[Hotel]) -> bool:
    """
    Gate for the confirm action:
    - check-in and check-out dates are set
    - a hotel offered by the destination is selected
    """
    return not missing_confirmation_fields(request, hotels)
