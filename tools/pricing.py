"""
Trip pricing engine

Pure functions over a TripRequest and a destination's hotel/transport
catalog. Nothing here raises on missing or malformed form input: absent
selections price at zero, a bad guest count counts as one guest and a bad
kilometer estimate falls back to DEFAULT_KM_PER_DAY.
"""
import logging
import math
import re
from datetime import date
from typing import List, Optional, Tuple, Union

from models.catalog import Destination, Hotel, TransportOption
from models.trip import CostBreakdown, PricingMode, Quote, RawNumber, TripRequest
from tools.catalog import find_hotel, find_transport, transport_options
from tools.itinerary import generate_timetable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BASE_GUEST_RATE = 1000.0        # per guest per night, up to BASE_GUEST_LIMIT guests
EXTRA_GUEST_RATE = 800.0        # per guest per night beyond BASE_GUEST_LIMIT
BASE_GUEST_LIMIT = 4

DEFAULT_GUEST_COUNT = 1
DEFAULT_KM_PER_DAY = 50
MIN_BILLABLE_KM_PER_DAY = 30    # perKm floor

# Larger guest counts or km estimates are treated as unusable input
MAX_NUMERIC_INPUT = 100_000
_LEADING_INT = re.compile(r"[+-]?\d+")
_MAX_INPUT_DIGITS = len(str(MAX_NUMERIC_INPUT)) + 1

# (minimum nights, multiplier); longest tier first, first match wins
FULL_DAY_DISCOUNTS: Tuple[Tuple[int, float], ...] = (
    (7, 0.90),
    (3, 0.95),
)


# ---------------------------------------------------------------------------
# Input normalisation
# ---------------------------------------------------------------------------


def _to_int(raw: RawNumber) -> Optional[int]:
    """
    Leading integer of a form value ("2.7" -> 2, "1e3" -> 1, "abc" -> None).

    Values beyond MAX_NUMERIC_INPUT count as unusable.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, float):
        value = int(raw) if math.isfinite(raw) else None
    elif isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw).strip())
        digits = match.group() if match else ""
        # int() refuses very long digit strings; anything that long is over the cap
        value = int(digits) if digits and len(digits) <= _MAX_INPUT_DIGITS else None

    if value is None or abs(value) > MAX_NUMERIC_INPUT:
        return None
    return value


def parse_guest_count(raw: RawNumber) -> int:
    """Guest count as entered -> positive int; anything unusable counts as 1."""
    count = _to_int(raw)
    if count is None or count < DEFAULT_GUEST_COUNT:
        return DEFAULT_GUEST_COUNT
    return count


def parse_km_per_day(raw: RawNumber) -> int:
    """Kilometer estimate as entered -> positive int, DEFAULT_KM_PER_DAY otherwise."""
    km = _to_int(raw)
    if km is None or km <= 0:
        return DEFAULT_KM_PER_DAY
    return km


def coerce_pricing_mode(pricing_mode: Union[PricingMode, str, None]) -> Optional[PricingMode]:
    if pricing_mode is None:
        return None
    try:
        return PricingMode(pricing_mode)
    except ValueError:
        logger.warning("unknown pricing mode %r; transport priced at 0", pricing_mode)
        return None


# ---------------------------------------------------------------------------
# Cost components
# ---------------------------------------------------------------------------


def compute_nights(check_in: Optional[date], check_out: Optional[date]) -> int:
    """Whole days between the dates plus one; 0 while either date is unset."""
    if check_in is None or check_out is None:
        return 0
    return (check_out - check_in).days + 1


def compute_hotel_cost(hotel: Optional[Hotel], nights: int) -> float:
    if hotel is None or nights < 1:
        return 0.0
    return hotel.price_per_night * nights


def compute_guest_surcharge(guests: RawNumber, nights: int) -> float:
    """
    Tiered per-guest-per-night charge.

    The first BASE_GUEST_LIMIT guests pay BASE_GUEST_RATE each, every
    further guest pays EXTRA_GUEST_RATE.
    """
    if nights < 1:
        return 0.0

    count = parse_guest_count(guests)
    if count <= BASE_GUEST_LIMIT:
        return count * BASE_GUEST_RATE * nights

    extra = count - BASE_GUEST_LIMIT
    return (BASE_GUEST_LIMIT * BASE_GUEST_RATE + extra * EXTRA_GUEST_RATE) * nights


def full_day_discount(nights: int) -> float:
    for min_nights, multiplier in FULL_DAY_DISCOUNTS:
        if nights >= min_nights:
            return multiplier
    return 1.0


def available_pricing_modes(option: Optional[TransportOption]) -> List[PricingMode]:
    """Pricing modes a user may pick for this option (one per price field present)."""
    if option is None:
        return []
    modes = []
    if option.price_per_day:
        modes.append(PricingMode.FULL_DAY)
    if option.price_per_km:
        modes.append(PricingMode.PER_KM)
    return modes


def compute_transport_cost(
    option: Optional[TransportOption],
    nights: int,
    pricing_mode: Union[PricingMode, str, None] = PricingMode.FULL_DAY,
    km_per_day: RawNumber = DEFAULT_KM_PER_DAY,
) -> float:
    """
    Transport charge for the whole stay.

    fullDay: pricePerDay * nights, with one duration discount applied to the
    total (>= 7 nights 10% off, >= 3 nights 5% off).
    perKm: pricePerKm * km_per_day per day, never less than the
    MIN_BILLABLE_KM_PER_DAY floor, times nights.

    A price field the option does not carry prices at 0.
    """
    if option is None or nights < 1:
        return 0.0

    mode = coerce_pricing_mode(pricing_mode)

    if mode == PricingMode.FULL_DAY:
        if not option.price_per_day:
            return 0.0
        base = option.price_per_day * nights
        return round(base * full_day_discount(nights), 2)

    if mode == PricingMode.PER_KM:
        if not option.price_per_km:
            return 0.0
        km = parse_km_per_day(km_per_day)
        daily = option.price_per_km * km
        minimum_daily = option.price_per_km * MIN_BILLABLE_KM_PER_DAY
        return round(max(daily, minimum_daily) * nights, 2)

    return 0.0


# ---------------------------------------------------------------------------
# Quote
# ---------------------------------------------------------------------------


def compute_breakdown(request: TripRequest, destination: Destination) -> CostBreakdown:
    """
    Price a request against one destination.

    Nights are derived once and shared by every component. With fewer than
    one night nothing is priced.
    """
    nights = compute_nights(request.check_in, request.check_out)
    if nights < 1:
        return CostBreakdown()

    hotel = find_hotel(destination.hotels, request.hotel_id)
    option = find_transport(transport_options(destination), request.transport_type)

    hotel_cost = compute_hotel_cost(hotel, nights)
    guest_surcharge = compute_guest_surcharge(request.guests, nights)
    transport_cost = compute_transport_cost(option, nights, request.pricing_mode, request.km_per_day)

    return CostBreakdown(
        nights=nights,
        hotel_cost=hotel_cost,
        guest_surcharge=guest_surcharge,
        transport_cost=transport_cost,
        total=hotel_cost + guest_surcharge + transport_cost,
    )


def compute_total(request: TripRequest, destination: Destination) -> float:
    return compute_breakdown(request, destination).total


def build_quote(request: TripRequest, destination: Destination) -> Quote:
    """Full quote: cost breakdown plus the generated timetable."""
    breakdown = compute_breakdown(request, destination)
    return Quote(
        **breakdown.model_dump(),
        timetable=generate_timetable(destination, breakdown.nights),
    )
