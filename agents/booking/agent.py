"""Booking Agent - owns the trip request of one open planning dialog"""
import logging
from datetime import date
from typing import Any, Optional, Union

from agents.booking.policies import can_confirm
from models.catalog import Destination, Hotel, TransportOption
from models.trip import (
    BookingConfirmation,
    PricingMode,
    Quote,
    RawNumber,
    TransportSummary,
    TripRequest,
)
from tools.catalog import find_hotel, find_transport, transport_options
from tools.pricing import (
    available_pricing_modes,
    build_quote,
    coerce_pricing_mode,
    parse_guest_count,
    parse_km_per_day,
)

logger = logging.getLogger(__name__)


def confirm_booking(destination: Destination, request: TripRequest) -> Optional[BookingConfirmation]:
    """
    Snapshot a request into a confirmation record.

    Returns None when the confirm gate fails. Nothing is stored; the
    snapshot is only logged.
    """
    if not can_confirm(request, destination.hotels):
        return None

    quote = build_quote(request, destination)
    hotel = find_hotel(destination.hotels, request.hotel_id)
    option = find_transport(transport_options(destination), request.transport_type)

    transport = None
    if option is not None:
        per_km = request.pricing_mode == PricingMode.PER_KM
        transport = TransportSummary(
            type=option.type,
            pricing_mode=request.pricing_mode,
            rate=option.price_per_km if per_km else option.price_per_day,
            km_per_day=parse_km_per_day(request.km_per_day) if per_km else None,
        )

    confirmation = BookingConfirmation(
        destination_name=destination.name,
        check_in=request.check_in,
        check_out=request.check_out,
        nights=quote.nights,
        guests=parse_guest_count(request.guests),
        hotel=hotel,
        transport=transport,
        quote=quote,
    )
    logger.info("Plan created: %s", confirmation.model_dump_json(exclude={"quote": {"timetable"}}))
    return confirmation


class BookingAgent:
    """
    Booking Agent for one destination's planning dialog.

    Holds the TripRequest while the form is filled in and recomputes the
    quote from scratch on demand. Closing the dialog discards everything.
    """

    def __init__(self, destination: Destination) -> None:
        self.destination = destination
        self.request = TripRequest()
        self.last_confirmation: Optional[BookingConfirmation] = None

    # ------------- form inputs -------------

    def _update(self, **changes: Any) -> TripRequest:
        # Re-validate so the check-out clamp always applies
        self.request = TripRequest.model_validate({**self.request.model_dump(), **changes})
        return self.request

    def set_check_in(self, check_in: Optional[date]) -> TripRequest:
        """Moving check-in past check-out drags check-out along."""
        return self._update(check_in=check_in)

    def set_check_out(self, check_out: Optional[date]) -> TripRequest:
        return self._update(check_out=check_out)

    def set_guests(self, guests: RawNumber) -> TripRequest:
        return self._update(guests=guests)

    def select_hotel(self, hotel_id: Optional[str]) -> TripRequest:
        return self._update(hotel_id=hotel_id)

    def select_transport(self, transport_type: Optional[str]) -> TripRequest:
        return self._update(transport_type=transport_type)

    def set_pricing_mode(self, pricing_mode: Union[PricingMode, str]) -> TripRequest:
        """Only modes the selected transport has a price for are accepted."""
        mode = coerce_pricing_mode(pricing_mode)
        if mode is None:
            return self.request

        option = self.selected_transport
        if option is not None and mode not in available_pricing_modes(option):
            logger.info(
                "pricing mode %s not offered by transport %r; keeping %s",
                mode.value,
                option.type,
                self.request.pricing_mode.value,
            )
            return self.request
        return self._update(pricing_mode=mode)

    def set_km_per_day(self, km_per_day: RawNumber) -> TripRequest:
        return self._update(km_per_day=km_per_day)

    # ------------- derived -------------

    @property
    def selected_hotel(self) -> Optional[Hotel]:
        return find_hotel(self.destination.hotels, self.request.hotel_id)

    @property
    def selected_transport(self) -> Optional[TransportOption]:
        return find_transport(transport_options(self.destination), self.request.transport_type)

    def quote(self) -> Quote:
        return build_quote(self.request, self.destination)

    def can_confirm(self) -> bool:
        return can_confirm(self.request, self.destination.hotels)

    def confirm(self) -> Optional[BookingConfirmation]:
        confirmation = confirm_booking(self.destination, self.request)
        if confirmation is not None:
            self.last_confirmation = confirmation
        return confirmation

    def close(self) -> None:
        self.request = TripRequest()
        self.last_confirmation = None
