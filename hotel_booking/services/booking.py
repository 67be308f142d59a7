import logging
from collections.abc import Mapping

from hotel_booking.exceptions.custom import (
    BookingNotFoundError,
    BookingValidationError,
    RoomNotFoundError,
)
from hotel_booking.mappers.booking_request import validate_booking_request
from hotel_booking.mappers.stay import compute_stay
from hotel_booking.schemas.booking import Booking, StayEstimate, ValidationFailed
from hotel_booking.services.database import HotelRepository

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, repository: HotelRepository):
        self._repository = repository

    def submit(self, raw: Mapping[str, str | None]) -> Booking:
        """Validate and persist a booking request.

        No availability check is made: overlapping bookings for the same
        room are accepted.
        """
        result = validate_booking_request(raw)
        room = self._repository.get_room(raw.get("room_id"))

        if isinstance(result, ValidationFailed):
            if room is None:
                logger.warning("Booking rejected, room %r not found", raw.get("room_id"))
                raise RoomNotFoundError(raw.get("room_id"))
            logger.info(
                "Booking validation failed for room %s: %s", room.id, result.errors
            )
            hotel = self._repository.get_hotel(room.hotel_id)
            if hotel is None:
                raise RoomNotFoundError(raw.get("room_id"))
            raise BookingValidationError(
                errors=result.errors,
                form=result.form,
                hotel=hotel,
                rooms=self._repository.list_rooms_for_hotel(hotel.id),
            )

        if room is None:
            logger.warning("Booking rejected, room %r not found", result.intent.room_id)
            raise RoomNotFoundError(result.intent.room_id)

        booking_id = self._repository.insert_booking(result.intent)
        logger.info("Created booking %s for room %s", booking_id, room.id)

        booking = self._repository.get_booking(booking_id)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def confirmation(self, booking_id: int | str) -> tuple[Booking, StayEstimate]:
        booking = self._repository.get_booking(booking_id)
        if booking is None:
            logger.warning("Booking %s not found", booking_id)
            raise BookingNotFoundError(booking_id)

        stay = compute_stay(
            booking.checkin_date,
            booking.checkout_date,
            booking.price_per_night or 0,
        )
        return booking, stay

    def list_bookings(self) -> list[Booking]:
        return self._repository.list_bookings()
