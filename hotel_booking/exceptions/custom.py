from __future__ import annotations

from hotel_booking.schemas.booking import BookingForm
from hotel_booking.schemas.hotel import Hotel, Room


class RepositoryError(Exception):
    def __init__(self, message: str, operation: str | None = None):
        self.message = message
        self.operation = operation
        super().__init__(message)


class HotelNotFoundError(Exception):
    def __init__(self, hotel_id: int | str, message: str = "Hotel not found"):
        self.hotel_id = hotel_id
        self.message = message
        super().__init__(message)


class BookingNotFoundError(Exception):
    def __init__(self, booking_id: int | str, message: str = "Booking not found"):
        self.booking_id = booking_id
        self.message = message
        super().__init__(message)


class RoomNotFoundError(Exception):
    def __init__(self, room_id: str | None, message: str = "Selected room no longer exists."):
        self.room_id = room_id
        self.message = message
        super().__init__(message)


class BookingValidationError(Exception):
    def __init__(
        self,
        errors: list[str],
        form: BookingForm,
        hotel: Hotel,
        rooms: list[Room],
    ):
        self.errors = errors
        self.form = form
        self.hotel = hotel
        self.rooms = rooms
        super().__init__("; ".join(errors))
