from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class BookingForm(BaseModel):
    """Form values echoed back to the hotel page for redisplay."""

    room_id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    checkin: str = ""
    checkout: str = ""
    guests: int = 2


class BookingIntent(BaseModel):
    room_id: str
    guest_name: str
    guest_email: str
    guest_phone: str | None = None
    checkin: str
    checkout: str
    guests: int


class ValidationOk(BaseModel):
    kind: Literal["ok"] = "ok"
    intent: BookingIntent


class ValidationFailed(BaseModel):
    kind: Literal["failed"] = "failed"
    errors: list[str]
    form: BookingForm


ValidationResult = ValidationOk | ValidationFailed


class Booking(BaseModel):
    id: int
    room_id: int
    guest_name: str
    guest_email: str
    guest_phone: str | None = None
    checkin_date: str
    checkout_date: str
    guests: int
    created_at: str | None = None  # SQLite CURRENT_TIMESTAMP text
    room_name: str | None = None
    hotel_name: str | None = None
    city: str | None = None
    price_per_night: float | None = None  # only on single-booking lookups


class StayEstimate(BaseModel):
    nights: int
    total: float
