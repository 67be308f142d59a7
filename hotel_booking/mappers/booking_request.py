import re
from collections.abc import Mapping

from hotel_booking.mappers.stay import parse_calendar_date
from hotel_booking.schemas.booking import (
    BookingForm,
    BookingIntent,
    ValidationFailed,
    ValidationOk,
    ValidationResult,
)

ROOM_REQUIRED = "Please select a room type."
NAME_REQUIRED = "Name is required."
EMAIL_REQUIRED = "Email is required."
CHECKIN_REQUIRED = "Check-in date is required."
CHECKOUT_REQUIRED = "Check-out date is required."
GUESTS_AT_LEAST_ONE = "Guests must be at least 1."
GUESTS_TOO_MANY = "Guests value is too large."
CHECKOUT_AFTER_CHECKIN = "Check-out date must be after check-in date."

# Largest value a SQLite INTEGER column holds
MAX_GUESTS = 2**63 - 1

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_guest_count(value: str | int | None) -> int:
    """Leading-digits integer parse: "3" → 3, "2 guests" → 2, "1.5" → 1, "abc" → 0."""
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    match = _LEADING_INT_RE.match(value)
    if not match:
        return 0
    number = match.group(1)
    digits = number.lstrip("+-").lstrip("0")
    # int() refuses very long digit strings; anything this long is out of range
    if len(digits) > len(str(MAX_GUESTS)):
        return -(MAX_GUESTS + 1) if number.startswith("-") else MAX_GUESTS + 1
    return int(number)


def validate_booking_request(raw: Mapping[str, str | None]) -> ValidationResult:
    """Validate raw booking form fields.

    Every rule is checked; messages come back in a fixed order so the form
    can list them the same way regardless of which fields were filled in.
    """
    room_id = raw.get("room_id") or ""
    name = raw.get("name") or ""
    email = raw.get("email") or ""
    phone = raw.get("phone") or ""
    checkin = raw.get("checkin") or ""
    checkout = raw.get("checkout") or ""
    guests = parse_guest_count(raw.get("guests"))

    errors: list[str] = []
    if not room_id:
        errors.append(ROOM_REQUIRED)
    if not name:
        errors.append(NAME_REQUIRED)
    if not email:
        errors.append(EMAIL_REQUIRED)
    if not checkin:
        errors.append(CHECKIN_REQUIRED)
    if not checkout:
        errors.append(CHECKOUT_REQUIRED)
    if guests <= 0:
        errors.append(GUESTS_AT_LEAST_ONE)
    elif guests > MAX_GUESTS:
        errors.append(GUESTS_TOO_MANY)

    if checkin and checkout:
        checkin_at = parse_calendar_date(checkin)
        checkout_at = parse_calendar_date(checkout)
        # Unparseable dates are not compared
        if checkin_at is not None and checkout_at is not None and checkout_at <= checkin_at:
            errors.append(CHECKOUT_AFTER_CHECKIN)

    if errors:
        return ValidationFailed(
            errors=errors,
            form=BookingForm(
                room_id=room_id,
                name=name,
                email=email,
                phone=phone,
                checkin=checkin,
                checkout=checkout,
                guests=guests or 1,
            ),
        )

    return ValidationOk(
        intent=BookingIntent(
            room_id=room_id,
            guest_name=name,
            guest_email=email,
            guest_phone=phone or None,
            checkin=checkin,
            checkout=checkout,
            guests=guests,
        )
    )
