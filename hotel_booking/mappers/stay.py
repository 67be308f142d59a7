import math
from datetime import date, datetime, timezone

from hotel_booking.schemas.booking import StayEstimate

_MS_PER_DAY = 1000 * 60 * 60 * 24


def parse_calendar_date(value: str | date | datetime | None) -> datetime | None:
    """Parse a calendar date into an aware UTC datetime.

    Policy:
      - "YYYY-MM-DD" is UTC midnight of that day
      - ISO date-times are accepted; naive ones are taken as UTC,
        aware ones are converted to UTC
      - anything else (empty, garbage, impossible dates) → None
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    text = value.strip()
    if not text:
        return None
    try:
        day = date.fromisoformat(text)
    except ValueError:
        pass
    else:
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)

    try:
        return _as_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def compute_stay(
    checkin: str | date | None,
    checkout: str | date | None,
    price_per_night: float,
) -> StayEstimate:
    """Nights between two stored dates (minimum 1) and the total estimate."""
    nights = 1
    checkin_at = parse_calendar_date(checkin)
    checkout_at = parse_calendar_date(checkout)
    if checkin_at is not None and checkout_at is not None:
        diff_ms = (checkout_at - checkin_at).total_seconds() * 1000
        # Round half up, not to even
        diff_days = math.floor(diff_ms / _MS_PER_DAY + 0.5)
        if diff_days > 0:
            nights = diff_days

    return StayEstimate(nights=nights, total=nights * price_per_night)
