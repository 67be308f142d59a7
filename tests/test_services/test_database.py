"""Tests for HotelRepository against a temporary SQLite file."""

import pytest
from sqlalchemy import create_engine

from hotel_booking.exceptions.custom import RepositoryError
from hotel_booking.schemas.booking import BookingIntent
from hotel_booking.services.database import HotelRepository


def _intent(**overrides) -> BookingIntent:
    fields = {
        "room_id": "1",
        "guest_name": "Asha",
        "guest_email": "asha@example.com",
        "guest_phone": None,
        "checkin": "2024-06-01",
        "checkout": "2024-06-03",
        "guests": 2,
    }
    fields.update(overrides)
    return BookingIntent(**fields)


# --- seeding ---


def test_seed_creates_sample_catalog(repository):
    hotels = repository.search_hotels()
    assert [h.name for h in hotels] == [
        "Oceanview Paradise",
        "Skyline Grand Hotel",
        "Serenity Hills Retreat",
    ]
    for hotel in hotels:
        rooms = repository.list_rooms_for_hotel(hotel.id)
        assert [(r.name, r.price_per_night, r.capacity) for r in rooms] == [
            ("Deluxe Room", 3500, 2),
            ("Family Suite", 5200, 4),
        ]


def test_seed_is_idempotent(repository):
    assert repository.seed_sample_data() is False
    repository.init()
    assert repository.seed_sample_data() is False

    hotels = repository.search_hotels()
    assert len(hotels) == 3
    assert sum(len(repository.list_rooms_for_hotel(h.id)) for h in hotels) == 6


# --- catalog ---


def test_distinct_cities_sorted(repository):
    assert repository.list_distinct_cities() == ["Goa", "Manali", "Mumbai"]


def test_featured_hotels(repository):
    featured = repository.list_featured_hotels(4)
    assert [h.city for h in featured] == ["Goa", "Mumbai"]
    assert all(h.featured for h in featured)


def test_featured_hotels_respects_limit(repository):
    assert len(repository.list_featured_hotels(1)) == 1


def test_search_without_city_returns_everything(repository):
    everything = repository.search_hotels()
    assert repository.search_hotels(None) == everything
    assert repository.search_hotels("") == everything
    assert len(everything) == 3


def test_search_by_exact_city(repository):
    hotels = repository.search_hotels("Goa")
    assert [h.name for h in hotels] == ["Oceanview Paradise"]


@pytest.mark.parametrize("city", ["goa", "GOA", "Go", "Goa ", "Paris"])
def test_search_city_is_exact_and_case_sensitive(repository, city):
    assert repository.search_hotels(city) == []


def test_get_hotel(repository):
    hotel = repository.get_hotel(1)
    assert hotel.name == "Oceanview Paradise"
    assert hotel.rating == 4.8
    assert repository.get_hotel("1") == hotel


@pytest.mark.parametrize(
    "hotel_id",
    [
        999,
        "999",
        "abc",
        "",
        "1; DROP TABLE hotels",
        "\u00b2",
        "\u0663",
        "99999999999999999999",
        2**63,
        -(2**63) - 1,
        "1" * 5000,
    ],
)
def test_get_hotel_missing(repository, hotel_id):
    assert repository.get_hotel(hotel_id) is None


def test_get_room(repository):
    room = repository.get_room("2")
    assert room.name == "Family Suite"
    assert room.hotel_id == 1
    assert repository.get_room(None) is None
    assert repository.get_room("nope") is None


# --- bookings ---


def test_insert_and_get_booking(repository):
    booking_id = repository.insert_booking(_intent(guest_phone="555-0100"))

    booking = repository.get_booking(booking_id)
    assert booking.id == booking_id
    assert booking.room_id == 1
    assert booking.guest_name == "Asha"
    assert booking.guest_phone == "555-0100"
    assert booking.checkin_date == "2024-06-01"
    assert booking.checkout_date == "2024-06-03"
    assert booking.guests == 2
    assert booking.room_name == "Deluxe Room"
    assert booking.hotel_name == "Oceanview Paradise"
    assert booking.city == "Goa"
    assert booking.price_per_night == 3500
    assert booking.created_at


def test_get_booking_missing(repository):
    assert repository.get_booking(42) is None
    assert repository.get_booking("x") is None


def test_double_booking_is_not_prevented(repository):
    first = repository.insert_booking(_intent())
    second = repository.insert_booking(_intent())

    assert first != second
    assert len(repository.list_bookings()) == 2


def test_list_bookings_newest_first(repository):
    ids = [
        repository.insert_booking(_intent(room_id="1")),
        repository.insert_booking(_intent(room_id="3")),
        repository.insert_booking(_intent(room_id="6")),
    ]

    listed = repository.list_bookings()
    assert [b.id for b in listed] == list(reversed(ids))
    assert [b.hotel_name for b in listed] == [
        "Serenity Hills Retreat",
        "Skyline Grand Hotel",
        "Oceanview Paradise",
    ]
    assert all(b.price_per_night is None for b in listed)


def test_errors_are_wrapped(tmp_path):
    repo = HotelRepository(create_engine(f"sqlite:///{tmp_path / 'empty.sqlite'}"))
    # No init(): tables are missing
    with pytest.raises(RepositoryError) as exc_info:
        repo.search_hotels()

    assert exc_info.value.operation == "search_hotels"
    assert "hotels" in exc_info.value.message
    repo.dispose()


def test_largest_storable_id_is_looked_up(repository):
    assert repository.get_hotel(str(2**63 - 1)) is None
    assert repository.get_room("00000000000000000000001").name == "Deluxe Room"


def test_out_of_range_room_id(repository):
    assert repository.get_room("99999999999999999999") is None
    assert repository.list_rooms_for_hotel("99999999999999999999") == []
