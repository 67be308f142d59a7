import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import (
    Boolean,
    Column,
    Connection,
    Engine,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    func,
    insert,
    select,
    text,
)
from sqlalchemy.exc import SQLAlchemyError

from hotel_booking.exceptions.custom import RepositoryError
from hotel_booking.schemas.booking import Booking, BookingIntent
from hotel_booking.schemas.hotel import Hotel, Room

logger = logging.getLogger(__name__)

SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1

metadata = MetaData()

hotels = Table(
    "hotels",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("city", String, nullable=False),
    Column("description", String),
    Column("image_url", String),
    Column("rating", Float),
    Column("featured", Boolean, nullable=False, server_default=text("0")),
)

rooms = Table(
    "rooms",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("hotel_id", Integer, ForeignKey("hotels.id"), nullable=False),
    Column("name", String, nullable=False),
    Column("price_per_night", Float, nullable=False),
    Column("capacity", Integer, nullable=False),
    Column("image_url", String),
)

bookings = Table(
    "bookings",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("room_id", Integer, ForeignKey("rooms.id"), nullable=False),
    Column("guest_name", String, nullable=False),
    Column("guest_email", String, nullable=False),
    Column("guest_phone", String),
    Column("checkin_date", String, nullable=False),
    Column("checkout_date", String, nullable=False),
    Column("guests", Integer, nullable=False),
    Column("created_at", String, server_default=text("CURRENT_TIMESTAMP")),
)

_DELUXE_IMAGE = "https://images.pexels.com/photos/164595/pexels-photo-164595.jpeg"
_RESORT_IMAGE = "https://images.pexels.com/photos/258154/pexels-photo-258154.jpeg"

SAMPLE_HOTELS = [
    {
        "name": "Oceanview Paradise",
        "city": "Goa",
        "description": "Beachfront resort with infinity pool and sunset views.",
        "image_url": _RESORT_IMAGE,
        "rating": 4.8,
        "featured": True,
    },
    {
        "name": "Skyline Grand Hotel",
        "city": "Mumbai",
        "description": "Luxury hotel in the heart of the city with rooftop lounge.",
        "image_url": "https://images.pexels.com/photos/261102/pexels-photo-261102.jpeg",
        "rating": 4.6,
        "featured": True,
    },
    {
        "name": "Serenity Hills Retreat",
        "city": "Manali",
        "description": "Cozy mountain resort surrounded by pine forests.",
        "image_url": _RESORT_IMAGE,
        "rating": 4.7,
        "featured": False,
    },
]

SAMPLE_ROOMS = [
    {"name": "Deluxe Room", "price_per_night": 3500, "capacity": 2, "image_url": _DELUXE_IMAGE},
    {"name": "Family Suite", "price_per_night": 5200, "capacity": 4, "image_url": _RESORT_IMAGE},
]


def _to_id(value: int | str | None) -> int | None:
    """Row ids arrive as path/form strings; anything non-numeric matches nothing."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdecimal()):
            return None
        # int() refuses very long digit strings
        if len(value.lstrip("0")) > len(str(SQLITE_MAX_INTEGER)):
            return None
        value = int(value)
    if not SQLITE_MIN_INTEGER <= value <= SQLITE_MAX_INTEGER:
        return None
    return value


def create_db_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sync endpoints run on FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


class HotelRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    @contextmanager
    def _begin(self, operation: str) -> Iterator[Connection]:
        try:
            with self._engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise RepositoryError(str(exc), operation=operation) from exc

    # --- lifecycle ---

    def init(self) -> None:
        with self._begin("init") as conn:
            metadata.create_all(conn)

    def seed_sample_data(self) -> bool:
        """Insert the sample catalog when the hotels table is empty."""
        with self._begin("seed_sample_data") as conn:
            count = conn.execute(select(func.count()).select_from(hotels)).scalar_one()
            if count:
                return False

            for hotel in SAMPLE_HOTELS:
                hotel_id = conn.execute(insert(hotels).values(**hotel)).inserted_primary_key[0]
                for room in SAMPLE_ROOMS:
                    conn.execute(insert(rooms).values(hotel_id=hotel_id, **room))

        logger.info("Seeded %d sample hotels", len(SAMPLE_HOTELS))
        return True

    def dispose(self) -> None:
        self._engine.dispose()

    # --- catalog ---

    def list_distinct_cities(self) -> list[str]:
        stmt = select(hotels.c.city).distinct().order_by(hotels.c.city.asc())
        with self._begin("list_distinct_cities") as conn:
            return list(conn.execute(stmt).scalars())

    def list_featured_hotels(self, limit: int) -> list[Hotel]:
        stmt = (
            select(hotels)
            .where(hotels.c.featured.is_(True))
            .order_by(hotels.c.id)
            .limit(limit)
        )
        with self._begin("list_featured_hotels") as conn:
            return [Hotel(**row._mapping) for row in conn.execute(stmt)]

    def search_hotels(self, city: str | None = None) -> list[Hotel]:
        stmt = select(hotels).order_by(hotels.c.id)
        if city:
            stmt = stmt.where(hotels.c.city == city)
        with self._begin("search_hotels") as conn:
            return [Hotel(**row._mapping) for row in conn.execute(stmt)]

    def get_hotel(self, hotel_id: int | str) -> Hotel | None:
        hotel_id = _to_id(hotel_id)
        if hotel_id is None:
            return None
        with self._begin("get_hotel") as conn:
            row = conn.execute(select(hotels).where(hotels.c.id == hotel_id)).first()
        return Hotel(**row._mapping) if row else None

    def list_rooms_for_hotel(self, hotel_id: int | str) -> list[Room]:
        hotel_id = _to_id(hotel_id)
        if hotel_id is None:
            return []
        stmt = select(rooms).where(rooms.c.hotel_id == hotel_id).order_by(rooms.c.id)
        with self._begin("list_rooms_for_hotel") as conn:
            return [Room(**row._mapping) for row in conn.execute(stmt)]

    def get_room(self, room_id: int | str | None) -> Room | None:
        room_id = _to_id(room_id)
        if room_id is None:
            return None
        with self._begin("get_room") as conn:
            row = conn.execute(select(rooms).where(rooms.c.id == room_id)).first()
        return Room(**row._mapping) if row else None

    # --- bookings ---

    def insert_booking(self, intent: BookingIntent) -> int:
        stmt = insert(bookings).values(
            room_id=_to_id(intent.room_id),
            guest_name=intent.guest_name,
            guest_email=intent.guest_email,
            guest_phone=intent.guest_phone,
            checkin_date=intent.checkin,
            checkout_date=intent.checkout,
            guests=intent.guests,
        )
        with self._begin("insert_booking") as conn:
            return conn.execute(stmt).inserted_primary_key[0]

    def _booking_query(self):
        return select(
            bookings,
            rooms.c.name.label("room_name"),
            hotels.c.name.label("hotel_name"),
            hotels.c.city,
        ).select_from(
            bookings.join(rooms, bookings.c.room_id == rooms.c.id).join(
                hotels, rooms.c.hotel_id == hotels.c.id
            )
        )

    def get_booking(self, booking_id: int | str) -> Booking | None:
        booking_id = _to_id(booking_id)
        if booking_id is None:
            return None
        stmt = (
            self._booking_query()
            .add_columns(rooms.c.price_per_night)
            .where(bookings.c.id == booking_id)
        )
        with self._begin("get_booking") as conn:
            row = conn.execute(stmt).first()
        return Booking(**row._mapping) if row else None

    def list_bookings(self) -> list[Booking]:
        # created_at has one-second resolution
        stmt = self._booking_query().order_by(
            bookings.c.created_at.desc(), bookings.c.id.desc()
        )
        with self._begin("list_bookings") as conn:
            return [Booking(**row._mapping) for row in conn.execute(stmt)]
