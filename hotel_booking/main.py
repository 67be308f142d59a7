import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_booking.config import Settings
from hotel_booking.exceptions.custom import (
    BookingNotFoundError,
    BookingValidationError,
    HotelNotFoundError,
    RepositoryError,
    RoomNotFoundError,
)
from hotel_booking.exceptions.handlers import (
    booking_not_found_error_handler,
    booking_validation_error_handler,
    hotel_not_found_error_handler,
    not_found_handler,
    repository_error_handler,
    room_not_found_error_handler,
    unexpected_error_handler,
)
from hotel_booking.routers.admin import router as admin_router
from hotel_booking.routers.bookings import router as bookings_router
from hotel_booking.routers.site import router as site_router
from hotel_booking.services.booking import BookingService
from hotel_booking.services.catalog import CatalogService
from hotel_booking.services.database import HotelRepository, create_db_engine
from hotel_booking.templating import STATIC_DIR

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    repository = HotelRepository(create_db_engine(settings.database_url))
    try:
        repository.init()
        if settings.seed_sample_data:
            repository.seed_sample_data()
    except RepositoryError:
        logger.exception("Failed to initialize database")
        repository.dispose()
        raise

    app.state.catalog_service = CatalogService(repository, featured_limit=settings.featured_limit)
    app.state.booking_service = BookingService(repository)
    logger.info("Hotel booking app ready")

    try:
        yield
    finally:
        repository.dispose()


app = FastAPI(title="Hotel Booking", lifespan=lifespan)

app.add_exception_handler(BookingValidationError, booking_validation_error_handler)
app.add_exception_handler(RoomNotFoundError, room_not_found_error_handler)
app.add_exception_handler(HotelNotFoundError, hotel_not_found_error_handler)
app.add_exception_handler(BookingNotFoundError, booking_not_found_error_handler)
app.add_exception_handler(StarletteHTTPException, not_found_handler)
app.add_exception_handler(RepositoryError, repository_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(site_router)
app.include_router(bookings_router)
app.include_router(admin_router)
