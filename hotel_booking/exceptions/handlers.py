import logging

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_booking.templating import templates

from .custom import (
    BookingNotFoundError,
    BookingValidationError,
    HotelNotFoundError,
    RepositoryError,
    RoomNotFoundError,
)

logger = logging.getLogger(__name__)


def _not_found_page(request: Request, message: str, status_code: int = 404) -> Response:
    return templates.TemplateResponse(
        request,
        "404.html",
        {"message": message},
        status_code=status_code,
    )


async def booking_validation_error_handler(
    request: Request, exc: BookingValidationError
) -> Response:
    return templates.TemplateResponse(
        request,
        "hotel.html",
        {
            "hotel": exc.hotel,
            "rooms": exc.rooms,
            "errors": exc.errors,
            "form": exc.form,
        },
        status_code=400,
    )


async def room_not_found_error_handler(request: Request, exc: RoomNotFoundError) -> Response:
    return _not_found_page(request, exc.message, status_code=400)


async def hotel_not_found_error_handler(request: Request, exc: HotelNotFoundError) -> Response:
    return _not_found_page(request, exc.message)


async def booking_not_found_error_handler(request: Request, exc: BookingNotFoundError) -> Response:
    return _not_found_page(request, exc.message)


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # Unmatched method or path
    if exc.status_code in (404, 405):
        return _not_found_page(request, "Page not found")
    return await http_exception_handler(request, exc)


async def repository_error_handler(_request: Request, exc: RepositoryError) -> Response:
    logger.error("Repository error during %s: %s", exc.operation, exc.message, exc_info=exc)
    return PlainTextResponse("Server error", status_code=500)


async def unexpected_error_handler(_request: Request, exc: Exception) -> Response:
    logger.exception("Unhandled error", exc_info=exc)
    return PlainTextResponse("Server error", status_code=500)
