from typing import Annotated

from fastapi import Depends, Request

from hotel_booking.services.booking import BookingService
from hotel_booking.services.catalog import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


CatalogDep = Annotated[CatalogService, Depends(get_catalog_service)]
BookingDep = Annotated[BookingService, Depends(get_booking_service)]
