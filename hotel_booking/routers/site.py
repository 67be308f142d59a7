from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from hotel_booking.dependencies import CatalogDep
from hotel_booking.schemas.booking import BookingForm
from hotel_booking.templating import templates

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(request: Request, catalog: CatalogDep):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "cities": catalog.list_cities(),
            "featured_hotels": catalog.featured_hotels(),
        },
    )


@router.get("/search", response_class=HTMLResponse)
def search(
    request: Request,
    catalog: CatalogDep,
    city: str | None = None,
    checkin: str | None = None,
    checkout: str | None = None,
    guests: str | None = None,
):
    return templates.TemplateResponse(
        request,
        "search.html",
        {
            "hotels": catalog.search(city),
            "city": city,
            "checkin": checkin,
            "checkout": checkout,
            "guests": guests,
        },
    )


@router.get("/hotel/{hotel_id}", response_class=HTMLResponse)
def hotel_detail(request: Request, hotel_id: str, catalog: CatalogDep):
    hotel, rooms = catalog.hotel_with_rooms(hotel_id)
    return templates.TemplateResponse(
        request,
        "hotel.html",
        {
            "hotel": hotel,
            "rooms": rooms,
            "errors": [],
            "form": BookingForm(),
        },
    )
