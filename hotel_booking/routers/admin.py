from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from hotel_booking.dependencies import BookingDep
from hotel_booking.templating import templates

router = APIRouter(prefix="/admin")


@router.get("/bookings", response_class=HTMLResponse)
def admin_bookings(request: Request, service: BookingDep):
    return templates.TemplateResponse(
        request,
        "admin_bookings.html",
        {"bookings": service.list_bookings()},
    )
