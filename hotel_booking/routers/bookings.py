from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from hotel_booking.dependencies import BookingDep
from hotel_booking.templating import templates

router = APIRouter()


@router.post("/book")
def book(
    service: BookingDep,
    room_id: Annotated[str, Form()] = "",
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    phone: Annotated[str, Form()] = "",
    checkin: Annotated[str, Form()] = "",
    checkout: Annotated[str, Form()] = "",
    guests: Annotated[str, Form()] = "",
) -> RedirectResponse:
    booking = service.submit({
        "room_id": room_id,
        "name": name,
        "email": email,
        "phone": phone,
        "checkin": checkin,
        "checkout": checkout,
        "guests": guests,
    })
    return RedirectResponse(url=f"/booking/{booking.id}", status_code=303)


@router.get("/booking/{booking_id}", response_class=HTMLResponse)
def booking_confirmation(request: Request, booking_id: str, service: BookingDep):
    booking, stay = service.confirmation(booking_id)
    return templates.TemplateResponse(
        request,
        "booking.html",
        {
            "booking": booking,
            "nights": stay.nights,
            "total_estimate": stay.total,
        },
    )
