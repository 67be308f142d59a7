from pydantic import BaseModel


class Hotel(BaseModel):
    id: int
    name: str
    city: str
    description: str | None = None
    image_url: str | None = None
    rating: float | None = None  # 0-5 scale (e.g. 4.8)
    featured: bool = False


class Room(BaseModel):
    id: int
    hotel_id: int
    name: str
    price_per_night: float
    capacity: int
    image_url: str | None = None
