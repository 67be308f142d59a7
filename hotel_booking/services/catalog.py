import logging

from hotel_booking.exceptions.custom import HotelNotFoundError
from hotel_booking.schemas.hotel import Hotel, Room
from hotel_booking.services.database import HotelRepository

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, repository: HotelRepository, featured_limit: int = 4):
        self._repository = repository
        self._featured_limit = featured_limit

    def list_cities(self) -> list[str]:
        return self._repository.list_distinct_cities()

    def featured_hotels(self) -> list[Hotel]:
        return self._repository.list_featured_hotels(self._featured_limit)

    def search(self, city: str | None = None) -> list[Hotel]:
        """All hotels when city is empty, otherwise exact (case-sensitive) city matches.

        Dates and guest count are accepted by the search page but not applied.
        """
        return self._repository.search_hotels(city or None)

    def hotel_with_rooms(self, hotel_id: int | str) -> tuple[Hotel, list[Room]]:
        hotel = self._repository.get_hotel(hotel_id)
        if hotel is None:
            logger.warning("Hotel %s not found", hotel_id)
            raise HotelNotFoundError(hotel_id)
        return hotel, self._repository.list_rooms_for_hotel(hotel.id)
