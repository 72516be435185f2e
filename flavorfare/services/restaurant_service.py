"""
Restaurant lifecycle service.

Owns create/read/update/delete of restaurants on top of a
``RestaurantRepository`` and turns a missing id into
``ResourceNotFoundError``.
"""
import logging
from typing import List

from flavorfare.core.exceptions import ResourceNotFoundError
from flavorfare.models.restaurant import Restaurant
from flavorfare.repositories.restaurant_repository import RestaurantRepository
from flavorfare.schemas.restaurant import (
    RestaurantCreate,
    RestaurantResponse,
    RestaurantUpdate,
)

logger = logging.getLogger(__name__)


class RestaurantService:
    """
    Service for managing restaurant records.

    Each call is one unit of work against the repository; the repository
    owns the transaction.
    """

    def __init__(self, repository: RestaurantRepository):
        self.repository = repository

    def get_restaurants(self) -> List[RestaurantResponse]:
        """Return all restaurants in store order (ascending id)."""
        restaurants = self.repository.find_all()
        logger.debug("Listing %d restaurants", len(restaurants))
        return [RestaurantResponse.model_validate(r) for r in restaurants]

    def get_restaurant(self, restaurant_id: int) -> RestaurantResponse:
        """
        Return a single restaurant.

        Raises:
            ResourceNotFoundError: If no restaurant has this id.
        """
        restaurant = self._get_or_raise(restaurant_id)
        return RestaurantResponse.model_validate(restaurant)

    def add_restaurant(self, data: RestaurantCreate) -> RestaurantResponse:
        """Persist a new restaurant. The id is assigned by the store."""
        restaurant = Restaurant(**data.model_dump())
        restaurant = self.repository.save(restaurant)
        logger.info("Created restaurant %s", restaurant.id)
        return RestaurantResponse.model_validate(restaurant)

    def update_restaurant(self, restaurant_id: int, data: RestaurantUpdate) -> RestaurantResponse:
        """
        Overwrite every mutable field of an existing restaurant.

        Raises:
            ResourceNotFoundError: If no restaurant has this id. Nothing is written.
        """
        restaurant = self._get_or_raise(restaurant_id)

        for field, value in data.model_dump().items():
            setattr(restaurant, field, value)

        restaurant = self.repository.save(restaurant)
        logger.info("Updated restaurant %s", restaurant.id)
        return RestaurantResponse.model_validate(restaurant)

    def delete_restaurant(self, restaurant_id: int) -> None:
        """
        Remove a restaurant.

        Raises:
            ResourceNotFoundError: If no restaurant has this id, including
                one that was already deleted.
        """
        self._get_or_raise(restaurant_id)
        self.repository.delete_by_id(restaurant_id)
        logger.info("Deleted restaurant %s", restaurant_id)

    def _get_or_raise(self, restaurant_id: int) -> Restaurant:
        restaurant = self.repository.find_by_id(restaurant_id)
        if restaurant is None:
            logger.info("Restaurant %s not found", restaurant_id)
            raise ResourceNotFoundError("Restaurant", restaurant_id)
        return restaurant
