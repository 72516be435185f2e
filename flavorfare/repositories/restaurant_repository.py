"""
Restaurant data access.

``RestaurantRepository`` is the store contract the service depends on;
``SqlAlchemyRestaurantRepository`` implements it over a SQLAlchemy session.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from flavorfare.models.restaurant import MAX_RESTAURANT_ID, Restaurant

logger = logging.getLogger(__name__)


class RestaurantRepository(ABC):
    """Contract for restaurant data access."""

    @abstractmethod
    def find_all(self) -> List[Restaurant]:
        """Gets all restaurants ordered by id."""
        pass

    @abstractmethod
    def find_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        """Gets a restaurant by ID, or None."""
        pass

    @abstractmethod
    def save(self, restaurant: Restaurant) -> Restaurant:
        """Inserts or updates a restaurant and returns it with its id set."""
        pass

    @abstractmethod
    def delete_by_id(self, restaurant_id: int) -> None:
        """Deletes the restaurant with the given ID."""
        pass


class SqlAlchemyRestaurantRepository(RestaurantRepository):
    """SQLAlchemy implementation of restaurant repository."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Restaurant]:
        stmt = select(Restaurant).order_by(Restaurant.id.asc())
        restaurants = list(self.db.execute(stmt).scalars().all())
        logger.debug("find_all returned %d restaurants", len(restaurants))
        return restaurants

    def find_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        # Ids outside the column range were never assigned
        if not 0 < restaurant_id <= MAX_RESTAURANT_ID:
            logger.debug("find_by_id(%s) out of range", restaurant_id)
            return None
        restaurant = self.db.get(Restaurant, restaurant_id)
        logger.debug("find_by_id(%s) found=%s", restaurant_id, restaurant is not None)
        return restaurant

    def save(self, restaurant: Restaurant) -> Restaurant:
        self.db.add(restaurant)
        self._commit()
        self.db.refresh(restaurant)
        return restaurant

    def delete_by_id(self, restaurant_id: int) -> None:
        restaurant = self.find_by_id(restaurant_id)
        if restaurant is None:
            return
        self.db.delete(restaurant)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
