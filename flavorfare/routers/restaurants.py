"""
Restaurants router.

Thin HTTP adapter over ``RestaurantService``. A missing id surfaces as
``ResourceNotFoundError`` and is turned into a 404 by the handler in
``flavorfare.main``.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from flavorfare.db.session import get_db
from flavorfare.models.restaurant import MAX_RESTAURANT_ID
from flavorfare.repositories.restaurant_repository import SqlAlchemyRestaurantRepository
from flavorfare.schemas.restaurant import (
    RestaurantCreate,
    RestaurantResponse,
    RestaurantUpdate,
)
from flavorfare.services.restaurant_service import RestaurantService

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


def get_restaurant_service(db: Session = Depends(get_db)) -> RestaurantService:
    """Build a service bound to the request's session."""
    return RestaurantService(SqlAlchemyRestaurantRepository(db))


@router.get("", response_model=List[RestaurantResponse])
def list_restaurants(service: RestaurantService = Depends(get_restaurant_service)):
    """List all restaurants ordered by id."""
    return service.get_restaurants()


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
def get_restaurant(
    restaurant_id: int = Path(..., gt=0, le=MAX_RESTAURANT_ID),
    service: RestaurantService = Depends(get_restaurant_service),
):
    """Get a single restaurant."""
    return service.get_restaurant(restaurant_id)


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
def create_restaurant(
    restaurant_in: RestaurantCreate,
    service: RestaurantService = Depends(get_restaurant_service),
):
    """Add a restaurant. Any client-supplied id is ignored."""
    return service.add_restaurant(restaurant_in)


@router.put("/{restaurant_id}", response_model=RestaurantResponse)
def update_restaurant(
    restaurant_in: RestaurantUpdate,
    restaurant_id: int = Path(..., gt=0, le=MAX_RESTAURANT_ID),
    service: RestaurantService = Depends(get_restaurant_service),
):
    """
    Replace a restaurant's fields.

    Omitted optional fields are cleared.
    """
    return service.update_restaurant(restaurant_id, restaurant_in)


@router.delete("/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_restaurant(
    restaurant_id: int = Path(..., gt=0, le=MAX_RESTAURANT_ID),
    service: RestaurantService = Depends(get_restaurant_service),
):
    """Delete a restaurant."""
    service.delete_restaurant(restaurant_id)
