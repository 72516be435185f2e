"""
Restaurant Pydantic schemas for API request/response models.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RestaurantBase(BaseModel):
    """Mutable restaurant fields shared by create and update payloads."""
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=32)
    description: Optional[str] = None


class RestaurantCreate(RestaurantBase):
    """Request model for adding a restaurant. The id is assigned by the store."""


class RestaurantUpdate(RestaurantBase):
    """
    Request model for updating a restaurant.

    Every mutable field is overwritten, so an omitted optional field is
    cleared rather than kept.
    """


class RestaurantResponse(RestaurantBase):
    """Response model for a single restaurant."""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
