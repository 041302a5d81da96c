"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for product catalog operations.

Name and price are accepted as given; the catalog does not restrict
either.

==============================================================================
"""

from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    """Product creation request."""
    name: str
    price: Decimal


class ProductDetail(BaseModel):
    """Product as stored in the catalog."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: Decimal
    created_at_utc: datetime


class ProductCreatedResponse(BaseModel):
    """Response for a created product."""
    success: bool = Field(default=True)
    id: str


class ProductListResponse(BaseModel):
    """All products, newest first."""
    success: bool = Field(default=True)
    total: int = Field(ge=0)
    products: List[ProductDetail]
