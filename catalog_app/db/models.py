"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM model for the product catalog.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                          products                               │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (UUID string, PK)                                            │
    │ name (VARCHAR, NOT NULL)                                        │
    │ price (VARCHAR decimal text, NOT NULL)                          │
    │ created_at_utc (DATETIME, NOT NULL, INDEXED)                    │
    └─────────────────────────────────────────────────────────────────┘

A product is created once, listed newest first, never updated in place
and removed with a hard delete.

=============================================================================
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Column, DateTime, String
from sqlalchemy.types import TypeDecorator

from catalog_app.db.database import Base


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the store keeps no offset)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_product_id() -> str:
    """Generate a fresh product identifier."""
    return str(uuid.uuid4())


class ExactDecimal(TypeDecorator):
    """
    Decimal stored as its text form.

    SQLite has no exact numeric type; keeping the string keeps every
    digit and the scale of the value that was written.
    """

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return str(value)

    def process_result_value(self, value: Any, dialect: Any) -> Optional[Decimal]:
        if value is None:
            return None
        return Decimal(value)


# =============================================================================
# PRODUCT MODEL
# =============================================================================

class Product(Base):
    """
    Catalog product.

    The identifier and creation timestamp are assigned when the object
    is constructed, so both are known before the row is flushed.

    Attributes:
        id: Unique identifier (UUID string)
        name: Display name
        price: Exact decimal amount
        created_at_utc: Creation instant (UTC), the listing sort key

    Example:
        >>> product = Product(name="Argan Oil", price=Decimal("18.00"))
        >>> product.id
        '6f1c...'
        >>> session.add(product)
        >>> await session.commit()
    """

    __tablename__ = "products"

    id: str = Column(
        String(36),
        primary_key=True,
        default=new_product_id,
        doc="Unique product identifier (UUID)"
    )

    name: str = Column(
        String(200),
        nullable=False,
        doc="Display name"
    )

    price: Decimal = Column(
        ExactDecimal(),
        nullable=False,
        doc="Price as an exact decimal amount"
    )

    created_at_utc: datetime = Column(
        DateTime,
        default=utc_now,
        nullable=False,
        index=True,
        doc="Creation timestamp (UTC)"
    )

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("id", new_product_id())
        kwargs.setdefault("created_at_utc", utc_now())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"Product(id={self.id!r}, "
            f"name={self.name!r}, "
            f"price={self.price!r})"
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
