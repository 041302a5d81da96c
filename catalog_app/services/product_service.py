"""
==============================================================================
Product Service Module
==============================================================================

Business-facing contract for the product catalog.

This module implements:
- ProductService: list, add and delete products

Each method is a single store round trip through the injected
DatabaseManager. Store errors and cancellation propagate unchanged;
deleting an unknown id is a no-op.

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_app.db.database import DatabaseManager
from catalog_app.db.models import Product


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product catalog operations.

    Attributes:
        _db_manager: DatabaseManager providing one session per call

    Example:
        >>> service = ProductService(db_manager)
        >>> product_id = await service.add("Test Oil", Decimal("5.50"))
        >>> [p.name for p in await service.list_all()]
        ['Test Oil', 'Demo Shampoo', 'Hair Serum', 'Conditioner']
        >>> await service.delete(product_id)
    """

    def __init__(self, db_manager: DatabaseManager) -> None:
        """
        Initialize the product service.

        Args:
            db_manager: DatabaseManager used for every store access
        """
        self._db_manager = db_manager

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    async def list_all(self) -> List[Product]:
        """
        Get all products, newest first.

        Products created at the same instant are ordered by id.

        Returns:
            List of Product models (possibly empty)
        """
        async def query(session: AsyncSession) -> List[Product]:
            result = await session.scalars(
                select(Product).order_by(
                    Product.created_at_utc.desc(),
                    Product.id.asc(),
                )
            )
            return list(result.all())

        return await self._db_manager.run_scoped(query)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    async def add(self, name: str, price: Decimal) -> str:
        """
        Create a product.

        Name and price are stored as given.

        Args:
            name: Display name
            price: Price amount

        Returns:
            Identifier of the new product
        """
        async def insert(session: AsyncSession) -> str:
            product = Product(name=name, price=price)
            session.add(product)
            await session.commit()
            return product.id

        product_id = await self._db_manager.run_scoped(insert)

        logger.info(f"✅ Product added: {name} ({product_id})")
        return product_id

    async def delete(self, product_id: str) -> None:
        """
        Delete a product by id.

        Unknown ids are ignored, so repeated deletes are safe.

        Args:
            product_id: Identifier of the product to remove
        """
        async def remove(session: AsyncSession) -> bool:
            product = await session.get(Product, product_id)
            if product is None:
                return False

            await session.delete(product)
            await session.commit()
            return True

        if await self._db_manager.run_scoped(remove):
            logger.info(f"🗑️ Product deleted: {product_id}")
        else:
            logger.debug(f"Delete skipped, product not found: {product_id}")
