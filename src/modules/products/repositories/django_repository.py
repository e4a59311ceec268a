"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions — the Service Layer decides
how to translate a missing entity into an API response.

Database errors (connection loss, constraint violations) are not caught
here; they propagate to the API exception handler.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent IDs and for IDs the column
        cannot represent.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, OverflowError, ValidationError):
            return None

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product with a single write."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    def delete(self, id: int) -> bool:
        """Permanently delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, TypeError, OverflowError, ValidationError):
            return False
        if deleted:
            logger.info("product.deleted", product_id=id)
        return bool(deleted)
