"""Product repository interface.

Narrows ``IRepository[Product]`` to the Product aggregate.  The service
layer receives an implementation of this contract by injection.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by ID, or ``None`` when there is no such row."""

    @abstractmethod
    def list(self) -> List[Product]:
        """List every product, newest first."""
