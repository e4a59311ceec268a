"""Product service layer (Use Cases).

Orchestrates the Product use cases, delegating persistence to the
injected ``IProductRepository``.  Every mutating use case performs
exactly one repository write.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product; it starts available."""
        product = Product(name=dto.name, price=dto.price, availability=True)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Replace name, price and availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)

        product.name = dto.name
        product.price = dto.price
        product.availability = dto.availability

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id)
        return product

    def toggle_availability(self, id: int) -> Product:
        """Negate the product's availability flag.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        product.toggle_availability()
        product = self._repo.save(product)
        logger.info(
            "product.availability_toggled",
            product_id=id,
            availability=product.availability,
        )
        return product

    def delete_product(self, id: int) -> None:
        """Permanently delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self._get_or_raise(id)
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product, newest first."""
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        return product
