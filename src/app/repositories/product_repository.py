"""Product Repository Interface

Defines the contract for product catalogue persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from src.domain.product import Product


class ProductRepository(ABC):
    """
    Repository interface for Product persistence
    """

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """
        Retrieve all products ordered by name

        Returns:
            List of products
        """
        pass

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Retrieve product by ID

        Args:
            product_id: Product ID

        Returns:
            Product if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        """
        Retrieve every product whose ID is in product_ids

        Unknown IDs are silently skipped; callers compare sizes to detect them.

        Args:
            product_ids: Product IDs

        Returns:
            List of products found
        """
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Product]:
        """
        Retrieve product by its unique name

        Args:
            name: Product name

        Returns:
            Product if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """
        Create a new product

        Args:
            product: Product entity to persist

        Returns:
            Created Product with generated ID
        """
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """
        Update an existing product

        Args:
            product: Product entity with updated values

        Returns:
            Updated Product
        """
        pass

    @abstractmethod
    async def delete(self, product: Product) -> None:
        """
        Delete a product

        Args:
            product: Product entity to delete
        """
        pass

    @abstractmethod
    async def is_referenced(self, product_id: int) -> bool:
        """
        Check whether any invoice item references the product

        Args:
            product_id: Product ID

        Returns:
            True if at least one invoice item references it
        """
        pass
