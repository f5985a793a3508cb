"""Customer Repository Interface

Defines the contract for customer persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """
    Repository interface for Customer persistence
    """

    @abstractmethod
    async def list_all(self) -> List[Customer]:
        """
        Retrieve all customers ordered by name

        Returns:
            List of customers
        """
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Retrieve customer by ID

        Args:
            customer_id: Customer ID

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_mobile(self, mobile: str) -> Optional[Customer]:
        """
        Retrieve customer by unique mobile number

        Args:
            mobile: 10 digit mobile number

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """
        Create a new customer

        Args:
            customer: Customer entity to persist

        Returns:
            Created Customer with generated ID
        """
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """
        Update an existing customer

        Args:
            customer: Customer entity with updated values

        Returns:
            Updated Customer
        """
        pass

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        """
        Delete a customer

        Args:
            customer: Customer entity to delete
        """
        pass

    @abstractmethod
    async def has_invoices(self, customer_id: int) -> bool:
        """
        Check whether the customer owns any invoice

        Args:
            customer_id: Customer ID

        Returns:
            True if at least one invoice references the customer
        """
        pass
