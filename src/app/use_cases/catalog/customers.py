"""Customer use cases"""

import logging
from datetime import datetime
from typing import List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from .dtos import AddCustomerCommandDTO, UpdateCustomerCommandDTO, CustomerDTO, DeletedDTO

logger = logging.getLogger(__name__)


def to_customer_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,
        name=customer.name,
        mobile=customer.mobile,
        address=customer.address,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )


def _not_found(customer_id: int) -> Error:
    return Error(
        code="CUSTOMER_NOT_FOUND",
        message=f"Customer with ID {customer_id} not found",
        reason="Customer does not exist",
    )


def _mobile_taken(mobile: str) -> Error:
    return Error(
        code="CUSTOMER_MOBILE_EXISTS",
        message=f"A customer with mobile {mobile} already exists",
        reason="Mobile numbers are unique",
    )


class ListCustomers:
    """Use Case: List all customers ordered by name"""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self) -> Result[List[CustomerDTO]]:
        try:
            customers = await self.customer_repo.list_all()
            return Return.ok([to_customer_dto(customer) for customer in customers])
        except Exception as e:
            return Return.err(
                Error(code="LIST_CUSTOMERS_FAILED", message="Failed to list customers", reason=str(e))
            )


class AddCustomer:
    """
    Use Case: Register a customer

    Business Rules:
    1. Mobile number is unique
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: AddCustomerCommandDTO) -> Result[CustomerDTO]:
        try:
            if await self.customer_repo.get_by_mobile(command.mobile):
                return Return.err(_mobile_taken(command.mobile))

            customer = await self.customer_repo.create(
                Customer(name=command.name, mobile=command.mobile, address=command.address)
            )
            await self.uow.commit()

            logger.info(f"Added customer {customer.id} ({customer.mobile})")
            return Return.ok(to_customer_dto(customer))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(code="ADD_CUSTOMER_FAILED", message="Failed to add customer", reason=str(e))
            )


class UpdateCustomer:
    """
    Use Case: Update customer details

    Invoices keep the customer details captured when they were created.
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(
        self, customer_id: int, command: UpdateCustomerCommandDTO
    ) -> Result[CustomerDTO]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id)
            if not customer:
                return Return.err(_not_found(customer_id))

            if command.mobile is not None and command.mobile != customer.mobile:
                if await self.customer_repo.get_by_mobile(command.mobile):
                    return Return.err(_mobile_taken(command.mobile))
                customer.mobile = command.mobile

            if command.name is not None:
                customer.name = command.name
            if command.address is not None:
                customer.address = command.address

            customer.updated_at = datetime.now()
            customer = await self.customer_repo.update(customer)
            await self.uow.commit()

            return Return.ok(to_customer_dto(customer))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(code="UPDATE_CUSTOMER_FAILED", message="Failed to update customer", reason=str(e))
            )


class DeleteCustomer:
    """
    Use Case: Delete a customer

    Business Rules:
    1. Customers with invoices cannot be deleted
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int) -> Result[DeletedDTO]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id)
            if not customer:
                return Return.err(_not_found(customer_id))

            if await self.customer_repo.has_invoices(customer_id):
                return Return.err(
                    Error(
                        code="CUSTOMER_HAS_INVOICES",
                        message=f"Customer '{customer.name}' has invoices and cannot be deleted",
                        reason="Referenced by invoices",
                    )
                )

            await self.customer_repo.delete(customer)
            await self.uow.commit()

            logger.info(f"Deleted customer {customer_id}")
            return Return.ok(DeletedDTO(id=customer_id, success=True))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(code="DELETE_CUSTOMER_FAILED", message="Failed to delete customer", reason=str(e))
            )
