"""Customer API Routes"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.catalog.dtos import (
    AddCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerDTO,
    DeletedDTO,
)
from src.app.use_cases.catalog.customers import (
    ListCustomers,
    AddCustomer,
    UpdateCustomer,
    DeleteCustomer,
)
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import client_error

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=List[CustomerDTO], status_code=status.HTTP_200_OK)
async def list_customers(session: AsyncSession = Depends(get_session)):
    result = await ListCustomers(SqlAlchemyCustomerRepository(session)).execute()

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.post(
    "",
    response_model=CustomerDTO,
    status_code=status.HTTP_200_OK,
    responses={409: {"description": "Mobile number already registered"}},
)
async def add_customer(
    request: AddCustomerCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """
    Register a customer.

    **Returns:**
    - 200: Customer created
    - 400: Blank name/address or mobile not exactly 10 digits
    - 409: Mobile already registered
    """
    use_case = AddCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(request)

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.put(
    "/{customer_id}",
    response_model=CustomerDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Customer not found"}, 409: {"description": "Mobile number already registered"}},
)
async def update_customer(
    customer_id: int,
    request: UpdateCustomerCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """
    Update a customer. Invoices keep the details captured when they were issued.
    """
    use_case = UpdateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(customer_id, request)

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.delete(
    "/{customer_id}",
    response_model=DeletedDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Customer not found"}, 409: {"description": "Customer has invoices"}},
)
async def delete_customer(customer_id: int, session: AsyncSession = Depends(get_session)):
    use_case = DeleteCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(customer_id)

    if result.is_err():
        raise client_error(result.error)

    return result.value
