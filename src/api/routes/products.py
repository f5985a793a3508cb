"""Product API Routes"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.catalog.dtos import (
    AddProductCommandDTO,
    UpdateProductCommandDTO,
    ProductDTO,
    DeletedDTO,
)
from src.app.use_cases.catalog.products import (
    ListProducts,
    AddProduct,
    UpdateProduct,
    DeleteProduct,
)
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import client_error

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductDTO], status_code=status.HTTP_200_OK)
async def list_products(session: AsyncSession = Depends(get_session)):
    result = await ListProducts(SqlAlchemyProductRepository(session)).execute()

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.post(
    "",
    response_model=ProductDTO,
    status_code=status.HTTP_200_OK,
    responses={409: {"description": "Product name already exists"}},
)
async def add_product(
    request: AddProductCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """
    Add a product to the catalogue.

    **Returns:**
    - 200: Product created
    - 400: Blank name or negative rate
    - 409: Name already in use
    """
    use_case = AddProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
    result = await use_case.execute(request)

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.put(
    "/{product_id}",
    response_model=ProductDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Product not found"}, 409: {"description": "Product name already exists"}},
)
async def update_product(
    product_id: int,
    request: UpdateProductCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    use_case = UpdateProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
    result = await use_case.execute(product_id, request)

    if result.is_err():
        raise client_error(result.error)

    return result.value


@router.delete(
    "/{product_id}",
    response_model=DeletedDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Product not found"}, 409: {"description": "Product used on invoices"}},
)
async def delete_product(product_id: int, session: AsyncSession = Depends(get_session)):
    """
    Delete a product. Products that appear on any invoice are kept.
    """
    use_case = DeleteProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
    result = await use_case.execute(product_id)

    if result.is_err():
        raise client_error(result.error)

    return result.value
