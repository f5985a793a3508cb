"""Product catalogue use cases"""

import logging
from datetime import datetime
from typing import List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.domain.product import Product
from .dtos import AddProductCommandDTO, UpdateProductCommandDTO, ProductDTO, DeletedDTO

logger = logging.getLogger(__name__)


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        rate=product.rate,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def _not_found(product_id: int) -> Error:
    return Error(
        code="PRODUCT_NOT_FOUND",
        message=f"Product with ID {product_id} not found",
        reason="Product does not exist",
    )


def _name_taken(name: str) -> Error:
    return Error(
        code="PRODUCT_NAME_EXISTS",
        message=f"A product named '{name}' already exists",
        reason="Product names are unique",
    )


class ListProducts:
    """Use Case: List all products ordered by name"""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self) -> Result[List[ProductDTO]]:
        try:
            products = await self.product_repo.list_all()
            return Return.ok([to_product_dto(product) for product in products])
        except Exception as e:
            return Return.err(
                Error(code="LIST_PRODUCTS_FAILED", message="Failed to list products", reason=str(e))
            )


class AddProduct:
    """
    Use Case: Add a product to the catalogue

    Business Rules:
    1. Name is unique
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, command: AddProductCommandDTO) -> Result[ProductDTO]:
        try:
            if await self.product_repo.get_by_name(command.name):
                return Return.err(_name_taken(command.name))

            product = await self.product_repo.create(
                Product(name=command.name, rate=command.rate)
            )
            await self.uow.commit()

            logger.info(f"Added product {product.id} '{product.name}' at {product.rate}")
            return Return.ok(to_product_dto(product))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(code="ADD_PRODUCT_FAILED", message="Failed to add product", reason=str(e))
            )


class UpdateProduct:
    """
    Use Case: Update name and/or rate of a product

    Existing invoice items keep the name and rate they were sold at.
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, product_id: int, command: UpdateProductCommandDTO) -> Result[ProductDTO]:
        try:
            product = await self.product_repo.get_by_id(product_id)
            if not product:
                return Return.err(_not_found(product_id))

            if command.name is not None and command.name != product.name:
                if await self.product_repo.get_by_name(command.name):
                    return Return.err(_name_taken(command.name))
                product.name = command.name

            if command.rate is not None:
                product.rate = command.rate

            product.updated_at = datetime.now()
            product = await self.product_repo.update(product)
            await self.uow.commit()

            return Return.ok(to_product_dto(product))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(code="UPDATE_PRODUCT_FAILED", message="Failed to update product", reason=str(e))
            )


class DeleteProduct:
    """
    Use Case: Delete a product

    Business Rules:
    1. Products sold on any invoice cannot be deleted
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, product_id: int) -> Result[DeletedDTO]:
        try:
            product = await self.product_repo.get_by_id(product_id)
            if not product:
                return Return.err(_not_found(product_id))

            if await self.product_repo.is_referenced(product_id):
                return Return.err(
                    Error(
                        code="PRODUCT_IN_USE",
                        message=f"Product '{product.name}' appears on existing invoices "
                                f"and cannot be deleted",
                        reason="Referenced by invoice items",
                    )
                )

            await self.product_repo.delete(product)
            await self.uow.commit()

            logger.info(f"Deleted product {product_id}")
            return Return.ok(DeletedDTO(id=product_id, success=True))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(code="DELETE_PRODUCT_FAILED", message="Failed to delete product", reason=str(e))
            )
