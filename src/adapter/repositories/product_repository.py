"""SQLAlchemy Product Repository Implementation"""

from typing import Iterable, List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.product_repository import ProductRepository
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product


class SqlAlchemyProductRepository(ProductRepository):
    """
    SQLAlchemy implementation of ProductRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Product]:
        statement = select(Product).order_by(Product.name.asc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        statement = select(Product).where(Product.id == product_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        product_ids = list(product_ids)
        if not product_ids:
            return []

        statement = select(Product).where(Product.id.in_(product_ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> Optional[Product]:
        statement = select(Product).where(Product.name == name)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def update(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def delete(self, product: Product) -> None:
        await self.session.delete(product)
        await self.session.flush()

    async def is_referenced(self, product_id: int) -> bool:
        statement = (
            select(func.count())
            .select_from(InvoiceItem)
            .where(InvoiceItem.product_id == product_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0
