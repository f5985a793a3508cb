"""SQLAlchemy Customer Repository Implementation"""

from typing import List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from src.domain.invoice import Invoice


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    SQLAlchemy implementation of CustomerRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Customer]:
        statement = select(Customer).order_by(Customer.name.asc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        statement = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_mobile(self, mobile: str) -> Optional[Customer]:
        statement = select(Customer).where(Customer.mobile == mobile)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def update(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def delete(self, customer: Customer) -> None:
        await self.session.delete(customer)
        await self.session.flush()

    async def has_invoices(self, customer_id: int) -> bool:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.customer_id == customer_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0
