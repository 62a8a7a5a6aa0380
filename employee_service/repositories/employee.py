"""
Employee 저장소.

서비스는 ``EmployeeRepository`` 인터페이스에만 의존하고,
실제 구현은 SQLAlchemy AsyncSession 기반의 ``SqlAlchemyEmployeeRepository``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import delete, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_service.core.exceptions import DuplicateResourceError
from employee_service.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository(ABC):
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Employee]:
        ...

    @abstractmethod
    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        ...

    @abstractmethod
    async def save(self, employee: Employee) -> Employee:
        """id가 없으면 INSERT (id 부여), 있으면 해당 id 레코드를 덮어씀."""

    @abstractmethod
    async def find_all(self) -> List[Employee]:
        ...

    @abstractmethod
    async def delete_by_id(self, employee_id: int) -> None:
        """없는 id여도 에러 없이 끝남."""


class SqlAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_email(self, email: str) -> Optional[Employee]:
        result = await self.session.execute(
            select(Employee).where(Employee.email == email)
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        result = await self.session.execute(
            select(Employee).where(Employee.id == employee_id)
        )
        return result.scalar_one_or_none()

    async def save(self, employee: Employee) -> Employee:
        persisted = await self._stage(employee)
        await self._commit(persisted.email)
        await self.session.refresh(persisted)
        return persisted

    async def save_all(self, employees: Iterable[Employee]) -> List[Employee]:
        persisted = [await self._stage(employee) for employee in employees]
        staged = [(e.id, e.email) for e in persisted]
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            email = await self._conflicting_email(staged)
            logger.warning("Unique constraint violated for email %s: %s", email, exc.orig)
            raise DuplicateResourceError("Employee", "email", email) from exc
        for employee in persisted:
            await self.session.refresh(employee)
        return persisted

    async def find_all(self) -> List[Employee]:
        result = await self.session.execute(select(Employee).order_by(Employee.id))
        return list(result.scalars().all())

    async def delete_by_id(self, employee_id: int) -> None:
        await self.session.execute(delete(Employee).where(Employee.id == employee_id))
        await self.session.commit()

    async def delete_all(self) -> None:
        await self.session.execute(delete(Employee))
        await self.session.commit()

    async def find_by_full_name(self, first_name: str, last_name: str) -> Optional[Employee]:
        result = await self.session.execute(
            select(Employee).where(
                Employee.first_name == first_name,
                Employee.last_name == last_name,
            )
        )
        return result.scalars().first()

    async def find_by_full_name_native(self, first_name: str, last_name: str) -> Optional[Employee]:
        """같은 조회를 raw SQL (named parameter)로 수행."""
        stmt = (
            text(
                "SELECT id, first_name, last_name, email FROM employees "
                "WHERE first_name = :first_name AND last_name = :last_name"
            )
            .columns(
                Employee.id,
                Employee.first_name,
                Employee.last_name,
                Employee.email,
            )
        )
        result = await self.session.execute(
            select(Employee).from_statement(stmt),
            {"first_name": first_name, "last_name": last_name},
        )
        return result.scalars().first()

    async def _stage(self, employee: Employee) -> Employee:
        if employee.id is None:
            self.session.add(employee)
            return employee
        # 이미 세션에 붙어 있는 객체면 그대로, 아니면 같은 id 레코드에 덮어쓰기
        if employee in self.session:
            return employee
        return await self.session.merge(employee)

    async def _conflicting_email(self, staged: List[Tuple[Optional[int], str]]) -> Optional[str]:
        """롤백 후, 배치 안에서 겹치거나 다른 레코드가 이미 쓰는 이메일 중 첫 번째를 찾음."""
        seen = set()
        for _, email in staged:
            if email in seen:
                return email
            seen.add(email)
        for employee_id, email in staged:
            owner = await self.find_by_email(email)
            if owner is not None and owner.id != employee_id:
                return email
        return None

    async def _commit(self, email: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            # employees 테이블의 unique 제약은 email 하나뿐
            logger.warning("Unique constraint violated for email %s: %s", email, exc.orig)
            raise DuplicateResourceError("Employee", "email", email) from exc
