from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_service.core.db import get_db
from employee_service.repositories.employee import (
    EmployeeRepository,
    SqlAlchemyEmployeeRepository,
)
from employee_service.services.employee_service import EmployeeService


def get_employee_repository(
    db: AsyncSession = Depends(get_db),
) -> EmployeeRepository:
    """요청마다 새 세션에 묶인 저장소를 만든다."""
    return SqlAlchemyEmployeeRepository(db)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    """
    라우터가 쓰는 EmployeeService.
    테스트에서는 app.dependency_overrides로 mock 서비스나 다른 세션을 주입한다.
    """
    return EmployeeService(repository)
