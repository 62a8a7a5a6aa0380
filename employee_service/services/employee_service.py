import logging
from typing import List, Optional

from employee_service.core.exceptions import DuplicateResourceError
from employee_service.models.employee import Employee
from employee_service.repositories.employee import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Employee 생명주기 (생성/조회/수정/삭제) 담당.

    - 이메일 중복이면 DuplicateResourceError
    - 없는 id 조회는 에러가 아니라 None (404 변환은 라우터 책임)
    - 저장소 에러 (DB 연결 등)는 잡지 않고 그대로 올려보냄
    """

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def save_employee(self, employee: Employee) -> Employee:
        existing = await self.repository.find_by_email(employee.email)
        if existing is not None:
            logger.info("Rejected employee with duplicate email %s", employee.email)
            raise DuplicateResourceError("Employee", "email", employee.email)

        saved = await self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved

    async def get_all_employees(self) -> List[Employee]:
        employees = await self.repository.find_all()
        logger.debug("Fetched %d employees", len(employees))
        return employees

    async def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return await self.repository.find_by_id(employee_id)

    async def update_employee(self, employee: Employee) -> Employee:
        # 존재 여부 확인은 호출자(라우터)가 get_employee_by_id로 먼저 수행
        # 다른 레코드와의 이메일 중복은 여기서 다시 검사하지 않음
        updated = await self.repository.save(employee)
        logger.info("Updated employee %s", updated.id)
        return updated

    async def delete_employee(self, employee_id: int) -> None:
        await self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
