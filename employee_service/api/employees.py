from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from employee_service.core.deps import get_employee_service
from employee_service.core.exceptions import DuplicateResourceError
from employee_service.models.employee import Employee as EmployeeModel
from employee_service.schemas.employee import (
    Employee as EmployeeSchema,
    EmployeeCreate,
    EmployeeUpdate,
)
from employee_service.services.employee_service import EmployeeService

# employees.id 컬럼이 BIGINT
EMPLOYEE_ID_MAX = 2**63 - 1

router = APIRouter(
    prefix="/api/employees",
    tags=["employees"],
)


@router.post(
    "",
    response_model=EmployeeSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    payload: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = EmployeeModel(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
    )
    try:
        return await service.save_employee(employee)
    except DuplicateResourceError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=exc.message,
        )


@router.get(
    "",
    response_model=List[EmployeeSchema],
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.get_all_employees()


@router.get(
    "/{employee_id}",
    response_model=EmployeeSchema,
)
async def get_employee(
    employee_id: int = Path(..., le=EMPLOYEE_ID_MAX),
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.get_employee_by_id(employee_id)

    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )

    return employee


@router.put(
    "/{employee_id}",
    response_model=EmployeeSchema,
)
async def update_employee(
    payload: EmployeeUpdate,
    employee_id: int = Path(..., le=EMPLOYEE_ID_MAX),
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.get_employee_by_id(employee_id)

    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )

    # PUT → 전체 교체 (id 제외)
    employee.first_name = payload.first_name
    employee.last_name = payload.last_name
    employee.email = payload.email

    try:
        return await service.update_employee(employee)
    except DuplicateResourceError as exc:
        # 다른 직원이 쓰고 있는 이메일로 바꾸면 DB unique index에서 걸림
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=exc.message,
        )


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_200_OK,
)
async def delete_employee(
    employee_id: int = Path(..., le=EMPLOYEE_ID_MAX),
    service: EmployeeService = Depends(get_employee_service),
):
    # 없는 id여도 200 (멱등)
    await service.delete_employee(employee_id)
    return {"message": "Employee deleted successfully!"}
