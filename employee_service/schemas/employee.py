from pydantic import BaseModel, Field, field_validator


class EmployeeBase(BaseModel):
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=100)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=255)

    class Config:
        populate_by_name = True

    @field_validator("first_name", "last_name", "email")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """
        공백만 있는 값은 거부. 값 자체는 다듬지 않고 받은 그대로 저장.
        """
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class EmployeeCreate(EmployeeBase):
    """POST /api/employees 요청 바디"""
    pass


class EmployeeUpdate(EmployeeBase):
    """PUT /api/employees/{id} 요청 바디

    PATCH가 아니라 전체 교체라서 세 필드 모두 필수.
    id 같은 필드가 들어오면 에러가 나야 함.
    """

    class Config:
        populate_by_name = True
        extra = "forbid"  # 정의되지 않은 필드가 들어오면 422 에러


class Employee(EmployeeBase):
    """응답용 스키마"""
    id: int

    class Config:
        populate_by_name = True
        from_attributes = True
