from sqlalchemy import BigInteger, Column, Integer, String
from sqlalchemy.orm import validates

from employee_service.core.db import Base


class Employee(Base):
    __tablename__ = "employees"

    # sqlite는 INTEGER PRIMARY KEY 일 때만 자동 증가 (테스트용)
    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        index=True,
        autoincrement=True,
    )
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    # 이메일 중복은 서비스에서 먼저 확인하지만, 동시 요청 race는 unique index로 막음
    email = Column(String(255), nullable=False, unique=True, index=True)

    def __init__(self, first_name: str, last_name: str, email: str, id: int | None = None):
        # 네 필드가 모두 채워진 상태로만 생성 (id는 저장 시 DB가 부여)
        self.id = id
        self.first_name = first_name
        self.last_name = last_name
        self.email = email

    @validates("first_name", "last_name", "email")
    def _validate_not_blank(self, key, value):
        if value is None or not str(value).strip():
            raise ValueError(f"{key} must not be empty")
        return value

    def __repr__(self) -> str:
        return (
            f"Employee(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, email={self.email!r})"
        )
