"""Shared fixtures for the employee service test suite."""

import os

# settings는 import 시점에 환경 변수를 읽으므로 app 모듈보다 먼저 설정
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from employee_service.core.db import create_engine, create_session_factory, init_db  # noqa: E402
from employee_service.models.employee import Employee  # noqa: E402
from employee_service.repositories.employee import SqlAlchemyEmployeeRepository  # noqa: E402


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Per-test SQLite file with the employees table created."""
    test_engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}")
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as db:
        yield db


@pytest.fixture
def repository(session):
    return SqlAlchemyEmployeeRepository(session)


@pytest.fixture
def employee():
    return Employee(first_name="firstname", last_name="lastname", email="email@email.com")
