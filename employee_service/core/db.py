from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from employee_service.core.config import settings

# Base 클래스 (모든 모델의 부모)
Base = declarative_base()


def create_engine(database_url: str | None = None) -> AsyncEngine:
    return create_async_engine(
        database_url or settings.database_url,
        echo=settings.SQL_ECHO,  # 개발용: True면 실행되는 SQL 로그 찍기
        future=True,
    )


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )


# SQLAlchemy Async Engine
engine = create_engine()

# 세션 팩토리
AsyncSessionLocal = create_session_factory(engine)


# FastAPI 의존성 주입용 세션
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    애플리케이션 시작 시 한 번 호출해서
    employees 테이블을 생성.
    이미 있으면 아무 일도 안 함 (CREATE TABLE IF NOT EXISTS 느낌).
    """
    # 모델을 import 해야 Base.metadata에 테이블이 등록됨
    from employee_service.models import employee  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    await engine.dispose()
