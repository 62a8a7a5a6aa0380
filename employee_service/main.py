import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from employee_service.api.employees import router as employees_router
from employee_service.core.config import settings
from employee_service.core.db import AsyncSessionLocal, close_db, init_db
from employee_service.core.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Employee Service",
    version=settings.API_VERSION,
    description="Employee CRUD service (REST + MySQL + SQLAlchemy)",
)


@app.on_event("startup")
async def on_startup() -> None:
    # DB에 employees 테이블 생성
    logger.info("Starting %s", settings.SERVICE_NAME)
    await init_db()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    logger.info("Shutting down %s", settings.SERVICE_NAME)
    await close_db()


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # 저장소 에러는 서비스에서 잡지 않으므로 여기서 5xx로 변환
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Database unavailable"},
    )


@app.get("/health")
async def health_check():
    db_status = "connected"
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Health check could not reach database: %s", exc)
        db_status = "error"
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "db": db_status,
        "version": settings.API_VERSION,
    }


@app.get("/")
async def root():
    return {
        "message": "Employee Service is running",
        "docs": "/docs",
    }


app.include_router(employees_router)
