from pydantic_settings import BaseSettings  # pydantic-settings에서 BaseSettings를 임포트


class Settings(BaseSettings):
    SERVICE_NAME: str = "employee-service"
    API_VERSION: str = "0.1.0"

    # MySQL 접속 정보 (DATABASE_URL이 없을 때 사용)
    MYSQL_USER: str = "erpuser"
    MYSQL_PASSWORD: str = "erppassword"
    MYSQL_HOST: str = "mysql"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = "erp"

    # 전체 URL을 직접 지정하면 위 MySQL 설정보다 우선 (테스트에서는 sqlite+aiosqlite 사용)
    DATABASE_URL: str | None = None

    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"  # .env 파일을 통해 환경 변수 관리

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+asyncmy://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
            f"@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
        )


# settings 객체를 생성하여 FastAPI에서 사용
settings = Settings()
