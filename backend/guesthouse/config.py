from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url
from typing import List, Optional

class Settings(BaseSettings):
    # Database
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "mysql+pymysql"
    DB_HOST: Optional[str] = None
    DB_PORT: Optional[int] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_NAME: Optional[str] = None
    DB_RESOLVE_HOST: bool = False
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 30

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]

    SEED_SAMPLE_DATA: bool = False
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = True

    def database_url(self, host: Optional[str] = None) -> URL:
        """Connection URL, preferring DATABASE_URL over the discrete DB_* fields"""
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        if not self.DB_HOST:
            return make_url("sqlite:///./guesthouse.db")
        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=host or self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

settings = Settings()
