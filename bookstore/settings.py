from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True, env_file=".env", extra="ignore"
    )

    ENVIRONMENT: str = "development"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: list[str] = ["*"]

    # Database settings
    # Full URL wins over the DB_* parts when it is set
    DATABASE_URL: str = ""
    DB_USER: str = "bookstore"
    DB_PASSWORD: SecretStr = SecretStr("bookstore")
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "bookstore"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5
    DB_CREATE_TABLES: bool = False

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/logging_errors.log"
    LOG_CONSOLE_FORMAT: str = "human"
    LOG_EXCLUDED_PATHS: list[str] = ["/health"]

    @model_validator(mode="after")
    def build_database_url(self) -> "Settings":
        if not self.DATABASE_URL:
            password = self.DB_PASSWORD.get_secret_value()
            self.DATABASE_URL = (
                f"postgresql+asyncpg://{self.DB_USER}:{password}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            )
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


app_settings = Settings()
