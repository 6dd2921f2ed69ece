# app/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Database connection (.env), either:
      - DATABASE_URL (full SQLAlchemy URL), or
      - DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASS
        plus optional DB_SSLMODE and DB_ENDPOINT (serverless Postgres endpoint id)

    Optional:
      - LOG_LEVEL, SQL_ECHO
      - CORS_ORIGIN_REGEX (origins echoed back by CORS)
      - FAVICON_PATH
    """

    PROJECT_NAME: str = "Product Catalog API"
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    DATABASE_URL: str | None = None

    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "postgres"
    DB_USER: str = "postgres"
    DB_PASS: str | None = None
    DB_SSLMODE: str = "require"
    DB_ENDPOINT: str | None = None

    CORS_ORIGIN_REGEX: str = ".*"
    FAVICON_PATH: str = "public/favicon.ico"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        """
        Resolve the SQLAlchemy URL.

        - DATABASE_URL wins if set.
        - Postgres URLs without sslmode get DB_SSLMODE appended.
        """
        if self.DATABASE_URL:
            db_url = self.DATABASE_URL
        else:
            query = {}
            if self.DB_ENDPOINT:
                query["options"] = f"endpoint={self.DB_ENDPOINT}"
            db_url = URL.create(
                "postgresql+psycopg2",
                username=self.DB_USER,
                password=self.DB_PASS,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
                query=query,
            ).render_as_string(hide_password=False)

        if db_url.startswith("postgresql") and "sslmode=" not in db_url:
            sep = "&" if "?" in db_url else "?"
            db_url = f"{db_url}{sep}sslmode={self.DB_SSLMODE}"

        return db_url


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
