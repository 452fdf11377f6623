# app/config.py
from pydantic_settings import BaseSettings
from typing import List, Optional
from pydantic import Field

class Settings(BaseSettings):
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./monk_mode.db")
    SQLALCHEMY_DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = Field(False)

    # "sql" → kv_store table, "file" → single JSON file (local development)
    STORE_BACKEND: str = Field("sql", pattern="^(sql|file)$")
    DATA_FILE: str = Field("db.json")
    DOCUMENT_KEY: str = Field("db")

    # "naive" → streak_count mirrors the number of logs
    STREAK_MODE: str = Field("naive", pattern="^(naive|consecutive)$")

    USER_NAME: str = Field("Web Developer")
    LOG_LEVEL: str = Field("INFO")

    # CORS origins: comma-separated. If empty or missing → allow any origin.
    ALLOWED_ORIGINS: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "extra": "allow",
    }

    @property
    def effective_database_url(self) -> str:
        return self.SQLALCHEMY_DATABASE_URL or self.DATABASE_URL or "sqlite+aiosqlite:///./monk_mode.db"

    @property
    def allowed_origins(self) -> List[str]:
        if not self.ALLOWED_ORIGINS:
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

settings = Settings()
