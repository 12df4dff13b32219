import json

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./mathkids.db"
    DATABASE_ECHO: bool = False
    AUTO_CREATE_SCHEMA: bool = True

    BACKEND_CORS_ORIGINS: str = '["*"]'

    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "MathKids API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Statistics and history windows
    RECENT_ACTIVITIES_LIMIT: int = 5
    PROGRESS_HISTORY_LIMIT: int = 30

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["*"]
        return self.BACKEND_CORS_ORIGINS

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


settings = Settings()
