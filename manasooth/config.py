# manasooth/config.py
from pydantic_settings import BaseSettings
from typing import Optional, List
from pydantic import Field

class Settings(BaseSettings):
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./manasooth.db")
    SQLALCHEMY_DATABASE_URL: Optional[str] = None
    DATABASE_ECHO: bool = Field(False)

    # Hosted model. Missing key → every AI call fails over to its static fallback.
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    AI_MODEL: str = Field("gpt-4o-mini")
    AI_TEMPERATURE: float = Field(0.7)
    AI_TIMEOUT_SECONDS: float = Field(30.0)
    CHAT_HISTORY_LIMIT: int = Field(10, ge=0)

    # In-memory conversational assessment sessions; least recently used are evicted first.
    CONVERSATION_SESSION_LIMIT: int = Field(1000, ge=1)

    # Comma-separated origins. If empty or missing → allow any origin.
    CORS_ORIGINS: Optional[str] = None

    LOG_LEVEL: str = Field("INFO")

    model_config = {
        "env_file": ".env",
        "extra": "allow",
    }

    @property
    def effective_database_url(self) -> str:
        url = self.SQLALCHEMY_DATABASE_URL or self.DATABASE_URL or "sqlite+aiosqlite:///./manasooth.db"
        # Ensure asyncpg is used
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @property
    def allowed_origins(self) -> List[str]:
        """
        Returns:
          - ["*"] → no restriction
          - List[str] → only these origins allowed
        """
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
