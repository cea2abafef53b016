from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from apps/api so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    database_url: str = "postgresql://localhost/talent_directory"
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7  # 7 days

    # Rate limiting (per-user when a bearer token is present, else per IP)
    search_rate_limit: str = "30/minute"
    endorse_rate_limit: str = "20/minute"
    rate_limit_enabled: bool = True
    rate_limit_storage_uri: str = "memory://"

    # Directory filter limits; exceeding one is a validation failure, not a truncation
    search_term_max_length: int = 100
    max_selected_languages: int = 15
    max_selected_expertise: int = 10
    max_selected_memberships: int = 10

    log_level: str = "INFO"
    sql_echo: bool = False

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
