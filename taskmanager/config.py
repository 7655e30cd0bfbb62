"""Settings loaded once from the environment and read-only thereafter."""

import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_EXPIRE_MINUTES = 60 * 24 * 7  # 7 days


def _env(name: str, default: str) -> str:
    v = os.environ.get(name)
    return default if v is None or v.strip() == "" else v


def _env_float(name: str, default: float) -> float:
    try:
        return float(_env(name, str(default)))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env(name, str(default)))
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


@dataclass(frozen=True)
class Settings:
    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: float = DEFAULT_EXPIRE_MINUTES
    # Default to local SQLite for dev/tests; override via env in Docker/Prod
    database_url: str = "sqlite:///./taskmanager.db"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"
    port: int = 5000

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            secret_key=_env("SECRET_KEY", Settings.secret_key),
            algorithm=_env("ALGORITHM", Settings.algorithm),
            access_token_expire_minutes=_env_float(
                "ACCESS_TOKEN_EXPIRE_MINUTES", DEFAULT_EXPIRE_MINUTES
            ),
            database_url=_env("DATABASE_URL", Settings.database_url),
            cors_origins=_env_list("CORS_ORIGINS", ["http://localhost:3000"]),
            log_level=_env("LOG_LEVEL", Settings.log_level).upper(),
            port=_env_int("PORT", Settings.port),
        )


settings = Settings.from_env()
