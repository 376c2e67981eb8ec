"""Configuration for the recurrence service."""
from dataclasses import dataclass
import os
from dotenv import load_dotenv

# Load environment variables from a local .env if present
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Settings read from the environment."""

    preview_default_count: int
    preview_max_count: int
    range_max_instances: int
    log_level: str
    environment: str
    frontend_url: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            preview_default_count=_env_int("RECURRENCE_PREVIEW_DEFAULT_COUNT", 5),
            preview_max_count=_env_int("RECURRENCE_PREVIEW_MAX_COUNT", 100),
            range_max_instances=_env_int("RECURRENCE_RANGE_MAX_INSTANCES", 100),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            environment=os.environ.get("ENVIRONMENT", "development"),
            frontend_url=os.environ.get("FRONTEND_URL", "http://localhost:3000"),
        )


def get_settings() -> Settings:
    """Dependency for getting the current settings."""
    return Settings.from_env()
