"""Application configuration loaded from the environment"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from taskapp.errors import ConfigurationError

DEFAULT_PORT = 8080


@dataclass(frozen=True)
class AppConfig:
    """
    Process-wide settings, read once at startup.

    Values are kept as given; validation happens when the task repository
    is opened so that a bad value never reaches the store client.
    """
    project_id: str
    namespace: str
    service_key: str
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def _read_port() -> int:
    raw = os.getenv("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError("PORT must be an integer", cause=e) from e


def load_config(dotenv_path: Optional[str] = ".env") -> AppConfig:
    """Build an AppConfig from environment variables (and .env if present)

    Raises:
        ConfigurationError: PORT is set but is not an integer
    """
    if dotenv_path:
        load_dotenv(dotenv_path=dotenv_path)

    return AppConfig(
        project_id=os.getenv("PROJECT_ID", "").strip(),
        namespace=os.getenv("FS_NAMESPACE", "").strip(),
        service_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY", "").strip(),
        port=_read_port(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
