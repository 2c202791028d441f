import os
from functools import lru_cache
from pathlib import Path
from typing import List, NamedTuple, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

AUTH_URL = "https://ngw.devices.sberbank.ru:9443/api/v2/oauth"
SCOPE = "GIGACHAT_API_PERS"
DEFAULT_CA_CERT_PATH = Path(__file__).parent / "russiantrustedca.pem"
PORT = 3000

# Env var name -> Settings field
REQUIRED_ENV = {
    "GIGACHAT_API_URL": "chat_url",
    "GIGACHAT_CLIENT_ID": "client_id",
    "GIGACHAT_CLIENT_SECRET": "client_secret",
}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


def _env_timeout() -> Optional[float]:
    value = os.getenv("GIGACHAT_TIMEOUT")
    return float(value) if value else None


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    auth_url: str = AUTH_URL
    scope: str = SCOPE
    chat_url: str = Field(default_factory=lambda: os.getenv("GIGACHAT_API_URL", ""))
    client_id: str = Field(default_factory=lambda: os.getenv("GIGACHAT_CLIENT_ID", ""))
    client_secret: str = Field(default_factory=lambda: os.getenv("GIGACHAT_CLIENT_SECRET", ""))

    ca_cert_path: Path = Field(
        default_factory=lambda: Path(os.getenv("GIGACHAT_CA_CERT_PATH") or DEFAULT_CA_CERT_PATH)
    )
    ca_extend_system_trust: bool = Field(default_factory=lambda: _env_flag("GIGACHAT_CA_EXTEND_SYSTEM"))
    request_timeout: Optional[float] = Field(default_factory=_env_timeout)

    debug: bool = Field(default_factory=lambda: _env_flag("DEBUG_LOGGING"))
    host: str = "0.0.0.0"
    port: int = PORT

    def missing_required(self) -> List[str]:
        """Names of required environment variables that are unset or empty"""
        return [env for env, field in REQUIRED_ENV.items() if not getattr(self, field)]


class RelayConfig(NamedTuple):
    """Validated settings plus the trusted CA certificate bytes"""
    settings: Settings
    ca_cert: bytes


def load_settings(settings: Optional[Settings] = None) -> RelayConfig:
    """
    Validate settings and read the CA certificate.

    Raises:
        ConfigurationError: a required variable is missing or the CA file
            cannot be read
    """
    settings = settings or Settings()

    missing = settings.missing_required()
    if missing:
        raise ConfigurationError(f"{', '.join(missing)} not set")

    try:
        ca_cert = settings.ca_cert_path.read_bytes()
    except OSError as e:
        raise ConfigurationError(f"Cannot read CA certificate {settings.ca_cert_path}: {e}") from e

    return RelayConfig(settings=settings, ca_cert=ca_cert)


@lru_cache(maxsize=1)
def get_settings() -> RelayConfig:
    return load_settings()
