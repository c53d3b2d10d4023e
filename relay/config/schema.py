"""Pydantic v2 configuration schema with strict validation."""

from pathlib import Path

from pydantic import BaseModel, Field

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "weather-app/1.0"
DEFAULT_PUBLIC_DIR = Path(__file__).parent.parent / "public"


class NwsConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = NWS_BASE_URL
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)


class RelayConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    public_dir: Path = DEFAULT_PUBLIC_DIR
    log_level: str = "INFO"
    nws: NwsConfig = NwsConfig()
