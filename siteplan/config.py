"""Runtime settings read from the environment (.env supported)."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from .errors import ConfigError
from .models import SetbackRule

_TRUE = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    cloudconvert_api_key: str | None = None
    cloudconvert_sandbox: bool = False
    setback_rule: SetbackRule = SetbackRule()
    log_level: str = "INFO"


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from environment variables."""
    if dotenv:
        load_dotenv()

    raw_distance = os.getenv("SETBACK_MIN_DISTANCE", "10")
    try:
        rule = SetbackRule(
            min_distance=float(raw_distance),
            unit=os.getenv("SETBACK_UNIT", "feet"),
        )
    except (ValueError, ValidationError) as exc:
        raise ConfigError(f"Invalid SETBACK_MIN_DISTANCE: {raw_distance!r}") from exc

    return Settings(
        cloudconvert_api_key=os.getenv("CLOUDCONVERT_API_KEY") or None,
        cloudconvert_sandbox=os.getenv("CLOUDCONVERT_SANDBOX", "").lower() in _TRUE,
        setback_rule=rule,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
