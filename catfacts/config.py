import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# .env next to this package (CATFACT_API_URL, CATFACT_TIMEOUT, ...)
ENV_PATH = Path(__file__).resolve().parent / ".env"

DEFAULT_API_URL = "https://catfact.ninja/fact"


def _optional_float(name: str) -> Optional[float]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


def _int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None  # None = requests' default (wait forever)
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings(env_file: Optional[Path] = ENV_PATH) -> Settings:
    """Read settings from the environment, after loading ``env_file`` if it exists.

    Variables already set in the environment win over the .env file.
    """
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)
    return Settings(
        api_url=os.getenv("CATFACT_API_URL") or DEFAULT_API_URL,
        timeout=_optional_float("CATFACT_TIMEOUT"),
        log_level=(os.getenv("CATFACTS_LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("CATFACTS_HOST") or "127.0.0.1",
        port=_int("CATFACTS_PORT", 8000),
    )
