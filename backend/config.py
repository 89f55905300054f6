from dataclasses import dataclass
from dotenv import load_dotenv
import os

load_dotenv()

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_TIMEOUT = 60
DEFAULT_FALLBACK_DELAY = 1.5


@dataclass(frozen=True)
class Settings:
    google_api_key: str
    gemini_model: str
    gemini_timeout: float
    fallback_delay: float
    log_level: str

    @property
    def has_api_key(self) -> bool:
        return bool(self.google_api_key)


def _float_env(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def get_settings() -> Settings:
    """Read settings from the environment. Called per request so env changes apply immediately."""
    return Settings(
        google_api_key=(os.getenv("GOOGLE_API_KEY") or "").strip(),
        gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        gemini_timeout=_float_env("GEMINI_TIMEOUT", DEFAULT_TIMEOUT),
        fallback_delay=_float_env("FALLBACK_DELAY_SECONDS", DEFAULT_FALLBACK_DELAY),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
