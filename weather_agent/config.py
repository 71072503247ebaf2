import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    line_channel_secret: Optional[str] = None
    line_channel_access_token: Optional[str] = None
    port: int = 8080
    http_timeout: float = 10.0
    geocoding_language: str = "en"
    log_level: str = "INFO"


def load_settings() -> Settings:
    # Loads .env into process env; safe to call multiple times
    load_dotenv()
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        model=os.getenv("MODEL") or Settings.model,
        line_channel_secret=os.getenv("LINE_CHANNEL_SECRET") or None,
        line_channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN") or None,
        port=int(os.getenv("PORT") or Settings.port),
        http_timeout=float(os.getenv("HTTP_TIMEOUT") or Settings.http_timeout),
        geocoding_language=os.getenv("GEOCODING_LANGUAGE") or Settings.geocoding_language,
        log_level=(os.getenv("LOG_LEVEL") or Settings.log_level).upper(),
    )
