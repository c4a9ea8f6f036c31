import json
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from ad_analyzer.utils import extract_origin


PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOCAL_ENV_FILE = PROJECT_ROOT / ".env.local"

if LOCAL_ENV_FILE.exists():
    load_dotenv(LOCAL_ENV_FILE, override=True)


class Settings(BaseSettings):
    class Config:
        env_file = ".env"
        extra = "ignore"
    environment: str = "development"
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")
    openai_api_key: str | None = Field(default=None)
    openai_model: str = Field(default="gpt-4o-mini")
    openai_temperature: float = Field(default=0.7)
    llm_timeout_seconds: float = Field(default=60.0)
    frontend_base_url: str = Field(default="http://localhost:3000")
    frontend_dir: str | None = Field(default=None)
    additional_cors_origins: str | None = Field(default=None)

    def get_additional_cors_origins(self) -> list[str]:
        value = self.additional_cors_origins
        if not value:
            return []

        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                return []
            if stripped.startswith("[") and stripped.endswith("]"):
                try:
                    parsed = json.loads(stripped)
                    if isinstance(parsed, list):
                        return [
                            str(origin).strip()
                            for origin in parsed
                            if str(origin).strip()
                        ]
                except json.JSONDecodeError:
                    pass
            return [item.strip() for item in stripped.split(",") if item.strip()]

        if isinstance(value, (list, tuple, set)):
            return [str(origin).strip() for origin in value if str(origin).strip()]

        return []


def get_cors_origins(settings: Settings) -> List[str]:
    """
    Build the CORS allow-list from the frontend URL plus any extra origins.
    Invalid entries are dropped and duplicates removed, order preserved.
    """
    origins: List[str] = []
    candidates = [settings.frontend_base_url, *settings.get_additional_cors_origins()]
    for candidate in candidates:
        origin = extract_origin(candidate)
        if origin and origin not in origins:
            origins.append(origin)
    return origins


@lru_cache()
def get_settings():
    return Settings()
