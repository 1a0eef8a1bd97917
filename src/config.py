from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    DEEPSEEK_MODEL,
    DEFAULT_APP_ENV,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RATE_LIMIT_DURATION,
    DEFAULT_RATE_LIMIT_TOKENS,
    ENV_PRODUCTION,
    OPENAI_MODEL,
)
from src.rate_limit.duration import parse_duration


@dataclass(frozen=True)
class Config:
    openai_api_key: Optional[str]
    openai_base_url: Optional[str]
    openai_model: str
    deepseek_api_key: Optional[str]
    deepseek_base_url: Optional[str]
    deepseek_model: str
    app_env: str
    log_level: str
    rate_limit_tokens: int
    rate_limit_duration: str

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == ENV_PRODUCTION

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        openai_api_key = (
            os.getenv("OPENAI_SECRET_KEY") or os.getenv("OPENAI_API_KEY") or None
        )
        openai_base_url = os.getenv("OPENAI_BASE_URL") or None
        openai_model = os.getenv("OPENAI_MODEL") or OPENAI_MODEL
        deepseek_api_key = os.getenv("DEEPSEEK_API_KEY") or None
        deepseek_base_url = os.getenv("DEEPSEEK_BASE_URL") or None
        deepseek_model = os.getenv("DEEPSEEK_MODEL") or DEEPSEEK_MODEL
        app_env = os.getenv("APP_ENV", DEFAULT_APP_ENV)
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
        raw_tokens = os.getenv("RATE_LIMIT_TOKENS", str(DEFAULT_RATE_LIMIT_TOKENS))
        rate_limit_duration = os.getenv("RATE_LIMIT_DURATION", DEFAULT_RATE_LIMIT_DURATION)

        return cls._validate(
            openai_api_key=openai_api_key,
            openai_base_url=openai_base_url,
            openai_model=openai_model,
            deepseek_api_key=deepseek_api_key,
            deepseek_base_url=deepseek_base_url,
            deepseek_model=deepseek_model,
            app_env=app_env,
            log_level=log_level,
            rate_limit_tokens=int(raw_tokens),
            rate_limit_duration=rate_limit_duration,
        )

    @staticmethod
    def _validate(
        openai_api_key: Optional[str],
        openai_base_url: Optional[str],
        openai_model: str,
        deepseek_api_key: Optional[str],
        deepseek_base_url: Optional[str],
        deepseek_model: str,
        app_env: str,
        log_level: str,
        rate_limit_tokens: int,
        rate_limit_duration: str,
    ) -> "Config":
        match rate_limit_tokens:
            case n if n <= 0:
                raise ValueError("RATE_LIMIT_TOKENS must be a positive integer")
            case _:
                pass

        # Raises ValueError on bad notation.
        parse_duration(rate_limit_duration)

        return Config(
            openai_api_key=openai_api_key,
            openai_base_url=openai_base_url,
            openai_model=openai_model,
            deepseek_api_key=deepseek_api_key,
            deepseek_base_url=deepseek_base_url,
            deepseek_model=deepseek_model,
            app_env=app_env,
            log_level=log_level,
            rate_limit_tokens=rate_limit_tokens,
            rate_limit_duration=rate_limit_duration,
        )
