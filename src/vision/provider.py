"""Provider selection — picks the one chat API image queries go to."""
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from openai import AsyncOpenAI

from src.config import Config
from src.constants import (
    ALLOWED_URL_SCHEMES,
    DEEPSEEK_API_PATH,
    MSG_INVALID_BASE_URL,
    MSG_PROVIDER_NONE,
    MSG_PROVIDER_SELECTED,
    PROVIDER_DEEPSEEK,
    PROVIDER_OPENAI,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveProvider:
    name: str
    model: str
    client: AsyncOpenAI


# ── pure helpers (module-level so tests can import them directly) ──────────────


def validate_base_url(name: str, url: Optional[str]) -> Optional[str]:
    """Return the URL when it is well-formed, else log and return None."""
    match url:
        case None | "":
            return None
        case _:
            pass
    parts = urlsplit(url.strip())
    match (parts.scheme.lower() in ALLOWED_URL_SCHEMES, bool(parts.netloc)):
        case (True, True):
            return url.strip()
        case _:
            logger.warning(MSG_INVALID_BASE_URL, name, url)
            return None


def normalize_deepseek_base_url(url: str) -> str:
    """DeepSeek's OpenAI-compatible routes live under /v1."""
    parts = urlsplit(url)
    path = parts.path.rstrip("/")
    if not path.endswith(DEEPSEEK_API_PATH):
        path += DEEPSEEK_API_PATH
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


# ── selector ──────────────────────────────────────────────────────────────────


def select_provider(config: Config) -> Optional[ActiveProvider]:
    """Prefer DeepSeek when it is fully configured, else OpenAI, else nothing."""
    deepseek_url = validate_base_url("DEEPSEEK_BASE_URL", config.deepseek_base_url)
    openai_url = validate_base_url("OPENAI_BASE_URL", config.openai_base_url)

    match (config.deepseek_api_key, deepseek_url, config.openai_api_key):
        case (str() as key, str() as url, _) if key:
            provider = ActiveProvider(
                name=PROVIDER_DEEPSEEK,
                model=config.deepseek_model,
                client=AsyncOpenAI(api_key=key, base_url=normalize_deepseek_base_url(url)),
            )
        case (_, _, str() as key) if key:
            provider = ActiveProvider(
                name=PROVIDER_OPENAI,
                model=config.openai_model,
                client=AsyncOpenAI(api_key=key, base_url=openai_url),
            )
        case _:
            provider = None

    if not config.is_production:
        match provider:
            case None:
                logger.info(MSG_PROVIDER_NONE)
            case p:
                logger.info(MSG_PROVIDER_SELECTED, p.name, p.model)
    return provider
