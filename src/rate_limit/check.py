"""check_rate_limit_and_raise — fail fast before a provider request is made."""
import logging

from src.constants import MSG_RATE_LIMITED
from src.errors import RateLimitExceededError
from src.rate_limit.client import RateLimiter
from src.rate_limit.duration import parse_duration

logger = logging.getLogger(__name__)


async def check_rate_limit_and_raise(
    limiter: RateLimiter,
    identifier: str,
    tokens: int,
    duration: str,
) -> None:
    allowed = await limiter.limit(identifier, tokens, parse_duration(duration))
    if not allowed:
        logger.warning(MSG_RATE_LIMITED, identifier, tokens, duration)
        raise RateLimitExceededError(identifier, tokens, duration)
