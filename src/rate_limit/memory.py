"""InMemoryRateLimiter — process-local sliding-window budget."""
import asyncio
import time
from collections import defaultdict, deque

from src.rate_limit.client import RateLimiter

_BudgetKey = tuple[str, int, float]


class InMemoryRateLimiter(RateLimiter):

    def __init__(self, clock=time.monotonic) -> None:
        self._clock = clock
        self._lock = asyncio.Lock()
        self._requests: dict[_BudgetKey, deque[float]] = defaultdict(deque)

    async def limit(self, identifier: str, tokens: int, window_seconds: float) -> bool:
        key = (identifier, tokens, window_seconds)
        async with self._lock:
            now = self._clock()
            window = self._requests[key]
            cutoff = now - window_seconds
            while window and window[0] <= cutoff:
                window.popleft()
            if len(window) >= tokens:
                return False
            window.append(now)
            return True
