"""RateLimiter — abstract base for request budget backends."""
from abc import ABC, abstractmethod


class RateLimiter(ABC):
    @abstractmethod
    async def limit(self, identifier: str, tokens: int, window_seconds: float) -> bool:
        """Consume one request from the budget. Returns False when it is exhausted."""
        ...
