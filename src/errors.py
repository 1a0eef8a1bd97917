"""Domain errors raised by the vision-query adapter."""


class VisionQueryError(Exception):
    """Base class for every error this package raises on purpose."""


class NoClientAvailableError(VisionQueryError):
    """No provider is configured, so there is nothing to send the query to."""


class RateLimitExceededError(VisionQueryError):

    def __init__(self, identifier: str, tokens: int, duration: str) -> None:
        super().__init__(f"Rate limit exceeded for {identifier} ({tokens} per {duration})")
        self.identifier = identifier
        self.tokens = tokens
        self.duration = duration


class ProviderResponseError(VisionQueryError):
    """The provider answered, but not with anything usable."""
