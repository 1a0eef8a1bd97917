"""VisionQueryService — rate-limited image queries in three calling styles."""
import logging
from collections.abc import AsyncGenerator
from typing import Optional, TypeVar

from pydantic import BaseModel

from src.constants import (
    BATCH_RATE_LIMIT_DURATION,
    BATCH_RATE_LIMIT_TOKENS,
    CONNECTION_TEST_PROMPT,
    MSG_EMPTY_OBJECT,
    MSG_NO_CLIENT,
    MSG_QUERY_SENT,
    RATE_LIMIT_IDENTIFIER,
)
from src.errors import NoClientAvailableError, ProviderResponseError
from src.rate_limit.check import check_rate_limit_and_raise
from src.rate_limit.client import RateLimiter
from src.vision.cleanup import clean_up_ai_text_response, clean_up_ai_values
from src.vision.provider import ActiveProvider
from src.vision.request import ImageQueryRequest, build_image_query_request

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class VisionQueryService:
    """Sends image queries to the active provider and cleans up what comes back.

    Every entry point spends one request from the budget first, then raises
    NoClientAvailableError when no provider is configured.
    """

    def __init__(
        self,
        provider: Optional[ActiveProvider],
        rate_limiter: RateLimiter,
        rate_limit_tokens: int,
        rate_limit_duration: str,
    ) -> None:
        self._provider = provider
        self._rate_limiter = rate_limiter
        self._rate_limit_tokens = rate_limit_tokens
        self._rate_limit_duration = rate_limit_duration

    @property
    def provider(self) -> Optional[ActiveProvider]:
        return self._provider

    # ── entry points ──────────────────────────────────────────────────────────

    async def generate_image_query(
        self,
        image_base64: str,
        query: str,
        is_batch: bool = False,
    ) -> str:
        provider, request = await self._prepare(image_base64, query, is_batch)
        logger.info(MSG_QUERY_SENT, provider.name, "text")
        response = await provider.client.chat.completions.create(
            model=request.model,
            messages=request.to_messages(),
        )
        return clean_up_ai_text_response(response.choices[0].message.content).strip()

    async def stream_image_query(
        self,
        image_base64: str,
        query: str,
    ) -> AsyncGenerator[str, None]:
        """Checks run now; the returned generator yields cleaned fragments as they arrive."""
        provider, request = await self._prepare(image_base64, query, is_batch=False)
        logger.info(MSG_QUERY_SENT, provider.name, "stream")
        return self._stream_fragments(provider, request)

    async def generate_image_object_query(
        self,
        image_base64: str,
        query: str,
        schema: type[SchemaT],
        is_batch: bool = False,
    ) -> SchemaT:
        provider, request = await self._prepare(image_base64, query, is_batch)
        logger.info(MSG_QUERY_SENT, provider.name, schema.__name__)
        completion = await provider.client.chat.completions.parse(
            model=request.model,
            messages=request.to_messages(),
            response_format=schema,
        )
        match completion.choices[0].message.parsed:
            case None:
                raise ProviderResponseError(MSG_EMPTY_OBJECT)
            case parsed:
                return schema.model_validate(clean_up_ai_values(parsed.model_dump(by_alias=True)))

    async def check_connection(self) -> str:
        await self._check_rate_limit(is_batch=False)
        provider = self._require_provider()
        response = await provider.client.chat.completions.create(
            model=provider.model,
            messages=[
                {
                    "role": "user",
                    "content": [{"type": "text", "text": CONNECTION_TEST_PROMPT}],
                }
            ],
        )
        return clean_up_ai_text_response(response.choices[0].message.content).strip()

    # ── internals ─────────────────────────────────────────────────────────────

    async def _stream_fragments(
        self,
        provider: ActiveProvider,
        request: ImageQueryRequest,
    ) -> AsyncGenerator[str, None]:
        stream = await provider.client.chat.completions.create(
            model=request.model,
            messages=request.to_messages(),
            stream=True,
        )
        async with stream:
            async for chunk in stream:
                match chunk.choices:
                    case []:
                        continue
                    case [choice, *_]:
                        pass
                fragment = clean_up_ai_text_response(choice.delta.content)
                if fragment:
                    yield fragment

    async def _prepare(
        self,
        image_base64: str,
        query: str,
        is_batch: bool,
    ) -> tuple[ActiveProvider, ImageQueryRequest]:
        await self._check_rate_limit(is_batch)
        provider = self._require_provider()
        request = build_image_query_request(provider, image_base64, query)
        return provider, request

    async def _check_rate_limit(self, is_batch: bool) -> None:
        match bool(is_batch):
            case True:
                tokens, duration = BATCH_RATE_LIMIT_TOKENS, BATCH_RATE_LIMIT_DURATION
            case False:
                tokens, duration = self._rate_limit_tokens, self._rate_limit_duration
        await check_rate_limit_and_raise(self._rate_limiter, RATE_LIMIT_IDENTIFIER, tokens, duration)

    def _require_provider(self) -> ActiveProvider:
        match self._provider:
            case None:
                raise NoClientAvailableError(MSG_NO_CLIENT)
            case provider:
                return provider
