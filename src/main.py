"""Entry point — wires Config → provider → VisionQueryService and runs one query."""
import argparse
import asyncio
import base64
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from src.config import Config
from src.constants import DEFAULT_IMAGE_QUERY, MSG_QUERY_FAILED
from src.errors import VisionQueryError
from src.rate_limit.memory import InMemoryRateLimiter
from src.vision.provider import select_provider
from src.vision.query import VisionQueryService


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_service(config: Config) -> VisionQueryService:
    return VisionQueryService(
        provider=select_provider(config),
        rate_limiter=InMemoryRateLimiter(),
        rate_limit_tokens=config.rate_limit_tokens,
        rate_limit_duration=config.rate_limit_duration,
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="photo-vision-query",
        description="Ask the configured AI provider a question about a photo.",
    )
    parser.add_argument("image", nargs="?", type=Path, help="path to the image file")
    parser.add_argument("-q", "--query", default=DEFAULT_IMAGE_QUERY, help="question to ask")
    parser.add_argument("--stream", action="store_true", help="print the answer as it arrives")
    parser.add_argument("--check", action="store_true", help="only test the provider connection")
    args = parser.parse_args(argv)
    if args.image is None and not args.check:
        parser.error("an image path is required unless --check is given")
    return args


async def _run(service: VisionQueryService, args: argparse.Namespace) -> None:
    if args.check:
        print(await service.check_connection())
        return

    image_base64 = base64.standard_b64encode(args.image.read_bytes()).decode()
    match args.stream:
        case True:
            stream = await service.stream_image_query(image_base64, args.query)
            async for fragment in stream:
                print(fragment, end="", flush=True)
            print()
        case False:
            print(await service.generate_image_query(image_base64, args.query))


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    service = build_service(config)
    try:
        asyncio.run(_run(service, args))
    except VisionQueryError as exc:
        logger.error(MSG_QUERY_FAILED, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
