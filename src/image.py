"""Helpers for base64 image payloads as they arrive from uploads."""
import re

from src.constants import DEFAULT_IMAGE_MEDIA_TYPE

_DATA_URL_PREFIX = re.compile(r"^data:(?P<media_type>[\w.+-]+/[\w.+-]+)?;base64,", re.IGNORECASE)


def remove_base64_prefix(value: str) -> str:
    """Strip a leading ``data:<mime>;base64,`` prefix, leaving the raw base64."""
    return _DATA_URL_PREFIX.sub("", value, count=1)


def media_type_from_base64(value: str, default: str = DEFAULT_IMAGE_MEDIA_TYPE) -> str:
    match _DATA_URL_PREFIX.match(value):
        case None:
            return default
        case m:
            return m.group("media_type") or default
