"""Post-processing for raw model text before it reaches the photo library."""
import re

from src.constants import RESPONSE_LABELS, RESPONSE_QUOTES

_LABEL_PREFIX = re.compile(
    r"^\s*(?:" + "|".join(map(re.escape, RESPONSE_LABELS)) + r")\s*:\s*",
    re.IGNORECASE,
)


def clean_up_ai_text_response(text: str | None) -> str:
    """Drop double quotes and a leading "Title:"-style label.

    Whitespace is kept as-is so streamed fragments still join up cleanly;
    callers holding a complete response strip it themselves.
    """
    match text:
        case None | "":
            return ""
        case _:
            pass
    for quote in RESPONSE_QUOTES:
        text = text.replace(quote, "")
    return _LABEL_PREFIX.sub("", text, count=1)


def clean_up_ai_values(value):
    """Apply clean_up_ai_text_response to every string in a dumped object, stripped."""
    match value:
        case str():
            return clean_up_ai_text_response(value).strip()
        case dict():
            return {key: clean_up_ai_values(item) for key, item in value.items()}
        case list() | tuple():
            return type(value)(map(clean_up_ai_values, value))
        case _:
            return value
