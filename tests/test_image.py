"""Image payload and text cleanup helper tests"""
import pytest

from src.image import media_type_from_base64, remove_base64_prefix
from src.vision.cleanup import clean_up_ai_text_response


# ── base64 prefix ─────────────────────────────────────────────────────────────


def test_remove_base64_prefix_strips_data_url():
    assert remove_base64_prefix("data:image/png;base64,iVBORw0KGgo=") == "iVBORw0KGgo="


def test_remove_base64_prefix_leaves_raw_base64():
    assert remove_base64_prefix("/9j/4AAQSkZJRg==") == "/9j/4AAQSkZJRg=="


def test_remove_base64_prefix_only_strips_leading_prefix():
    value = "abc data:image/png;base64,def"
    assert remove_base64_prefix(value) == value


def test_media_type_from_base64_reads_prefix():
    assert media_type_from_base64("data:image/webp;base64,UklGR") == "image/webp"


def test_media_type_from_base64_defaults_to_jpeg():
    assert media_type_from_base64("/9j/4AAQ") == "image/jpeg"


def test_media_type_from_base64_missing_mime_uses_default():
    assert media_type_from_base64("data:;base64,AAAA", default="image/png") == "image/png"


# ── text cleanup ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('"Golden hour over the harbor"', "Golden hour over the harbor"),
        ("“Misty forest”", "Misty forest"),
        ("Title: Misty forest", "Misty forest"),
        ("caption:  A cat on a windowsill", "A cat on a windowsill"),
        ("A plain answer", "A plain answer"),
    ],
)
def test_clean_up_ai_text_response(raw, expected):
    assert clean_up_ai_text_response(raw) == expected


def test_clean_up_keeps_fragment_whitespace():
    assert clean_up_ai_text_response(" over the ") == " over the "


def test_clean_up_handles_empty_input():
    assert clean_up_ai_text_response(None) == ""
    assert clean_up_ai_text_response("") == ""
