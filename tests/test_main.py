"""CLI entry point tests"""
import base64

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from src.config import Config
from src.errors import NoClientAvailableError
from src.main import _parse_args, build_service, main


@pytest.fixture
def no_logging_setup(monkeypatch):
    monkeypatch.setattr("src.main._setup_logging", lambda level: None)


def test_parse_args_requires_image_unless_check():
    with pytest.raises(SystemExit):
        _parse_args([])

    assert _parse_args(["--check"]).check


def test_parse_args_defaults(tmp_path):
    args = _parse_args([str(tmp_path / "photo.jpg")])

    assert not args.stream
    assert args.query


def test_build_service_uses_selected_provider(monkeypatch):
    monkeypatch.setenv("OPENAI_SECRET_KEY", "sk-openai")

    with patch("src.vision.provider.AsyncOpenAI"):
        service = build_service(Config.from_env())

    assert service.provider.name == "openai"


def test_build_service_without_credentials():
    assert build_service(Config.from_env()).provider is None


def test_main_prints_one_shot_answer(tmp_path, capsys, no_logging_setup):
    image = tmp_path / "photo.jpg"
    image.write_bytes(b"jpeg-bytes")
    service = MagicMock()
    service.generate_image_query = AsyncMock(return_value="A foggy pier")

    with patch("src.main.build_service", return_value=service):
        code = main([str(image), "-q", "Describe"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "A foggy pier"
    image_base64, query = service.generate_image_query.call_args.args
    assert base64.b64decode(image_base64) == b"jpeg-bytes"
    assert query == "Describe"


def test_main_streams_fragments(tmp_path, capsys, no_logging_setup):
    image = tmp_path / "photo.jpg"
    image.write_bytes(b"jpeg-bytes")

    async def fragments():
        for part in ("A ", "foggy ", "pier"):
            yield part

    service = MagicMock()
    service.stream_image_query = AsyncMock(return_value=fragments())

    with patch("src.main.build_service", return_value=service):
        code = main([str(image), "--stream"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "A foggy pier"


def test_main_check_connection(capsys, no_logging_setup):
    service = MagicMock()
    service.check_connection = AsyncMock(return_value="pong")

    with patch("src.main.build_service", return_value=service):
        code = main(["--check"])

    assert code == 0
    assert "pong" in capsys.readouterr().out


def test_main_returns_error_code_on_query_error(tmp_path, no_logging_setup):
    image = tmp_path / "photo.jpg"
    image.write_bytes(b"jpeg-bytes")
    service = MagicMock()
    service.generate_image_query = AsyncMock(side_effect=NoClientAvailableError("No AI client available"))

    with patch("src.main.build_service", return_value=service):
        assert main([str(image)]) == 1
