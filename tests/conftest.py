import pytest

_ENV_VARS = (
    "OPENAI_SECRET_KEY",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "DEEPSEEK_API_KEY",
    "DEEPSEEK_BASE_URL",
    "DEEPSEEK_MODEL",
    "APP_ENV",
    "LOG_LEVEL",
    "RATE_LIMIT_TOKENS",
    "RATE_LIMIT_DURATION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's shell or .env file out of the tests."""
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
