"""All magic values live here — no inline literals anywhere else."""

# Providers
PROVIDER_OPENAI = "openai"
PROVIDER_DEEPSEEK = "deepseek"
OPENAI_MODEL = "gpt-5.1"
DEEPSEEK_MODEL = "deepseek-chat"
DEEPSEEK_API_PATH = "/v1"
ALLOWED_URL_SCHEMES = ("http", "https")

# Environment
ENV_PRODUCTION = "production"
DEFAULT_APP_ENV = "development"
DEFAULT_LOG_LEVEL = "INFO"

# Rate limiting
RATE_LIMIT_IDENTIFIER = "openai-image-query"
DEFAULT_RATE_LIMIT_TOKENS = 100
DEFAULT_RATE_LIMIT_DURATION = "1h"
BATCH_RATE_LIMIT_TOKENS = 1200
BATCH_RATE_LIMIT_DURATION = "1d"
DURATION_UNITS: dict[str, float] = {
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
    "d": 86400.0,
}

# Images
DEFAULT_IMAGE_MEDIA_TYPE = "image/jpeg"

# Text cleanup: labels models like to prepend to a bare answer
RESPONSE_LABELS = ("title", "caption", "description", "tags", "semantic description")
RESPONSE_QUOTES = ('"', "“", "”")

# Prompts
CONNECTION_TEST_PROMPT = "Test connection"
DEFAULT_IMAGE_QUERY = "Describe this photo in one short sentence."

# Log / user-facing messages
MSG_PROVIDER_SELECTED = "AI provider: %s (model %s)"
MSG_PROVIDER_NONE = "AI provider: none configured"
MSG_INVALID_BASE_URL = "Ignoring malformed %s: %r"
MSG_NO_CLIENT = "No AI client available"
MSG_RATE_LIMITED = "Rate limit exceeded for %s (%d per %s)"
MSG_EMPTY_OBJECT = "Model returned no structured object"
MSG_QUERY_SENT = "→ %s image query (%s)"
MSG_QUERY_FAILED = "Image query failed: %s"
