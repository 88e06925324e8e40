import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Checked in this order; the first non-blank value wins
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_GENERATIVE_AI_API_KEY")

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-pro").strip()
GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/"
).strip()

REQUEST_TIMEOUT_SECONDS = 15.0
MAX_OUTPUT_TOKENS = 2048
GIFT_IDEA_COUNT = 5

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()


def resolve_api_key() -> Optional[str]:
    """Returns the first configured API key, or None. Read fresh on every call."""
    for name in API_KEY_ENV_VARS:
        value = (os.getenv(name) or "").strip()
        if value:
            return value
    return None


def resolve_api_key_name() -> Optional[str]:
    for name in API_KEY_ENV_VARS:
        if (os.getenv(name) or "").strip():
            return name
    return None
