import asyncio
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import resolve_api_key
from .errors import GiftGenerationError
from .llm import complete

log = logging.getLogger(__name__)

PROBE_PROMPT = 'Respond with a simple JSON array containing 3 colors: ["red", "blue", "green"]'
PROBE_MAX_TOKENS = 100


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def mask_key(key: Optional[str]) -> str:
    if not key:
        return "not set"
    if len(key) <= 8:
        return "****"
    return f"{key[:4]}...{key[-4:]}"


def check_env() -> Dict[str, Any]:
    """Reports which API key variables are set, with values masked."""
    gemini_key = os.getenv("GEMINI_API_KEY")
    google_key = os.getenv("GOOGLE_GENERATIVE_AI_API_KEY")

    return {
        "environment": os.getenv("APP_ENV", "development"),
        "apiKeysConfigured": {
            "GEMINI_API_KEY": "set" if gemini_key else "not set",
            "GOOGLE_GENERATIVE_AI_API_KEY": "set" if google_key else "not set",
            "maskedGeminiKey": mask_key(gemini_key),
            "maskedGoogleGenAIKey": mask_key(google_key),
        },
        "timestamp": _now(),
    }


async def probe_connection() -> Dict[str, Any]:
    """Sends a tiny probe prompt to check the key and the model respond."""
    api_key = resolve_api_key()
    if not api_key:
        return {
            "success": False,
            "apiKeyPresent": False,
            "error": "No API keys found in environment variables",
            "timestamp": _now(),
        }

    try:
        text = await complete(PROBE_PROMPT, api_key, max_tokens=PROBE_MAX_TOKENS)
    except GiftGenerationError as e:
        log.error("Error testing AI connection: %s", e)
        return {"success": False, "apiKeyPresent": True, "error": str(e), "timestamp": _now()}
    except Exception as e:
        log.exception("Unexpected error testing AI connection")
        return {"success": False, "apiKeyPresent": True, "error": str(e) or "Unknown error", "timestamp": _now()}

    return {"success": True, "apiKeyPresent": True, "response": text, "timestamp": _now()}


def probe_connection_sync() -> Dict[str, Any]:
    return asyncio.run(probe_connection())
