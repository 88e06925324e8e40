import asyncio
import logging
from typing import List

from .config import resolve_api_key, resolve_api_key_name
from .errors import GiftGenerationError, MissingCredentialsError
from .llm import complete
from .models import GenerationResult, GiftIdea, RecipientProfile
from .parsing import extract_json_array, parse_gift_ideas
from .prompts import build_gift_prompt

log = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred while generating gift ideas. Please try again."


async def _run_pipeline(profile: RecipientProfile, is_regenerate: bool) -> List[GiftIdea]:
    api_key = resolve_api_key()
    if not api_key:
        raise MissingCredentialsError()
    # Key name only, never the value
    log.info("Using API key: %s", resolve_api_key_name())

    prompt = build_gift_prompt(profile, is_regenerate=is_regenerate)
    text = await complete(prompt, api_key)
    return parse_gift_ideas(extract_json_array(text))


async def generate_gift_ideas(profile: RecipientProfile, is_regenerate: bool = False) -> GenerationResult:
    """
    Runs the whole generation pipeline for one recipient.

    Never raises: every failure comes back as a fallback result carrying the
    static catalog and a message naming the stage that failed.
    """
    try:
        ideas = await _run_pipeline(profile, is_regenerate)
    except GiftGenerationError as e:
        log.error("Gift generation failed (%s): %s", type(e).__name__, e)
        return GenerationResult.failed(str(e))
    except Exception as e:
        log.exception("Error generating gift ideas")
        return GenerationResult.failed(f"Error: {e}" if str(e) else UNEXPECTED_ERROR)

    log.info("Generated %d gift ideas", len(ideas))
    return GenerationResult.ok(ideas)


def generate_gift_ideas_sync(profile: RecipientProfile, is_regenerate: bool = False) -> GenerationResult:
    """Blocking entry point for the Streamlit script thread."""
    return asyncio.run(generate_gift_ideas(profile, is_regenerate=is_regenerate))
