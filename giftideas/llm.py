# giftideas/llm.py

import asyncio
import logging
from typing import Optional

from openai import AsyncOpenAI

from .config import GEMINI_BASE_URL, GEMINI_MODEL, MAX_OUTPUT_TOKENS, REQUEST_TIMEOUT_SECONDS
from .errors import CompletionError, CompletionTimeoutError

log = logging.getLogger(__name__)


def _client(api_key: str) -> AsyncOpenAI:
    # One request per generation, the timeout race bounds the wait
    return AsyncOpenAI(api_key=api_key, base_url=GEMINI_BASE_URL, max_retries=0)


def _drain_abandoned(task: "asyncio.Future") -> None:
    """Retrieves the outcome of a request nobody is waiting on anymore."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        log.debug("Abandoned completion request failed later: %s", exc)
    else:
        log.debug("Abandoned completion request finished after the timeout")


async def complete(
    prompt: str,
    api_key: str,
    *,
    max_tokens: int = MAX_OUTPUT_TOKENS,
    timeout: Optional[float] = None,
) -> str:
    """
    Sends a single prompt and returns the reply text.

    The request is raced against a timer. Whichever settles first decides the
    outcome; a request that loses is left running, only the wait is abandoned.
    """
    if timeout is None:
        timeout = REQUEST_TIMEOUT_SECONDS

    client = _client(api_key)
    request = asyncio.ensure_future(
        client.chat.completions.create(
            model=GEMINI_MODEL,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
        )
    )
    timer = asyncio.ensure_future(asyncio.sleep(timeout))

    log.info("Sending request to %s (timeout %ss)", GEMINI_MODEL, timeout)
    done, _ = await asyncio.wait({request, timer}, return_when=asyncio.FIRST_COMPLETED)
    timer.cancel()

    if request not in done:
        # Still in flight, so the client stays open for it
        request.add_done_callback(_drain_abandoned)
        raise CompletionTimeoutError(f"API Error: API request timed out after {timeout:g} seconds")

    try:
        resp = request.result()
    except Exception as e:
        raise CompletionError(f"API Error: {e}") from e
    finally:
        await client.close()

    text = (resp.choices[0].message.content or "") if resp.choices else ""

    log.info("Received response from %s", GEMINI_MODEL)
    log.debug("Response sample: %s...", text[:200])
    return text
