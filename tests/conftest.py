from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from giftideas.models import RecipientProfile


def _reply(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


@pytest.fixture
def profile():
    return RecipientProfile(
        recipient_name="Priya",
        age="29",
        gender="Female",
        relationship="friend",
        interests="rock climbing, sci-fi novels, espresso",
        budget="$50-$100",
        preferred_gift_type="Experiences",
    )


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gem-test-key-1234567890")
    monkeypatch.delenv("GOOGLE_GENERATIVE_AI_API_KEY", raising=False)
    return "gem-test-key-1234567890"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_GENERATIVE_AI_API_KEY", raising=False)


@pytest.fixture
def fake_openai(monkeypatch):
    """
    Replaces AsyncOpenAI in giftideas.llm.

    Call the fixture with reply text, an exception, or a coroutine function
    to control what chat.completions.create does. Returns the create mock.
    """

    def install(outcome):
        create = AsyncMock()
        if isinstance(outcome, BaseException):
            create.side_effect = outcome
        elif callable(outcome):
            create.side_effect = outcome
        else:
            create.return_value = _reply(outcome)

        client = MagicMock()
        client.chat.completions.create = create
        client.close = AsyncMock()
        factory = MagicMock(return_value=client)
        monkeypatch.setattr("giftideas.llm.AsyncOpenAI", factory)
        create.factory = factory
        create.client = client
        return create

    return install
