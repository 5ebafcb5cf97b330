"""
Shared fixtures for the itinerary advisor tests.

FakeOpenAI mimics the slice of the OpenAI client the generation client
uses (``client.chat.completions.create``) so no test touches the network.
"""

from types import SimpleNamespace

import pytest
from tenacity import wait_none

from itinerary_advisor.shared.llm import client as llm_client_module


ADVICE_REPLY = """Here are two alternatives for your trip.

ALTERNATIVE 1:
An art and food focused day around your fixed plans.
Arrival Flight SF > Paris | travel | 10:00 AM | Air France Flight AF1234 | $1,249
Le Grand Hotel Paris | hotel | 12:30 PM | Check-in at the hotel | $4,800
Musee d'Orsay Visit | activity | 2:30 PM | Impressionist masterpieces in a former railway station | $20
Montmartre Food Walk | activity | 6:00 PM | Cheese, wine and pastries on the hill | $95
Departure Flight Paris > SF | travel | 3:00 PM | Air France Flight AF1235 | $1,149

ALTERNATIVE 2:
A slower day with gardens and a view over the city.
Arrival Flight SF > Paris | travel | 10:00 AM | Air France Flight AF1234 | $1,249
Le Grand Hotel Paris | hotel | 12:30 PM | Check-in at the hotel | $4,800
Luxembourg Gardens Picnic | activity | 3:00 PM | Picnic by the Medici Fountain | $40
Eiffel Tower Summit at Dusk | activity | 8:00 PM | Sunset views from the top floor | $35
Departure Flight Paris > SF | travel | 3:00 PM | Air France Flight AF1235 | $1,149
"""


def make_completion(content, prompt_tokens=120, completion_tokens=80):
    """Build an object shaped like a chat completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        ),
    )


class FakeOpenAI:
    """
    Stand-in for ``openai.OpenAI``.

    Each call to ``chat.completions.create`` consumes the next outcome:
    a string becomes the reply content, an exception is raised.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return make_completion(outcome)


@pytest.fixture
def fake_client_factory():
    return FakeOpenAI


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    """Retries still happen, just without the exponential backoff sleeps."""
    monkeypatch.setattr(llm_client_module._create_completion.retry, "wait", wait_none())


@pytest.fixture
def cached_client(monkeypatch):
    """Install a FakeOpenAI as the process-wide cached client."""

    def install(*outcomes):
        fake = FakeOpenAI(*outcomes)
        monkeypatch.setattr(llm_client_module, "_client", fake)
        return fake

    return install
