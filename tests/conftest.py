"""Shared fixtures: a fake LLM client and a Flask test client."""
import asyncio
import json
import re
from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest

from app import create_app
from app.services.common import ingestion_pipeline, llm_retry

CLAUSE_ID_LINE = re.compile(r'^\[([^\]]+)\] "', re.MULTILINE)

SAMPLE_CONTRACT = """MASTER SERVICES AGREEMENT
This Agreement is made between Acme Ltd (the Client) and Widget Co (the Supplier).

1. DEFINITIONS
In this Agreement the following terms shall have the meanings set out below.

2. PAYMENT TERMS
The Client shall pay each undisputed invoice within 90 days of receipt.
"""


class FakeAPIError(Exception):
  def __init__(self, message, status_code=None):
    super().__init__(message)
    self.status_code = status_code


class FakeCompletions:
  """Replays scripted responses: a str, an Exception, or a callable(kwargs)."""

  def __init__(self, responses, delay=0.0):
    self.responses = list(responses)
    self.delay = delay
    self.calls = []

  async def create(self, **kwargs):
    self.calls.append(kwargs)
    if self.delay:
      await asyncio.sleep(self.delay)
    response = self.responses.pop(0)
    if isinstance(response, Exception):
      raise response
    if callable(response):
      response = response(kwargs)
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=response))])


class FakePromptClient:
  def __init__(self, responses, delay=0.0):
    self.completions = FakeCompletions(responses, delay)
    self.chat = SimpleNamespace(completions=self.completions)


def user_prompt(kwargs) -> str:
  return kwargs["messages"][-1]["content"]


def analysis_for_all(severity="High", category="payment"):
  def respond(kwargs):
    ids = CLAUSE_ID_LINE.findall(user_prompt(kwargs))
    return json.dumps({"analysis": [
      {"clause_id": clause_id, "category": category, "severity": severity,
       "reasoning": f"Reasoning for {clause_id}",
       "recommendation": f"Negotiate {clause_id}"}
      for clause_id in ids
    ]})

  return respond


SUMMARY_RESPONSE = json.dumps({
  "key_red_flags": ["90 day payment terms"],
  "negotiation_priority": ["clause-2"],
  "executive_summary": "The contract carries high payment risk."
})


@pytest.fixture
def no_backoff(monkeypatch):
  monkeypatch.setattr(llm_retry, "RETRY_BASE_DELAY", 0)
  monkeypatch.setattr(ingestion_pipeline, "ANALYSIS_COOLDOWN_SECONDS", 0)


@pytest.fixture
def fake_llm(monkeypatch, no_backoff):
  """Install a FakePromptClient built from the given responses."""

  def install(responses, delay=0.0):
    client = FakePromptClient(responses, delay)

    @asynccontextmanager
    async def fake_client_factory():
      yield client

    monkeypatch.setattr(ingestion_pipeline, "get_prompt_async_client",
                        fake_client_factory)
    return client

  return install


@pytest.fixture
def app():
  flask_app = create_app()
  flask_app.config.update(TESTING=True)
  return flask_app


@pytest.fixture
def client(app):
  return app.test_client()
