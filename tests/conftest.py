"""
Pytest configuration and fixtures
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from config import Settings
from llm.provider import ProviderRegistry

# Explicit values for every provider field so the developer's environment
# and .env never leak into tests
BASE_SETTINGS = dict(
    ai_provider="openai",
    openai_api_key="",
    openai_model="gpt-4o-mini",
    azure_openai_api_key="",
    azure_openai_endpoint="",
    azure_openai_deployment_name="",
    azure_openai_api_version="2024-08-01-preview",
    azure_default_deployment="gpt-4.1-mini",
    default_max_tokens=500,
    default_temperature=1.0,
    post_max_tokens=4000,
)


class FakeProvider:
    """Provider stub that records requests and returns a fixed reply"""

    def __init__(self, reply="generated text"):
        self.reply = reply
        self.requests = []

    async def generate_completion(self, request):
        self.requests.append(request)
        if isinstance(self.reply, BaseException):
            raise self.reply
        return self.reply


def make_response(content):
    """Shape of openai ChatCompletion that the providers read"""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


def make_sdk_client(response):
    create = AsyncMock(return_value=response)
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


@pytest.fixture
def make_settings():
    def _make(**overrides):
        return Settings(_env_file=None, **{**BASE_SETTINGS, **overrides})
    return _make


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def fake_registry(make_settings, fake_provider):
    """Registry with valid openai settings whose provider is the stub"""
    registry = ProviderRegistry(make_settings(openai_api_key="sk-test"))
    with patch.object(registry, "_create_provider", return_value=fake_provider):
        yield registry


@pytest.fixture
def default_registry(monkeypatch, make_settings, fake_provider):
    """Fresh process registry over test settings, provider replaced by the stub"""
    import llm.provider

    monkeypatch.setattr(llm.provider, "_default_registry", None)
    monkeypatch.setattr(llm.provider, "default_settings", make_settings(openai_api_key="sk-test"))
    registry = llm.provider.get_registry()
    with patch.object(registry, "_create_provider", return_value=fake_provider):
        yield registry
