"""
Tests for ProviderRegistry
"""
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from llm.client import AzureOpenAIProvider, OpenAIProvider
from llm.errors import ConfigurationError, ErrorKind
from llm.provider import ProviderRegistry, resolve_provider_name
from data.models import ProviderName

AZURE_OK = dict(
    ai_provider="azure",
    azure_openai_api_key="az-key",
    azure_openai_endpoint="https://example.openai.azure.com",
    azure_openai_deployment_name="posts-deploy",
)


@pytest.mark.parametrize("tag", ["", "openai", "  OpenAI "])
def test_openai_without_key_fails(make_settings, tag):
    """Unset or openai provider with empty key raises ConfigurationError naming openai"""
    registry = ProviderRegistry(make_settings(ai_provider=tag))

    with patch("llm.provider.OpenAIProvider") as provider_cls:
        with pytest.raises(ConfigurationError) as exc_info:
            registry.get_provider()

    provider_cls.assert_not_called()
    err = exc_info.value
    assert err.provider == "openai"
    assert err.missing == ["OPENAI_API_KEY"]
    assert err.kind == ErrorKind.CONFIGURATION
    assert "OpenAI" in str(err)
    assert "OPENAI_API_KEY" in str(err)


@pytest.mark.parametrize("blank", [
    ["azure_openai_api_key"],
    ["azure_openai_endpoint"],
    ["azure_openai_deployment_name"],
    ["azure_openai_api_key", "azure_openai_endpoint"],
    ["azure_openai_api_key", "azure_openai_endpoint", "azure_openai_deployment_name"],
])
def test_azure_missing_fields_fail(make_settings, blank):
    """Every missing azure field is named and no client is built"""
    overrides = {**AZURE_OK, **{field: "" for field in blank}}
    registry = ProviderRegistry(make_settings(**overrides))

    with patch("llm.provider.AzureOpenAIProvider") as provider_cls:
        with pytest.raises(ConfigurationError) as exc_info:
            registry.get_provider()

    provider_cls.assert_not_called()
    err = exc_info.value
    assert err.provider == "azure"
    assert err.missing == [field.upper() for field in blank]
    assert "Azure" in str(err)
    for field in blank:
        assert field.upper() in str(err)


def test_openai_provider_built(make_settings):
    registry = ProviderRegistry(make_settings(openai_api_key="sk-test"))

    provider = registry.get_provider()

    assert isinstance(provider, OpenAIProvider)


def test_azure_provider_built(make_settings):
    registry = ProviderRegistry(make_settings(**AZURE_OK))

    provider = registry.get_provider()

    assert isinstance(provider, AzureOpenAIProvider)
    assert provider.deployment_name == "posts-deploy"


def test_azure_api_version_defaults_when_empty(make_settings):
    registry = ProviderRegistry(make_settings(**AZURE_OK, azure_openai_api_version=""))

    with patch("llm.provider.AzureOpenAIProvider") as provider_cls:
        registry.get_provider()

    provider_cls.assert_called_once_with(
        api_key="az-key",
        endpoint="https://example.openai.azure.com",
        deployment_name="posts-deploy",
        api_version="2024-08-01-preview",
    )


def test_provider_cached_without_revalidation(make_settings):
    """Second call returns the same instance and skips validation"""
    registry = ProviderRegistry(make_settings(openai_api_key="sk-test"))

    with patch.object(registry, "_create_provider", wraps=registry._create_provider) as spy:
        with patch("llm.provider.resolve_provider_name", wraps=resolve_provider_name) as tag_spy:
            first = registry.get_provider()
            second = registry.get_provider()
            third = registry.get_provider()

    assert first is second is third
    assert spy.call_count == 1
    assert tag_spy.call_count == 1


def test_failed_validation_is_not_cached(make_settings):
    registry = ProviderRegistry(make_settings())

    with patch.object(registry, "_create_provider", wraps=registry._create_provider) as spy:
        for _ in range(2):
            with pytest.raises(ConfigurationError):
                registry.get_provider()

    assert spy.call_count == 2


def test_settings_are_frozen(make_settings):
    settings = make_settings(openai_api_key="sk-test")

    with pytest.raises(ValidationError):
        settings.openai_api_key = ""

    assert settings.openai_api_key == "sk-test"


def test_concurrent_cold_start_builds_once(make_settings):
    registry = ProviderRegistry(make_settings(openai_api_key="sk-test"))

    with patch.object(registry, "_create_provider", wraps=registry._create_provider) as spy:
        with ThreadPoolExecutor(max_workers=8) as pool:
            providers = list(pool.map(lambda _: registry.get_provider(), range(32)))

    assert spy.call_count == 1
    assert all(p is providers[0] for p in providers)


def test_registry_has_no_reset_hook(make_settings):
    """The cached provider is write-once"""
    registry = ProviderRegistry(make_settings(openai_api_key="sk-test"))

    assert not hasattr(registry, "reset")
    assert registry.get_provider() is registry.get_provider()


def test_default_model_openai(make_settings):
    registry = ProviderRegistry(make_settings())
    assert registry.get_default_model() == "gpt-4o-mini"


def test_default_model_azure_uses_deployment(make_settings):
    registry = ProviderRegistry(make_settings(**AZURE_OK))
    assert registry.get_default_model() == "posts-deploy"


def test_default_model_azure_fallback(make_settings):
    registry = ProviderRegistry(make_settings(ai_provider="azure"))
    assert registry.get_default_model() == "gpt-4.1-mini"


def test_default_model_not_cached(make_settings):
    """Each call reads the configuration again"""
    registry = ProviderRegistry(make_settings(**AZURE_OK))

    with patch("llm.provider.resolve_provider_name", wraps=resolve_provider_name) as tag_spy:
        assert registry.get_default_model() == "posts-deploy"
        assert registry.get_default_model() == "posts-deploy"

    assert tag_spy.call_count == 2


@pytest.mark.parametrize("tag,expected", [
    ("", ProviderName.OPENAI),
    ("openai", ProviderName.OPENAI),
    ("azure", ProviderName.AZURE),
    ("AZURE", ProviderName.AZURE),
    ("something-else", ProviderName.OPENAI),
])
def test_resolve_provider_name(make_settings, tag, expected):
    assert resolve_provider_name(make_settings(ai_provider=tag)) == expected
