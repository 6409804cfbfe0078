"""
LLM module — интеграция с AI-провайдерами.

AI-агностичная архитектура:
- AIProvider: интерфейс провайдера
- ProviderRegistry: выбор и ленивое создание провайдера
- OpenAIProvider / AzureOpenAIProvider: реализации
- build_system_prompt / build_user_prompt: промпты

Использование:
    from llm import get_registry
    provider = get_registry().get_provider()
    text = await provider.generate_completion(request)
"""

from llm.client import AIProvider, OpenAIProvider, AzureOpenAIProvider
from llm.errors import (
    ErrorKind,
    AIError,
    ConfigurationError,
    GenerationError,
    CompletionError,
    PostGenerationError,
    describe_error,
)
from llm.prompts import SYSTEM_PROMPT, build_system_prompt, build_user_prompt
from llm.provider import ProviderRegistry, get_registry, get_provider, get_default_model

__all__ = [
    # Client
    "AIProvider",
    "OpenAIProvider",
    "AzureOpenAIProvider",
    # Provider selection
    "ProviderRegistry",
    "get_registry",
    "get_provider",
    "get_default_model",
    # Prompts
    "SYSTEM_PROMPT",
    "build_system_prompt",
    "build_user_prompt",
    # Errors
    "ErrorKind",
    "AIError",
    "ConfigurationError",
    "GenerationError",
    "CompletionError",
    "PostGenerationError",
    "describe_error",
]
