"""
Выбор и ленивое создание AI-провайдера.

ProviderRegistry — явный контекст процесса:
- читает настройки при первом обращении
- проверяет обязательные ключи
- создаёт ровно один провайдер и кэширует его до конца жизни процесса

Использование:
    from llm import get_registry
    registry = get_registry()
    provider = registry.get_provider()
    text = await provider.generate_completion(request)
"""

import threading
import logging
from typing import Optional

from config import Settings, settings as default_settings
from data.models import ProviderName
from llm.client import AIProvider, AzureOpenAIProvider, OpenAIProvider
from llm.errors import ConfigurationError

logger = logging.getLogger(__name__)

OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
AZURE_DEFAULT_DEPLOYMENT = "gpt-4.1-mini"
AZURE_DEFAULT_API_VERSION = "2024-08-01-preview"


def resolve_provider_name(settings: Settings) -> ProviderName:
    """Тег провайдера из настроек; пустой или неизвестный даёт openai."""
    tag = (settings.ai_provider or "").strip().lower()
    if tag == ProviderName.AZURE.value:
        return ProviderName.AZURE
    return ProviderName.OPENAI


class ProviderRegistry:
    """
    Хранит единственный экземпляр провайдера.

    Первое успешное создание выигрывает, дальше экземпляр не заменяется.
    Создание защищено блокировкой, поэтому при одновременном
    холодном старте провайдер создаётся один раз.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self._provider: Optional[AIProvider] = None
        self._lock = threading.Lock()

    def get_provider(self) -> AIProvider:
        """
        Возвращает провайдер, создавая его при первом вызове.

        Raises:
            ConfigurationError: если не заданы обязательные ключи
        """
        if self._provider is not None:
            return self._provider

        with self._lock:
            if self._provider is None:
                self._provider = self._create_provider()

        return self._provider

    def get_default_model(self) -> str:
        """
        Модель по умолчанию для текущих настроек.

        Для Azure это имя деплоймента. Не кэшируется.
        """
        if resolve_provider_name(self.settings) == ProviderName.AZURE:
            return (
                self.settings.azure_openai_deployment_name
                or self.settings.azure_default_deployment
                or AZURE_DEFAULT_DEPLOYMENT
            )
        return self.settings.openai_model or OPENAI_DEFAULT_MODEL

    def _create_provider(self) -> AIProvider:
        """Проверка настроек и создание провайдера (без сетевых вызовов)."""
        s = self.settings
        name = resolve_provider_name(s)

        if name == ProviderName.AZURE:
            required = {
                "AZURE_OPENAI_API_KEY": s.azure_openai_api_key,
                "AZURE_OPENAI_ENDPOINT": s.azure_openai_endpoint,
                "AZURE_OPENAI_DEPLOYMENT_NAME": s.azure_openai_deployment_name,
            }
            missing = [key for key, value in required.items() if not value]
            if missing:
                logger.error(f"Azure OpenAI: не заданы {', '.join(missing)}")
                raise ConfigurationError(
                    ProviderName.AZURE.value,
                    missing,
                    "Azure OpenAI configuration is incomplete. "
                    f"Please set {', '.join(missing)}"
                )

            provider = AzureOpenAIProvider(
                api_key=s.azure_openai_api_key,
                endpoint=s.azure_openai_endpoint,
                deployment_name=s.azure_openai_deployment_name,
                api_version=s.azure_openai_api_version or AZURE_DEFAULT_API_VERSION
            )
            logger.info(
                f"AI провайдер инициализирован (azure, deployment={s.azure_openai_deployment_name}, "
                f"endpoint={s.azure_openai_endpoint})"
            )
            return provider

        if not s.openai_api_key:
            logger.error("OpenAI: не задан OPENAI_API_KEY")
            raise ConfigurationError(
                ProviderName.OPENAI.value,
                ["OPENAI_API_KEY"],
                "OpenAI API key is not configured. Please set OPENAI_API_KEY"
            )

        provider = OpenAIProvider(s.openai_api_key)
        logger.info("AI провайдер инициализирован (openai)")
        return provider


# === Реестр по умолчанию ===

_default_registry: Optional[ProviderRegistry] = None
_default_registry_lock = threading.Lock()


def get_registry() -> ProviderRegistry:
    """Реестр процесса поверх глобальных settings."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = ProviderRegistry()
    return _default_registry


def get_provider() -> AIProvider:
    return get_registry().get_provider()


def get_default_model() -> str:
    return get_registry().get_default_model()
