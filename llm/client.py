"""
AI-провайдеры для PostCraft.

Архитектура:
- AIProvider — Protocol (интерфейс) с единственной операцией generate_completion
- OpenAIProvider — реализация для OpenAI
- AzureOpenAIProvider — реализация для Azure OpenAI

Набор провайдеров закрытый (см. ProviderName), выбор делает ProviderRegistry.
Конструкторы не ходят в сеть, только держат ключи и SDK-клиент.
"""

from typing import Optional, Protocol, runtime_checkable
import time
import logging

from openai import AsyncAzureOpenAI, AsyncOpenAI

from data.models import CompletionRequest
from llm.errors import GenerationError

logger = logging.getLogger(__name__)


@runtime_checkable
class AIProvider(Protocol):
    """
    Абстрактный интерфейс AI-провайдера.

    Обе реализации (OpenAI, Azure OpenAI) должны
    реализовывать этот интерфейс.
    """

    async def generate_completion(self, request: CompletionRequest) -> str:
        """
        Отправляет запрос к LLM и возвращает текстовый ответ.

        Args:
            request: модель, сообщения [{role, content}, ...], лимит токенов, температура

        Returns:
            str: ответ без пробелов по краям

        Raises:
            GenerationError: если провайдер вернул пустой ответ
        """
        ...


class OpenAIProvider:
    """Клиент для OpenAI."""

    label = "OpenAI"

    def __init__(self, api_key: str):
        self.client = AsyncOpenAI(api_key=api_key)

    async def generate_completion(self, request: CompletionRequest) -> str:
        return await _complete(self.client, request.model, request, self.label)


class AzureOpenAIProvider:
    """
    Клиент для Azure OpenAI.

    Azure маршрутизирует запросы по имени деплоймента, поэтому
    request.model игнорируется и вместо него подставляется deployment_name.
    """

    label = "Azure OpenAI"

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        deployment_name: str,
        api_version: str
    ):
        self.client = AsyncAzureOpenAI(
            api_key=api_key,
            azure_endpoint=endpoint,
            api_version=api_version,
            azure_deployment=deployment_name
        )
        self.deployment_name = deployment_name

    async def generate_completion(self, request: CompletionRequest) -> str:
        return await _complete(self.client, self.deployment_name, request, self.label)


async def _complete(client, model: str, request: CompletionRequest, label: str) -> str:
    """Общий вызов chat.completions для обоих провайдеров."""
    logger.debug(f"{label} запрос (model={model}, max_tokens={request.max_tokens})")

    start_time = time.time()

    response = await client.chat.completions.create(
        model=model,
        messages=request.to_openai_messages(),
        max_completion_tokens=request.max_tokens,
        temperature=request.temperature
    )

    elapsed = time.time() - start_time
    content = _first_choice_content(response)

    if not content:
        logger.warning(f"{label} вернул пустой ответ")
        raise GenerationError(f"Failed to generate text from {label}")

    content = content.strip()
    logger.info(f"{label} ответ получен за {elapsed:.1f}с ({len(content)} символов)")

    return content


def _first_choice_content(response) -> Optional[str]:
    """Текст первого варианта ответа (или None, если его нет)."""
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None)
