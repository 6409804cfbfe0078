"""
Генерация текста через выбранного AI-провайдера.

Пайплайн:
1. Параметры по умолчанию (модель, лимит токенов, температура)
2. Получение провайдера из реестра (ленивое создание)
3. Запрос [system, user]
"""

import logging
from typing import Optional

from data.models import ChatMessage, CompletionRequest, MessageRole
from llm.errors import CompletionError
from llm.provider import ProviderRegistry, get_registry

logger = logging.getLogger(__name__)


async def generate_text(
    system_prompt: str,
    user_prompt: str,
    *,
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
    registry: Optional[ProviderRegistry] = None
) -> str:
    """
    Генерирует текст по системному и пользовательскому промпту.

    Args:
        system_prompt: системный промпт
        user_prompt: пользовательский промпт
        model: модель (по умолчанию: модель реестра)
        max_tokens: лимит токенов (по умолчанию 500)
        temperature: температура (по умолчанию 1)
        registry: реестр провайдеров (по умолчанию: реестр процесса)

    Returns:
        str: сгенерированный текст

    Raises:
        CompletionError: любая ошибка настройки или генерации, причина в .cause
    """
    registry = registry or get_registry()
    settings = registry.settings

    if model is None:
        model = registry.get_default_model()
    if max_tokens is None:
        max_tokens = settings.default_max_tokens
    if temperature is None:
        temperature = settings.default_temperature

    try:
        provider = registry.get_provider()

        request = CompletionRequest(
            model=model,
            messages=[
                ChatMessage(role=MessageRole.SYSTEM, content=system_prompt),
                ChatMessage(role=MessageRole.USER, content=user_prompt),
            ],
            max_tokens=max_tokens,
            temperature=temperature
        )

        return await provider.generate_completion(request)

    except Exception as e:
        logger.error(f"Ошибка генерации текста: {e}")
        raise CompletionError(e) from e
