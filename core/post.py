"""
Генерация поста для соцсетей.
"""

import logging
from typing import Optional

from core.completion import generate_text
from data.models import GeneratePostRequest, GeneratePostResponse
from llm.errors import PostGenerationError
from llm.prompts import build_system_prompt, build_user_prompt
from llm.provider import ProviderRegistry, get_registry

logger = logging.getLogger(__name__)


async def generate_post(
    request: GeneratePostRequest,
    *,
    registry: Optional[ProviderRegistry] = None
) -> GeneratePostResponse:
    """
    Генерирует пост по требованиям и референсным постам.

    Args:
        request: требования и (опционально) примеры постов
        registry: реестр провайдеров (по умолчанию: реестр процесса)

    Returns:
        GeneratePostResponse с текстом поста

    Raises:
        PostGenerationError: ошибка верхнего уровня, причина в .cause
    """
    registry = registry or get_registry()

    try:
        system_prompt = build_system_prompt(request.reference_posts)
        user_prompt = build_user_prompt(request.requirements)

        logger.info(
            f"Генерация поста (референсов: {len(request.reference_posts or [])}, "
            f"требования: {len(request.requirements)} символов)"
        )

        post = await generate_text(
            system_prompt,
            user_prompt,
            model=registry.get_default_model(),
            max_tokens=registry.settings.post_max_tokens,
            registry=registry
        )

        return GeneratePostResponse(post=post)

    except Exception as e:
        logger.error(f"Ошибка генерации поста: {e}")
        raise PostGenerationError(e) from e
