"""
Промпты для генерации постов.

Все функции чистые: одинаковый вход даёт одинаковый выход.
"""

from typing import Optional, Sequence

SYSTEM_PROMPT = (
    "Generate a social media post based on the request, "
    "following the style of the reference posts below."
)

USER_PROMPT_PREFIX = "Generate a post based on the following request:"


def build_system_prompt(reference_posts: Optional[Sequence[str]] = None) -> str:
    """
    Системный промпт с референсными постами.

    Args:
        reference_posts: примеры постов для стиля (опционально)

    Returns:
        str: SYSTEM_PROMPT, а если примеры есть, с нумерованным
        списком 'example N: "..."' начиная с 1
    """
    system_prompt = SYSTEM_PROMPT

    if reference_posts:
        system_prompt += "\n\nReference posts:\n"
        for i, post in enumerate(reference_posts, 1):
            system_prompt += f'\nexample {i}: "{post}"\n'

    return system_prompt


def build_user_prompt(requirements: str) -> str:
    """Пользовательский промпт: фиксированная инструкция + требования как есть."""
    return f"{USER_PROMPT_PREFIX}\n\n{requirements}"
