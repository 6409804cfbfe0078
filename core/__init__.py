"""
Core module — генерация текста и постов.
"""

from core.completion import generate_text
from core.post import generate_post

__all__ = [
    "generate_text",
    "generate_post",
]
