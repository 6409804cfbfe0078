"""
Data module — модели запросов и ответов.
"""

from data.models import (
    ProviderName,
    MessageRole,
    ChatMessage,
    CompletionRequest,
    GeneratePostRequest,
    GeneratePostResponse,
)

__all__ = [
    "ProviderName",
    "MessageRole",
    "ChatMessage",
    "CompletionRequest",
    "GeneratePostRequest",
    "GeneratePostResponse",
]
