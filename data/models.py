"""
Pydantic модели данных для PostCraft.

Модели:
- ChatMessage: одно сообщение диалога (role + content)
- CompletionRequest: запрос к провайдеру (модель, сообщения, лимиты)
- GeneratePostRequest: требования к посту + референсные посты
- GeneratePostResponse: сгенерированный пост
"""

from pydantic import BaseModel, ConfigDict, Field
from enum import Enum
from typing import Optional


class ProviderName(str, Enum):
    """Поддерживаемые AI-провайдеры"""
    OPENAI = "openai"
    AZURE = "azure"


class MessageRole(str, Enum):
    """Роль сообщения в чате"""
    SYSTEM = "system"
    USER = "user"


class ChatMessage(BaseModel):
    role: MessageRole
    content: str


class CompletionRequest(BaseModel):
    """
    Запрос на генерацию текста.

    Создаётся заново на каждый вызов, нигде не хранится.
    """
    model: str
    messages: list[ChatMessage]
    max_tokens: int = Field(..., gt=0, description="Максимум токенов в ответе")
    temperature: float

    def to_openai_messages(self) -> list[dict]:
        """Сообщения в формате chat.completions: [{role, content}, ...]"""
        return [
            {"role": m.role.value, "content": m.content}
            for m in self.messages
        ]


class GeneratePostRequest(BaseModel):
    """
    Входные данные для генерации поста.

    reference_posts принимается и как referencePosts (формат фронтенда).
    """
    model_config = ConfigDict(populate_by_name=True)

    requirements: str
    reference_posts: Optional[list[str]] = Field(None, alias="referencePosts")


class GeneratePostResponse(BaseModel):
    post: str
