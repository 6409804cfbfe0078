"""
Типизированные ошибки AI-слоя.

Каждая ошибка несёт вид (ErrorKind) и исходную причину (cause),
чтобы при переупаковке между слоями не терялась структура.

Иерархия:
- AIError — базовая
  - ConfigurationError — не хватает ключей/настроек провайдера
  - GenerationError — провайдер вернул пустой ответ
  - CompletionError — обёртка оркестратора (generate_text)
  - PostGenerationError — обёртка верхнего уровня (generate_post)
"""

from enum import Enum
from typing import Optional

UNKNOWN_ERROR = "unknown error"


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    GENERATION = "generation"
    UPSTREAM = "upstream"  # ошибки SDK / сети


class AIError(Exception):
    """Базовая ошибка AI-слоя"""

    kind: ErrorKind = ErrorKind.UPSTREAM

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(AIError):
    """Не заданы обязательные настройки провайдера"""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, provider: str, missing: list[str], message: Optional[str] = None):
        self.provider = provider
        self.missing = list(missing)
        super().__init__(
            message or
            f"{provider} configuration is incomplete. "
            f"Please set {', '.join(self.missing)}"
        )


class GenerationError(AIError):
    """Провайдер не вернул текст"""

    kind = ErrorKind.GENERATION


class _WrappedError(AIError):
    """Ошибка, оборачивающая другую с префиксом"""

    prefix = ""

    def __init__(self, cause: BaseException):
        super().__init__(f"{self.prefix}: {describe_error(cause)}", cause=cause)
        # Вид ошибки наследуется от причины
        self.kind = cause.kind if isinstance(cause, AIError) else ErrorKind.UPSTREAM


class CompletionError(_WrappedError):
    prefix = "Text generation failed"


class PostGenerationError(_WrappedError):
    prefix = "Post generation failed"


def describe_error(error: object) -> str:
    """
    Текст ошибки для встраивания в обёртку.

    Если это не исключение или у него нет сообщения, возвращается UNKNOWN_ERROR.
    """
    if isinstance(error, AIError):
        return error.message or UNKNOWN_ERROR
    if isinstance(error, BaseException):
        return str(error) or UNKNOWN_ERROR
    return UNKNOWN_ERROR
