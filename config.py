"""
Конфигурация приложения PostCraft.
Загружает настройки из переменных окружения / .env файла.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки приложения"""

    # === Приложение ===
    app_name: str = "PostCraft"
    debug: bool = False
    log_level: str = "INFO"
    server_name: str = "0.0.0.0"
    server_port: int = 7860

    # === Выбор провайдера: openai | azure ===
    ai_provider: str = "openai"

    # === OpenAI ===
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # === Azure OpenAI ===
    azure_openai_api_key: str = ""
    azure_openai_endpoint: str = ""
    azure_openai_deployment_name: str = ""
    azure_openai_api_version: str = "2024-08-01-preview"
    azure_default_deployment: str = "gpt-4.1-mini"  # если деплоймент не задан

    # === Параметры генерации ===
    default_max_tokens: int = 500
    default_temperature: float = 1.0
    post_max_tokens: int = 4000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True  # настройки неизменяемы после загрузки


# Глобальный экземпляр настроек
# Загружается при импорте модуля
settings = Settings()
