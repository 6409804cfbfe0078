"""
PostCraft — генератор постов для соцсетей.

Точка входа приложения.

Использование:
    python app.py

    Затем откройте http://localhost:7860 в браузере.
"""

import logging
import sys

from config import settings

# Настройка логирования
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
    datefmt='%H:%M:%S',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Уменьшаем шум от библиотек
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)
logging.getLogger("gradio").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def main():
    """Запуск приложения."""
    import gradio as gr
    from ui.components import create_app
    from ui.styles import CUSTOM_CSS

    logger.info("=" * 50)
    logger.info(f"🚀 Запуск {settings.app_name} (провайдер: {settings.ai_provider or 'openai'})")
    logger.info("=" * 50)

    app = create_app()

    app.launch(
        server_name=settings.server_name,
        server_port=settings.server_port,
        share=False,
        show_error=settings.debug,
        css=CUSTOM_CSS,
        theme=gr.themes.Base(
            primary_hue="blue",
            secondary_hue="slate",
            neutral_hue="slate",
        )
    )


if __name__ == "__main__":
    main()
