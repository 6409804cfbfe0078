"""
Gradio UI компоненты для PostCraft.

Интерфейс:
1. Требования к посту
2. Референсные посты (опционально, разделитель: строка '---')
3. Кнопка генерации
4. Результат: текст поста
"""

import gradio as gr
import logging
from typing import Optional

from core.post import generate_post
from data.models import GeneratePostRequest
from llm.errors import AIError, ErrorKind
from llm.provider import ProviderRegistry

logger = logging.getLogger(__name__)

REFERENCE_SEPARATOR = "---"


def create_app() -> gr.Blocks:
    """
    Создание Gradio приложения.

    Returns:
        gr.Blocks: готовое приложение
    """

    with gr.Blocks(title="PostCraft — генератор постов") as app:

        # === Header ===
        gr.Markdown("""
        # ✍️ PostCraft
        ### Посты для соцсетей в вашем стиле

        Опишите, о чём пост, и добавьте примеры своих постов
        """)

        # === Форма ввода ===
        with gr.Row():
            with gr.Column(scale=2):
                requirements_input = gr.Textbox(
                    label="📝 О чём пост",
                    placeholder="Например: анонс новой кофейни, дружелюбный тон, 2-3 эмодзи",
                    lines=4,
                    max_lines=10
                )

                references_input = gr.Textbox(
                    label="📚 Примеры постов (опционально)",
                    placeholder=f"Каждый пост отделяйте строкой {REFERENCE_SEPARATOR}",
                    lines=6,
                    max_lines=20
                )

                generate_btn = gr.Button(
                    "🚀 Сгенерировать",
                    variant="primary",
                    size="lg",
                    elem_classes=["primary-btn"]
                )

        # === Результат (скрыт до генерации) ===
        with gr.Column(visible=False, elem_classes=["results-section"]) as results_section:
            gr.Markdown("### 💬 Готовый пост")
            post_output = gr.Textbox(
                show_label=False,
                lines=8,
                interactive=False,
                elem_classes=["post-card"]
            )
            error_output = gr.Markdown(
                visible=False,
                elem_classes=["error-box"]
            )

        async def on_generate(requirements: str, references: str):
            return await handle_generate(requirements, references)

        # Привязываем обработчик
        generate_btn.click(
            fn=on_generate,
            inputs=[requirements_input, references_input],
            outputs=[results_section, post_output, error_output]
        )

    return app


def split_reference_posts(text: str) -> list[str]:
    """
    Разбивает поле примеров на отдельные посты.

    Разделитель: строка, состоящая только из '---'.
    Пустые фрагменты отбрасываются.
    """
    if not text:
        return []

    posts = []
    current: list[str] = []

    for line in text.splitlines():
        if line.strip() == REFERENCE_SEPARATOR:
            posts.append("\n".join(current))
            current = []
        else:
            current.append(line)
    posts.append("\n".join(current))

    return [p.strip() for p in posts if p.strip()]


async def handle_generate(
    requirements: str,
    references: str,
    registry: Optional[ProviderRegistry] = None
) -> tuple:
    """
    Обработчик нажатия кнопки генерации.

    Returns:
        (results_section, post_output, error_output) в порядке outputs
    """
    if not requirements or not requirements.strip():
        gr.Warning("Пожалуйста, опишите, о чём пост")
        return gr.update(visible=False), gr.update(), gr.update()

    request = GeneratePostRequest(
        requirements=requirements,
        reference_posts=split_reference_posts(references) or None
    )

    try:
        result = await generate_post(request, registry=registry)
        logger.info("Пост успешно сгенерирован")

        return (
            gr.update(visible=True),
            result.post,
            gr.update(visible=False, value="")
        )

    except AIError as e:
        if e.kind == ErrorKind.CONFIGURATION:
            logger.warning(f"Ошибка настройки: {e}")
        else:
            logger.error(f"Ошибка генерации: {e}", exc_info=True)
        return (
            gr.update(visible=True),
            "",
            gr.update(visible=True, value=f"❌ Ошибка: {str(e)}")
        )
