"""
UI module — Gradio форма генерации постов.
"""

from ui.styles import CUSTOM_CSS
from ui.components import create_app, split_reference_posts

__all__ = [
    "CUSTOM_CSS",
    "create_app",
    "split_reference_posts",
]
