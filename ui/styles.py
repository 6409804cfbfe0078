"""
CSS стили для PostCraft UI.

Тёмная тема, карточка поста и блок ошибки.
"""

CUSTOM_CSS = """
/* === Переменные === */
:root {
    --primary: #2563eb;
    --primary-hover: #1d4ed8;
    --danger: #ef4444;
    --bg-primary: #0f172a;
    --bg-card: #334155;
    --text-primary: #f8fafc;
    --text-secondary: #94a3b8;
    --border: #475569;
    --radius: 12px;
}

/* === Основной контейнер === */
.gradio-container {
    background: var(--bg-primary) !important;
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif !important;
}

h1, h2, h3 {
    color: var(--text-primary) !important;
    font-weight: 600 !important;
}

/* === Кнопка === */
.primary-btn {
    background: var(--primary) !important;
    border-radius: var(--radius) !important;
}

.primary-btn:hover {
    background: var(--primary-hover) !important;
}

/* === Результат === */
.results-section {
    margin-top: 24px !important;
}

.post-card textarea {
    background: var(--bg-card) !important;
    border: 1px solid var(--border) !important;
    border-radius: var(--radius) !important;
    color: var(--text-primary) !important;
    white-space: pre-wrap !important;
}

.error-box {
    border-left: 4px solid var(--danger) !important;
    padding: 12px 16px !important;
    color: var(--text-secondary) !important;
}
"""
