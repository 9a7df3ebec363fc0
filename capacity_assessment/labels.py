# labels.py

from typing import Dict

from .core.models import Level
from .config import settings

DEFAULT_LANGUAGE = "uk"

LEVEL_LABELS: Dict[str, Dict[str, str]] = {
    "uk": {
        Level.HIGH.value: "Високий",
        Level.MEDIUM.value: "Середній",
        Level.LOW.value: "Низький",
    },
    "en": {
        Level.HIGH.value: "High",
        Level.MEDIUM.value: "Medium",
        Level.LOW.value: "Low",
    },
}

LEVEL_HINTS: Dict[str, Dict[str, str]] = {
    "uk": {
        Level.HIGH.value: "Сильний результат — підтримуйте системність і робіть точкові покращення.",
        Level.MEDIUM.value: "Середній рівень — пріоритезуйте покращення в процесах із найбільшими прогалинами.",
        Level.LOW.value: "Низький рівень — потрібні системні зміни та формалізація процесів. Почніть із базових практик.",
    },
    "en": {
        Level.HIGH.value: "Strong result: keep your practices consistent and make targeted improvements.",
        Level.MEDIUM.value: "Medium level: prioritise improvements in the processes with the largest gaps.",
        Level.LOW.value: "Low level: systemic changes and formalised processes are needed. Start with the basics.",
    },
}

UI_TEXT: Dict[str, Dict[str, str]] = {
    "uk": {
        "criterion": "Критерій",
        "level": "Рівень",
        "max_score": "Макс. бал",
        "score": "Бал",
        "percent": "%",
        "total": "Загальний результат",
        "organization": "Організація",
        "priority_steps": "Пріоритетні кроки",
        "no_recommendations": "За вашими відповідями пріоритетних рекомендацій не знайдено.",
        "progress": "Прогрес: {current} із {total}",
        "question": "Питання {current} / {total}",
        "organization_prompt": "Назва організації",
        "email_prompt": "Email (необов'язково)",
    },
    "en": {
        "criterion": "Criterion",
        "level": "Level",
        "max_score": "Max score",
        "score": "Score",
        "percent": "%",
        "total": "Overall result",
        "organization": "Organization",
        "priority_steps": "Priority steps",
        "no_recommendations": "No priority recommendations were found for your answers.",
        "progress": "Progress: {current} of {total}",
        "question": "Question {current} / {total}",
        "organization_prompt": "Organization name",
        "email_prompt": "Email (optional)",
    },
}


def _table(tables: Dict[str, Dict[str, str]], language: str = None) -> Dict[str, str]:
    language = language or settings.LANGUAGE
    return tables.get(language, tables[DEFAULT_LANGUAGE])


def level_label(level: Level, language: str = None) -> str:
    """Display name for a level"""
    return _table(LEVEL_LABELS, language)[Level(level).value]


def level_hint(level: Level, language: str = None) -> str:
    """General advice shown next to a criterion's level"""
    return _table(LEVEL_HINTS, language)[Level(level).value]


def ui_text(key: str, language: str = None, **kwargs) -> str:
    text = _table(UI_TEXT, language)[key]
    return text.format(**kwargs) if kwargs else text
