from capacity_assessment.core.models import Level
from capacity_assessment.labels import level_hint, level_label, ui_text


def test_level_labels():
    assert level_label(Level.HIGH, "uk") == "Високий"
    assert level_label(Level.MEDIUM, "en") == "Medium"
    assert level_label("low", "en") == "Low"


def test_unknown_language_falls_back_to_ukrainian():
    assert level_label(Level.LOW, "fr") == "Низький"
    assert level_hint(Level.HIGH, "fr").startswith("Сильний результат")


def test_ui_text_formatting():
    assert ui_text("progress", "en", current=2, total=10) == "Progress: 2 of 10"
    assert ui_text("progress", "uk", current=1, total=3) == "Прогрес: 1 із 3"
