import json

import pytest

from capacity_assessment.core.data_loader import load_catalog, parse_catalog, validate_catalog
from capacity_assessment.core.models import Catalog
from capacity_assessment.utils.validation import ValidationError


def question(qid, criterion="A", options=None):
    if options is None:
        options = [{"value": 0, "text": "No", "recommendation": "Do it"}, {"value": 5, "text": "Yes"}]
    return {"id": qid, "criterion": criterion, "text": f"Text {qid}", "options": options}


def test_load_sample_catalog(sample_catalog_path):
    catalog = load_catalog(sample_catalog_path)

    assert len(catalog.questions) == 8
    assert catalog.criteria() == ["Governance", "Financial Management", "Human Resources"]
    assert catalog.questions[0].max_value == 10


def test_parse_catalog_keeps_order():
    catalog = parse_catalog({"questions": [question("B1", "B"), question("A1", "A")]})
    assert [q.id for q in catalog.questions] == ["B1", "A1"]
    assert catalog.questions[0].options[1].recommendation == ""


def test_question_without_options_fails_fast():
    with pytest.raises(ValidationError) as exc_info:
        parse_catalog({"questions": [question("A1", options=[])]})
    assert exc_info.value.errors


def test_negative_option_value_rejected():
    with pytest.raises(ValidationError):
        parse_catalog({"questions": [question("A1", options=[{"value": -1, "text": "Bad"}])]})


def test_duplicate_ids_rejected():
    with pytest.raises(ValidationError) as exc_info:
        parse_catalog({"questions": [question("A1"), question("A1")]})
    assert "Duplicate question id: A1" in exc_info.value.errors


def test_missing_questions_key_rejected():
    with pytest.raises(ValidationError):
        parse_catalog({"items": []})


def test_validate_catalog_reports_errors():
    catalog = Catalog(questions=[])
    is_valid, errors = validate_catalog(catalog)

    assert not is_valid
    assert errors == ["Catalog has no questions"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(str(tmp_path / "nope.json"))


def test_load_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"title": "T", "questions": [question("A1")]}), encoding="utf-8")

    catalog = load_catalog(str(path))
    assert catalog.title == "T"
    assert len(catalog) == 1
