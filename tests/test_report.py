import pytest
from pydantic import ValidationError as PydanticValidationError

from capacity_assessment.config import settings
from capacity_assessment.core.answer_store import AnswerStore
from capacity_assessment.core.models import Catalog, Level
from capacity_assessment.core.report import assemble_report


def test_all_worst_answers(two_question_catalog, answers):
    answers.record(0, 0, 0)
    answers.record(1, 0, 0)

    report = assemble_report(two_question_catalog, answers, cap=3)
    row = report.get_criterion("A")

    assert (row.score, row.max_score, row.pct, row.level) == (0, 15, 0, Level.LOW)
    assert [rec.text for rec in row.recommendations] == ["Do the big thing", "Do the small thing"]
    assert [rec.deficit for rec in row.recommendations] == [10, 5]


def test_all_best_answers(two_question_catalog, answers):
    answers.record(0, 5, 1)
    answers.record(1, 10, 1)

    report = assemble_report(two_question_catalog, answers, cap=3)
    row = report.get_criterion("A")

    assert (row.score, row.max_score, row.pct, row.level) == (15, 15, 100, Level.HIGH)
    assert row.recommendations == ()
    assert report.total_pct == 100


def test_totals_match_criteria(mixed_catalog, answers):
    answers.record(0, 5, 1)
    answers.record(3, 4, 1)

    report = assemble_report(mixed_catalog, answers, cap=3)

    assert report.total_score == sum(row.score for row in report.per_criterion)
    assert report.total_max == sum(row.max_score for row in report.per_criterion)
    assert [row.criterion for row in report.per_criterion] == ["Governance", "Finance", "People"]
    assert report.get_criterion("People").level == Level.HIGH
    assert report.get_criterion("Missing") is None


def test_assemble_is_idempotent(mixed_catalog, answers):
    answers.record(0, 0, 0)
    answers.record(2, 3, 1)

    first = assemble_report(mixed_catalog, answers, cap=10)
    second = assemble_report(mixed_catalog, answers, cap=10)

    assert first == second
    assert first.model_dump() == second.model_dump()


def test_report_is_immutable(two_question_catalog, answers):
    report = assemble_report(two_question_catalog, answers, cap=3)

    with pytest.raises(PydanticValidationError):
        report.total_score = 99
    assert isinstance(report.per_criterion, tuple)


def test_default_cap_from_settings(question_factory):
    catalog = Catalog(questions=[
        question_factory(f"Q{i}", "C", [0, i + 1], [f"Advice {i}", ""]) for i in range(5)
    ])
    store = AnswerStore()
    for position in range(5):
        store.record(position, 0, 0)

    report = assemble_report(catalog, store)

    assert len(report.get_criterion("C").recommendations) == min(settings.RECOMMENDATION_CAP, 5)
