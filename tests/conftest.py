from pathlib import Path

import pytest

from capacity_assessment.core.answer_store import AnswerStore
from capacity_assessment.core.models import Catalog, Option, Question

SAMPLE_CATALOG = Path(__file__).parent.parent / "capacity_assessment" / "data" / "questionnaire.json"


def _make_question(qid, criterion, values, recommendations=None, text=None):
    recommendations = recommendations or [f"Improve {qid} from {v}" for v in values]
    return Question(
        id=qid,
        criterion=criterion,
        text=text or f"Question {qid}",
        options=[
            Option(value=value, text=f"Option {value}", recommendation=rec)
            for value, rec in zip(values, recommendations)
        ],
    )


@pytest.fixture
def two_question_catalog():
    """Criterion A with options {0,5} and {0,10}"""
    return Catalog(questions=[
        _make_question("A1", "A", [0, 5], ["Do the small thing", ""]),
        _make_question("A2", "A", [0, 10], ["Do the big thing", ""]),
    ])


@pytest.fixture
def mixed_catalog():
    return Catalog(title="Mixed", questions=[
        _make_question("G1", "Governance", [0, 5, 10]),
        _make_question("F1", "Finance", [0, 10]),
        _make_question("G2", "Governance", [0, 3, 5]),
        _make_question("H1", "People", [0, 4]),
    ])


@pytest.fixture
def question_factory():
    """Build a question from a list of option values and their advice texts"""
    return _make_question


@pytest.fixture
def answers():
    return AnswerStore()


@pytest.fixture
def sample_catalog_path():
    return str(SAMPLE_CATALOG)
