import logging
from typing import Dict, List

from .answer_store import AnswerStore
from .models import Aggregation, Catalog, CriterionAggregate, CriterionEntry

logger = logging.getLogger(__name__)


class _RunningCriterion:
    """Mutable accumulator used only while folding one aggregation"""

    def __init__(self):
        self.score = 0.0
        self.max_score = 0.0
        self.entries: List[CriterionEntry] = []

    def freeze(self) -> CriterionAggregate:
        return CriterionAggregate(
            score=self.score,
            max_score=self.max_score,
            entries=tuple(self.entries),
        )


def aggregate(catalog: Catalog, answers: AnswerStore) -> Aggregation:
    """
    Fold catalog and answers into total and per-criterion scores.

    Unanswered questions score 0 but still count toward the maximum.
    Criteria keep the order in which they first appear in the catalog.

    Args:
        catalog: Questionnaire being scored
        answers: Answers recorded so far

    Returns:
        Fresh Aggregation snapshot
    """
    total_score = 0.0
    total_max = 0.0
    running: Dict[str, _RunningCriterion] = {}

    for position, question in enumerate(catalog.questions):
        stored = answers.get(position)
        value = stored.value if stored is not None else 0.0
        max_value = question.max_value

        total_score += value
        total_max += max_value

        criterion = running.get(question.criterion)
        if criterion is None:
            criterion = _RunningCriterion()
            running[question.criterion] = criterion

        criterion.score += value
        criterion.max_score += max_value
        criterion.entries.append(CriterionEntry(
            question=question,
            position=position,
            value=value,
            max_value=max_value,
            option_index=stored.option_index if stored is not None else None,
        ))

    logger.debug(
        f"Aggregated {len(catalog.questions)} questions into {len(running)} criteria: "
        f"{total_score}/{total_max}"
    )

    return Aggregation(
        total_score=total_score,
        total_max=total_max,
        by_criterion={name: crit.freeze() for name, crit in running.items()},
    )
