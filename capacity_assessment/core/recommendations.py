import logging
from typing import List, Set, Tuple

from .models import CriterionAggregate, Recommendation

logger = logging.getLogger(__name__)


def _candidates(aggregate: CriterionAggregate) -> List[Recommendation]:
    """Recommendations for every answered entry that left points on the table"""
    candidates = []

    for entry in aggregate.entries:
        index = entry.option_index
        if index is None or not 0 <= index < len(entry.question.options):
            # Unanswered questions produce no advice
            continue

        deficit = entry.max_value - entry.value
        text = entry.question.options[index].recommendation
        if deficit <= 0 or not text:
            continue

        candidates.append(Recommendation(
            text=text,
            question_id=entry.question.id,
            question_text=entry.question.text,
            deficit=deficit,
        ))

    return candidates


def select_recommendations(aggregate: CriterionAggregate, cap: int) -> Tuple[Recommendation, ...]:
    """
    Rank improvement advice for one criterion.

    Highest deficit first; equal deficits keep catalog order. Identical
    advice text coming from several questions is kept once.

    Args:
        aggregate: Criterion aggregate to draw from
        cap: Maximum number of recommendations returned

    Returns:
        Tuple of at most cap recommendations
    """
    if cap < 0:
        raise ValueError(f"Recommendation cap must be non-negative, got {cap}")

    # sorted() is stable, so ties stay in question order
    ranked = sorted(_candidates(aggregate), key=lambda rec: rec.deficit, reverse=True)

    selected: List[Recommendation] = []
    seen_texts: Set[str] = set()
    for rec in ranked:
        if len(selected) >= cap:
            break
        if rec.text in seen_texts:
            continue
        seen_texts.add(rec.text)
        selected.append(rec)

    return tuple(selected)
