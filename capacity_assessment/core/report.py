import logging
from typing import Optional

from .aggregator import aggregate
from .answer_store import AnswerStore
from .levels import classify_level, percentage
from .models import Catalog, CriterionReport, Report
from .recommendations import select_recommendations
from ..config import settings

logger = logging.getLogger(__name__)


def assemble_report(catalog: Catalog, answers: AnswerStore, cap: Optional[int] = None) -> Report:
    """
    Build the immutable report every renderer and exporter reads.

    Recomputed from scratch on each call; the same catalog and answers always
    give an equal report.
    """
    if cap is None:
        cap = settings.RECOMMENDATION_CAP

    aggregation = aggregate(catalog, answers)

    rows = []
    for name, criterion in aggregation.by_criterion.items():
        rows.append(CriterionReport(
            criterion=name,
            score=criterion.score,
            max_score=criterion.max_score,
            pct=percentage(criterion.score, criterion.max_score),
            level=classify_level(criterion.score, criterion.max_score),
            recommendations=select_recommendations(criterion, cap),
        ))

    report = Report(
        total_score=aggregation.total_score,
        total_max=aggregation.total_max,
        total_pct=percentage(aggregation.total_score, aggregation.total_max),
        per_criterion=tuple(rows),
    )

    logger.debug(f"Assembled report: {report.total_score}/{report.total_max} ({report.total_pct}%)")
    return report
