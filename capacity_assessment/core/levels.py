import math
from typing import Optional

from .models import Level
from ..config import settings


def score_percentage(score: float, max_score: float) -> float:
    """Unrounded score ratio as a percentage; 0 when nothing is scorable"""
    if not max_score:
        return 0.0
    return 100.0 * score / max_score


def percentage(score: float, max_score: float) -> int:
    """Display percentage, rounded half up"""
    return int(math.floor(score_percentage(score, max_score) + 0.5))


def classify_level(score: float, max_score: float,
                   high_threshold: Optional[float] = None,
                   medium_threshold: Optional[float] = None) -> Level:
    """
    Map a score to a qualitative level.

    Bands are inclusive on their lower edge. A criterion with no scorable
    questions is always low.
    """
    if not max_score:
        return Level.LOW

    high = settings.HIGH_LEVEL_THRESHOLD if high_threshold is None else high_threshold
    medium = settings.MEDIUM_LEVEL_THRESHOLD if medium_threshold is None else medium_threshold

    pct = score_percentage(score, max_score)
    if pct >= high:
        return Level.HIGH
    elif pct >= medium:
        return Level.MEDIUM
    else:
        return Level.LOW
