import math
import logging
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class StoredAnswer(BaseModel):
    """Chosen option for one question position"""
    value: float
    option_index: Optional[int] = None

    class Config:
        frozen = True


def parse_stored_value(raw: Any) -> float:
    """
    Coerce a raw answer value to a finite number.

    This is the only place answer values are coerced. Anything that is not a
    finite number is scored as 0 instead of raising, so a malformed answer
    degrades that question's score rather than the whole computation.
    """
    if isinstance(raw, bool):
        return float(raw)

    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.debug(f"Non-numeric answer value {raw!r} stored as 0")
        return 0.0

    if not math.isfinite(value):
        logger.debug(f"Non-finite answer value {raw!r} stored as 0")
        return 0.0

    return value


def parse_option_index(raw: Any) -> Optional[int]:
    """Coerce an option index; anything that is not a whole number is absent"""
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, int):
        return raw

    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(value) or not value.is_integer():
        return None

    return int(value)


class AnswerStore(BaseModel):
    """Answers keyed by question position; unanswered positions are absent"""
    answers: Dict[int, StoredAnswer] = Field(default_factory=dict)

    def record(self, position: int, value: Any, option_index: Any = None) -> StoredAnswer:
        """Store the answer at position, replacing any earlier one"""
        answer = StoredAnswer(
            value=parse_stored_value(value),
            option_index=parse_option_index(option_index),
        )
        self.answers[position] = answer
        return answer

    def get(self, position: int) -> Optional[StoredAnswer]:
        return self.answers.get(position)

    def reset(self):
        self.answers.clear()

    def is_answered(self, position: int) -> bool:
        return position in self.answers

    def answered_positions(self) -> List[int]:
        return sorted(self.answers.keys())

    def __len__(self) -> int:
        return len(self.answers)
