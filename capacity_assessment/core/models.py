from datetime import datetime
from typing import Dict, List, Optional, Tuple
from enum import Enum
from pydantic import BaseModel, Field
import uuid

from .answer_store import AnswerStore


class Level(str, Enum):
    """Qualitative level of a score-to-max ratio"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SessionState(str, Enum):
    """Session states for tracking assessment progress"""
    INITIALIZED = "initialized"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class Option(BaseModel):
    """Answer option with its score and improvement advice"""
    value: float = Field(..., ge=0, description="Points awarded when chosen")
    text: str = Field(..., description="Option text to display to user")
    recommendation: str = Field("", description="Advice shown when this option leaves a deficit")

    class Config:
        frozen = True


class Question(BaseModel):
    """Questionnaire item scored toward one criterion"""
    id: str
    criterion: str
    text: str
    options: Tuple[Option, ...] = Field(..., min_length=1)

    class Config:
        frozen = True

    @property
    def max_value(self) -> float:
        """Best achievable value for this question"""
        return max(option.value for option in self.options)

    def format_for_display(self, position: int, total: int) -> Dict[str, object]:
        """Format question for a renderer"""
        return {
            "id": self.id,
            "criterion": self.criterion,
            "text": self.text,
            "position": position + 1,
            "total": total,
            "options": [
                {"index": index, "value": option.value, "text": option.text}
                for index, option in enumerate(self.options)
            ],
        }


class Catalog(BaseModel):
    """Ordered, read-only questionnaire"""
    title: Optional[str] = None
    questions: Tuple[Question, ...] = Field(default_factory=tuple)

    class Config:
        frozen = True

    def __len__(self) -> int:
        return len(self.questions)

    def criteria(self) -> List[str]:
        """Criterion names in first-seen order"""
        seen: List[str] = []
        for question in self.questions:
            if question.criterion not in seen:
                seen.append(question.criterion)
        return seen


class CriterionEntry(BaseModel):
    """One question's contribution to a criterion"""
    question: Question
    position: int
    value: float
    max_value: float
    option_index: Optional[int] = None

    class Config:
        frozen = True


class CriterionAggregate(BaseModel):
    score: float = 0.0
    max_score: float = 0.0
    entries: Tuple[CriterionEntry, ...] = ()

    class Config:
        frozen = True


class Aggregation(BaseModel):
    """Snapshot of totals and per-criterion aggregates"""
    total_score: float
    total_max: float
    by_criterion: Dict[str, CriterionAggregate]

    class Config:
        frozen = True


class Recommendation(BaseModel):
    text: str
    question_id: str
    question_text: str
    deficit: float

    class Config:
        frozen = True


class CriterionReport(BaseModel):
    """Per-criterion row of the report"""
    criterion: str
    score: float
    max_score: float
    pct: int
    level: Level
    recommendations: Tuple[Recommendation, ...] = ()

    class Config:
        frozen = True


class Report(BaseModel):
    """Fully computed assessment results"""
    total_score: float
    total_max: float
    total_pct: int
    per_criterion: Tuple[CriterionReport, ...] = ()

    class Config:
        frozen = True

    def get_criterion(self, name: str) -> Optional[CriterionReport]:
        for row in self.per_criterion:
            if row.criterion == name:
                return row
        return None


class AssessmentSession(BaseModel):
    """Single assessment run with its answers and navigation state"""
    session_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    state: SessionState = SessionState.INITIALIZED
    organization_name: str = ""
    user_email: Optional[str] = None
    current_index: int = 0
    answers: AnswerStore = Field(default_factory=AnswerStore)
    created_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
