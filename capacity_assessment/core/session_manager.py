from datetime import datetime
from typing import Optional, Tuple
import logging

from .models import AssessmentSession, Catalog, Question, Report, SessionState
from .report import assemble_report
from ..config import settings
from ..utils.validation import validate_and_raise, validate_start_input

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Raised when a session operation is not allowed in the current state"""


class AssessmentSessionManager:
    """Drives one assessment session over a fixed catalog"""

    def __init__(self, catalog: Catalog, recommendation_cap: Optional[int] = None):
        if not catalog.questions:
            raise ValueError("Cannot run an assessment over an empty catalog")

        self.catalog = catalog
        self.recommendation_cap = (
            settings.RECOMMENDATION_CAP if recommendation_cap is None else recommendation_cap
        )
        self.session = AssessmentSession()

    @property
    def total_questions(self) -> int:
        return len(self.catalog.questions)

    @property
    def is_last_question(self) -> bool:
        return self.session.current_index == self.total_questions - 1

    def _require_state(self, *states: SessionState):
        if self.session.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise SessionError(
                f"Session {self.session.session_id} is '{SessionState(self.session.state).value}', "
                f"expected one of: {allowed}"
            )

    def _clamp(self, index: int) -> int:
        return min(self.total_questions - 1, max(0, index))

    def start(self, organization_name: str, user_email: Optional[str] = None) -> AssessmentSession:
        """
        Start a fresh assessment

        Args:
            organization_name: Required organization name
            user_email: Optional contact email

        Returns:
            The new session positioned at the first question
        """
        is_valid, errors, name, email = validate_start_input(organization_name, user_email)
        validate_and_raise((is_valid, errors), "Start assessment")

        session = AssessmentSession(
            organization_name=name,
            user_email=email,
            state=SessionState.IN_PROGRESS,
        )
        self.session = session

        logger.info(f"Started assessment session {session.session_id} for '{session.organization_name}'")
        return session

    def current_question(self) -> Question:
        return self.catalog.questions[self.session.current_index]

    def progress(self) -> Tuple[int, int, float]:
        """Return (current position, total, completed fraction) for a progress indicator"""
        current = self.session.current_index + 1
        return current, self.total_questions, current / self.total_questions

    def answer(self, option_index: int):
        """Record the chosen option for the current question"""
        self._require_state(SessionState.IN_PROGRESS)

        question = self.current_question()
        if not 0 <= option_index < len(question.options):
            raise ValueError(
                f"Option index {option_index} out of range for question {question.id} "
                f"({len(question.options)} options)"
            )

        option = question.options[option_index]
        self.session.answers.record(self.session.current_index, option.value, option_index)
        logger.debug(
            f"Session {self.session.session_id}: answered {question.id} "
            f"with option {option_index} (value={option.value})"
        )

    def selected_option(self, position: Optional[int] = None) -> Optional[int]:
        """Option index chosen at position (current question by default)"""
        if position is None:
            position = self.session.current_index
        stored = self.session.answers.get(position)
        return stored.option_index if stored is not None else None

    def next(self) -> bool:
        """
        Move to the next question.

        Returns:
            False (and stays put) when the current question is unanswered
        """
        self._require_state(SessionState.IN_PROGRESS)

        if not self.session.answers.is_answered(self.session.current_index):
            return False

        self.session.current_index = self._clamp(self.session.current_index + 1)
        return True

    def back(self):
        self._require_state(SessionState.IN_PROGRESS)
        self.session.current_index = self._clamp(self.session.current_index - 1)

    def can_finish(self) -> bool:
        return (
            self.session.state == SessionState.IN_PROGRESS
            and self.is_last_question
            and self.session.answers.is_answered(self.session.current_index)
        )

    def finish(self) -> Report:
        """Complete the assessment and return its report"""
        self._require_state(SessionState.IN_PROGRESS)

        if not self.session.answers.is_answered(self.session.current_index):
            raise SessionError("Current question must be answered before finishing")

        self.session.state = SessionState.COMPLETE
        self.session.completed_at = datetime.now()

        report = self.report()
        logger.info(
            f"Assessment complete for session {self.session.session_id}: "
            f"{report.total_score}/{report.total_max} ({report.total_pct}%)"
        )
        return report

    def report(self) -> Report:
        return assemble_report(self.catalog, self.session.answers, self.recommendation_cap)

    def restart(self) -> AssessmentSession:
        """Drop the current session and return to the start page"""
        logger.info(f"Restarting assessment (discarding session {self.session.session_id})")
        self.session = AssessmentSession()
        return self.session
