"""
Persona Assignment

Validates a quiz submission, classifies it, stores the submission and makes
the result the user's current persona.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from learnpersona.ingest.activity import record_activity
from learnpersona.ingest.database import get_session
from learnpersona.ingest.lookup import get_user
from learnpersona.ingest.schema import QuizResponse
from .categories import Category, PERSONA_DESCRIPTIONS, PERSONA_TIPS
from .classifier import classify
from .validation import validate_submission, QuizValidationError


logger = logging.getLogger(__name__)


@dataclass
class PersonaAssignment:
    """Result of persona assignment."""
    user_id: str
    category: Category
    persona_name: str  # Human-readable name, e.g. "The Explorer"
    description: str
    tips: List[str]
    scores: Dict[str, int]  # category value -> answer count
    assigned_at: datetime
    quiz_response_id: Optional[int] = None
    previous_persona: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.previous_persona != self.persona_name

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'user_id': self.user_id,
            'category': self.category.value,
            'persona': self.persona_name,
            'description': self.description,
            'tips': list(self.tips),
            'scores': dict(self.scores),
            'assigned_at': self.assigned_at.isoformat(),
            'quiz_response_id': self.quiz_response_id,
            'previous_persona': self.previous_persona,
        }


def assign_persona(
    user_id: str,
    responses: Mapping[str, object],
    session: Session = None,
    completed_at: Optional[datetime] = None
) -> PersonaAssignment:
    """
    Score a quiz submission and store the result as the user's persona.

    Args:
        user_id: User who took the quiz
        responses: Raw answers, question id -> selected option
        session: Database session (optional, will create if needed)
        completed_at: Submission timestamp (defaults to now, UTC)

    Returns:
        PersonaAssignment for the submission

    Raises:
        UserNotFound: If the user does not exist
        QuizValidationError: If the submission is incomplete or malformed
    """
    close_session = False
    if session is None:
        session = get_session()
        close_session = True

    try:
        user = get_user(session, user_id)

        try:
            submission = validate_submission(responses)
        except QuizValidationError as exc:
            logger.info("Rejected quiz submission from %s: %s", user_id, exc)
            raise

        result = classify(submission, computed_at=completed_at)
        previous_persona = user.persona

        quiz_response = QuizResponse(
            user_id=user_id,
            responses={qid: category.value for qid, category in submission.items()},
            result=result.persona_name,
            scores=result.scores_by_value(),
            completed_at=result.computed_at
        )
        session.add(quiz_response)

        # The latest submission always overwrites the current persona
        user.persona = result.persona_name
        record_activity(user, now=result.computed_at)

        session.commit()
        session.refresh(quiz_response)

        logger.info(
            "Assigned persona %s to user %s (previous: %s)",
            result.persona_name, user_id, previous_persona
        )

        return PersonaAssignment(
            user_id=user_id,
            category=result.category,
            persona_name=result.persona_name,
            description=PERSONA_DESCRIPTIONS[result.category],
            tips=list(PERSONA_TIPS[result.category]),
            scores=result.scores_by_value(),
            assigned_at=result.computed_at,
            quiz_response_id=quiz_response.id,
            previous_persona=previous_persona
        )

    finally:
        if close_session:
            session.close()
