"""
Recommendation Engine

Recommendations are always derived from the user's current persona, so a new
quiz result takes effect on the next request.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from sqlalchemy.orm import Session

from learnpersona.ingest.lookup import get_user
from learnpersona.ingest.schema import Course, LearningStrategy, UserProgress
from .catalog import get_courses_by_persona, get_strategies_by_persona


logger = logging.getLogger(__name__)


class PersonaRequiredError(ValueError):
    """The user has not taken the persona quiz yet."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("User has no persona defined")


@dataclass
class UserRecommendations:
    """Courses and strategies recommended for one user."""
    user_id: str
    persona: str
    courses: List[Course] = field(default_factory=list)
    strategies: List[LearningStrategy] = field(default_factory=list)


def recommended_courses(user_id: str, session: Session) -> List[Course]:
    """
    Courses for the user's persona, excluding ones already completed.

    Raises:
        UserNotFound: If the user does not exist
        PersonaRequiredError: If the user has no persona yet
    """
    user = get_user(session, user_id)
    if not user.persona:
        raise PersonaRequiredError(user_id)

    completed_ids = {
        row.course_id for row in session.query(UserProgress).filter(
            UserProgress.user_id == user_id,
            UserProgress.completed.is_(True)
        )
    }
    return [c for c in get_courses_by_persona(session, user.persona) if c.id not in completed_ids]


def recommended_strategies(user_id: str, session: Session) -> List[LearningStrategy]:
    """
    Learning strategies for the user's persona.

    Raises:
        UserNotFound: If the user does not exist
        PersonaRequiredError: If the user has no persona yet
    """
    user = get_user(session, user_id)
    if not user.persona:
        raise PersonaRequiredError(user_id)
    return get_strategies_by_persona(session, user.persona)


def recommend_for_user(user_id: str, session: Session) -> UserRecommendations:
    """Courses and strategies for the user's current persona."""
    courses = recommended_courses(user_id, session)
    strategies = recommended_strategies(user_id, session)
    persona = get_user(session, user_id).persona

    logger.debug(
        "Recommending %d courses and %d strategies to %s (%s)",
        len(courses), len(strategies), user_id, persona
    )
    return UserRecommendations(user_id=user_id, persona=persona, courses=courses, strategies=strategies)
