"""
Course Progress

Start courses, update progress, and keep the user's aggregate counters
(completed courses, overall progress, streak) in step.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from learnpersona.ingest.activity import record_activity
from learnpersona.ingest.lookup import get_user, get_course, get_progress
from learnpersona.ingest.schema import User, UserProgress


logger = logging.getLogger(__name__)


def _refresh_user_progress(user: User, session: Session) -> None:
    """Set the user's overall progress to the mean over their courses."""
    records = session.query(UserProgress).filter(UserProgress.user_id == user.user_id).all()
    if records:
        user.progress = round(sum(r.progress for r in records) / len(records))
    else:
        user.progress = 0


def start_course(
    user_id: str,
    course_id: int,
    session: Session,
    now: Optional[datetime] = None
) -> UserProgress:
    """
    Record that a user started a course.

    Starting a course the user already has in progress returns the existing
    record.

    Raises:
        UserNotFound: If the user does not exist
        CourseNotFound: If the course does not exist
    """
    now = now or datetime.utcnow()
    user = get_user(session, user_id)
    get_course(session, course_id)

    existing = session.query(UserProgress).filter(
        UserProgress.user_id == user_id,
        UserProgress.course_id == course_id
    ).first()
    if existing:
        return existing

    record = UserProgress(
        user_id=user_id,
        course_id=course_id,
        progress=0,
        completed=False,
        started_at=now
    )
    session.add(record)
    session.flush()

    _refresh_user_progress(user, session)
    record_activity(user, now=now)
    session.commit()
    session.refresh(record)

    logger.info("User %s started course %s", user_id, course_id)
    return record


def update_progress(
    progress_id: int,
    session: Session,
    progress: Optional[int] = None,
    completed: Optional[bool] = None,
    now: Optional[datetime] = None
) -> UserProgress:
    """
    Update a progress record.

    Completing a course (``completed=True``, or ``progress=100`` in the same
    call) stamps ``completed_at`` and sets progress to 100. The user's
    completed course count goes up on the first completion only, so a
    reopened course does not count twice.

    Raises:
        ProgressNotFound: If the record does not exist
        ValueError: If progress is outside 0-100
    """
    now = now or datetime.utcnow()
    record = get_progress(session, progress_id)
    user = get_user(session, record.user_id)

    if progress is not None:
        if not 0 <= progress <= 100:
            raise ValueError("Progress must be between 0 and 100")
        record.progress = progress

    # Only a progress value sent in this call can auto-complete
    completing = not record.completed and (
        completed is True or (completed is None and progress == 100)
    )
    if completing:
        record.completed = True
        record.completed_at = now
        record.progress = 100
        if record.first_completed_at is None:
            record.first_completed_at = now
            user.completed_courses = (user.completed_courses or 0) + 1
        logger.info("User %s completed course %s", record.user_id, record.course_id)
    elif completed is False and record.completed:
        # Reopened; completed_courses keeps counting the first completion
        record.completed = False
        record.completed_at = None

    session.flush()
    _refresh_user_progress(user, session)
    record_activity(user, now=now)
    session.commit()
    session.refresh(record)
    return record


def get_user_progress(user_id: str, session: Session) -> List[UserProgress]:
    """All progress records for a user, most recently started first."""
    get_user(session, user_id)
    return session.query(UserProgress).filter(
        UserProgress.user_id == user_id
    ).order_by(UserProgress.started_at.desc(), UserProgress.id.desc()).all()
