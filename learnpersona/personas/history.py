"""
Quiz History

Retrieve past quiz submissions and the persona changes they caused.
"""

from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from learnpersona.ingest.database import get_session
from learnpersona.ingest.schema import QuizResponse


def get_quiz_history(
    user_id: str,
    session: Session = None,
    limit: Optional[int] = None
) -> List[QuizResponse]:
    """
    Retrieve quiz submissions for a user.

    Args:
        user_id: User ID to get history for
        session: Database session (optional)
        limit: Maximum number of records to return (None for all)

    Returns:
        List of QuizResponse records, newest first
    """
    close_session = False
    if session is None:
        session = get_session()
        close_session = True

    try:
        query = session.query(QuizResponse).filter(
            QuizResponse.user_id == user_id
        ).order_by(desc(QuizResponse.completed_at), desc(QuizResponse.id))

        if limit is not None:
            query = query.limit(limit)

        return query.all()

    finally:
        if close_session:
            session.close()


def get_latest_quiz_response(user_id: str, session: Session = None) -> Optional[QuizResponse]:
    """Most recent quiz submission for a user, or None."""
    history = get_quiz_history(user_id, session=session, limit=1)
    return history[0] if history else None


def get_persona_changes(user_id: str, session: Session = None) -> List[dict]:
    """
    Get persona transitions over time.

    Args:
        user_id: User ID
        session: Database session (optional)

    Returns:
        List of dicts describing each change, oldest first
    """
    history = get_quiz_history(user_id, session=session)

    changes = []
    prev_persona = None

    for record in reversed(history):  # Process oldest to newest
        if prev_persona is None:
            prev_persona = record.result

        if record.result != prev_persona:
            changes.append({
                'from_persona': prev_persona,
                'to_persona': record.result,
                'changed_at': record.completed_at,
                'scores': record.scores
            })
            prev_persona = record.result

    return changes
