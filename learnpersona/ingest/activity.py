"""
Learner Activity Tracking

Daily learning streaks: activity on the same calendar day keeps the streak,
activity on the following day extends it, and a longer gap restarts it.
"""

from datetime import datetime
from typing import Optional

from learnpersona.ingest.schema import User


def record_activity(user: User, now: Optional[datetime] = None) -> int:
    """
    Update a user's streak and last-active timestamp.

    Does not commit; the caller owns the session.

    Args:
        user: User record to update
        now: Activity timestamp (defaults to now, UTC)

    Returns:
        The updated streak count
    """
    now = now or datetime.utcnow()
    last = user.last_active

    if last is None or not user.streak_count:
        user.streak_count = 1
    else:
        gap_days = (now.date() - last.date()).days
        if gap_days == 1:
            user.streak_count += 1
        elif gap_days > 1:
            user.streak_count = 1
        # gap_days <= 0: already active today (or clock skew), streak unchanged

    if last is None or now > last:
        user.last_active = now
    return user.streak_count
