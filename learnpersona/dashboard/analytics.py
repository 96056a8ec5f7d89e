"""
L&D Dashboard Analytics

Organization-wide aggregates for L&D professionals: persona mix by
department, learning activity over time, recent activity, course completion
and top learners.
"""

from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from learnpersona.ingest.schema import User, Course, QuizResponse, UserProgress, ROLE_LEARNER
from learnpersona.personas.categories import Category, CATEGORY_ORDER


def _month_start(moment: datetime, months_back: int) -> datetime:
    """First instant of the month ``months_back`` months before ``moment``'s month."""
    total = moment.year * 12 + (moment.month - 1) - months_back
    return datetime(total // 12, total % 12 + 1, 1)


def persona_distribution_by_department(session: Session) -> Dict[str, Dict[str, int]]:
    """
    Count personas within each department.

    Users without a department or persona are skipped.

    Returns:
        {department: {persona display name: count}}
    """
    result: Dict[str, Dict[str, int]] = {}
    users = session.query(User).filter(
        User.department.isnot(None),
        User.persona.isnot(None)
    ).all()

    for user in users:
        department = result.setdefault(user.department, {})
        department[user.persona] = department.get(user.persona, 0) + 1

    return result


def learning_activity_trends(
    session: Session,
    months: int = 6,
    now: Optional[datetime] = None
) -> Dict[str, List[int]]:
    """
    Monthly course starts by learners of each persona.

    Args:
        session: Database session
        months: Number of calendar months to report, ending with the current one
        now: Reference time (defaults to now, UTC)

    Returns:
        {persona short name: [count per month, oldest first]}
    """
    now = now or datetime.utcnow()
    window_start = _month_start(now, months - 1)
    trends = {category.short_name: [0] * months for category in CATEGORY_ORDER}

    rows = session.query(UserProgress.started_at, User.persona).join(
        User, User.user_id == UserProgress.user_id
    ).filter(
        UserProgress.started_at >= window_start,
        UserProgress.started_at <= now,
        User.persona.isnot(None)
    ).all()

    for started_at, persona in rows:
        try:
            category = Category.parse(persona)
        except ValueError:
            continue
        index = (started_at.year - window_start.year) * 12 + (started_at.month - window_start.month)
        if 0 <= index < months:
            trends[category.short_name][index] += 1

    return trends


def user_activity(session: Session, limit: Optional[int] = 50) -> List[dict]:
    """
    Recent started/completed course events, newest first.
    """
    rows = session.query(UserProgress, User, Course).join(
        User, User.user_id == UserProgress.user_id
    ).join(
        Course, Course.id == UserProgress.course_id
    ).all()

    activities = []
    for progress, user, course in rows:
        activities.append({
            'user_id': user.user_id,
            'user_name': user.name,
            'user_department': user.department,
            'course_id': course.id,
            'course_title': course.title,
            'activity_type': 'completed' if progress.completed else 'started',
            'timestamp': progress.completed_at if progress.completed and progress.completed_at else progress.started_at,
        })

    activities.sort(key=lambda a: a['timestamp'], reverse=True)
    return activities[:limit] if limit is not None else activities


def course_completion_rates(session: Session) -> List[dict]:
    """Enrollments, completions and completion rate for each course."""
    enrollments: Dict[int, int] = defaultdict(int)
    completions: Dict[int, int] = defaultdict(int)
    for course_id, completed in session.query(UserProgress.course_id, UserProgress.completed):
        enrollments[course_id] += 1
        if completed:
            completions[course_id] += 1

    rates = []
    for course in session.query(Course).order_by(Course.id):
        enrolled = enrollments.get(course.id, 0)
        done = completions.get(course.id, 0)
        rates.append({
            'course_id': course.id,
            'title': course.title,
            'enrollments': enrolled,
            'completions': done,
            'completion_rate': round(done / enrolled * 100, 1) if enrolled else 0.0,
        })
    return rates


def top_learners(session: Session, limit: int = 5) -> List[dict]:
    """Learners ranked by completed courses, then streak."""
    learners = session.query(User).filter(User.role == ROLE_LEARNER).order_by(
        User.completed_courses.desc(),
        User.streak_count.desc(),
        User.name
    ).limit(limit).all()

    return [
        {
            'user_id': user.user_id,
            'name': user.name,
            'department': user.department,
            'persona': user.persona,
            'completed_courses': user.completed_courses,
            'streak_count': user.streak_count,
            'progress': user.progress,
        }
        for user in learners
    ]


def organization_summary(session: Session) -> dict:
    """Headline totals for the organization."""
    enrollments = session.query(UserProgress).count()
    completions = session.query(UserProgress).filter(UserProgress.completed.is_(True)).count()
    return {
        'total_users': session.query(User).count(),
        'learners': session.query(User).filter(User.role == ROLE_LEARNER).count(),
        'learners_with_persona': session.query(User).filter(
            User.role == ROLE_LEARNER, User.persona.isnot(None)
        ).count(),
        'quiz_submissions': session.query(QuizResponse).count(),
        'enrollments': enrollments,
        'completions': completions,
        'completion_rate': round(completions / enrollments * 100, 1) if enrollments else 0.0,
    }
