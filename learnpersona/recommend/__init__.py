"""
Recommendation Module

Persona-matched courses and learning strategies, plus course progress.
"""

from .catalog import (
    get_courses,
    get_course,
    get_courses_by_persona,
    get_strategies,
    get_strategy,
    get_strategies_by_persona,
    create_course,
    create_strategy
)
from .engine import (
    recommend_for_user,
    recommended_courses,
    recommended_strategies,
    UserRecommendations,
    PersonaRequiredError
)
from .progress import start_course, update_progress, get_user_progress

__all__ = [
    'get_courses',
    'get_course',
    'get_courses_by_persona',
    'get_strategies',
    'get_strategy',
    'get_strategies_by_persona',
    'create_course',
    'create_strategy',
    'recommend_for_user',
    'recommended_courses',
    'recommended_strategies',
    'UserRecommendations',
    'PersonaRequiredError',
    'start_course',
    'update_progress',
    'get_user_progress'
]
