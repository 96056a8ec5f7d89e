"""
L&D Dashboard Module

Aggregate analytics over the organization for L&D professionals.
"""

from .analytics import (
    persona_distribution_by_department,
    learning_activity_trends,
    user_activity,
    course_completion_rates,
    top_learners,
    organization_summary
)

__all__ = [
    'persona_distribution_by_department',
    'learning_activity_trends',
    'user_activity',
    'course_completion_rates',
    'top_learners',
    'organization_summary'
]
