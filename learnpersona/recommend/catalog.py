"""
Course and Strategy Catalog

Lookups over the course catalog and learning strategies, including the
persona filters used for recommendations.
"""

from typing import Iterable, List, Optional, Union

from sqlalchemy.orm import Session

from learnpersona.ingest.lookup import get_course as _get_course
from learnpersona.ingest.schema import Course, LearningStrategy
from learnpersona.personas.categories import Category


def _persona_name(persona: Union[str, Category]) -> str:
    """Normalize a persona value or name to its display name (raises ValueError)."""
    return Category.parse(persona).display_name


def _suits(item, persona_name: str) -> bool:
    return bool(item.suitable_personas) and persona_name in item.suitable_personas


def get_courses(session: Session, tags: Optional[Iterable[str]] = None) -> List[Course]:
    """
    List courses, optionally restricted to those sharing any of ``tags``.

    Tag matching is case-insensitive.
    """
    courses = session.query(Course).order_by(Course.id).all()
    if not tags:
        return courses

    wanted = {tag.strip().lower() for tag in tags if tag and tag.strip()}
    if not wanted:
        return courses
    return [
        course for course in courses
        if course.tags and wanted.intersection(tag.lower() for tag in course.tags)
    ]


def get_course(session: Session, course_id: int) -> Course:
    """Fetch a course by id (raises CourseNotFound)."""
    return _get_course(session, course_id)


def get_courses_by_persona(session: Session, persona: Union[str, Category]) -> List[Course]:
    """Courses suitable for a persona."""
    persona_name = _persona_name(persona)
    return [course for course in get_courses(session) if _suits(course, persona_name)]


def get_strategies(session: Session) -> List[LearningStrategy]:
    """List all learning strategies."""
    return session.query(LearningStrategy).order_by(LearningStrategy.id).all()


def get_strategy(session: Session, strategy_id: int) -> Optional[LearningStrategy]:
    """Fetch a strategy by id, or None."""
    return session.query(LearningStrategy).filter(LearningStrategy.id == strategy_id).first()


def get_strategies_by_persona(session: Session, persona: Union[str, Category]) -> List[LearningStrategy]:
    """Learning strategies suitable for a persona."""
    persona_name = _persona_name(persona)
    return [strategy for strategy in get_strategies(session) if _suits(strategy, persona_name)]


def create_course(
    session: Session,
    title: str,
    description: str,
    url: str,
    image_url: Optional[str] = None,
    provider: Optional[str] = None,
    tags: Optional[List[str]] = None,
    suitable_personas: Optional[List[str]] = None,
    difficulty: Optional[str] = None,
    duration: Optional[str] = None
) -> Course:
    """
    Add a course to the catalog.

    ``suitable_personas`` may name personas by value or display name; they
    are stored as display names.
    """
    course = Course(
        title=title,
        description=description,
        url=url,
        image_url=image_url,
        provider=provider,
        tags=list(tags) if tags else None,
        suitable_personas=[_persona_name(p) for p in suitable_personas] if suitable_personas else None,
        difficulty=difficulty,
        duration=duration
    )
    session.add(course)
    session.commit()
    session.refresh(course)
    return course


def create_strategy(
    session: Session,
    title: str,
    description: str,
    content: str,
    type: str,
    suitable_personas: Optional[List[str]] = None
) -> LearningStrategy:
    """Add a learning strategy."""
    strategy = LearningStrategy(
        title=title,
        description=description,
        content=content,
        type=type,
        suitable_personas=[_persona_name(p) for p in suitable_personas] if suitable_personas else None
    )
    session.add(strategy)
    session.commit()
    session.refresh(strategy)
    return strategy
