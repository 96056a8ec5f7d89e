"""
L&D Dashboard API Endpoints

Organization-wide analytics and content publishing for L&D professionals.
Every endpoint takes a ``requester_id`` that must belong to an L&D
professional.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from learnpersona.ingest.lookup import UserNotFound, get_user
from learnpersona.ingest.schema import User, ROLE_LD_PROFESSIONAL
from learnpersona.dashboard import (
    persona_distribution_by_department,
    learning_activity_trends,
    user_activity,
    course_completion_rates,
    top_learners,
    organization_summary
)
from learnpersona.recommend import create_course, create_strategy
from learnpersona.api.public import get_db_session
from learnpersona.api.models import (
    ActivityItem, CourseCompletion, LearnerSummary, OrganizationSummary,
    CourseCreate, CourseResponse, StrategyCreate, StrategyResponse
)
from learnpersona.api.exceptions import UserNotFoundError, LDRoleRequiredError


router = APIRouter(prefix="/api/dashboard", tags=["ld-dashboard"])


def require_ld_professional(
    requester_id: str = Query(..., description="User ID of the L&D professional making the request"),
    session: Session = Depends(get_db_session)
) -> User:
    """Dependency that resolves the requester and checks the L&D role."""
    try:
        requester = get_user(session, requester_id)
    except UserNotFound:
        raise UserNotFoundError(requester_id)
    if requester.role != ROLE_LD_PROFESSIONAL:
        raise LDRoleRequiredError()
    return requester


@router.get("/personas", response_model=Dict[str, Dict[str, int]])
def persona_distribution(
    requester: User = Depends(require_ld_professional),
    session: Session = Depends(get_db_session)
) -> Dict[str, Dict[str, int]]:
    """Persona counts per department."""
    return persona_distribution_by_department(session)


@router.get("/trends", response_model=Dict[str, List[int]])
def activity_trends(
    months: int = Query(6, ge=1, le=24, description="Number of months to report"),
    requester: User = Depends(require_ld_professional),
    session: Session = Depends(get_db_session)
) -> Dict[str, List[int]]:
    """Monthly course starts per persona, oldest month first."""
    return learning_activity_trends(session, months=months)


@router.get("/activity", response_model=List[ActivityItem])
def recent_activity(
    limit: int = Query(50, ge=1, le=500),
    requester: User = Depends(require_ld_professional),
    session: Session = Depends(get_db_session)
) -> List[ActivityItem]:
    """Recent course starts and completions, newest first."""
    return [ActivityItem(**item) for item in user_activity(session, limit=limit)]


@router.get("/courses", response_model=List[CourseCompletion])
def completion_rates(
    requester: User = Depends(require_ld_professional),
    session: Session = Depends(get_db_session)
) -> List[CourseCompletion]:
    """Enrollment and completion figures for each course."""
    return [CourseCompletion(**row) for row in course_completion_rates(session)]


@router.get("/learners/top", response_model=List[LearnerSummary])
def learners_top(
    limit: int = Query(5, ge=1, le=100),
    requester: User = Depends(require_ld_professional),
    session: Session = Depends(get_db_session)
) -> List[LearnerSummary]:
    """Learners with the most completed courses."""
    return [LearnerSummary(**row) for row in top_learners(session, limit=limit)]


@router.get("/summary", response_model=OrganizationSummary)
def summary(
    requester: User = Depends(require_ld_professional),
    session: Session = Depends(get_db_session)
) -> OrganizationSummary:
    """Headline organization totals."""
    return OrganizationSummary(**organization_summary(session))


@router.post("/courses", response_model=CourseResponse, status_code=201)
def publish_course(
    course: CourseCreate,
    requester: User = Depends(require_ld_professional),
    session: Session = Depends(get_db_session)
) -> CourseResponse:
    """Publish a course to the catalog."""
    created = create_course(session, **course.model_dump())
    return CourseResponse.model_validate(created)


@router.post("/strategies", response_model=StrategyResponse, status_code=201)
def publish_strategy(
    strategy: StrategyCreate,
    requester: User = Depends(require_ld_professional),
    session: Session = Depends(get_db_session)
) -> StrategyResponse:
    """Publish a learning strategy."""
    created = create_strategy(session, **strategy.model_dump())
    return StrategyResponse.model_validate(created)
