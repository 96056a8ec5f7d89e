"""
Public API Endpoints

Learner-facing API endpoints for LearnPersona.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from learnpersona.ingest.accounts import create_user, authenticate, DuplicateUserError
from learnpersona.ingest.database import get_session
from learnpersona.ingest.lookup import UserNotFound, CourseNotFound, ProgressNotFound, get_user
from learnpersona.personas import (
    Category, CATEGORY_ORDER, QUESTION_BANK, persona_info,
    assign_persona, get_quiz_history, get_persona_changes
)
from learnpersona.recommend import (
    get_courses, get_course, get_courses_by_persona,
    get_strategies, get_strategies_by_persona,
    recommended_courses, recommended_strategies,
    start_course, update_progress, get_user_progress
)
from learnpersona.api.models import (
    UserCreate, LoginRequest, UserResponse, PersonaInfo, QuestionResponse,
    QuizSubmit, QuizResultResponse, QuizHistoryItem,
    CourseResponse, StrategyResponse,
    ProgressStart, ProgressUpdate, ProgressResponse, ProfileResponse
)
from learnpersona.api.exceptions import (
    UserNotFoundError, CourseNotFoundError, ProgressNotFoundError, InvalidCredentialsError
)


router = APIRouter(prefix="/api", tags=["public"])


def get_db_session() -> Session:
    """Dependency to get database session."""
    session = get_session()
    try:
        yield session
    finally:
        session.close()


def _parse_persona(persona: str) -> Category:
    try:
        return Category.parse(persona)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown persona {persona}")


# Accounts

@router.post("/register", response_model=UserResponse, status_code=201)
def register(
    user_data: UserCreate,
    session: Session = Depends(get_db_session)
) -> UserResponse:
    """
    Register a learner or L&D professional.

    Raises:
        HTTPException: If the username or email already exists
    """
    try:
        user = create_user(
            session,
            username=user_data.username,
            password=user_data.password,
            name=user_data.name,
            email=user_data.email,
            department=user_data.department,
            role=user_data.role
        )
    except DuplicateUserError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
def login(
    credentials: LoginRequest,
    session: Session = Depends(get_db_session)
) -> UserResponse:
    """Check credentials and return the user."""
    user = authenticate(session, credentials.username, credentials.password)
    if not user:
        raise InvalidCredentialsError()
    return UserResponse.model_validate(user)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user_detail(
    user_id: str,
    session: Session = Depends(get_db_session)
) -> UserResponse:
    """Get a user by id."""
    try:
        user = get_user(session, user_id)
    except UserNotFound:
        raise UserNotFoundError(user_id)
    return UserResponse.model_validate(user)


# Personas and quiz

@router.get("/personas", response_model=List[PersonaInfo])
def list_personas() -> List[PersonaInfo]:
    """The five learning personas, in tie-break order."""
    return [PersonaInfo(**persona_info(category)) for category in CATEGORY_ORDER]


@router.get("/quiz/questions", response_model=List[QuestionResponse])
def list_questions() -> List[QuestionResponse]:
    """The persona quiz question bank."""
    return [QuestionResponse(**question.to_dict()) for question in QUESTION_BANK]


@router.post("/quiz/submit", response_model=QuizResultResponse, status_code=201)
def submit_quiz(
    submission: QuizSubmit,
    session: Session = Depends(get_db_session)
) -> QuizResultResponse:
    """
    Score a quiz submission and store the result as the user's persona.

    Incomplete or malformed submissions are rejected with 400 before scoring.

    Raises:
        UserNotFoundError: If user not found
    """
    try:
        assignment = assign_persona(
            user_id=submission.user_id,
            responses=submission.responses,
            session=session
        )
    except UserNotFound:
        raise UserNotFoundError(submission.user_id)

    return QuizResultResponse(
        quiz_response_id=assignment.quiz_response_id,
        user_id=assignment.user_id,
        category=assignment.category.value,
        persona=assignment.persona_name,
        description=assignment.description,
        tips=assignment.tips,
        scores=assignment.scores,
        completed_at=assignment.assigned_at,
        previous_persona=assignment.previous_persona
    )


@router.get("/quiz/history/{user_id}", response_model=List[QuizHistoryItem])
def quiz_history(
    user_id: str,
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of submissions"),
    session: Session = Depends(get_db_session)
) -> List[QuizHistoryItem]:
    """A user's quiz submissions, newest first."""
    try:
        get_user(session, user_id)
    except UserNotFound:
        raise UserNotFoundError(user_id)

    history = get_quiz_history(user_id, session=session, limit=limit)
    return [QuizHistoryItem.model_validate(record) for record in history]


# Courses

@router.get("/courses", response_model=List[CourseResponse])
def list_courses(
    tags: Optional[List[str]] = Query(None, description="Only courses with any of these tags"),
    session: Session = Depends(get_db_session)
) -> List[CourseResponse]:
    """List the course catalog."""
    return [CourseResponse.model_validate(c) for c in get_courses(session, tags=tags)]


@router.get("/courses/persona/{persona}", response_model=List[CourseResponse])
def courses_for_persona(
    persona: str,
    session: Session = Depends(get_db_session)
) -> List[CourseResponse]:
    """Courses suitable for a persona (category value or display name)."""
    category = _parse_persona(persona)
    return [CourseResponse.model_validate(c) for c in get_courses_by_persona(session, category)]


@router.get("/courses/recommended/{user_id}", response_model=List[CourseResponse])
def courses_recommended(
    user_id: str,
    session: Session = Depends(get_db_session)
) -> List[CourseResponse]:
    """
    Courses for the user's current persona, excluding completed ones.

    Returns 400 if the user has not taken the quiz yet.
    """
    try:
        courses = recommended_courses(user_id, session)
    except UserNotFound:
        raise UserNotFoundError(user_id)
    return [CourseResponse.model_validate(c) for c in courses]


@router.get("/courses/{course_id}", response_model=CourseResponse)
def course_detail(
    course_id: int,
    session: Session = Depends(get_db_session)
) -> CourseResponse:
    """Get a course by id."""
    try:
        course = get_course(session, course_id)
    except CourseNotFound:
        raise CourseNotFoundError(course_id)
    return CourseResponse.model_validate(course)


# Learning strategies

@router.get("/strategies", response_model=List[StrategyResponse])
def list_strategies(session: Session = Depends(get_db_session)) -> List[StrategyResponse]:
    """List all learning strategies."""
    return [StrategyResponse.model_validate(s) for s in get_strategies(session)]


@router.get("/strategies/persona/{persona}", response_model=List[StrategyResponse])
def strategies_for_persona(
    persona: str,
    session: Session = Depends(get_db_session)
) -> List[StrategyResponse]:
    """Learning strategies suitable for a persona."""
    category = _parse_persona(persona)
    return [StrategyResponse.model_validate(s) for s in get_strategies_by_persona(session, category)]


@router.get("/strategies/recommended/{user_id}", response_model=List[StrategyResponse])
def strategies_recommended(
    user_id: str,
    session: Session = Depends(get_db_session)
) -> List[StrategyResponse]:
    """Learning strategies for the user's current persona."""
    try:
        strategies = recommended_strategies(user_id, session)
    except UserNotFound:
        raise UserNotFoundError(user_id)
    return [StrategyResponse.model_validate(s) for s in strategies]


# Progress

@router.post("/progress/start", response_model=ProgressResponse, status_code=201)
def progress_start(
    data: ProgressStart,
    session: Session = Depends(get_db_session)
) -> ProgressResponse:
    """Start a course."""
    try:
        record = start_course(data.user_id, data.course_id, session)
    except UserNotFound:
        raise UserNotFoundError(data.user_id)
    except CourseNotFound:
        raise CourseNotFoundError(data.course_id)
    return ProgressResponse.model_validate(record)


@router.put("/progress/{progress_id}", response_model=ProgressResponse)
def progress_update(
    progress_id: int,
    data: ProgressUpdate,
    session: Session = Depends(get_db_session)
) -> ProgressResponse:
    """Update progress on a course, or mark it completed."""
    try:
        record = update_progress(
            progress_id,
            session,
            progress=data.progress,
            completed=data.completed
        )
    except ProgressNotFound:
        raise ProgressNotFoundError(progress_id)
    return ProgressResponse.model_validate(record)


@router.get("/progress/{user_id}", response_model=List[ProgressResponse])
def progress_list(
    user_id: str,
    session: Session = Depends(get_db_session)
) -> List[ProgressResponse]:
    """A user's course progress, most recently started first."""
    try:
        records = get_user_progress(user_id, session)
    except UserNotFound:
        raise UserNotFoundError(user_id)
    return [ProgressResponse.model_validate(r) for r in records]


# Profile

@router.get("/profile/{user_id}", response_model=ProfileResponse)
def get_profile(
    user_id: str,
    session: Session = Depends(get_db_session)
) -> ProfileResponse:
    """
    Get a learner profile.

    Returns:
        - User info
        - Current persona with description and tips
        - Latest quiz submission and persona changes
        - Course counts
    """
    try:
        user = get_user(session, user_id)
    except UserNotFound:
        raise UserNotFoundError(user_id)

    history = get_quiz_history(user_id, session=session)
    records = get_user_progress(user_id, session)

    persona = PersonaInfo(**persona_info(Category.parse(user.persona))) if user.persona else None
    completed = sum(1 for r in records if r.completed)

    return ProfileResponse(
        user=UserResponse.model_validate(user),
        persona=persona,
        latest_quiz=QuizHistoryItem.model_validate(history[0]) if history else None,
        persona_changes=get_persona_changes(user_id, session=session),
        courses_in_progress=len(records) - completed,
        courses_completed=completed
    )
