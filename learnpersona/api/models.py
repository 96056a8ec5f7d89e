"""
Pydantic Models for API Request/Response
"""

from datetime import datetime
from typing import List, Optional, Dict

from pydantic import BaseModel, Field


# Request Models

class UserCreate(BaseModel):
    """Request model for registering a user."""
    username: str = Field(..., min_length=3, description="Unique login name")
    password: str = Field(..., min_length=6, description="Password")
    name: str = Field(..., min_length=1, description="User's name")
    email: str = Field(..., description="User's email address", pattern=r'^[^@]+@[^@]+\.[^@]+$')
    department: Optional[str] = Field(None, description="Department (optional)")
    role: str = Field("learner", pattern=r'^(learner|ld_professional)$', description="learner or ld_professional")


class LoginRequest(BaseModel):
    """Request model for logging in."""
    username: str
    password: str


class QuizSubmit(BaseModel):
    """Request model for a quiz submission."""
    user_id: str = Field(..., description="User ID")
    responses: Dict[str, Optional[str]] = Field(
        ..., description="Question id -> selected option (persona category)"
    )


class ProgressStart(BaseModel):
    """Request model for starting a course."""
    user_id: str = Field(..., description="User ID")
    course_id: int = Field(..., description="Course ID")


class ProgressUpdate(BaseModel):
    """Request model for updating course progress."""
    progress: Optional[int] = Field(None, ge=0, le=100, description="Progress percent (0-100)")
    completed: Optional[bool] = Field(None, description="Mark course completed")


class CourseCreate(BaseModel):
    """Request model for publishing a course."""
    title: str
    description: str
    url: str
    image_url: Optional[str] = None
    provider: Optional[str] = None
    tags: Optional[List[str]] = None
    suitable_personas: Optional[List[str]] = None
    difficulty: Optional[str] = None
    duration: Optional[str] = None


class StrategyCreate(BaseModel):
    """Request model for publishing a learning strategy."""
    title: str
    description: str
    content: str
    type: str
    suitable_personas: Optional[List[str]] = None


# Response Models

class UserResponse(BaseModel):
    """Response model for user data."""
    user_id: str
    username: str
    name: str
    email: str
    department: Optional[str]
    role: str
    persona: Optional[str]
    streak_count: int
    last_active: Optional[datetime]
    completed_courses: int
    progress: int
    created_at: datetime

    class Config:
        from_attributes = True


class PersonaInfo(BaseModel):
    """A learning persona and its tips."""
    category: str
    name: str
    description: str
    tips: List[str]


class QuestionOption(BaseModel):
    value: str
    label: str


class QuestionResponse(BaseModel):
    """A quiz question."""
    id: str
    question: str
    options: List[QuestionOption]


class QuizResultResponse(BaseModel):
    """Response model for a scored quiz submission."""
    quiz_response_id: Optional[int]
    user_id: str
    category: str
    persona: str
    description: str
    tips: List[str]
    scores: Dict[str, int]
    completed_at: datetime
    previous_persona: Optional[str] = None


class QuizHistoryItem(BaseModel):
    """A stored quiz submission."""
    id: int
    user_id: str
    responses: Dict[str, str]
    result: str
    scores: Optional[Dict[str, int]] = None
    completed_at: datetime

    class Config:
        from_attributes = True


class CourseResponse(BaseModel):
    """Response model for a course."""
    id: int
    title: str
    description: str
    url: str
    image_url: Optional[str] = None
    provider: Optional[str] = None
    tags: Optional[List[str]] = None
    suitable_personas: Optional[List[str]] = None
    difficulty: Optional[str] = None
    duration: Optional[str] = None

    class Config:
        from_attributes = True


class StrategyResponse(BaseModel):
    """Response model for a learning strategy."""
    id: int
    title: str
    description: str
    content: str
    suitable_personas: Optional[List[str]] = None
    type: str

    class Config:
        from_attributes = True


class ProgressResponse(BaseModel):
    """Response model for a course progress record."""
    id: int
    user_id: str
    course_id: int
    progress: int
    completed: bool
    started_at: datetime
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileResponse(BaseModel):
    """Response model for a learner profile."""
    user: UserResponse
    persona: Optional[PersonaInfo] = None
    latest_quiz: Optional[QuizHistoryItem] = None
    persona_changes: List[Dict] = Field(default_factory=list)
    courses_in_progress: int
    courses_completed: int


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    detail: Optional[str] = None


# L&D Dashboard Models

class ActivityItem(BaseModel):
    user_id: str
    user_name: str
    user_department: Optional[str]
    course_id: int
    course_title: str
    activity_type: str  # started, completed
    timestamp: datetime


class CourseCompletion(BaseModel):
    course_id: int
    title: str
    enrollments: int
    completions: int
    completion_rate: float


class LearnerSummary(BaseModel):
    user_id: str
    name: str
    department: Optional[str]
    persona: Optional[str]
    completed_courses: int
    streak_count: int
    progress: int


class OrganizationSummary(BaseModel):
    total_users: int
    learners: int
    learners_with_persona: int
    quiz_submissions: int
    enrollments: int
    completions: int
    completion_rate: float
