"""
Database schema definitions for LearnPersona.
"""

from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime,
    ForeignKey, Text, JSON, Index
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


# User roles
ROLE_LEARNER = 'learner'
ROLE_LD_PROFESSIONAL = 'ld_professional'
ROLES = (ROLE_LEARNER, ROLE_LD_PROFESSIONAL)


class User(Base):
    """User table - learners and L&D professionals."""
    __tablename__ = 'users'
    __table_args__ = (
        Index('idx_users_department', 'department'),
        Index('idx_users_persona', 'persona'),
    )

    user_id = Column(String, primary_key=True)
    username = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    department = Column(String, nullable=True)
    role = Column(String, default=ROLE_LEARNER, nullable=False)  # learner, ld_professional
    persona = Column(String, nullable=True)  # Display name of current persona, e.g. "The Explorer"
    streak_count = Column(Integer, default=0, nullable=False)
    last_active = Column(DateTime, nullable=True)
    completed_courses = Column(Integer, default=0, nullable=False)
    progress = Column(Integer, default=0, nullable=False)  # Mean course progress (0-100)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    quiz_responses = relationship("QuizResponse", back_populates="user", cascade="all, delete-orphan")
    course_progress = relationship("UserProgress", back_populates="user", cascade="all, delete-orphan")


class QuizResponse(Base):
    """Quiz response table - every persona quiz submission."""
    __tablename__ = 'quiz_responses'
    __table_args__ = (
        Index('idx_quiz_responses_user', 'user_id'),
        Index('idx_quiz_responses_completed', 'completed_at'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey('users.user_id'), nullable=False)
    responses = Column(JSON, nullable=False)  # question_id -> category value
    result = Column(String, nullable=False)  # Persona display name
    scores = Column(JSON, nullable=True)  # category value -> count
    completed_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="quiz_responses")


class Course(Base):
    """Course catalog table."""
    __tablename__ = 'courses'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    url = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    provider = Column(String, nullable=True)
    tags = Column(JSON, nullable=True)  # List of tag strings
    suitable_personas = Column(JSON, nullable=True)  # List of persona display names
    difficulty = Column(String, nullable=True)  # Beginner, Intermediate, Advanced
    duration = Column(String, nullable=True)

    # Relationships
    enrollments = relationship("UserProgress", back_populates="course", cascade="all, delete-orphan")


class LearningStrategy(Base):
    """Learning strategy table - study techniques matched to personas."""
    __tablename__ = 'learning_strategies'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    content = Column(Text, nullable=False)  # Step-by-step instructions
    suitable_personas = Column(JSON, nullable=True)
    type = Column(String, nullable=False)  # Organization, Comprehension, Retention, ...


class UserProgress(Base):
    """User progress table - one row per course a user has started."""
    __tablename__ = 'user_progress'
    __table_args__ = (
        Index('idx_user_progress_user', 'user_id'),
        Index('idx_user_progress_course', 'course_id'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey('users.user_id'), nullable=False)
    course_id = Column(Integer, ForeignKey('courses.id'), nullable=False)
    progress = Column(Integer, default=0, nullable=False)  # 0-100
    completed = Column(Boolean, default=False, nullable=False)
    started_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    first_completed_at = Column(DateTime, nullable=True)  # Never cleared by reopening

    # Relationships
    user = relationship("User", back_populates="course_progress")
    course = relationship("Course", back_populates="enrollments")
