"""
Record Lookups

Fetch-or-raise helpers shared by the domain modules.
"""

from sqlalchemy.orm import Session

from learnpersona.ingest.schema import User, Course, UserProgress


class UserNotFound(LookupError):
    """No user with the given id."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class CourseNotFound(LookupError):
    """No course with the given id."""

    def __init__(self, course_id: int):
        self.course_id = course_id
        super().__init__(f"Course {course_id} not found")


class ProgressNotFound(LookupError):
    """No progress record with the given id."""

    def __init__(self, progress_id: int):
        self.progress_id = progress_id
        super().__init__(f"Progress record {progress_id} not found")


def get_user(session: Session, user_id: str) -> User:
    user = session.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise UserNotFound(user_id)
    return user


def get_course(session: Session, course_id: int) -> Course:
    course = session.query(Course).filter(Course.id == course_id).first()
    if not course:
        raise CourseNotFound(course_id)
    return course


def get_progress(session: Session, progress_id: int) -> UserProgress:
    record = session.query(UserProgress).filter(UserProgress.id == progress_id).first()
    if not record:
        raise ProgressNotFound(progress_id)
    return record
