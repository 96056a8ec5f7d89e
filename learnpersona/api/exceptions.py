"""
Custom Exceptions for LearnPersona API
"""

from fastapi import HTTPException, status


class UserNotFoundError(HTTPException):
    """User not found."""

    def __init__(self, user_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {user_id} not found"
        )


class CourseNotFoundError(HTTPException):
    """Course not found."""

    def __init__(self, course_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Course {course_id} not found"
        )


class ProgressNotFoundError(HTTPException):
    """Progress record not found."""

    def __init__(self, progress_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Progress record {progress_id} not found"
        )


class InvalidCredentialsError(HTTPException):
    """Username or password did not match."""

    def __init__(self, detail: str = "Invalid username or password"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail
        )


class LDRoleRequiredError(HTTPException):
    """Requester is not an L&D professional."""

    def __init__(self, detail: str = "L&D professional role required"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )
