"""
User Accounts

Registration and password checks for learners and L&D professionals.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from learnpersona.ingest.schema import User, ROLES, ROLE_LEARNER


class DuplicateUserError(ValueError):
    """Username or email is already registered."""


def new_user_id() -> str:
    return f"user_{uuid.uuid4().hex[:12]}"


def create_user(
    session: Session,
    username: str,
    password: str,
    name: str,
    email: str,
    department: Optional[str] = None,
    role: str = ROLE_LEARNER,
    password_hash: Optional[str] = None,
    commit: bool = True
) -> User:
    """
    Register a user.

    Args:
        session: Database session
        username: Unique login name
        password: Plain-text password (hashed before storage)
        name: Display name
        email: Unique email address
        department: Department for dashboard grouping (optional)
        role: 'learner' or 'ld_professional'
        password_hash: Precomputed hash to store instead of hashing ``password``
        commit: Commit the session after adding the user

    Raises:
        DuplicateUserError: If the username or email is taken
        ValueError: If the role is unknown
    """
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role}")

    if session.query(User).filter(User.username == username).first():
        raise DuplicateUserError(f"Username {username} already exists")
    if session.query(User).filter(User.email == email).first():
        raise DuplicateUserError(f"User with email {email} already exists")

    user = User(
        user_id=new_user_id(),
        username=username,
        password_hash=password_hash or generate_password_hash(password),
        name=name,
        email=email,
        department=department or None,
        role=role,
        created_at=datetime.utcnow()
    )
    session.add(user)
    if commit:
        session.commit()
        session.refresh(user)
    else:
        session.flush()
    return user


def authenticate(session: Session, username: str, password: str) -> Optional[User]:
    """Return the user if the credentials match, else None."""
    user = session.query(User).filter(User.username == username).first()
    if user and check_password_hash(user.password_hash, password):
        return user
    return None
