"""
Demo data seeding.

Loads the course catalog and learning strategies, an L&D professional
account, and a simulated organization of learners with quiz results and
course activity.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

from learnpersona.config import get_settings
from learnpersona.ingest.accounts import create_user
from learnpersona.ingest.catalog_data import SAMPLE_COURSES, SAMPLE_STRATEGIES
from learnpersona.ingest.generators import SyntheticOrganizationGenerator
from learnpersona.ingest.schema import Course, LearningStrategy, User, ROLE_LD_PROFESSIONAL, ROLE_LEARNER
from learnpersona.personas.assignment import assign_persona
from learnpersona.recommend.progress import start_course, update_progress


logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"
LD_USERNAME = "ld_admin"


def seed_catalog(session: Session) -> int:
    """
    Load sample courses and strategies if the catalog is empty.

    Returns:
        Number of records added
    """
    if session.query(Course).count() or session.query(LearningStrategy).count():
        logger.info("Catalog already present, skipping")
        return 0

    for course in SAMPLE_COURSES:
        session.add(Course(**course))
    for strategy in SAMPLE_STRATEGIES:
        session.add(LearningStrategy(**strategy))
    session.commit()

    added = len(SAMPLE_COURSES) + len(SAMPLE_STRATEGIES)
    logger.info("Seeded %d courses and %d strategies", len(SAMPLE_COURSES), len(SAMPLE_STRATEGIES))
    return added


def seed_organization(
    session: Session,
    num_users: int = 40,
    seed: int = 42,
    now: Optional[datetime] = None
) -> int:
    """
    Create a simulated organization of ``num_users`` learners.

    Every learner takes the quiz through the regular assignment path, so the
    stored personas come from the classifier. The generator is replayed in
    full on every run and only missing learners, personas and enrollments are
    added, so a run that stopped partway is completed by the next one.

    Returns:
        Number of learners created
    """
    if session.query(User).filter(User.role == ROLE_LEARNER).count() >= num_users:
        logger.info("Organization already present, skipping")
        return 0

    generator = SyntheticOrganizationGenerator(seed=seed, now=now)
    # One hash for every demo account keeps seeding fast
    password_hash = generate_password_hash(DEMO_PASSWORD)

    if not session.query(User).filter(User.username == LD_USERNAME).first():
        create_user(
            session,
            username=LD_USERNAME,
            password=DEMO_PASSWORD,
            name="L&D Administrator",
            email="ld_admin@example.com",
            department="HR",
            role=ROLE_LD_PROFESSIONAL,
            password_hash=password_hash
        )

    course_ids = [course_id for (course_id,) in session.query(Course.id).order_by(Course.id)]

    created = 0
    for number in range(1, num_users + 1):
        profile = generator.generate_user(number)
        taken_at = generator.quiz_time()
        answers = generator.generate_answers(generator.latent_persona())
        plan = generator.enrollment_plan(course_ids, taken_at)

        user = session.query(User).filter(User.username == profile["username"]).first()
        if user is None:
            user = create_user(session, password=DEMO_PASSWORD, password_hash=password_hash, **profile)
            created += 1
        if not user.persona:
            assign_persona(user.user_id, answers, session=session, completed_at=taken_at)

        for step in plan:
            record = start_course(user.user_id, step["course_id"], session, now=step["started_at"])
            finished_at = min(step["started_at"] + timedelta(days=14), generator.now)
            update_progress(
                record.id,
                session,
                progress=step["progress"],
                completed=step["completed"],
                now=finished_at
            )

    logger.info("Seeded simulated organization: %d new learners, %d total", created, num_users)
    return created


def seed_demo_data(session: Session, num_users: Optional[int] = None, seed: Optional[int] = None) -> None:
    """Seed catalog and organization using configured sizes."""
    settings = get_settings()
    seed_catalog(session)
    seed_organization(
        session,
        num_users=settings.demo_org_size if num_users is None else num_users,
        seed=settings.demo_seed if seed is None else seed
    )
