"""
Tests for L&D dashboard analytics.
"""

from datetime import datetime

from learnpersona.dashboard import (
    persona_distribution_by_department,
    learning_activity_trends,
    user_activity,
    course_completion_rates,
    top_learners,
    organization_summary
)
from learnpersona.ingest.accounts import create_user
from learnpersona.personas.assignment import assign_persona
from learnpersona.recommend import get_courses, start_course, update_progress
from learnpersona.tests.helpers import make_answers


NOW = datetime(2024, 6, 15, 12, 0)


def add_learner(session, username, department, answers=None):
    user = create_user(
        session,
        username=username,
        password="secret123",
        name=username.title(),
        email=f"{username}@example.com",
        department=department
    )
    if answers:
        assign_persona(user.user_id, answers, session=session, completed_at=datetime(2024, 1, 1))
    return user


class TestPersonaDistribution:

    def test_counts_by_department(self, catalog):
        add_learner(catalog, "ann", "Sales", make_answers(creator=10))
        add_learner(catalog, "bob", "Sales", make_answers(creator=10))
        add_learner(catalog, "cat", "Sales", make_answers(thinker=10))
        add_learner(catalog, "dan", "Finance", make_answers(explorer=6, thinker=4))

        assert persona_distribution_by_department(catalog) == {
            "Sales": {"The Creator": 2, "The Thinker": 1},
            "Finance": {"The Explorer": 1},
        }

    def test_skips_users_without_department_or_persona(self, catalog):
        add_learner(catalog, "eve", None, make_answers(creator=10))
        add_learner(catalog, "fay", "HR")

        assert persona_distribution_by_department(catalog) == {}


class TestActivityTrends:

    def test_monthly_course_starts_per_persona(self, catalog):
        courses = get_courses(catalog)
        creator = add_learner(catalog, "gus", "Product", make_answers(creator=10))
        thinker = add_learner(catalog, "hal", "Product", make_answers(thinker=10))

        start_course(creator.user_id, courses[0].id, catalog, now=datetime(2024, 6, 2))
        start_course(creator.user_id, courses[1].id, catalog, now=datetime(2024, 4, 20))
        start_course(thinker.user_id, courses[2].id, catalog, now=datetime(2024, 1, 5))
        start_course(thinker.user_id, courses[3].id, catalog, now=datetime(2023, 11, 30))  # outside window

        trends = learning_activity_trends(catalog, months=6, now=NOW)

        assert list(trends) == ["Explorer", "Connector", "Synthesizer", "Thinker", "Creator"]
        assert trends["Creator"] == [0, 0, 0, 1, 0, 1]
        assert trends["Thinker"] == [1, 0, 0, 0, 0, 0]
        assert trends["Explorer"] == [0] * 6

    def test_window_crosses_year_boundary(self, catalog):
        learner = add_learner(catalog, "ida", "Sales", make_answers(explorer=10))
        start_course(learner.user_id, get_courses(catalog)[0].id, catalog, now=datetime(2023, 12, 10))

        trends = learning_activity_trends(catalog, months=3, now=datetime(2024, 2, 1))

        assert trends["Explorer"] == [1, 0, 0]


class TestActivityFeed:

    def test_newest_first(self, catalog):
        courses = get_courses(catalog)
        learner = add_learner(catalog, "jon", "HR", make_answers(connector=10))
        first = start_course(learner.user_id, courses[0].id, catalog, now=datetime(2024, 3, 1))
        start_course(learner.user_id, courses[1].id, catalog, now=datetime(2024, 3, 5))
        update_progress(first.id, catalog, completed=True, now=datetime(2024, 3, 10))

        feed = user_activity(catalog)

        assert [item["activity_type"] for item in feed] == ["completed", "started"]
        assert feed[0]["course_title"] == courses[0].title
        assert feed[0]["timestamp"] == datetime(2024, 3, 10)
        assert len(user_activity(catalog, limit=1)) == 1


class TestCompletionAndLearners:

    def test_course_completion_rates(self, catalog):
        courses = get_courses(catalog)
        a = add_learner(catalog, "kim", "Sales", make_answers(creator=10))
        b = add_learner(catalog, "lee", "Sales", make_answers(creator=10))
        rec = start_course(a.user_id, courses[0].id, catalog)
        start_course(b.user_id, courses[0].id, catalog)
        update_progress(rec.id, catalog, completed=True)

        rates = {row["course_id"]: row for row in course_completion_rates(catalog)}

        assert rates[courses[0].id]["enrollments"] == 2
        assert rates[courses[0].id]["completions"] == 1
        assert rates[courses[0].id]["completion_rate"] == 50.0
        assert rates[courses[1].id]["completion_rate"] == 0.0

    def test_top_learners(self, catalog, ld_user):
        courses = get_courses(catalog)
        busy = add_learner(catalog, "max", "Sales", make_answers(creator=10))
        idle = add_learner(catalog, "ned", "Sales", make_answers(creator=10))
        for course in courses[:2]:
            rec = start_course(busy.user_id, course.id, catalog)
            update_progress(rec.id, catalog, completed=True)

        learners = top_learners(catalog, limit=5)

        assert learners[0]["user_id"] == busy.user_id
        assert learners[0]["completed_courses"] == 2
        assert ld_user.user_id not in [row["user_id"] for row in learners]
        assert idle.user_id in [row["user_id"] for row in learners]

    def test_organization_summary(self, catalog, ld_user):
        learner = add_learner(catalog, "oli", "Sales", make_answers(creator=10))
        add_learner(catalog, "pam", "Sales")
        rec = start_course(learner.user_id, get_courses(catalog)[0].id, catalog)
        update_progress(rec.id, catalog, completed=True)

        summary = organization_summary(catalog)

        assert summary == {
            "total_users": 3,
            "learners": 2,
            "learners_with_persona": 1,
            "quiz_submissions": 1,
            "enrollments": 1,
            "completions": 1,
            "completion_rate": 100.0,
        }
