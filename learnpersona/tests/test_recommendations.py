"""
Tests for the catalog, recommendations, course progress and streaks.
"""

from datetime import datetime, timedelta

import pytest

from learnpersona.ingest.activity import record_activity
from learnpersona.ingest.catalog_data import SAMPLE_COURSES, SAMPLE_STRATEGIES
from learnpersona.ingest.lookup import CourseNotFound, ProgressNotFound, UserNotFound
from learnpersona.ingest.schema import User
from learnpersona.personas.assignment import assign_persona
from learnpersona.personas.categories import Category
from learnpersona.recommend import (
    get_courses, get_course, get_courses_by_persona,
    get_strategies, get_strategy, get_strategies_by_persona,
    create_course, create_strategy,
    recommend_for_user, recommended_courses, recommended_strategies, PersonaRequiredError,
    start_course, update_progress, get_user_progress
)
from learnpersona.tests.helpers import make_answers


class TestCatalog:

    def test_seeded_catalog(self, catalog):
        assert len(get_courses(catalog)) == len(SAMPLE_COURSES)
        assert len(get_strategies(catalog)) == len(SAMPLE_STRATEGIES)

    def test_every_persona_has_courses_and_strategies(self, catalog):
        for category in Category:
            assert get_courses_by_persona(catalog, category), category
            assert get_strategies_by_persona(catalog, category), category

    def test_persona_filter_accepts_names(self, catalog):
        by_value = get_courses_by_persona(catalog, "connector")
        by_name = get_courses_by_persona(catalog, "The Connector")

        assert [c.id for c in by_value] == [c.id for c in by_name]
        assert all("The Connector" in c.suitable_personas for c in by_value)

    def test_unknown_persona(self, catalog):
        with pytest.raises(ValueError):
            get_courses_by_persona(catalog, "Visual Learner")

    def test_courses_by_tags(self, catalog):
        courses = get_courses(catalog, tags=["Analysis", "agile"])

        titles = {c.title for c in courses}
        assert titles == {"Critical Thinking Masterclass", "Systems Thinking Fundamentals", "Agile Project Management"}

    def test_blank_tags_return_everything(self, catalog):
        assert len(get_courses(catalog, tags=["", " "])) == len(SAMPLE_COURSES)

    def test_get_course_missing(self, catalog):
        with pytest.raises(CourseNotFound):
            get_course(catalog, 9999)

    def test_get_strategy(self, catalog):
        first = get_strategies(catalog)[0]

        assert get_strategy(catalog, first.id).title == first.title
        assert get_strategy(catalog, 9999) is None

    def test_create_course_normalizes_personas(self, session):
        course = create_course(
            session,
            title="Storytelling with Data",
            description="Turn analysis into narrative.",
            url="https://example.com/storytelling",
            tags=["data"],
            suitable_personas=["synthesizer", "The Connector"]
        )

        assert course.suitable_personas == ["The Synthesizer", "The Connector"]
        assert get_courses_by_persona(session, Category.SYNTHESIZER)[0].id == course.id

    def test_create_strategy(self, session):
        strategy = create_strategy(
            session,
            title="Teach-back",
            description="Explain it to a colleague.",
            content="1. Learn\n2. Teach",
            type="Comprehension",
            suitable_personas=["connector"]
        )

        assert strategy.id is not None
        assert get_strategies_by_persona(session, "The Connector") == [strategy]


class TestRecommendations:

    def test_requires_persona(self, catalog, test_user):
        with pytest.raises(PersonaRequiredError):
            recommended_courses(test_user.user_id, catalog)
        with pytest.raises(PersonaRequiredError):
            recommended_strategies(test_user.user_id, catalog)

    def test_unknown_user(self, catalog):
        with pytest.raises(UserNotFound):
            recommend_for_user("user_missing", catalog)

    def test_follow_current_persona(self, catalog, test_user):
        assign_persona(test_user.user_id, make_answers(creator=10), session=catalog)
        first = recommend_for_user(test_user.user_id, catalog)

        assign_persona(test_user.user_id, make_answers(connector=10), session=catalog)
        second = recommend_for_user(test_user.user_id, catalog)

        assert first.persona == "The Creator"
        assert all("The Creator" in c.suitable_personas for c in first.courses)
        assert second.persona == "The Connector"
        assert all("The Connector" in s.suitable_personas for s in second.strategies)

    def test_completed_courses_excluded(self, catalog, test_user):
        assign_persona(test_user.user_id, make_answers(connector=10), session=catalog)
        courses = recommended_courses(test_user.user_id, catalog)
        done = courses[0]

        record = start_course(test_user.user_id, done.id, catalog)
        update_progress(record.id, catalog, completed=True)

        remaining = recommended_courses(test_user.user_id, catalog)
        assert done.id not in [c.id for c in remaining]
        assert len(remaining) == len(courses) - 1


class TestProgress:

    def test_start_course(self, catalog, test_user):
        course = get_courses(catalog)[0]

        record = start_course(test_user.user_id, course.id, catalog)

        assert record.progress == 0
        assert record.completed is False
        assert get_user_progress(test_user.user_id, catalog) == [record]

    def test_start_course_twice_returns_existing(self, catalog, test_user):
        course = get_courses(catalog)[0]

        first = start_course(test_user.user_id, course.id, catalog)
        second = start_course(test_user.user_id, course.id, catalog)

        assert first.id == second.id

    def test_start_unknown_course(self, catalog, test_user):
        with pytest.raises(CourseNotFound):
            start_course(test_user.user_id, 9999, catalog)

    def test_update_progress_sets_user_mean(self, catalog, test_user):
        courses = get_courses(catalog)
        a = start_course(test_user.user_id, courses[0].id, catalog)
        start_course(test_user.user_id, courses[1].id, catalog)

        update_progress(a.id, catalog, progress=50)

        catalog.refresh(test_user)
        assert test_user.progress == 25

    def test_complete_course_counts_once(self, catalog, test_user):
        course = get_courses(catalog)[0]
        record = start_course(test_user.user_id, course.id, catalog)

        update_progress(record.id, catalog, completed=True)
        update_progress(record.id, catalog, completed=True)

        catalog.refresh(test_user)
        assert record.completed is True
        assert record.progress == 100
        assert record.completed_at is not None
        assert test_user.completed_courses == 1
        assert test_user.progress == 100

    def test_complete_reopen_complete_counts_once(self, catalog, test_user):
        record = start_course(test_user.user_id, get_courses(catalog)[0].id, catalog)

        update_progress(record.id, catalog, completed=True)
        update_progress(record.id, catalog, completed=False)
        assert record.completed is False
        assert record.completed_at is None

        update_progress(record.id, catalog, completed=True)

        catalog.refresh(test_user)
        assert record.completed is True
        assert record.first_completed_at is not None
        assert test_user.completed_courses == 1

    def test_empty_update_does_not_complete_reopened_course(self, catalog, test_user):
        record = start_course(test_user.user_id, get_courses(catalog)[0].id, catalog)
        update_progress(record.id, catalog, completed=True)
        update_progress(record.id, catalog, completed=False)

        update_progress(record.id, catalog)

        catalog.refresh(test_user)
        assert record.completed is False
        assert test_user.completed_courses == 1

    def test_reaching_100_completes(self, catalog, test_user):
        record = start_course(test_user.user_id, get_courses(catalog)[0].id, catalog)

        update_progress(record.id, catalog, progress=100)

        assert record.completed is True

    def test_invalid_progress(self, catalog, test_user):
        record = start_course(test_user.user_id, get_courses(catalog)[0].id, catalog)

        with pytest.raises(ValueError):
            update_progress(record.id, catalog, progress=150)

    def test_missing_progress_record(self, catalog):
        with pytest.raises(ProgressNotFound):
            update_progress(12345, catalog, progress=10)


class TestStreaks:

    def make_user(self):
        return User(user_id="u", username="u", password_hash="x", name="U", email="u@example.com",
                    streak_count=0)

    def test_first_activity_starts_streak(self):
        user = self.make_user()

        assert record_activity(user, now=datetime(2024, 1, 1, 9)) == 1

    def test_same_day_keeps_streak(self):
        user = self.make_user()
        record_activity(user, now=datetime(2024, 1, 1, 9))

        assert record_activity(user, now=datetime(2024, 1, 1, 22)) == 1
        assert user.last_active == datetime(2024, 1, 1, 22)

    def test_next_day_extends_streak(self):
        user = self.make_user()
        day = datetime(2024, 1, 1, 9)
        for offset in range(3):
            record_activity(user, now=day + timedelta(days=offset))

        assert user.streak_count == 3

    def test_gap_resets_streak(self):
        user = self.make_user()
        record_activity(user, now=datetime(2024, 1, 1, 9))
        record_activity(user, now=datetime(2024, 1, 2, 9))

        assert record_activity(user, now=datetime(2024, 1, 5, 9)) == 1

    def test_older_activity_does_not_move_last_active_back(self):
        user = self.make_user()
        record_activity(user, now=datetime(2024, 1, 5, 9))
        record_activity(user, now=datetime(2024, 1, 3, 9))

        assert user.last_active == datetime(2024, 1, 5, 9)
        assert user.streak_count == 1
