"""
Tests for the Persona Classifier

Dominant category, first-declared tie-break, idempotence and concurrent use.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
import random

import pytest

from learnpersona.personas.categories import Category, CATEGORY_ORDER
from learnpersona.personas.classifier import classify, count_answers, dominant_category
from learnpersona.personas.validation import validate_submission
from learnpersona.tests.helpers import make_answers


def submission(**counts):
    return validate_submission(make_answers(**counts))


class TestDominantCategory:
    """A strictly dominant category always wins."""

    def test_explorer_beats_thinker(self):
        """6 Explorer + 4 Thinker -> Explorer."""
        result = classify(submission(explorer=6, thinker=4))

        assert result.category == Category.EXPLORER
        assert result.persona_name == "The Explorer"

    def test_all_creator(self):
        """10 Creator -> Creator."""
        result = classify(submission(creator=10))

        assert result.category == Category.CREATOR
        assert result.scores[Category.CREATOR] == 10

    @pytest.mark.parametrize("winner", CATEGORY_ORDER)
    def test_each_category_can_dominate(self, winner):
        """Each category wins with 4 answers against 2 for three others."""
        others = [c for c in CATEGORY_ORDER if c != winner][:3]
        counts = {winner.value: 4}
        counts.update({c.value: 2 for c in others})

        assert classify(submission(**counts)).category == winner

    def test_later_category_with_strictly_more_wins(self):
        result = classify(submission(explorer=3, connector=3, creator=4))

        assert result.category == Category.CREATOR


class TestTieBreak:
    """Ties go to the earliest declared category."""

    def test_full_tie(self):
        """2 answers per category -> first declared category."""
        result = classify(submission(explorer=2, connector=2, synthesizer=2, thinker=2, creator=2))

        assert result.category == CATEGORY_ORDER[0] == Category.EXPLORER

    def test_tie_between_later_categories(self):
        result = classify(submission(explorer=1, connector=1, thinker=4, creator=4))

        assert result.category == Category.THINKER

    def test_tie_independent_of_answer_order(self):
        """Shuffling which question carries which answer does not change the result."""
        rng = random.Random(7)
        ordering = [Category.SYNTHESIZER] * 5 + [Category.CREATOR] * 5
        outcomes = set()
        for _ in range(50):
            rng.shuffle(ordering)
            answers = {f"q{n + 1}": c for n, c in enumerate(ordering)}
            outcomes.add(classify(answers).category)

        assert outcomes == {Category.SYNTHESIZER}

    def test_tie_independent_of_mapping_order(self):
        answers = dict(submission(connector=5, synthesizer=5))
        reversed_answers = dict(reversed(list(answers.items())))

        assert classify(answers).category == classify(reversed_answers).category == Category.CONNECTOR


class TestClassifierContract:
    """Counting, purity and edge cases."""

    def test_counts_include_every_category(self):
        counts = count_answers(submission(creator=10))

        assert list(counts) == CATEGORY_ORDER
        assert counts[Category.EXPLORER] == 0
        assert sum(counts.values()) == 10

    def test_empty_submission_defaults_to_first_category(self):
        result = classify({})

        assert result.category == Category.EXPLORER
        assert all(count == 0 for count in result.scores.values())

    def test_dominant_category_with_missing_keys(self):
        assert dominant_category({Category.THINKER: 1}) == Category.THINKER

    def test_idempotent(self):
        answers = submission(explorer=3, connector=3, thinker=4)

        first = classify(answers)
        second = classify(answers)

        assert first.category == second.category
        assert first.scores == second.scores

    def test_uses_given_timestamp(self):
        moment = datetime(2024, 3, 1, 12, 0, 0)

        result = classify(submission(creator=10), computed_at=moment)

        assert result.computed_at == moment

    def test_defaults_timestamp_to_now(self):
        before = datetime.utcnow()
        result = classify(submission(creator=10))

        assert before <= result.computed_at <= datetime.utcnow()

    def test_does_not_mutate_input(self):
        answers = dict(submission(explorer=6, thinker=4))
        snapshot = dict(answers)

        classify(answers)

        assert answers == snapshot

    def test_scores_by_value(self):
        result = classify(submission(explorer=6, thinker=4))

        assert result.scores_by_value() == {
            'explorer': 6, 'connector': 0, 'synthesizer': 0, 'thinker': 4, 'creator': 0
        }


class TestConcurrentClassification:
    """Concurrent submissions are scored independently."""

    def test_concurrent_submissions_do_not_share_counts(self):
        cases = [
            (submission(explorer=6, thinker=4), Category.EXPLORER),
            (submission(creator=10), Category.CREATOR),
            (submission(explorer=2, connector=2, synthesizer=2, thinker=2, creator=2), Category.EXPLORER),
            (submission(connector=7, synthesizer=3), Category.CONNECTOR),
            (submission(synthesizer=4, thinker=6), Category.THINKER),
        ] * 40

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda case: classify(case[0]), cases))

        for (answers, expected), result in zip(cases, results):
            assert result.category == expected
            assert sum(result.scores.values()) == len(answers)
