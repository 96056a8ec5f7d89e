"""
Synthetic organization generator for the L&D dashboard.

Generates learners across departments, has each take the persona quiz with
answers biased toward a latent learning style, and enrolls them in courses
over the past months.
"""

import random
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from faker import Faker

from learnpersona.ingest.catalog_data import DEPARTMENTS
from learnpersona.personas.categories import Category, CATEGORY_ORDER
from learnpersona.personas.questions import QUESTION_BANK, Question


class SyntheticOrganizationGenerator:
    """Generate a deterministic simulated organization."""

    def __init__(self, seed: int = 42, now: Optional[datetime] = None):
        self.rng = random.Random(seed)
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self.now = now or datetime.utcnow()

    def generate_user(self, user_number: int) -> Dict:
        """
        Generate a single learner.

        Args:
            user_number: Sequential number used to keep usernames and emails unique

        Returns:
            Dict with user data
        """
        name = self.fake.name()
        name_parts = name.split()
        if len(name_parts) >= 2:
            handle = f"{name_parts[0][0].lower()}{name_parts[-1].lower()}"
        else:
            handle = name.lower().replace(' ', '')
        handle = ''.join(ch for ch in handle if ch.isalnum())

        return {
            "username": f"{handle}{user_number}",
            "name": name,
            "email": f"{handle}{user_number}@example.com",
            "department": self.rng.choice(DEPARTMENTS),
        }

    def generate_answers(self, latent: Category, consistency: float = 0.55) -> Dict[str, str]:
        """
        Quiz answers leaning toward ``latent``.

        Each question picks the latent category's option with probability
        ``consistency`` and a uniformly random option otherwise.
        """
        answers = {}
        for question in QUESTION_BANK:
            answers[question.question_id] = self._pick(question, latent, consistency).value
        return answers

    def _pick(self, question: Question, latent: Category, consistency: float) -> Category:
        if latent in question.categories and self.rng.random() < consistency:
            return latent
        return self.rng.choice(question.categories)

    def latent_persona(self) -> Category:
        return self.rng.choice(CATEGORY_ORDER)

    def quiz_time(self, months: int = 6) -> datetime:
        """A quiz timestamp within the last ``months`` months."""
        return self.now - timedelta(days=self.rng.randint(1, months * 30), hours=self.rng.randint(0, 23))

    def enrollment_plan(self, course_ids: List[int], taken_at: datetime) -> List[Dict]:
        """
        Courses a learner starts after taking the quiz.

        Returns:
            List of dicts with course_id, started_at, progress and completed
        """
        if not course_ids:
            return []

        count = self.rng.randint(0, min(4, len(course_ids)))
        plan = []
        for course_id in self.rng.sample(course_ids, count):
            span = max((self.now - taken_at).days, 1)
            started_at = taken_at + timedelta(days=self.rng.randint(0, span))
            if started_at > self.now:
                started_at = self.now
            completed = self.rng.random() < 0.4
            plan.append({
                "course_id": course_id,
                "started_at": started_at,
                "progress": 100 if completed else self.rng.choice([10, 25, 40, 60, 75, 90]),
                "completed": completed,
            })
        plan.sort(key=lambda p: p["started_at"])
        return plan
