"""
Persona Classifier

Maps a completed quiz submission to the dominant persona category.

Counts answers per category and picks the highest count. Categories are
scanned in declared order and a later category only takes the lead with a
strictly greater count, so ties go to the earliest declared category and the
result never depends on mapping iteration order.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Mapping, Optional

from .categories import Category, CATEGORY_ORDER


@dataclass(frozen=True)
class PersonaResult:
    """Outcome of classifying one submission."""
    category: Category
    scores: Dict[Category, int]
    computed_at: datetime

    @property
    def persona_name(self) -> str:
        return self.category.display_name

    def scores_by_value(self) -> Dict[str, int]:
        return {category.value: count for category, count in self.scores.items()}


def count_answers(submission: Mapping[str, Category]) -> Dict[Category, int]:
    """Per-category answer counts, with every category present."""
    counts = {category: 0 for category in CATEGORY_ORDER}
    for category in submission.values():
        counts[category] += 1
    return counts


def dominant_category(counts: Mapping[Category, int]) -> Category:
    """Highest-count category; ties keep the earliest declared one."""
    leader = CATEGORY_ORDER[0]
    highest = counts.get(leader, 0)
    for category in CATEGORY_ORDER[1:]:
        if counts.get(category, 0) > highest:
            leader = category
            highest = counts[category]
    return leader


def classify(
    submission: Mapping[str, Category],
    computed_at: Optional[datetime] = None
) -> PersonaResult:
    """
    Classify a quiz submission.

    The submission must already be validated (see ``validate_submission``):
    every value is a ``Category``. An empty submission yields the first
    declared category.

    Args:
        submission: Mapping of question id to the category of the chosen option
        computed_at: Timestamp to record (defaults to now, UTC)

    Returns:
        PersonaResult with the dominant category and the per-category counts
    """
    counts = count_answers(submission)
    return PersonaResult(
        category=dominant_category(counts),
        scores=counts,
        computed_at=computed_at or datetime.utcnow()
    )
