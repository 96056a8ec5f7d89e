"""
Test helpers.
"""

from typing import Dict

from learnpersona.personas.categories import Category
from learnpersona.personas.questions import QUESTION_BANK


def make_answers(**counts: int) -> Dict[str, str]:
    """
    Build a complete submission with the given number of answers per category.

    Every question offers every category, so any split of the ten answers is
    a valid submission. Example: make_answers(explorer=6, thinker=4)
    """
    categories = []
    for name, count in counts.items():
        categories.extend([Category(name)] * count)
    assert len(categories) == len(QUESTION_BANK), "counts must cover every question"
    return {q.question_id: c.value for q, c in zip(QUESTION_BANK, categories)}
