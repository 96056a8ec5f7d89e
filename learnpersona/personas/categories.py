"""
Persona Categories

The five learning personas, declared in their tie-break order, with the
display names, descriptions and learning tips shown to learners.
"""

from enum import Enum
from typing import Dict, List, Union


class Category(str, Enum):
    """Learning persona category. Declaration order is the tie-break order."""
    EXPLORER = 'explorer'
    CONNECTOR = 'connector'
    SYNTHESIZER = 'synthesizer'
    THINKER = 'thinker'
    CREATOR = 'creator'

    @property
    def display_name(self) -> str:
        return PERSONA_NAMES[self]

    @property
    def short_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Union[str, "Category"]) -> "Category":
        """
        Resolve a category from its value ("explorer"), short name ("Explorer")
        or display name ("The Explorer"), case-insensitively.

        Raises:
            ValueError: If the value names no known category
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown persona category: {value!r}")

        key = value.strip().lower()
        if key.startswith('the '):
            key = key[4:].strip()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown persona category: {value!r}") from None


# Categories in declared order
CATEGORY_ORDER: List[Category] = list(Category)

# Persona display names
PERSONA_NAMES: Dict[Category, str] = {
    Category.EXPLORER: 'The Explorer',
    Category.CONNECTOR: 'The Connector',
    Category.SYNTHESIZER: 'The Synthesizer',
    Category.THINKER: 'The Thinker',
    Category.CREATOR: 'The Creator',
}

PERSONA_DESCRIPTIONS: Dict[Category, str] = {
    Category.EXPLORER: (
        "Explorers are curious and adventurous learners who thrive on discovering new concepts "
        "and ideas. They enjoy variety and are always looking for fresh perspectives. Explorers "
        "learn best when they can explore multiple resources and follow their interests where "
        "they lead."
    ),
    Category.CONNECTOR: (
        "Connectors are social learners who thrive on interaction and collaboration. They learn "
        "best through discussion, teaching others, and collaborative projects, and are skilled at "
        "understanding different viewpoints."
    ),
    Category.SYNTHESIZER: (
        "Synthesizers excel at seeing the big picture and identifying patterns across different "
        "domains. They learn best when they can relate new information to what they already know "
        "and understand how concepts work together as a system."
    ),
    Category.THINKER: (
        "Thinkers are analytical and methodical learners who value depth of understanding. They "
        "prefer to master fundamental principles before moving forward and learn best with clear, "
        "logical explanations and time to reflect."
    ),
    Category.CREATOR: (
        "Creators are hands-on learners who learn by doing and making. They prefer practical "
        "applications over theory and learn best through projects, experiments, and real-world "
        "applications."
    ),
}

PERSONA_TIPS: Dict[Category, List[str]] = {
    Category.EXPLORER: [
        "Use varied learning resources (videos, books, podcasts) to keep engagement high",
        "Set up learning challenges that take you outside your comfort zone",
        "Allow time for 'learning detours' to explore interesting tangents",
        "Join communities where you can discover new ideas and perspectives",
        "Create a flexible learning schedule with variety built in",
    ],
    Category.CONNECTOR: [
        "Form or join study groups for collaborative learning",
        "Teach concepts to others to solidify your understanding",
        "Engage in discussions and debates about what you're learning",
        "Seek mentorship and be open to mentoring others",
        "Use social learning platforms and community-based resources",
    ],
    Category.SYNTHESIZER: [
        "Create mind maps or concept maps to visualize connections",
        "Look for interdisciplinary approaches to subjects",
        "Keep a learning journal to track insights and connections",
        "Ask 'how does this relate to X?' when learning something new",
        "Review and reorganize your knowledge periodically to strengthen connections",
    ],
    Category.THINKER: [
        "Allocate uninterrupted time for deep focused learning",
        "Develop hierarchical note-taking systems",
        "Question assumptions and look for evidence",
        "Master fundamentals before moving to advanced topics",
        "Explain complex topics in your own words to ensure understanding",
    ],
    Category.CREATOR: [
        "Choose project-based learning opportunities",
        "Set up practical applications for theoretical knowledge",
        "Break learning into actionable experiments",
        "Build portfolios or tangible outputs from your learning",
        "Seek immediate opportunities to apply new skills",
    ],
}


def persona_info(category: Category) -> dict:
    """Public description of a persona."""
    return {
        'category': category.value,
        'name': category.display_name,
        'description': PERSONA_DESCRIPTIONS[category],
        'tips': list(PERSONA_TIPS[category]),
    }
