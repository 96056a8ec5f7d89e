"""
Persona Quiz Question Bank

Ten fixed questions. Every question offers one option per category, so a
completed quiz always implies exactly one category per question.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .categories import Category


@dataclass(frozen=True)
class AnswerOption:
    """One selectable answer and the category it implies."""
    category: Category
    label: str


@dataclass(frozen=True)
class Question:
    """A quiz question with ordered answer options."""
    question_id: str
    prompt: str
    options: Tuple[AnswerOption, ...]

    @property
    def categories(self) -> Tuple[Category, ...]:
        return tuple(option.category for option in self.options)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'id': self.question_id,
            'question': self.prompt,
            'options': [
                {'value': option.category.value, 'label': option.label}
                for option in self.options
            ]
        }


def _question(question_id: str, prompt: str, *options: Tuple[Category, str]) -> Question:
    return Question(
        question_id=question_id,
        prompt=prompt,
        options=tuple(AnswerOption(category, label) for category, label in options)
    )


E, CN, S, T, CR = (
    Category.EXPLORER, Category.CONNECTOR, Category.SYNTHESIZER, Category.THINKER, Category.CREATOR
)

QUESTION_BANK: List[Question] = [
    _question(
        "q1", "How do you prefer to approach a new subject?",
        (E, "I like to explore multiple sources and discover different aspects of the topic."),
        (CN, "I prefer to discuss it with others and learn through conversation."),
        (S, "I like to see how it connects to things I already know and find patterns."),
        (T, "I prefer to understand the underlying principles and analyze it deeply first."),
        (CR, "I want to try things out right away and learn by doing."),
    ),
    _question(
        "q2", "When working on a challenging problem, you typically:",
        (T, "Break it down into smaller parts and analyze each component."),
        (E, "Look for new approaches or ideas that might help solve it."),
        (CR, "Build a prototype or test solution to see what works."),
        (CN, "Discuss it with others to get different perspectives."),
        (S, "Look for patterns or similarities to other problems you've solved."),
    ),
    _question(
        "q3", "How do you best retain information?",
        (CR, "By applying it in a practical scenario or project."),
        (T, "By understanding the underlying logic and principles."),
        (CN, "By explaining it to someone else or discussing it."),
        (E, "By connecting it to a variety of different contexts."),
        (S, "By organizing it into a framework or system."),
    ),
    _question(
        "q4", "In a team project, which role do you naturally gravitate toward?",
        (CN, "Facilitating communication and ensuring everyone's ideas are heard."),
        (E, "Bringing in new ideas and resources that others might not have considered."),
        (T, "Analyzing the project requirements and planning a logical approach."),
        (CR, "Implementing and building the actual solutions."),
        (S, "Integrating everyone's contributions into a cohesive whole."),
    ),
    _question(
        "q5", "What aspect of learning do you find most engaging?",
        (E, "Discovering new ideas and possibilities."),
        (T, "Understanding complex concepts in depth."),
        (CR, "Applying knowledge to create something tangible."),
        (S, "Seeing how different ideas connect to form a bigger picture."),
        (CN, "Exchanging perspectives and learning from others."),
    ),
    _question(
        "q6", "When faced with a new technology or tool, you usually:",
        (CR, "Jump in and start using it right away to figure out how it works."),
        (T, "Read the documentation or tutorials thoroughly before starting."),
        (CN, "Ask someone who's used it before for guidance or tips."),
        (E, "Try different features to see what's possible."),
        (S, "Consider how it fits with other tools or systems you use."),
    ),
    _question(
        "q7", "What type of learning environment helps you thrive?",
        (CN, "Collaborative settings with plenty of discussion and group work."),
        (E, "Dynamic environments with variety and new challenges."),
        (CR, "Hands-on workshops where you can build and create."),
        (T, "Structured environments with clear information and time to reflect."),
        (S, "Environments that allow you to connect ideas across different domains."),
    ),
    _question(
        "q8", "When learning something new, what frustrates you the most?",
        (T, "Lack of clear, logical explanations and structure."),
        (E, "Too much repetition and not enough novelty or exploration."),
        (CR, "Too much theory without practical application opportunities."),
        (CN, "Not having others to discuss and share the learning experience with."),
        (S, "Isolated information without context or connections to other knowledge."),
    ),
    _question(
        "q9", "How do you organize your learning materials?",
        (S, "In comprehensive systems that show relationships between topics."),
        (T, "In logical categories with detailed notes and references."),
        (E, "In flexible collections that allow for new additions and discoveries."),
        (CR, "Around projects or applications where they'll be used."),
        (CN, "In shareable formats that make it easy to collaborate with others."),
    ),
    _question(
        "q10", "What's your approach to solving problems you haven't encountered before?",
        (E, "Research widely to find new approaches and possibilities."),
        (CN, "Reach out to others who might have insights or suggestions."),
        (CR, "Try different solutions until you find one that works."),
        (T, "Analyze the problem thoroughly to understand its fundamental nature."),
        (S, "Look for patterns similar to problems you've solved before."),
    ),
]

QUESTIONS_BY_ID: Dict[str, Question] = {q.question_id: q for q in QUESTION_BANK}


def get_question(question_id: str) -> Question:
    """Look up a question by id (raises KeyError if unknown)."""
    return QUESTIONS_BY_ID[question_id]
