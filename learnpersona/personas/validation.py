"""
Quiz Submission Validation

Rejects malformed submissions before they reach the classifier: every
question in the bank must be answered, and every answer must be one of that
question's options.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence

from .categories import Category
from .questions import Question, QUESTION_BANK


INCOMPLETE_SUBMISSION_MESSAGE = "Please answer all questions"


class QuizValidationError(ValueError):
    """Base class for rejected quiz submissions."""


class IncompleteSubmissionError(QuizValidationError):
    """One or more questions were left unanswered."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(INCOMPLETE_SUBMISSION_MESSAGE)


class UnknownQuestionError(QuizValidationError):
    """An answer refers to a question that is not in the bank."""

    def __init__(self, question_ids: Iterable[str]):
        self.question_ids = list(question_ids)
        super().__init__(f"Unknown question(s): {', '.join(self.question_ids)}")


class InvalidAnswerError(QuizValidationError):
    """An answer is not a valid option for its question."""

    def __init__(self, question_id: str, answer):
        self.question_id = question_id
        self.answer = answer
        super().__init__(f"Invalid answer {answer!r} for question {question_id}")


# Read-only question id -> Category mapping
QuizSubmission = Mapping[str, Category]


def validate_submission(
    raw: Optional[Mapping[str, object]],
    questions: Sequence[Question] = QUESTION_BANK
) -> QuizSubmission:
    """
    Validate raw quiz answers and resolve them to categories.

    Args:
        raw: Mapping of question id to the selected option (category value
            or persona name)
        questions: Question bank the submission answers

    Returns:
        Read-only mapping of question id to Category, in bank order

    Raises:
        IncompleteSubmissionError: If any question is unanswered
        UnknownQuestionError: If an answer names a question outside the bank
        InvalidAnswerError: If an answer is not one of the question's options
    """
    raw = raw or {}
    known_ids = {q.question_id for q in questions}

    unknown: List[str] = [qid for qid in raw if qid not in known_ids]
    if unknown:
        raise UnknownQuestionError(unknown)

    missing = [
        q.question_id for q in questions
        if raw.get(q.question_id) is None
        or (isinstance(raw.get(q.question_id), str) and not raw[q.question_id].strip())
    ]
    if missing:
        raise IncompleteSubmissionError(missing)

    resolved = {}
    for question in questions:
        answer = raw[question.question_id]
        try:
            category = Category.parse(answer)
        except ValueError:
            raise InvalidAnswerError(question.question_id, answer) from None
        if category not in question.categories:
            raise InvalidAnswerError(question.question_id, answer)
        resolved[question.question_id] = category

    return MappingProxyType(resolved)
