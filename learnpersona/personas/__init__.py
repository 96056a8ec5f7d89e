"""
Persona Module

Learning persona classification from the persona quiz.

Modules:
    - categories: The five persona categories and their descriptions
    - questions: The fixed quiz question bank
    - validation: Submission validation (completeness, valid options)
    - classifier: Frequency-count classifier with first-declared tie-break
    - assignment: Score a submission and store it as the user's persona
    - history: Past submissions and persona changes
"""

from .categories import Category, CATEGORY_ORDER, PERSONA_NAMES, persona_info
from .questions import Question, AnswerOption, QUESTION_BANK, get_question
from .validation import (
    validate_submission,
    QuizValidationError,
    IncompleteSubmissionError,
    UnknownQuestionError,
    InvalidAnswerError
)
from .classifier import classify, PersonaResult
from .assignment import assign_persona, PersonaAssignment
from .history import get_quiz_history, get_latest_quiz_response, get_persona_changes

__all__ = [
    'Category',
    'CATEGORY_ORDER',
    'PERSONA_NAMES',
    'persona_info',
    'Question',
    'AnswerOption',
    'QUESTION_BANK',
    'get_question',
    'validate_submission',
    'QuizValidationError',
    'IncompleteSubmissionError',
    'UnknownQuestionError',
    'InvalidAnswerError',
    'classify',
    'PersonaResult',
    'assign_persona',
    'PersonaAssignment',
    'get_quiz_history',
    'get_latest_quiz_response',
    'get_persona_changes'
]
