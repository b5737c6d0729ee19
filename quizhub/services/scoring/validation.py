import logging
from typing import Dict, Iterable

from pydantic import ValidationError

from quizhub.services.scoring.errors import ConfigurationError, DuplicateAnswerError
from quizhub.services.scoring.records import Answer, Question, QuestionId, QuestionType

logger = logging.getLogger(__name__)

SINGLE_KEY_TYPES = {QuestionType.SINGLE_CHOICE, QuestionType.TRUE_FALSE}


def question_from_record(record) -> Question:
    """Build an engine ``Question`` from a stored question row.

    A null point value counts as one point. Any field that cannot be
    coerced (unknown type, non-positive points) is a configuration defect.
    """
    try:
        return Question(
            id=record.id,
            type=record.type,
            options=list(record.options or []),
            correct_answers=list(record.correct_answers or []),
            points=record.points if record.points is not None else 1,
            order=record.order or 0,
            text=getattr(record, "text", None),
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ConfigurationError(
            f"Question {record.id} has an invalid {field}: {error['msg']}",
            question_id=record.id,
        ) from e


def validate_question(question: Question) -> None:
    if question.type not in set(QuestionType):
        raise ConfigurationError(
            f"Question {question.id} has unsupported type {question.type!r}",
            question_id=question.id,
        )
    if not question.options:
        raise ConfigurationError(
            f"Question {question.id} has no options",
            question_id=question.id,
        )
    if question.type in SINGLE_KEY_TYPES and not question.correct_answers:
        raise ConfigurationError(
            f"Question {question.id} has no correct answer",
            question_id=question.id,
        )
    if question.type == QuestionType.MATCHING and len(question.correct_answers) != len(question.options):
        raise ConfigurationError(
            f"Matching question {question.id} has {len(question.options)} keys "
            f"but {len(question.correct_answers)} correct values",
            question_id=question.id,
        )
    if question.type == QuestionType.MATCHING and len(set(question.options)) != len(question.options):
        raise ConfigurationError(
            f"Matching question {question.id} repeats a key",
            question_id=question.id,
        )
    if question.points <= 0:
        raise ConfigurationError(
            f"Question {question.id} is worth {question.points} points", question_id=question.id
        )


def index_answers(answers: Iterable[Answer]) -> Dict[QuestionId, Answer]:
    indexed: Dict[QuestionId, Answer] = {}
    for answer in answers:
        if answer.question_id in indexed:
            raise DuplicateAnswerError(answer.question_id)
        indexed[answer.question_id] = answer
    return indexed
