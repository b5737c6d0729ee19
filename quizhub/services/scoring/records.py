from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Set, Union
from uuid import UUID

from pydantic import BaseModel, Field

QuestionId = Union[UUID, int, str]


class QuestionType(str, Enum):
    SINGLE_CHOICE = "SINGLE_CHOICE"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    MATCHING = "MATCHING"
    TRUE_FALSE = "TRUE_FALSE"


class MultipleChoiceRule(str, Enum):
    # max(0, (hits - false positives) / |correct|)
    PENALIZED = "penalized"
    # hits / |correct| - penalty per false positive
    FLAT_PENALTY = "flat_penalty"
    ALL_OR_NOTHING = "all_or_nothing"


@dataclass(frozen=True)
class ScoringConfig:
    scale: float = 10
    precision: int = 1
    multiple_choice_rule: MultipleChoiceRule = MultipleChoiceRule.PENALIZED
    wrong_choice_penalty: float = 0.1
    passing_score: float = 6.0


DEFAULT_CONFIG = ScoringConfig()


class Question(BaseModel):
    """A question as the engine scores it.

    Building one directly with an unknown ``type`` fails pydantic validation.
    Stored rows go through ``question_from_record``, which reports the same
    defect as ``ConfigurationError``.
    """

    id: QuestionId
    type: QuestionType
    options: List[str] = Field(default_factory=list)
    correct_answers: List[str] = Field(default_factory=list)
    points: float = Field(1, gt=0)
    order: int = 0
    text: Optional[str] = None

    class Config:
        frozen = True


class ChoiceAnswer(BaseModel):
    question_id: QuestionId
    question_type: Literal["SINGLE_CHOICE", "TRUE_FALSE"]
    selected_answer: Optional[str] = None


class MultipleChoiceAnswer(BaseModel):
    question_id: QuestionId
    question_type: Literal["MULTIPLE_CHOICE"]
    selected_answers: Optional[Set[str]] = None


class MatchingAnswer(BaseModel):
    question_id: QuestionId
    question_type: Literal["MATCHING"]
    matching_pairs: Optional[Dict[str, str]] = None


Answer = Annotated[
    Union[ChoiceAnswer, MultipleChoiceAnswer, MatchingAnswer],
    Field(discriminator="question_type"),
]


@dataclass(frozen=True)
class Evaluation:
    is_correct: bool
    partial_score: float


UNANSWERED = Evaluation(is_correct=False, partial_score=0.0)


class QuestionOutcome(BaseModel):
    question_id: QuestionId
    is_correct: bool
    partial_score: float
    points: float
    earned_points: float
    question: Question
    answer: Optional[Answer] = None


class QuizScore(BaseModel):
    score: float
    correct_answers: int
    total_questions: int
    total_points: float
    max_possible_points: float
    passed: bool
    breakdown: List[QuestionOutcome]
