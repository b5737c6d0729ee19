from uuid import UUID
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, model_validator
from quizhub.services.scoring import QuestionType

SINGLE_KEY_TYPES = (QuestionType.SINGLE_CHOICE, QuestionType.TRUE_FALSE)


class QuestionCreate(BaseModel):
    text: str = Field(..., min_length=1)
    type: QuestionType
    points: float = Field(1, gt=0)
    order: Optional[int] = None
    options: List[str] = Field(default_factory=list)

    # SINGLE_CHOICE / TRUE_FALSE
    correct_answer: Optional[str] = None
    # MULTIPLE_CHOICE
    correct_answers: Optional[List[str]] = None
    # MATCHING: key -> value; keys become options
    matching_pairs: Optional[Dict[str, str]] = None

    @model_validator(mode="after")
    def check_answer_key(self):
        if self.type in SINGLE_KEY_TYPES:
            if not self.options:
                raise ValueError(f"options are required for {self.type.value} questions")
            if not self.correct_answer:
                raise ValueError(f"correct_answer is required for {self.type.value} questions")
            if self.correct_answer not in self.options:
                raise ValueError("correct_answer must be one of the options")
        elif self.type == QuestionType.MULTIPLE_CHOICE:
            if not self.options:
                raise ValueError("options are required for MULTIPLE_CHOICE questions")
            if not self.correct_answers:
                raise ValueError("correct_answers is required for MULTIPLE_CHOICE questions and cannot be empty")
            unknown = [a for a in self.correct_answers if a not in self.options]
            if unknown:
                raise ValueError(f"correct_answers not among the options: {unknown}")
        elif self.type == QuestionType.MATCHING:
            if not self.matching_pairs:
                raise ValueError("matching_pairs is required for MATCHING questions and cannot be empty")
        return self

    def answer_key(self) -> Tuple[List[str], List[str]]:
        """Return the ``(options, correct_answers)`` pair stored for this question."""
        if self.type == QuestionType.MATCHING:
            return list(self.matching_pairs.keys()), list(self.matching_pairs.values())
        if self.type == QuestionType.MULTIPLE_CHOICE:
            return list(self.options), list(dict.fromkeys(self.correct_answers))
        return list(self.options), [self.correct_answer]


class QuestionPublicOut(BaseModel):
    id: UUID
    text: str
    type: QuestionType
    options: List[str]
    points: Optional[float] = None
    order: int

    class Config:
        from_attributes = True


class QuestionOut(QuestionPublicOut):
    correct_answers: List[str]
