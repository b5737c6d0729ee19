from uuid import UUID
from typing import Annotated, List, Union
from pydantic import BaseModel, Field, field_validator
from quizhub.services.scoring import ChoiceAnswer, MatchingAnswer, MultipleChoiceAnswer


class ChoiceAnswerIn(ChoiceAnswer):
    question_id: UUID


class MultipleChoiceAnswerIn(MultipleChoiceAnswer):
    question_id: UUID


class MatchingAnswerIn(MatchingAnswer):
    question_id: UUID


AnswerIn = Annotated[
    Union[ChoiceAnswerIn, MultipleChoiceAnswerIn, MatchingAnswerIn],
    Field(discriminator="question_type"),
]


class QuizSubmission(BaseModel):
    answers: List[AnswerIn] = Field(default_factory=list)

    @field_validator("answers")
    @classmethod
    def one_answer_per_question(cls, answers):
        seen = set()
        for answer in answers:
            if answer.question_id in seen:
                raise ValueError(f"Duplicate answer for question {answer.question_id}")
            seen.add(answer.question_id)
        return answers
