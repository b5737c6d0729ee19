from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from quizhub.schemas.quiz.question_base import QuestionCreate, QuestionOut, QuestionPublicOut
from quizhub.schemas.users.user_base import UserBrief


class QuizBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    subject_id: UUID
    time_limit: Optional[int] = Field(None, ge=1)
    passing_score: Optional[float] = Field(None, ge=0)


class QuizCreate(QuizBase):
    is_published: bool = False
    questions: List[QuestionCreate] = Field(..., min_length=1)


class QuizUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    subject_id: Optional[UUID] = None
    time_limit: Optional[int] = Field(None, ge=1)
    passing_score: Optional[float] = Field(None, ge=0)


class QuizStatusUpdate(BaseModel):
    is_published: bool


class QuizBrief(BaseModel):
    id: UUID
    title: str

    class Config:
        from_attributes = True


class QuizPublicOut(QuizBase):
    id: UUID
    is_published: bool
    created_at: datetime
    created_by: Optional[UserBrief] = None
    questions: List[QuestionPublicOut]

    class Config:
        from_attributes = True


class QuizOut(QuizPublicOut):
    questions: List[QuestionOut]
