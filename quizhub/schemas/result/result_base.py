from uuid import UUID
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel
from quizhub.schemas.quiz.question_base import QuestionOut
from quizhub.schemas.quiz.quiz_base import QuizBrief
from quizhub.schemas.users.user_base import UserBrief
from quizhub.services.scoring import QuestionType


class ResultOut(BaseModel):
    id: UUID
    user_id: UUID
    quiz_id: UUID
    score: float
    correct_answers: int
    total_questions: int
    total_points: float
    max_possible_points: float
    is_practice: bool
    created_at: datetime
    user: Optional[UserBrief] = None
    quiz: Optional[QuizBrief] = None

    class Config:
        from_attributes = True


class QuestionOutcomeOut(BaseModel):
    question_id: UUID
    is_correct: bool
    partial_score: float
    points: float
    earned_points: float


class SubmissionOut(BaseModel):
    result: ResultOut
    passed: bool
    partial_points: float
    breakdown: List[QuestionOutcomeOut]


class SubmittedAnswerOut(BaseModel):
    question_id: UUID
    question_type: QuestionType
    selected_answer: Optional[str] = None
    selected_answers: Optional[List[str]] = None
    matching_pairs: Optional[Dict[str, str]] = None
    is_correct: bool
    partial_score: float
    question: QuestionOut

    class Config:
        from_attributes = True


class PerformanceOut(BaseModel):
    total_quizzes: int
    average_score: float
    highest_score: float
    lowest_score: float
    quizzes_passed: int
    recent_results: List[ResultOut]


class AttemptStatusOut(BaseModel):
    quiz_id: UUID
    has_taken: bool
