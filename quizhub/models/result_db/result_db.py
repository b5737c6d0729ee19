import uuid
from datetime import datetime

from sqlalchemy import (
    Column, Boolean, Integer, Float, String, DateTime, ForeignKey, Index, JSON, Uuid, false
)
from sqlalchemy.orm import relationship
from quizhub.core.database import Base


class Result(Base):
    __tablename__ = "results"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    quiz_id = Column(Uuid, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)

    score = Column(Float, nullable=False)
    correct_answers = Column(Integer, nullable=False, default=0)
    total_questions = Column(Integer, nullable=False, default=0)
    total_points = Column(Float, nullable=False, default=0)
    max_possible_points = Column(Float, nullable=False, default=0)
    is_practice = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="results")
    quiz = relationship("Quiz", back_populates="results")
    answers = relationship("SubmittedAnswer", back_populates="result", cascade="all, delete-orphan")


# One graded attempt per (user, quiz); practice attempts are unlimited.
Index(
    "uq_results_graded_attempt",
    Result.user_id,
    Result.quiz_id,
    unique=True,
    postgresql_where=Result.is_practice == false(),
    sqlite_where=Result.is_practice == false(),
)


class SubmittedAnswer(Base):
    __tablename__ = "answers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)
    result_id = Column(Uuid, ForeignKey("results.id", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column(Uuid, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    question_type = Column(String, nullable=False)
    selected_answer = Column(String, nullable=True)
    selected_answers = Column(JSON, nullable=True)
    matching_pairs = Column(JSON, nullable=True)  # { key: chosen value }
    is_correct = Column(Boolean, nullable=False, default=False)
    partial_score = Column(Float, nullable=False, default=0)

    result = relationship("Result", back_populates="answers")
    question = relationship("QuizQuestion")
