import uuid
from datetime import datetime

from sqlalchemy import Column, String, Text, Boolean, Integer, Float, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from quizhub.core.database import Base


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    subject_id = Column(Uuid, ForeignKey("subjects.id"), nullable=False, index=True)
    time_limit = Column(Integer, nullable=True)  # minutes
    passing_score = Column(Float, nullable=True)  # on the score scale
    created_by_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    is_published = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    subject = relationship("Subject", back_populates="quizzes")
    created_by = relationship("User", back_populates="quizzes")
    questions = relationship(
        "QuizQuestion",
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="QuizQuestion.order",
    )
    results = relationship("Result", back_populates="quiz", cascade="all, delete-orphan")
