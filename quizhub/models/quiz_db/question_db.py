import uuid
from sqlalchemy import Column, String, Text, Integer, Float, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship
from quizhub.core.database import Base


class QuizQuestion(Base):
    __tablename__ = "questions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)
    quiz_id = Column(Uuid, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)

    text = Column(Text, nullable=False)
    type = Column(String, nullable=False)
    options = Column(JSON, nullable=False, default=list)
    # MATCHING: correct_answers[i] is the value paired with options[i]
    correct_answers = Column(JSON, nullable=False, default=list)
    points = Column(Float, nullable=True)
    order = Column(Integer, nullable=False, default=0)

    quiz = relationship("Quiz", back_populates="questions")
