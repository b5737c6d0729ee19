import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import relationship
from quizhub.core.database import Base


class UserRole(str, Enum):
    ADMIN = "administrator"
    TEACHER = "teacher"
    STUDENT = "student"


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)

    username = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.STUDENT.value)
    created_at = Column(DateTime, default=datetime.utcnow)

    quizzes = relationship("Quiz", back_populates="created_by")
    results = relationship("Result", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_staff(self) -> bool:
        return self.role in (UserRole.ADMIN.value, UserRole.TEACHER.value)
