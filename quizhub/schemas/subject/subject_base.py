from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field


class SubjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class SubjectOut(BaseModel):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SubjectWithQuizCount(BaseModel):
    id: UUID
    name: str
    quiz_count: int
