from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime
from quizhub.models.user_db.user_db import UserRole


class UserBase(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    name: str = Field(..., min_length=1)


class UserCreate(UserBase):
    password: str = Field(..., min_length=6)


class UserRoleUpdate(BaseModel):
    role: UserRole


class UserBrief(BaseModel):
    id: UUID
    username: str
    name: str

    class Config:
        from_attributes = True


class UserOut(UserBase):
    id: UUID
    role: UserRole
    created_at: datetime

    class Config:
        from_attributes = True
