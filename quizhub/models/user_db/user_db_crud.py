from uuid import UUID
from typing import Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session
from quizhub.core.security import hash_password
from quizhub.models.user_db.user_db import User, UserRole
from quizhub.schemas.users.user_base import UserCreate


def create_user(db: Session, user: UserCreate, role: UserRole = UserRole.STUDENT):
    db_user = User(
        username=user.username,
        name=user.name,
        hashed_password=hash_password(user.password),
        role=role.value,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def get_user_by_username(db: Session, username: str):
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id: UUID):
    return db.query(User).filter(User.id == user_id).first()


def get_recent_users(db: Session, limit: int = 5) -> List[User]:
    return db.query(User).order_by(User.created_at.desc()).limit(limit).all()


def count_by_role(db: Session) -> Dict[str, int]:
    counts = {role.value: 0 for role in UserRole}
    for role, total in db.query(User.role, func.count(User.id)).group_by(User.role).all():
        counts[role] = total
    return counts


def update_user_role(db: Session, user_id: UUID, role: UserRole):
    user = get_user_by_id(db, user_id)
    if not user:
        return None
    user.role = role.value
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: UUID):
    user = get_user_by_id(db, user_id)
    if not user:
        return None
    db.delete(user)
    db.commit()
    return user
