from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Body, Query
from sqlalchemy.orm import Session
from quizhub.core.database import get_db
from quizhub.core.security import admin_required
from quizhub.models.user_db.user_db import User
from quizhub.models.user_db.user_db_crud import get_user_by_id, update_user_role, delete_user
from quizhub.schemas.common.page_response import PageResponse
from quizhub.schemas.users.user_base import UserOut, UserRoleUpdate


user_router = APIRouter(prefix="/users", tags=["Users"], dependencies=[Depends(admin_required)])


@user_router.get("/", response_model=PageResponse[UserOut])
def list_users(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    skip = (page - 1) * size
    total = db.query(User).count()
    users = db.query(User).order_by(User.created_at).offset(skip).limit(size).all()

    has_next = (page * size) < total
    has_prev = page > 1

    return PageResponse[UserOut](
        page=page,
        size=size,
        total=total,
        has_next=has_next,
        has_prev=has_prev,
        items=users
    )


@user_router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    user = get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@user_router.put("/{user_id}/role", response_model=UserOut)
def edit_user_role(
    user_id: UUID,
    update: UserRoleUpdate = Body(...),
    db: Session = Depends(get_db)
):
    user = update_user_role(db, user_id, update.role)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@user_router.delete("/{user_id}", response_model=UserOut)
def delete_user_route(user_id: UUID, db: Session = Depends(get_db)):
    user = get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if user.quizzes:
        raise HTTPException(status_code=409, detail="User still owns quizzes")
    deleted = UserOut.model_validate(user)
    delete_user(db, user_id)
    return deleted
