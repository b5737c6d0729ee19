import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from quizhub.core.database import get_db
from quizhub.core.security import (
    verify_password,
    create_access_token,
    get_current_user
)
from quizhub.models.user_db.user_db import User
from quizhub.models.user_db.user_db_crud import create_user, get_user_by_username
from quizhub.schemas.login.login_base import LoginOut, LoginRequest
from quizhub.schemas.users.user_base import UserCreate, UserOut

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    if get_user_by_username(db, user.username):
        raise HTTPException(status_code=400, detail="Username already taken")
    created = create_user(db, user)
    logger.info("Registered user %s", created.username)
    return created


@auth_router.post("/login", response_model=LoginOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = get_user_by_username(db, payload.username)
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": str(user.id), "role": user.role})
    return {"user": user, "token": token}


@auth_router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user
