from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from quizhub.core.config import settings
from quizhub.core.database import get_db
from quizhub.core.security import get_current_user, staff_required
from quizhub.models.result_db import result_crud
from quizhub.models.user_db.user_db import User, UserRole
from quizhub.schemas.result.result_base import PerformanceOut, ResultOut, SubmittedAnswerOut

result_router = APIRouter(prefix="/results", tags=["Results"])


def ensure_can_view(user_id: UUID, current_user: User):
    if not current_user.is_staff and current_user.id != user_id:
        raise HTTPException(status_code=403, detail="You can only view your own results")


@result_router.get("/", response_model=List[ResultOut])
def list_results(
    username: Optional[str] = None,
    quiz_title: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    include_practice: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(staff_required)
):
    teacher_id = current_user.id if current_user.role == UserRole.TEACHER.value else None
    return result_crud.find_results(
        db,
        username=username,
        quiz_title=quiz_title,
        date_from=date_from,
        date_to=date_to,
        include_practice=include_practice,
        teacher_id=teacher_id,
    )


@result_router.get("/user/{user_id}", response_model=List[ResultOut])
def list_user_results(user_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    ensure_can_view(user_id, current_user)
    return result_crud.get_results_by_user(db, user_id)


@result_router.get("/user/{user_id}/performance", response_model=PerformanceOut)
def get_performance(user_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    ensure_can_view(user_id, current_user)
    return result_crud.get_student_performance(db, user_id, settings.PASSING_SCORE)


@result_router.get("/user/{user_id}/quiz/{quiz_id}", response_model=ResultOut)
def get_user_quiz_result(
    user_id: UUID,
    quiz_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    ensure_can_view(user_id, current_user)
    result = result_crud.get_result_for_user_and_quiz(db, user_id, quiz_id)
    if not result:
        raise HTTPException(status_code=404, detail=f"Result for user {user_id} and quiz {quiz_id} not found")
    return result


@result_router.get("/quiz/{quiz_id}", response_model=List[ResultOut])
def list_quiz_results(
    quiz_id: UUID,
    include_practice: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(staff_required)
):
    return result_crud.get_results_by_quiz(db, quiz_id, include_practice=include_practice)


@result_router.get("/{result_id}", response_model=ResultOut)
def get_result(result_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    result = result_crud.get_result_by_id(db, result_id)
    if not result:
        raise HTTPException(status_code=404, detail="Result not found")
    ensure_can_view(result.user_id, current_user)
    return result


@result_router.get("/{result_id}/answers", response_model=List[SubmittedAnswerOut])
def get_result_answers(result_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    result = result_crud.get_result_by_id(db, result_id)
    if not result:
        raise HTTPException(status_code=404, detail="Result not found")
    ensure_can_view(result.user_id, current_user)
    return result_crud.get_answers_for_result(db, result_id)
