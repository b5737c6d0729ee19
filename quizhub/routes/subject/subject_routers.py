from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from quizhub.core.database import get_db
from quizhub.core.security import admin_required, get_current_user
from quizhub.models.subject_db.subject_crud import (
    create_subject, delete_subject, get_subject_by_id, get_subject_by_name,
    get_subjects_with_quiz_count, rename_subject
)
from quizhub.schemas.subject.subject_base import SubjectCreate, SubjectOut, SubjectWithQuizCount

subject_router = APIRouter(prefix="/subjects", tags=["Subjects"])


@subject_router.get("/", response_model=List[SubjectWithQuizCount], dependencies=[Depends(get_current_user)])
def list_subjects(db: Session = Depends(get_db)):
    return get_subjects_with_quiz_count(db)


@subject_router.post(
    "/",
    response_model=SubjectOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(admin_required)],
)
def create_subject_route(subject_in: SubjectCreate, db: Session = Depends(get_db)):
    if get_subject_by_name(db, subject_in.name):
        raise HTTPException(status_code=409, detail="A subject with this name already exists")
    return create_subject(db, subject_in.name)


@subject_router.put("/{subject_id}", response_model=SubjectOut, dependencies=[Depends(admin_required)])
def rename_subject_route(subject_id: UUID, subject_in: SubjectCreate, db: Session = Depends(get_db)):
    subject = get_subject_by_id(db, subject_id)
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")

    existing = get_subject_by_name(db, subject_in.name)
    if existing and existing.id != subject.id:
        raise HTTPException(status_code=409, detail="A subject with this name already exists")
    return rename_subject(db, subject, subject_in.name)


@subject_router.delete("/{subject_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(admin_required)])
def delete_subject_route(subject_id: UUID, db: Session = Depends(get_db)):
    subject = get_subject_by_id(db, subject_id)
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")
    if subject.quizzes:
        raise HTTPException(status_code=409, detail="Subject still has quizzes")
    delete_subject(db, subject_id)
    return None
