from uuid import UUID
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session
from quizhub.models.quiz_db.quiz_db import Quiz
from quizhub.models.subject_db.subject_db import Subject


def get_subject_by_id(db: Session, subject_id: UUID):
    return db.query(Subject).filter(Subject.id == subject_id).first()


def get_subject_by_name(db: Session, name: str):
    return db.query(Subject).filter(func.lower(Subject.name) == name.lower()).first()


def get_all_subjects(db: Session) -> List[Subject]:
    return db.query(Subject).order_by(Subject.name).all()


def get_subjects_with_quiz_count(db: Session) -> List[dict]:
    rows = (
        db.query(Subject.id, Subject.name, func.count(Quiz.id))
        .outerjoin(Quiz, (Quiz.subject_id == Subject.id) & (Quiz.is_published.is_(True)))
        .group_by(Subject.id, Subject.name)
        .order_by(Subject.name)
        .all()
    )
    return [{"id": subject_id, "name": name, "quiz_count": total} for subject_id, name, total in rows]


def create_subject(db: Session, name: str):
    subject = Subject(name=name)
    db.add(subject)
    db.commit()
    db.refresh(subject)
    return subject


def rename_subject(db: Session, subject: Subject, name: str):
    subject.name = name
    db.commit()
    db.refresh(subject)
    return subject


def delete_subject(db: Session, subject_id: UUID):
    subject = get_subject_by_id(db, subject_id)
    if not subject:
        return None
    db.delete(subject)
    db.commit()
    return subject
