import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session
from quizhub.models.quiz_db.question_db import QuizQuestion
from quizhub.models.quiz_db.quiz_db import Quiz
from quizhub.models.user_db.user_db import User, UserRole
from quizhub.schemas.quiz.question_base import QuestionCreate
from quizhub.schemas.quiz.quiz_base import QuizCreate, QuizUpdate
from quizhub.services.scoring import Question, question_from_record

logger = logging.getLogger(__name__)


def build_question(question_in: QuestionCreate, index: int) -> QuizQuestion:
    options, correct_answers = question_in.answer_key()
    return QuizQuestion(
        text=question_in.text,
        type=question_in.type.value,
        options=options,
        correct_answers=correct_answers,
        points=question_in.points,
        order=question_in.order if question_in.order is not None else index,
    )


def create_quiz(db: Session, quiz_in: QuizCreate, created_by: User) -> Quiz:
    quiz = Quiz(
        title=quiz_in.title,
        description=quiz_in.description,
        subject_id=quiz_in.subject_id,
        time_limit=quiz_in.time_limit,
        passing_score=quiz_in.passing_score,
        is_published=quiz_in.is_published,
        created_by_id=created_by.id,
        questions=[build_question(q, i) for i, q in enumerate(quiz_in.questions)],
    )
    db.add(quiz)
    db.commit()
    db.refresh(quiz)
    logger.info(
        "Quiz %s created by %s with %d questions", quiz.id, created_by.username, len(quiz.questions)
    )
    return quiz


def get_quiz_by_id(db: Session, quiz_id: UUID) -> Optional[Quiz]:
    return db.query(Quiz).filter(Quiz.id == quiz_id).first()


def get_quizzes_for_user(db: Session, user: User) -> List[Quiz]:
    query = db.query(Quiz)
    if user.role == UserRole.TEACHER.value:
        query = query.filter(Quiz.created_by_id == user.id)
    elif user.role != UserRole.ADMIN.value:
        query = query.filter(Quiz.is_published.is_(True))
    return query.order_by(Quiz.created_at.desc()).all()


def get_recent_quizzes(db: Session, limit: int = 5, published_only: bool = False) -> List[Quiz]:
    query = db.query(Quiz)
    if published_only:
        query = query.filter(Quiz.is_published.is_(True))
    return query.order_by(Quiz.created_at.desc()).limit(limit).all()


def get_questions_for_quiz(db: Session, quiz_id: UUID) -> List[Question]:
    records = (
        db.query(QuizQuestion)
        .filter(QuizQuestion.quiz_id == quiz_id)
        .order_by(QuizQuestion.order)
        .all()
    )
    return [question_from_record(record) for record in records]


def update_quiz(db: Session, quiz: Quiz, updates: QuizUpdate) -> Quiz:
    for field, value in updates.model_dump(exclude_unset=True).items():
        setattr(quiz, field, value)
    db.commit()
    db.refresh(quiz)
    return quiz


def set_published(db: Session, quiz: Quiz, is_published: bool) -> Quiz:
    quiz.is_published = is_published
    db.commit()
    db.refresh(quiz)
    return quiz


def delete_quiz(db: Session, quiz: Quiz) -> None:
    db.delete(quiz)
    db.commit()
    logger.info("Quiz %s deleted", quiz.id)
