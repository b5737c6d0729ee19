import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from quizhub.models.quiz_db.question_db import QuizQuestion
from quizhub.models.quiz_db.quiz_db import Quiz
from quizhub.models.result_db.result_db import Result, SubmittedAnswer
from quizhub.models.user_db.user_db import User
from quizhub.services.scoring import QuizScore

logger = logging.getLogger(__name__)


class AttemptAlreadyRecordedError(Exception):
    def __init__(self, user_id, quiz_id):
        super().__init__(f"User {user_id} already has a graded result for quiz {quiz_id}")
        self.user_id = user_id
        self.quiz_id = quiz_id


def has_non_practice_result(db: Session, user_id: UUID, quiz_id: UUID) -> bool:
    query = db.query(Result.id).filter(
        Result.user_id == user_id,
        Result.quiz_id == quiz_id,
        Result.is_practice.is_(False),
    )
    return db.query(query.exists()).scalar()


def _submitted_answer(outcome, user_id: UUID) -> SubmittedAnswer:
    answer = outcome.answer
    return SubmittedAnswer(
        question_id=outcome.question_id,
        user_id=user_id,
        question_type=answer.question_type,
        selected_answer=getattr(answer, "selected_answer", None),
        selected_answers=sorted(answer.selected_answers)
        if getattr(answer, "selected_answers", None) is not None
        else None,
        matching_pairs=getattr(answer, "matching_pairs", None),
        is_correct=outcome.is_correct,
        partial_score=outcome.partial_score,
    )


def save_result(
    db: Session, user_id: UUID, quiz_id: UUID, scored: QuizScore, is_practice: bool
) -> Result:
    """Persist a scored attempt together with its answers.

    The graded-attempt limit is enforced by the ``uq_results_graded_attempt``
    index, so two concurrent graded submissions cannot both be stored.
    """
    result = Result(
        user_id=user_id,
        quiz_id=quiz_id,
        score=scored.score,
        correct_answers=scored.correct_answers,
        total_questions=scored.total_questions,
        total_points=scored.total_points,
        max_possible_points=scored.max_possible_points,
        is_practice=is_practice,
        answers=[
            _submitted_answer(outcome, user_id)
            for outcome in scored.breakdown
            if outcome.answer is not None
        ],
    )
    db.add(result)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_practice:
            raise
        logger.warning("Rejected second graded attempt of quiz %s by user %s", quiz_id, user_id)
        raise AttemptAlreadyRecordedError(user_id, quiz_id) from e
    db.refresh(result)
    return result


def _with_relations(query):
    return query.options(joinedload(Result.user), joinedload(Result.quiz))


def get_result_by_id(db: Session, result_id: UUID) -> Optional[Result]:
    return _with_relations(db.query(Result)).filter(Result.id == result_id).first()


def find_results(
    db: Session,
    username: Optional[str] = None,
    quiz_title: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    include_practice: bool = False,
    teacher_id: Optional[UUID] = None,
) -> List[Result]:
    query = _with_relations(db.query(Result)).join(Result.user).join(Result.quiz)

    if teacher_id:
        query = query.filter(Quiz.created_by_id == teacher_id)
    if not include_practice:
        query = query.filter(Result.is_practice.is_(False))
    if username:
        query = query.filter(func.lower(User.username).contains(username.lower()))
    if quiz_title:
        query = query.filter(func.lower(Quiz.title).contains(quiz_title.lower()))
    if date_from:
        query = query.filter(Result.created_at >= datetime.combine(date_from, time.min))
    if date_to:
        # the whole of the last day is included
        query = query.filter(Result.created_at < datetime.combine(date_to + timedelta(days=1), time.min))

    return query.order_by(Result.created_at.desc()).all()


def get_results_by_user(db: Session, user_id: UUID) -> List[Result]:
    return (
        _with_relations(db.query(Result))
        .filter(Result.user_id == user_id)
        .order_by(Result.created_at.desc())
        .all()
    )


def get_results_by_quiz(db: Session, quiz_id: UUID, include_practice: bool = False) -> List[Result]:
    query = _with_relations(db.query(Result)).filter(Result.quiz_id == quiz_id)
    if not include_practice:
        query = query.filter(Result.is_practice.is_(False))
    return query.order_by(Result.score.desc()).all()


def get_result_for_user_and_quiz(db: Session, user_id: UUID, quiz_id: UUID) -> Optional[Result]:
    return (
        _with_relations(db.query(Result))
        .filter(Result.user_id == user_id, Result.quiz_id == quiz_id)
        .order_by(Result.is_practice, Result.created_at.desc())
        .first()
    )


def get_recent_results_for_teacher(db: Session, teacher_id: UUID, limit: int = 5) -> List[Result]:
    return (
        _with_relations(db.query(Result))
        .join(Result.quiz)
        .filter(Quiz.created_by_id == teacher_id)
        .order_by(Result.created_at.desc())
        .limit(limit)
        .all()
    )


def get_answers_for_result(db: Session, result_id: UUID) -> List[SubmittedAnswer]:
    return (
        db.query(SubmittedAnswer)
        .join(SubmittedAnswer.question)
        .options(joinedload(SubmittedAnswer.question))
        .filter(SubmittedAnswer.result_id == result_id)
        .order_by(QuizQuestion.order)
        .all()
    )


def average_score_for_user(db: Session, user_id: UUID) -> float:
    average = db.query(func.avg(Result.score)).filter(Result.user_id == user_id).scalar()
    return float(average or 0)


def get_student_performance(db: Session, user_id: UUID, default_passing_score: float) -> dict:
    results = get_results_by_user(db, user_id)
    if not results:
        return {
            "total_quizzes": 0,
            "average_score": 0.0,
            "highest_score": 0.0,
            "lowest_score": 0.0,
            "quizzes_passed": 0,
            "recent_results": [],
        }

    scores = [result.score for result in results]
    passed = sum(
        1
        for result in results
        if result.score >= (
            result.quiz.passing_score if result.quiz.passing_score is not None else default_passing_score
        )
    )
    return {
        "total_quizzes": len(results),
        "average_score": sum(scores) / len(scores),
        "highest_score": max(scores),
        "lowest_score": min(scores),
        "quizzes_passed": passed,
        "recent_results": results[:5],
    }
