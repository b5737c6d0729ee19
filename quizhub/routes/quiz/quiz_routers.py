from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from quizhub.core.database import get_db
from quizhub.core.security import get_current_user, staff_required
from quizhub.models.quiz_db import quiz_crud
from quizhub.models.quiz_db.quiz_db import Quiz
from quizhub.models.result_db.result_crud import (
    average_score_for_user,
    get_recent_results_for_teacher,
    get_results_by_user,
    has_non_practice_result,
)
from quizhub.models.subject_db.subject_crud import get_all_subjects, get_subject_by_id
from quizhub.models.user_db.user_db import User, UserRole
from quizhub.schemas.quiz.quiz_base import (
    QuizCreate, QuizOut, QuizPublicOut, QuizStatusUpdate, QuizUpdate
)
from quizhub.schemas.quiz.submission_base import QuizSubmission
from quizhub.schemas.result.result_base import (
    AttemptStatusOut, QuestionOutcomeOut, ResultOut, SubmissionOut
)
from quizhub.schemas.subject.subject_base import SubjectOut
from quizhub.services.submission import partial_points, submit_quiz

quiz_router = APIRouter(prefix="/quizzes", tags=["Quizzes"])


def quiz_view(quiz: Quiz, user: User):
    if user.is_staff:
        return QuizOut.model_validate(quiz)
    return QuizPublicOut.model_validate(quiz)


def get_visible_quiz(quiz_id: UUID, db: Session, user: User) -> Quiz:
    quiz = quiz_crud.get_quiz_by_id(db, quiz_id)
    if not quiz or (not quiz.is_published and not user.is_staff):
        raise HTTPException(status_code=404, detail="Quiz not found")
    return quiz


def ensure_can_manage(quiz: Quiz, user: User):
    if user.role != UserRole.ADMIN.value and quiz.created_by_id != user.id:
        raise HTTPException(status_code=403, detail="You do not have permission to modify this quiz")


@quiz_router.post("/", response_model=QuizOut, status_code=status.HTTP_201_CREATED)
def create_quiz(
    quiz_in: QuizCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(staff_required)
):
    if not get_subject_by_id(db, quiz_in.subject_id):
        raise HTTPException(status_code=400, detail=f"Subject {quiz_in.subject_id} not found")
    return quiz_crud.create_quiz(db, quiz_in, current_user)


@quiz_router.get("/", response_model=List[QuizPublicOut])
def list_quizzes(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return quiz_crud.get_quizzes_for_user(db, current_user)


@quiz_router.get("/home")
def get_homepage(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    quizzes = quiz_crud.get_quizzes_for_user(db, current_user)
    stats = {}

    if current_user.role == UserRole.ADMIN.value:
        stats["total_quizzes"] = db.query(Quiz).count()
        stats["total_users"] = db.query(User).count()
        stats["total_subjects"] = len(get_all_subjects(db))
    elif current_user.role == UserRole.TEACHER.value:
        stats["total_quizzes"] = len(quizzes)
        stats["recent_results"] = [
            ResultOut.model_validate(r) for r in get_recent_results_for_teacher(db, current_user.id)
        ]
    else:
        stats["recent_results"] = [
            ResultOut.model_validate(r) for r in get_results_by_user(db, current_user.id)[:5]
        ]
        stats["average_score"] = average_score_for_user(db, current_user.id)

    return {
        "user_role": current_user.role,
        "quizzes": [QuizPublicOut.model_validate(q) for q in quizzes],
        "subjects": [SubjectOut.model_validate(s) for s in get_all_subjects(db)],
        "stats": stats,
    }


@quiz_router.get("/{quiz_id}", response_model=None)
def get_quiz(quiz_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return quiz_view(get_visible_quiz(quiz_id, db, current_user), current_user)


@quiz_router.put("/{quiz_id}", response_model=QuizOut)
def update_quiz(
    quiz_id: UUID,
    quiz_in: QuizUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(staff_required)
):
    quiz = quiz_crud.get_quiz_by_id(db, quiz_id)
    if not quiz:
        raise HTTPException(status_code=404, detail="Quiz not found")
    if quiz.created_by_id != current_user.id:
        raise HTTPException(status_code=403, detail="You do not have permission to update this quiz")
    if quiz_in.subject_id and not get_subject_by_id(db, quiz_in.subject_id):
        raise HTTPException(status_code=400, detail=f"Subject {quiz_in.subject_id} not found")
    return quiz_crud.update_quiz(db, quiz, quiz_in)


@quiz_router.patch("/{quiz_id}/status", response_model=QuizOut)
def update_quiz_status(
    quiz_id: UUID,
    status_in: QuizStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(staff_required)
):
    quiz = quiz_crud.get_quiz_by_id(db, quiz_id)
    if not quiz:
        raise HTTPException(status_code=404, detail="Quiz not found")
    ensure_can_manage(quiz, current_user)
    return quiz_crud.set_published(db, quiz, status_in.is_published)


@quiz_router.delete("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quiz(quiz_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(staff_required)):
    quiz = quiz_crud.get_quiz_by_id(db, quiz_id)
    if not quiz:
        raise HTTPException(status_code=404, detail="Quiz not found")
    ensure_can_manage(quiz, current_user)
    quiz_crud.delete_quiz(db, quiz)
    return None


@quiz_router.get("/{quiz_id}/attempt-status", response_model=AttemptStatusOut)
def get_attempt_status(quiz_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    quiz = get_visible_quiz(quiz_id, db, current_user)
    return AttemptStatusOut(quiz_id=quiz.id, has_taken=has_non_practice_result(db, current_user.id, quiz.id))


@quiz_router.post("/{quiz_id}/submit", response_model=SubmissionOut)
def submit(
    quiz_id: UUID,
    submission: QuizSubmission,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    quiz = get_visible_quiz(quiz_id, db, current_user)
    result, scored = submit_quiz(db, quiz, current_user, submission)
    return SubmissionOut(
        result=ResultOut.model_validate(result),
        passed=scored.passed,
        partial_points=partial_points(scored),
        breakdown=[
            QuestionOutcomeOut(
                question_id=outcome.question_id,
                is_correct=outcome.is_correct,
                partial_score=outcome.partial_score,
                points=outcome.points,
                earned_points=outcome.earned_points,
            )
            for outcome in scored.breakdown
        ],
    )
