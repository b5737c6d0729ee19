import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session
from quizhub.core.config import scoring_config
from quizhub.models.quiz_db.quiz_crud import get_questions_for_quiz
from quizhub.models.quiz_db.quiz_db import Quiz
from quizhub.models.result_db.result_crud import (
    AttemptAlreadyRecordedError,
    has_non_practice_result,
    save_result,
)
from quizhub.models.result_db.result_db import Result
from quizhub.models.user_db.user_db import User
from quizhub.schemas.quiz.submission_base import QuizSubmission
from quizhub.services.scoring import QuizScore, ScoringConfig, score_quiz

logger = logging.getLogger(__name__)


def partial_points(scored: QuizScore) -> float:
    """Points earned on questions that were not answered fully correctly."""
    return sum(outcome.earned_points for outcome in scored.breakdown if not outcome.is_correct)


def submit_quiz(
    db: Session,
    quiz: Quiz,
    user: User,
    submission: QuizSubmission,
    config: Optional[ScoringConfig] = None,
) -> Tuple[Result, QuizScore]:
    # staff may retake any quiz; their attempts never count as graded
    is_practice = user.is_staff

    if not is_practice and has_non_practice_result(db, user.id, quiz.id):
        logger.warning("User %s tried to retake quiz %s", user.username, quiz.id)
        raise AttemptAlreadyRecordedError(user.id, quiz.id)

    questions = get_questions_for_quiz(db, quiz.id)
    scored = score_quiz(
        questions,
        submission.answers,
        config or scoring_config(),
        passing_score=quiz.passing_score,
    )
    result = save_result(db, user.id, quiz.id, scored, is_practice)

    logger.info(
        "User %s scored %.2f on quiz %s (%d/%d correct, %.2f/%.2f points, practice=%s)",
        user.username,
        scored.score,
        quiz.id,
        scored.correct_answers,
        scored.total_questions,
        scored.total_points,
        scored.max_possible_points,
        is_practice,
    )
    return result, scored
