from decimal import ROUND_HALF_UP, Decimal
from operator import attrgetter
from typing import Iterable, Optional, Sequence

from quizhub.services.scoring.evaluators import evaluate
from quizhub.services.scoring.records import (
    DEFAULT_CONFIG,
    Answer,
    Question,
    QuestionOutcome,
    QuizScore,
    ScoringConfig,
)
from quizhub.services.scoring.validation import index_answers


def round_half_up(value: float, precision: int) -> float:
    quantum = Decimal(1).scaleb(-precision)
    # drop float noise (0.24999999999999997) before the half-up step
    return float(Decimal(str(round(value, 9))).quantize(quantum, rounding=ROUND_HALF_UP))


def scale_score(total_points: float, max_possible_points: float, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    if max_possible_points <= 0:
        return 0.0
    raw = total_points / max_possible_points * config.scale
    return min(round_half_up(raw, config.precision), config.scale)


def score_quiz(
    questions: Sequence[Question],
    answers: Iterable[Answer],
    config: ScoringConfig = DEFAULT_CONFIG,
    passing_score: Optional[float] = None,
) -> QuizScore:
    """Score one submission against a quiz's questions.

    Questions are evaluated in ``order``. Answers for questions outside the
    quiz are ignored, and questions without an answer earn nothing. The
    first question that cannot be scored as stored raises
    ``ConfigurationError`` and aborts the whole quiz.

    ``passing_score`` overrides ``config.passing_score`` for this quiz.
    """
    question_ids = {question.id for question in questions}
    answers_by_question = index_answers(answer for answer in answers if answer.question_id in question_ids)

    breakdown = []
    correct_answers = 0
    total_points = 0.0
    max_possible_points = 0.0

    for question in sorted(questions, key=attrgetter("order")):
        answer = answers_by_question.get(question.id)
        evaluation = evaluate(question, answer, config)
        earned = evaluation.partial_score * question.points

        correct_answers += 1 if evaluation.is_correct else 0
        total_points += earned
        max_possible_points += question.points

        breakdown.append(
            QuestionOutcome(
                question_id=question.id,
                is_correct=evaluation.is_correct,
                partial_score=evaluation.partial_score,
                points=question.points,
                earned_points=earned,
                question=question,
                answer=answer,
            )
        )

    score = scale_score(total_points, max_possible_points, config)
    threshold = config.passing_score if passing_score is None else passing_score

    return QuizScore(
        score=score,
        correct_answers=correct_answers,
        total_questions=len(breakdown),
        total_points=total_points,
        max_possible_points=max_possible_points,
        passed=score >= threshold,
        breakdown=breakdown,
    )
