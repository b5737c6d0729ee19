"""Per-question correctness and partial credit.

Every evaluator is a pure function of (question, answer, config) and
returns an ``Evaluation`` whose ``partial_score`` lies in [0, 1]. Callers
go through ``evaluate``, which validates the question, handles missing
answers and answers of the wrong shape, and dispatches on the question type.
"""
import logging
from typing import Callable, Dict, Optional, Set, Tuple, Type

from quizhub.services.scoring.errors import ConfigurationError
from quizhub.services.scoring.records import (
    DEFAULT_CONFIG,
    UNANSWERED,
    Answer,
    ChoiceAnswer,
    Evaluation,
    MatchingAnswer,
    MultipleChoiceAnswer,
    MultipleChoiceRule,
    Question,
    QuestionType,
    ScoringConfig,
)
from quizhub.services.scoring.validation import validate_question

logger = logging.getLogger(__name__)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def evaluate_choice(question: Question, answer: ChoiceAnswer, config: ScoringConfig) -> Evaluation:
    if answer.selected_answer is None:
        return UNANSWERED
    is_correct = answer.selected_answer == question.correct_answers[0]
    return Evaluation(is_correct, 1.0 if is_correct else 0.0)


def _penalized(correct: Set[str], selected: Set[str], config: ScoringConfig) -> float:
    return (len(correct & selected) - len(selected - correct)) / len(correct)


def _flat_penalty(correct: Set[str], selected: Set[str], config: ScoringConfig) -> float:
    if not selected:
        return 0.0
    hits = len(correct & selected) / len(correct)
    return hits - config.wrong_choice_penalty * len(selected - correct)


def _all_or_nothing(correct: Set[str], selected: Set[str], config: ScoringConfig) -> float:
    return 0.0


MULTIPLE_CHOICE_RULES: Dict[MultipleChoiceRule, Callable[[Set[str], Set[str], ScoringConfig], float]] = {
    MultipleChoiceRule.PENALIZED: _penalized,
    MultipleChoiceRule.FLAT_PENALTY: _flat_penalty,
    MultipleChoiceRule.ALL_OR_NOTHING: _all_or_nothing,
}


def evaluate_multiple_choice(
    question: Question, answer: MultipleChoiceAnswer, config: ScoringConfig
) -> Evaluation:
    if answer.selected_answers is None:
        return UNANSWERED

    correct = set(question.correct_answers)
    selected = set(answer.selected_answers)

    if not correct:
        is_correct = not selected
        return Evaluation(is_correct, float(is_correct))
    if selected == correct:
        return Evaluation(True, 1.0)

    rule = MULTIPLE_CHOICE_RULES[config.multiple_choice_rule]
    return Evaluation(False, _clamp(rule(correct, selected, config)))


def evaluate_matching(question: Question, answer: MatchingAnswer, config: ScoringConfig) -> Evaluation:
    pairs = answer.matching_pairs
    if pairs is None:
        return UNANSWERED

    total = len(question.options)
    matched = sum(
        1
        for key, expected in zip(question.options, question.correct_answers)
        if pairs.get(key) == expected
    )
    return Evaluation(matched == total, matched / total)


EVALUATORS: Dict[QuestionType, Tuple[Type, Callable[[Question, Answer, ScoringConfig], Evaluation]]] = {
    QuestionType.SINGLE_CHOICE: (ChoiceAnswer, evaluate_choice),
    QuestionType.TRUE_FALSE: (ChoiceAnswer, evaluate_choice),
    QuestionType.MULTIPLE_CHOICE: (MultipleChoiceAnswer, evaluate_multiple_choice),
    QuestionType.MATCHING: (MatchingAnswer, evaluate_matching),
}


def evaluate(
    question: Question, answer: Optional[Answer] = None, config: ScoringConfig = DEFAULT_CONFIG
) -> Evaluation:
    validate_question(question)
    answer_class, evaluator = EVALUATORS[question.type]

    if answer is None:
        return UNANSWERED
    if not isinstance(answer, answer_class):
        logger.debug(
            "Answer for question %s has shape %s, expected %s; scoring as unanswered",
            question.id,
            type(answer).__name__,
            answer_class.__name__,
        )
        return UNANSWERED
    return evaluator(question, answer, config)
