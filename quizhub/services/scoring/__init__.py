from quizhub.services.scoring.aggregator import round_half_up, scale_score, score_quiz
from quizhub.services.scoring.errors import ConfigurationError, DuplicateAnswerError, ScoringError
from quizhub.services.scoring.evaluators import evaluate
from quizhub.services.scoring.records import (
    DEFAULT_CONFIG,
    Answer,
    ChoiceAnswer,
    Evaluation,
    MatchingAnswer,
    MultipleChoiceAnswer,
    MultipleChoiceRule,
    Question,
    QuestionOutcome,
    QuestionType,
    QuizScore,
    ScoringConfig,
)
from quizhub.services.scoring.validation import index_answers, question_from_record, validate_question

__all__ = [
    "Answer",
    "ChoiceAnswer",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "DuplicateAnswerError",
    "Evaluation",
    "MatchingAnswer",
    "MultipleChoiceAnswer",
    "MultipleChoiceRule",
    "Question",
    "QuestionOutcome",
    "QuestionType",
    "QuizScore",
    "ScoringConfig",
    "ScoringError",
    "evaluate",
    "index_answers",
    "question_from_record",
    "round_half_up",
    "scale_score",
    "score_quiz",
    "validate_question",
]
