class ScoringError(Exception):
    """Base class for everything the scoring engine raises."""


class ConfigurationError(ScoringError):
    """A question record cannot be scored as stored (bad type, options or key)."""

    def __init__(self, message: str, question_id=None):
        super().__init__(message)
        self.question_id = question_id


class DuplicateAnswerError(ScoringError):
    def __init__(self, question_id):
        super().__init__(f"More than one answer submitted for question {question_id}")
        self.question_id = question_id
