# Importing every model registers it on Base.metadata and resolves string relationships.
from quizhub.models.user_db.user_db import User, UserRole  # noqa: F401
from quizhub.models.subject_db.subject_db import Subject  # noqa: F401
from quizhub.models.quiz_db.quiz_db import Quiz  # noqa: F401
from quizhub.models.quiz_db.question_db import QuizQuestion  # noqa: F401
from quizhub.models.result_db.result_db import Result, SubmittedAnswer  # noqa: F401
