from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from quizhub.core.database import get_db
from quizhub.core.security import admin_required
from quizhub.models.quiz_db.quiz_crud import get_recent_quizzes
from quizhub.models.quiz_db.quiz_db import Quiz
from quizhub.models.result_db.result_db import Result
from quizhub.models.user_db.user_db import User
from quizhub.models.user_db.user_db_crud import count_by_role, get_recent_users
from quizhub.schemas.quiz.quiz_base import QuizBrief
from quizhub.schemas.users.user_base import UserOut

admin_router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(admin_required)])


@admin_router.get("/stats")
def get_dashboard_stats(db: Session = Depends(get_db)):
    return {
        "user_count": db.query(User).count(),
        "quiz_count": db.query(Quiz).count(),
        "result_count": db.query(Result).count(),
        "users_by_role": count_by_role(db),
        "recent_users": [UserOut.model_validate(u) for u in get_recent_users(db, 5)],
        "recent_quizzes": [QuizBrief.model_validate(q) for q in get_recent_quizzes(db, 5)],
    }
