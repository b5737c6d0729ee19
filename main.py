import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from quizhub.core.logging import configure_logging
from quizhub.models import all_models  # noqa: F401
from quizhub.models.result_db.result_crud import AttemptAlreadyRecordedError
from quizhub.routes.admin.admin_routers import admin_router
from quizhub.routes.auth.auth_routers import auth_router
from quizhub.routes.quiz.quiz_routers import quiz_router
from quizhub.routes.result.result_routers import result_router
from quizhub.routes.subject.subject_routers import subject_router
from quizhub.routes.user.user_routers import user_router
from quizhub.services.scoring import ConfigurationError, DuplicateAnswerError

configure_logging()
logger = logging.getLogger("quizhub")

app = FastAPI(title="quizhub", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(subject_router)
app.include_router(quiz_router)
app.include_router(result_router)
app.include_router(admin_router)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Quiz cannot be scored (%s %s): %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": f"This quiz is misconfigured and cannot be scored: {exc}"},
    )


@app.exception_handler(DuplicateAnswerError)
async def duplicate_answer_handler(request: Request, exc: DuplicateAnswerError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(AttemptAlreadyRecordedError)
async def attempt_recorded_handler(request: Request, exc: AttemptAlreadyRecordedError):
    return JSONResponse(
        status_code=403,
        content={"detail": "You have already taken this quiz. Retakes are not allowed."},
    )


@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "quizhub"}
