from pydantic_settings import BaseSettings

from quizhub.services.scoring import MultipleChoiceRule, ScoringConfig


class Settings(BaseSettings):
    # JWT
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Database
    DATABASE_URL: str
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # Scoring
    SCORE_SCALE: float = 10
    SCORE_PRECISION: int = 1
    MULTIPLE_CHOICE_RULE: MultipleChoiceRule = MultipleChoiceRule.PENALIZED
    WRONG_CHOICE_PENALTY: float = 0.1
    PASSING_SCORE: float = 6.0

    class Config:
        env_file = ".env"


settings = Settings()


def scoring_config() -> ScoringConfig:
    return ScoringConfig(
        scale=settings.SCORE_SCALE,
        precision=settings.SCORE_PRECISION,
        multiple_choice_rule=settings.MULTIPLE_CHOICE_RULE,
        wrong_choice_penalty=settings.WRONG_CHOICE_PENALTY,
        passing_score=settings.PASSING_SCORE,
    )
