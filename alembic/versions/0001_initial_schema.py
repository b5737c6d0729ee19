"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(), nullable=False, unique=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime()),
    )
    op.create_index("ix_users_id", "users", ["id"], unique=True)

    op.create_table(
        "subjects",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime()),
        sa.Column("updated_at", sa.DateTime()),
    )
    op.create_index("ix_subjects_id", "subjects", ["id"], unique=True)

    op.create_table(
        "quizzes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("subject_id", sa.Uuid(), sa.ForeignKey("subjects.id"), nullable=False),
        sa.Column("time_limit", sa.Integer()),
        sa.Column("passing_score", sa.Float()),
        sa.Column("created_by_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime()),
    )
    op.create_index("ix_quizzes_id", "quizzes", ["id"], unique=True)
    op.create_index("ix_quizzes_subject_id", "quizzes", ["subject_id"])
    op.create_index("ix_quizzes_created_by_id", "quizzes", ["created_by_id"])

    op.create_table(
        "questions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("quiz_id", sa.Uuid(), sa.ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=False),
        sa.Column("correct_answers", sa.JSON(), nullable=False),
        sa.Column("points", sa.Float()),
        sa.Column("order", sa.Integer(), nullable=False),
    )
    op.create_index("ix_questions_id", "questions", ["id"], unique=True)
    op.create_index("ix_questions_quiz_id", "questions", ["quiz_id"])

    op.create_table(
        "results",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("quiz_id", sa.Uuid(), sa.ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("score", sa.Float(), nullable=False),
        sa.Column("correct_answers", sa.Integer(), nullable=False),
        sa.Column("total_questions", sa.Integer(), nullable=False),
        sa.Column("total_points", sa.Float(), nullable=False),
        sa.Column("max_possible_points", sa.Float(), nullable=False),
        sa.Column("is_practice", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_results_id", "results", ["id"], unique=True)
    op.create_index("ix_results_user_id", "results", ["user_id"])
    op.create_index("ix_results_quiz_id", "results", ["quiz_id"])
    op.create_index(
        "uq_results_graded_attempt",
        "results",
        ["user_id", "quiz_id"],
        unique=True,
        postgresql_where=sa.text("is_practice = false"),
        sqlite_where=sa.text("is_practice = 0"),
    )

    op.create_table(
        "answers",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("result_id", sa.Uuid(), sa.ForeignKey("results.id", ondelete="CASCADE"), nullable=False),
        sa.Column("question_id", sa.Uuid(), sa.ForeignKey("questions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("question_type", sa.String(), nullable=False),
        sa.Column("selected_answer", sa.String()),
        sa.Column("selected_answers", sa.JSON()),
        sa.Column("matching_pairs", sa.JSON()),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("partial_score", sa.Float(), nullable=False),
    )
    op.create_index("ix_answers_id", "answers", ["id"], unique=True)
    op.create_index("ix_answers_result_id", "answers", ["result_id"])


def downgrade() -> None:
    op.drop_table("answers")
    op.drop_index("uq_results_graded_attempt", table_name="results")
    op.drop_table("results")
    op.drop_table("questions")
    op.drop_table("quizzes")
    op.drop_table("subjects")
    op.drop_table("users")
