"""initial_schema

Create the StackIt schema:
- Users (username, role, reputation floored at zero)
- Questions (tags, vote ledger, view counter, accepted answer)
- Answers (vote ledger, acceptance flag)
- Notifications (answer / accept events)

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-18 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _vote_ledger() -> list[sa.Column]:
    return [
        sa.Column(
            "upvotes",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "downvotes",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() lives in pgcrypto before PostgreSQL 13
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("reputation", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "reputation >= 0", name="check_users_reputation_non_negative"
        ),
        sa.CheckConstraint("role IN ('user', 'admin')", name="check_users_role"),
    )
    op.create_index("idx_users_username", "users", ["username"], unique=True)

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        *_vote_ledger(),
        sa.Column("accepted_answer", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="check_questions_views_non_negative"),
    )
    op.create_index("idx_questions_user_id", "questions", ["user_id"])
    op.create_index(
        "idx_questions_created_at",
        "questions",
        [sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_questions_tags", "questions", ["tags"], postgresql_using="gin"
    )

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        *_vote_ledger(),
        sa.Column("is_accepted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["question_id"], ["questions.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index("idx_answers_user_id", "answers", ["user_id"])

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("sender_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=True),
        sa.Column("answer_id", sa.UUID(), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["recipient_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["sender_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["question_id"], ["questions.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["answer_id"], ["answers.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('answer', 'accept')", name="check_notifications_type"
        ),
        sa.CheckConstraint(
            "recipient_id <> sender_id",
            name="check_notifications_not_self_addressed",
        ),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notifications")
    op.drop_table("answers")
    op.drop_table("questions")
    op.drop_table("users")
