"""SQLAlchemy table definitions for StackIt.

These are SQLAlchemy Core tables mapped by hand to the pydantic domain
models (see mappers.py). They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("username", String(50), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("reputation >= 0", name="check_users_reputation_non_negative"),
    CheckConstraint("role IN ('user', 'admin')", name="check_users_role"),
)

Index("idx_users_username", users_table.c.username, unique=True)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("tags", ARRAY(String), nullable=False, server_default="{}"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("views", Integer, nullable=False, server_default="0"),
    # Vote ledger: membership lists are authoritative, vote_count is cached
    Column("upvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    # No FK to answers: the two tables would reference each other
    Column("accepted_answer", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="check_questions_views_non_negative"),
)

Index("idx_questions_user_id", questions_table.c.user_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("content", Text, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("upvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_user_id", answers_table.c.user_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "sender_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("type", String(20), nullable=False),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="SET NULL"), nullable=True
    ),
    Column("message", Text, nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("type IN ('answer', 'accept')", name="check_notifications_type"),
    CheckConstraint(
        "recipient_id <> sender_id", name="check_notifications_not_self_addressed"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
