"""SQLAlchemy table definitions for Deliberate.

These tables are used with SQLAlchemy Core; rows are mapped to the
immutable domain models by hand (see mappers.py).
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
# Owners and voters are identified by the external identity provider, so
# there is no users table to reference.
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(500), nullable=False),
    Column("description", Text, nullable=False),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("owner_id", UUID, nullable=False),
    Column("allowed_emails", ARRAY(String(255)), nullable=False, server_default="{}"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index(
    "idx_questions_allowed_emails",
    questions_table.c.allowed_emails,
    postgresql_using="gin",
)

# ============================================================================
# SOLUTIONS TABLE
# ============================================================================
solutions_table = Table(
    "solutions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, nullable=False),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_solutions_question_id",
    solutions_table.c.question_id,
    solutions_table.c.created_at,
)

# ============================================================================
# PROCONS TABLE (the votable items)
# ============================================================================
procons_table = Table(
    "procons",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "solution_id",
        UUID,
        ForeignKey("solutions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, nullable=False),
    Column(
        "polarity",
        postgresql.ENUM("pro", "con", name="procon_polarity", create_type=False),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_procons_solution_id",
    procons_table.c.solution_id,
    procons_table.c.created_at,
)

# ============================================================================
# VOTES TABLE (the ledger)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "procon_id",
        UUID,
        ForeignKey("procons.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One current vote per user per item; the upsert conflicts on this
    UniqueConstraint("user_id", "procon_id", name="uq_vote_user_procon"),
    CheckConstraint("value IN (1, -1)", name="ck_vote_value"),
)

Index("idx_votes_procon_id", votes_table.c.procon_id)
