"""Create documents table

Revision ID: 3f1c9a2be7d4
Revises:
Create Date: 2026-09-14

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from brbs.adapters.db.dialects import Backend, backend_of
from brbs.adapters.db.sa_types import BIGINT_PK, PORTABLE_JSON, UTCDateTime

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2be7d4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    backend = backend_of(bind.dialect.name)

    op.create_table(
        "documents",
        sa.Column(
            "seq",
            BIGINT_PK,
            sa.Identity(always=False, start=1),
            nullable=False,
            comment="Insertion sequence; defines the natural order of a collection.",
        ),
        sa.Column(
            "collection",
            sa.String(length=100),
            nullable=False,
            comment="Collection name (e.g., 'forum_posts').",
        ),
        sa.Column(
            "doc_id",
            sa.String(length=200),
            nullable=False,
            comment="Document identity (the body's `_id`).",
        ),
        sa.Column(
            "revision",
            sa.Integer(),
            nullable=False,
            comment="Starts at 1; bumped on every update (optimistic concurrency).",
        ),
        sa.Column(
            "body",
            PORTABLE_JSON,
            nullable=False,
            comment="Document body (JSON object).",
        ),
        sa.Column(
            "recorded_at",
            UTCDateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="Server-assigned UTC insert timestamp.",
        ),
        sa.Column(
            "updated_at",
            UTCDateTime(),
            nullable=True,
            comment="UTC timestamp of the last update, if any.",
        ),
        sa.CheckConstraint(
            "revision >= 1", name=op.f("ck_documents_positive_revision")
        ),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_documents")),
        sa.UniqueConstraint(
            "collection", "doc_id", name=op.f("uq_documents_collection_doc_id")
        ),
        comment="Document collections backing the BRBS catalogs.",
    )
    op.create_index(
        op.f("ix_documents_documents_collection_documents_seq"),
        "documents",
        ["collection", "seq"],
        unique=False,
    )

    # Postgres specific
    if backend is Backend.POSTGRES:
        op.create_index(
            "ix_documents_body_gin",
            "documents",
            ["body"],
            postgresql_using="gin",
        )


def downgrade() -> None:
    """Downgrade schema."""
    bind = op.get_bind()
    if backend_of(bind.dialect.name) is Backend.POSTGRES:
        op.drop_index("ix_documents_body_gin", table_name="documents")
    op.drop_index(
        op.f("ix_documents_documents_collection_documents_seq"),
        table_name="documents",
    )
    op.drop_table("documents")
