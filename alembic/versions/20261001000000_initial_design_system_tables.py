"""Initial tables: users, design_tokens, components.

Revision ID: 20261001000000
Revises:
Create Date: 2026-10-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "20261001000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_DOCUMENT = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="designer"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "design_tokens",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=255), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("tags", JSON_DOCUMENT, nullable=False),
        sa.Column("theme", sa.String(length=16), nullable=False, server_default="all"),
        sa.Column("light_value", sa.Text(), nullable=True),
        sa.Column("dark_value", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="active"),
        sa.Column("created_by", sa.String(length=24), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("search_document", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_design_tokens_name"), "design_tokens", ["name"], unique=False)
    op.create_index(op.f("ix_design_tokens_category"), "design_tokens", ["category"], unique=False)
    op.create_index(op.f("ix_design_tokens_status"), "design_tokens", ["status"], unique=False)
    op.create_index(op.f("ix_design_tokens_created_by"), "design_tokens", ["created_by"], unique=False)
    op.create_index(
        "ix_design_tokens_category_created_at",
        "design_tokens",
        ["category", "created_at"],
        unique=False,
    )

    op.create_table(
        "components",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("styles", JSON_DOCUMENT, nullable=False),
        sa.Column("code", JSON_DOCUMENT, nullable=False),
        sa.Column("examples", JSON_DOCUMENT, nullable=False),
        sa.Column("tags", JSON_DOCUMENT, nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="draft"),
        sa.Column("version", sa.String(length=64), nullable=False, server_default="1.0.0"),
        sa.Column("dependencies", JSON_DOCUMENT, nullable=False),
        sa.Column("created_by", sa.String(length=24), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("search_document", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_components_name"), "components", ["name"], unique=False)
    op.create_index(op.f("ix_components_type"), "components", ["type"], unique=False)
    op.create_index(op.f("ix_components_status"), "components", ["status"], unique=False)
    op.create_index(op.f("ix_components_created_by"), "components", ["created_by"], unique=False)
    op.create_index("ix_components_type_status", "components", ["type", "status"], unique=False)
    op.create_index(
        "ix_components_status_created_at",
        "components",
        ["status", "created_at"],
        unique=False,
    )

    if op.get_bind().dialect.name == "postgresql":
        # Expression indexes backing to_tsvector('english', search_document) @@ to_tsquery(...)
        for table in ("design_tokens", "components"):
            op.create_index(
                f"ix_{table}_search_document_fts",
                table,
                [sa.text("to_tsvector('english', search_document)")],
                postgresql_using="gin",
            )


def downgrade() -> None:
    if op.get_bind().dialect.name == "postgresql":
        for table in ("design_tokens", "components"):
            op.drop_index(f"ix_{table}_search_document_fts", table_name=table)
    op.drop_table("components")
    op.drop_table("design_tokens")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
