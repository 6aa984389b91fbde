"""initial llm provider and model tables

Revision ID: 202610190001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "202610190001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    existing = set(inspector.get_table_names())

    if "llm_settings" not in existing:
        op.create_table(
            "llm_settings",
            sa.Column("provider", sa.Text(), nullable=False),
            sa.Column("provider_name", sa.Text(), nullable=False),
            sa.Column("is_active", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("api_style", sa.Text(), nullable=False, server_default="openai"),
            sa.Column("logo", sa.Text(), nullable=True),
            sa.Column("endpoint", sa.Text(), nullable=True),
            sa.Column("apikey", sa.Text(), nullable=True),
            sa.Column("order", sa.Integer(), nullable=True),
            sa.Column("type", sa.Text(), nullable=False, server_default="default"),
            sa.PrimaryKeyConstraint("provider"),
        )

    if "models" not in existing:
        op.create_table(
            "models",
            sa.Column("name", sa.Text(), nullable=False),
            sa.Column("provider_id", sa.Text(), nullable=False),
            sa.Column("display_name", sa.Text(), nullable=False),
            sa.Column("max_tokens", sa.Integer(), nullable=True),
            sa.Column("support_vision", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("selected", sa.Integer(), nullable=False, server_default="1"),
            sa.Column("order", sa.Integer(), nullable=True),
            sa.Column("type", sa.Text(), nullable=False, server_default="default"),
            sa.ForeignKeyConstraint(["provider_id"], ["llm_settings.provider"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("name"),
        )


def downgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    existing = set(inspector.get_table_names())
    if "models" in existing:
        op.drop_table("models")
    if "llm_settings" in existing:
        op.drop_table("llm_settings")
