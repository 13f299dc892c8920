"""Create users and prompts tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `users` table and the `prompts` table that references it.
Rollback: downgrade() drops both tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, then prompts (foreign key to users.id), then the lookup index."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), nullable=False, comment="Opaque user identifier"),
        sa.Column("email", sa.String(255), nullable=False, comment="Sign-in email address"),
        sa.Column("username", sa.String(64), nullable=False, comment="Public handle shown next to prompts"),
        sa.Column("image", sa.String(512), nullable=True, comment="Avatar URL"),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    op.create_table(
        "prompts",
        sa.Column("id", sa.String(64), nullable=False, comment="Opaque prompt identifier"),
        sa.Column("creator_id", sa.String(64), nullable=False, comment="Owning user (the prompt's creator)"),
        sa.Column("prompt", sa.Text(), nullable=False, comment="Prompt text"),
        sa.Column("tag", sa.String(64), nullable=False, comment="Topic tag"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this prompt was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_prompts"),
        sa.ForeignKeyConstraint(
            ["creator_id"],
            ["users.id"],
            name="fk_prompts_creator_id_users",
            ondelete="CASCADE",
        ),
    )

    # Serves WHERE creator_id = :id ORDER BY created_at
    op.create_index(
        "idx_prompts_creator_created_at",
        "prompts",
        ["creator_id", "created_at"],
    )


def downgrade() -> None:
    """Drop in reverse dependency order."""
    op.drop_index("idx_prompts_creator_created_at", table_name="prompts")
    op.drop_table("prompts")
    op.drop_table("users")
