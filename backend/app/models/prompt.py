"""
Promptopia Backend — Prompt SQLAlchemy Model
==============================================

What:  ORM model representing the `prompts` table.
Why:   Maps Python objects to database rows for type-safe queries.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Queried by PromptService; created/edited outside this service.

Table Design Rationale:
    - creator_id: Foreign key to users.id. The schema (not the service)
      guarantees that a resolving key refers to exactly one user.
    - prompt: Full prompt text, no length limit
    - tag: Free-form topic label (e.g. "#webdev")
    - created_at: UTC with timezone; also the listing order

    Index on (creator_id, created_at):
        Serves the lookup endpoint's only query:
        WHERE creator_id = :id ORDER BY created_at, id
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.user import generate_id


class Prompt(Base):
    """
    A prompt shared by a user.

    Query Patterns:
        - Prompts by creator: SELECT ... WHERE creator_id = :id
          → Uses idx_prompts_creator_created_at
    """

    __tablename__ = "prompts"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        default=generate_id,
        comment="Opaque prompt identifier",
    )

    creator_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owning user (the prompt's creator)",
    )

    prompt: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Prompt text",
    )

    tag: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Topic tag",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this prompt was created (UTC)",
    )

    __table_args__ = (
        Index("idx_prompts_creator_created_at", "creator_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Prompt(id={self.id}, creator_id={self.creator_id}, tag='{self.tag}')>"
