"""
Promptopia Backend — User SQLAlchemy Model
============================================

What:  ORM model for the `users` table: the owner ("creator") of prompts.
Why:   Prompts reference their creator by id; the lookup endpoint expands
       that reference into this record.
Who:   Read by PromptService when populating prompt creators.
When:  Rows are created by the sign-in flow outside this service; read-only here.
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def generate_id() -> str:
    """Default primary key: 32-character hex UUID."""
    return uuid.uuid4().hex


class User(Base):
    """
    An identity record that owns prompts.

    Query Patterns:
        - Populate creators: SELECT ... WHERE id IN (:ids)
          → Uses primary key index
    """

    __tablename__ = "users"

    # Why string (not UUID): Identifiers are opaque strings issued by the
    # sign-in provider; only their character set is validated at the API edge
    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        default=generate_id,
        comment="Opaque user identifier",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="Sign-in email address",
    )

    username: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        comment="Public handle shown next to prompts",
    )

    # Nullable: not every provider returns an avatar
    image: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        default=None,
        comment="Avatar URL",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
