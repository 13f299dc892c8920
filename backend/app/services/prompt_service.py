"""
Promptopia Backend — Prompt Service (Business Logic)
======================================================

What:  Lists the prompts a user created, with each creator populated inline.
Why:   Keeps query and join logic independent of HTTP concerns.
How:   connect → query prompts → batch-fetch creators → merge → serialize.
Who:   Called by GET /api/users/{id}/posts.

Populate Flow:
    ┌───────────┐    ┌───────────────┐    ┌────────────────┐    ┌─────────┐
    │ Validate  │───▶│ prompts WHERE │───▶│ users WHERE id │───▶│  Merge  │
    │ user id   │    │ creator_id=id │    │ IN (distinct)  │    │         │
    └───────────┘    └───────────────┘    └────────────────┘    └─────────┘

    Two queries regardless of result size. Creators are fetched once per
    distinct id rather than once per prompt.

Error Handling:
    A malformed id raises ValidationError before any database work (→ 400).
    Every later failure (connect, query, serialization) is logged with its
    cause and re-raised as PromptFetchError (→ 500, fixed plain-text body).
    Zero matching prompts is a normal, empty result.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import connect_to_db, session_scope
from app.exceptions import PromptFetchError, ValidationError
from app.models.prompt import Prompt
from app.models.user import User
from app.schemas.prompt import CreatorResponse, PromptResponse

logger = logging.getLogger(__name__)

USER_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")


class PromptService:
    """
    Read-only access to prompts.

    Stateless: the shared engine lives in app.database; each call opens
    its own session, so concurrent calls never share mutable state.
    """

    def validate_user_id(self, user_id: str) -> str:
        """
        Reject identifiers that cannot name a user.

        Raises:
            ValidationError: user_id is empty, longer than 64 characters, or
                             contains characters outside [A-Za-z0-9_-]
        """
        if not USER_ID_PATTERN.fullmatch(user_id):
            raise ValidationError(
                message="User id must be 1-64 characters of letters, digits, '_' or '-'",
                field="id",
            )
        return user_id

    async def list_prompts_by_creator(self, creator_id: str) -> List[PromptResponse]:
        """
        Return every prompt created by `creator_id`, creators populated.

        Args:
            creator_id: User identifier from the URL path

        Returns:
            Prompts in store order (created_at, then id). Empty if the user
            has no prompts or does not exist.

        Raises:
            ValidationError: Malformed creator_id (→ 400)
            PromptFetchError: Any connection, query or serialization failure (→ 500)
        """
        self.validate_user_id(creator_id)

        try:
            await connect_to_db()
            async with session_scope() as db:
                prompts = await self._fetch_prompts(db, creator_id)
                creators = await self._fetch_creators(db, (p.creator_id for p in prompts))

            results = [
                self._to_response(prompt, creators.get(prompt.creator_id))
                for prompt in prompts
            ]
        except Exception as e:
            logger.error(
                "Failed to fetch prompts for creator %s: %s",
                creator_id,
                str(e),
                exc_info=True,
            )
            raise PromptFetchError(
                context={"creator_id": creator_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Fetched %d prompts for creator %s", len(results), creator_id)
        return results

    async def _fetch_prompts(self, db: AsyncSession, creator_id: str) -> List[Prompt]:
        result = await db.execute(
            select(Prompt)
            .where(Prompt.creator_id == creator_id)
            .order_by(Prompt.created_at, Prompt.id)
        )
        return list(result.scalars().all())

    async def _fetch_creators(
        self, db: AsyncSession, creator_ids: Iterable[str]
    ) -> Dict[str, User]:
        """Batch-load users by id; ids that do not resolve are simply absent."""
        ids = set(creator_ids)
        if not ids:
            return {}

        result = await db.execute(select(User).where(User.id.in_(ids)))
        return {user.id: user for user in result.scalars().all()}

    @staticmethod
    def _to_response(prompt: Prompt, creator: Optional[User]) -> PromptResponse:
        return PromptResponse(
            id=prompt.id,
            creator=(
                CreatorResponse(
                    id=creator.id,
                    email=creator.email,
                    username=creator.username,
                    image=creator.image,
                )
                if creator is not None
                else None
            ),
            prompt=prompt.prompt,
            tag=prompt.tag,
            created_at=prompt.created_at,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
prompt_service = PromptService()
