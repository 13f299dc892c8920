"""
Promptopia Backend — User Route Handlers
==========================================

What:  Handles GET /api/users/{id}/posts (prompts created by one user).
Why:   Powers the profile page, which lists a user's prompts with their
       creator details already attached.
How:   Delegates to PromptService; errors are turned into responses by the
       global exception handlers in main.py.
"""

import logging
from typing import List

from fastapi import APIRouter

from app.schemas.prompt import ErrorResponse, PromptResponse
from app.services.prompt_service import prompt_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.get(
    "/users/{user_id}/posts",
    response_model=List[PromptResponse],
    responses={
        200: {"description": "Prompts created by the user, creators populated"},
        400: {"description": "Malformed user id", "model": ErrorResponse},
        500: {
            "description": "Prompts could not be fetched",
            "content": {"text/plain": {"example": "Failed to fetch prompts created by this user"}},
        },
    },
    summary="List a user's prompts",
    description=(
        "Returns every prompt whose creator is the given user, in creation order. "
        "Each prompt's creator field holds the full user record. A user with no "
        "prompts (or an unknown user) yields an empty array. Malformed ids get 400; "
        "paths the route cannot match (an empty id, or an encoded '/' in the id) "
        "get the framework's 404."
    ),
)
async def list_user_prompts(user_id: str) -> List[PromptResponse]:
    """
    List prompts created by `user_id`.

    Example:
        GET /api/users/u1/posts
        → 200 [{"_id": "p1", "creator": {"_id": "u1", ...}, "prompt": "...", ...}]
    """
    return await prompt_service.list_prompts_by_creator(user_id)
