"""Alexa Skill webhook endpoint."""

import json
import logging
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Depends, Request

from ..config import settings
from ..models.alexa import SkillResponse
from ..services.content_lookup import OmdbMovieLookup
from ..services.movie_facts import build_conversation_router
from ..services.number_facts import NumberFactLookup
from ..services.request_parser import MalformedRequest
from ..services.router import ConversationRouter
from ..services.skill_handler import handle_skill_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["skill"])


@lru_cache(maxsize=1)
def get_conversation_router() -> ConversationRouter:
    """Get or create the ConversationRouter singleton."""
    if not settings.omdb_api_key:
        logger.warning("MOVIE_FACTS_OMDB_API_KEY not set, movie lookups will fail")

    lookup = OmdbMovieLookup(
        api_key=settings.omdb_api_key,
        base_url=settings.omdb_base_url,
        timeout=settings.lookup_timeout,
    )
    number_facts = NumberFactLookup(
        base_url=settings.numbers_api_base_url,
        timeout=settings.lookup_timeout,
    )
    return build_conversation_router(lookup, number_facts, lookup_timeout=settings.lookup_timeout)


@router.post("/", response_model=SkillResponse, response_model_exclude_none=True)
async def skill_webhook(
    request: Request,
    conversation: ConversationRouter = Depends(get_conversation_router),
) -> SkillResponse:
    """
    Handle Alexa Skill requests.

    Supported intents:
    - MovieFacts: "Alexa, ask Movie Facts about Inception"
    - FollowUp: "Who directed it?" / "Who starred in it?"
    - NumberFact: "Alexa, ask Movie Facts for a math fact about 42"
    - ClearSession / AMAZON.StartOverIntent: forget the current movie
    - AMAZON.HelpIntent, AMAZON.StopIntent, AMAZON.CancelIntent

    Conversation state travels in the sessionAttributes the caller echoes
    back; nothing is stored between requests.
    """
    try:
        body: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedRequest("Request body is not valid JSON") from e

    return await handle_skill_request(body, conversation)
