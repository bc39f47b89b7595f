"""Alexa Skill request handling."""

import logging
from typing import Any

from ..models.alexa import SkillResponse
from .request_parser import parse_request
from .response_builder import render
from .router import ConversationRouter

logger = logging.getLogger(__name__)


async def handle_skill_request(envelope: dict[str, Any], router: ConversationRouter) -> SkillResponse:
    """
    Process one Alexa skill turn and return the response envelope.

    Args:
        envelope: Full Alexa request envelope
        router: ConversationRouter built at startup

    Returns:
        SkillResponse for the turn

    Raises:
        MalformedRequest: The envelope has no request or intent block
    """
    turn = parse_request(envelope)

    logger.info(f"Alexa intent: {turn.intent_name} (new session: {turn.is_new_session})")

    result = await router.route(turn)
    return render(result)
