"""Turn routing for the skill conversation."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Awaitable, Callable, Mapping

from ..models.turn import TurnRequest, TurnResult

logger = logging.getLogger(__name__)

Handler = Callable[[TurnRequest], Awaitable[TurnResult]]


class ConversationState(str, Enum):
    """Conversation state derived from the echoed session attributes."""

    FRESH = "fresh"
    ENGAGED = "engaged"


def conversation_state(turn: TurnRequest) -> ConversationState:
    """Engaged once a previous turn of this session has stored a subject."""
    if turn.is_new_session or turn.subject is None:
        return ConversationState.FRESH
    return ConversationState.ENGAGED


class StatefulIntent:
    """Intent whose handler depends on the conversation state.

    Every ConversationState must have a handler.
    """

    def __init__(self, handlers: Mapping[ConversationState, Handler]):
        missing = [state.value for state in ConversationState if state not in handlers]
        if missing:
            raise ValueError(f"No handler for conversation state(s): {', '.join(missing)}")
        self._handlers = MappingProxyType(dict(handlers))

    def for_state(self, state: ConversationState) -> Handler:
        return self._handlers[state]


IntentRoute = Handler | StatefulIntent


class ConversationRouter:
    """Selects the handler for each turn from an immutable intent table.

    The router holds no session state. Everything it knows about earlier
    turns comes from the session attributes the caller echoes back, so any
    number of turns can be routed concurrently.
    """

    def __init__(self, intents: Mapping[str, IntentRoute], fallback: Handler):
        """Initialize router.

        Args:
            intents: Intent name to handler, or to a StatefulIntent
            fallback: Handler for intents missing from the table
        """
        self._intents = MappingProxyType(dict(intents))
        self._fallback = fallback

    @property
    def intents(self) -> Mapping[str, IntentRoute]:
        return self._intents

    def select(self, turn: TurnRequest) -> Handler:
        """Pick the handler for a turn.

        Intent-level routes (such as ClearSession) win over the conversation
        state; the state only chooses between the branches of a StatefulIntent.
        """
        route = self._intents.get(turn.intent_name)

        if route is None:
            logger.info(f"Unknown intent '{turn.intent_name}', using fallback")
            return self._fallback

        if isinstance(route, StatefulIntent):
            return route.for_state(conversation_state(turn))

        return route

    async def route(self, turn: TurnRequest) -> TurnResult:
        """Run the handler selected for a turn and return its result."""
        # A new session starts from nothing, whatever the caller echoed
        if turn.is_new_session and turn.session_attributes:
            logger.debug("Ignoring session attributes sent with a new session")
            turn = turn.without_session_attributes()

        state = conversation_state(turn)
        logger.info(f"Routing intent '{turn.intent_name}' in {state.value} state")

        result = await self.select(turn)(turn)

        logger.info(f"Turn outcome: {result.outcome.value}, end_session={result.end_session}")
        return result
