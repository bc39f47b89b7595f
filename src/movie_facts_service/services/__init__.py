"""Business logic services."""

from .content_lookup import ContentLookup, ContentLookupError, OmdbMovieLookup, SubjectNotFound
from .movie_facts import MovieFactsSkill, build_conversation_router, build_intent_table
from .number_facts import NumberFactLookup
from .request_parser import MalformedRequest, parse_request
from .response_builder import render
from .router import ConversationRouter, ConversationState, StatefulIntent
from .skill_handler import handle_skill_request

__all__ = [
    "ContentLookup",
    "ContentLookupError",
    "SubjectNotFound",
    "OmdbMovieLookup",
    "NumberFactLookup",
    "MovieFactsSkill",
    "build_intent_table",
    "build_conversation_router",
    "MalformedRequest",
    "parse_request",
    "render",
    "ConversationRouter",
    "ConversationState",
    "StatefulIntent",
    "handle_skill_request",
]
