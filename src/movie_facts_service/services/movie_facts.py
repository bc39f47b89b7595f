"""Movie Facts skill handlers and intent table."""

import asyncio
import logging
from typing import Mapping

from ..models.subject import Subject
from ..models.turn import SUBJECT_KEY, MissingSlot, Outcome, TurnRequest, TurnResult
from .content_lookup import ContentLookup, ContentLookupError
from .number_facts import NumberFactLookup
from .router import ConversationRouter, ConversationState, IntentRoute, StatefulIntent

logger = logging.getLogger(__name__)

DEFAULT_LOOKUP_TIMEOUT = 5.0

CLEAR_SESSION_INTENTS = ("ClearSession", "AMAZON.StartOverIntent")
MOVIE_FACTS_INTENT = "MovieFacts"
FOLLOW_UP_INTENT = "FollowUp"
STOP_INTENTS = ("AMAZON.StopIntent", "AMAZON.CancelIntent")

MOVIE_SLOT = "Movie"
ROLE_SLOT = "Role"
NUMBER_SLOT = "Number"
FACT_TYPE_SLOT = "FactType"

ROLE_DIRECTED = "directed"
ROLE_STARRED_IN = "starred in"

START_OVER_PROMPT = "OK, what movie would you like to know about?"
WHICH_MOVIE_PROMPT = "Which movie would you like to know about?"
FALLBACK_PROMPT = (
    "Sorry, I didn't get that. You can ask me about a movie, "
    "or for a fact about a number."
)
HELP_PROMPT = (
    "Ask me about a movie, like: tell me about Inception. "
    "Then ask who directed it, or who starred in it."
)


class MovieFactsSkill:
    """Handlers for every outcome of the Movie Facts conversation."""

    def __init__(
        self,
        lookup: ContentLookup,
        number_facts: NumberFactLookup,
        lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT,
    ):
        """Initialize skill.

        Args:
            lookup: ContentLookup used to resolve movie titles
            number_facts: Source of number trivia
            lookup_timeout: Upper bound for one external lookup, in seconds
        """
        self.lookup = lookup
        self.number_facts = number_facts
        self.lookup_timeout = lookup_timeout

    async def clear_session(self, turn: TurnRequest) -> TurnResult:
        """ClearSession / StartOver - forget the subject and close the session."""
        return TurnResult(
            speech_text=START_OVER_PROMPT,
            session_attributes={},
            end_session=True,
            outcome=Outcome.CLEARED,
        )

    async def summarize_subject(self, turn: TurnRequest) -> TurnResult:
        """Fresh conversation - resolve the Movie slot and speak its synopsis."""
        try:
            title = turn.slot(MOVIE_SLOT)
        except MissingSlot:
            return self._prompt(turn, WHICH_MOVIE_PROMPT)

        subject = await self._resolve(title)
        if subject is None:
            return self._resolution_failed(turn, title)

        speech = subject.synopsis.strip() or f"I don't have a synopsis for {subject.name}."

        return TurnResult(
            speech_text=speech,
            session_attributes={SUBJECT_KEY: subject.name},
            outcome=Outcome.SUMMARY,
        )

    async def change_subject(self, turn: TurnRequest) -> TurnResult:
        """Engaged MovieFacts - a named movie replaces the remembered one."""
        if MOVIE_SLOT in turn.slots:
            return await self.summarize_subject(turn)
        return await self.describe_subject(turn)

    async def describe_subject(self, turn: TurnRequest) -> TurnResult:
        """Engaged conversation - answer a follow-up about the remembered subject."""
        title = turn.session_attributes[SUBJECT_KEY]

        subject = await self._resolve(title)
        if subject is None:
            return self._resolution_failed(turn, title)

        role = turn.slots.get(ROLE_SLOT, "").strip().lower()

        if role == ROLE_DIRECTED:
            speech = _directed_by(subject)
        elif role == ROLE_STARRED_IN:
            speech = _starred(subject)
        else:
            speech = f"You can ask who directed {subject.name}, or who starred in it."

        return TurnResult(
            speech_text=speech,
            session_attributes={SUBJECT_KEY: title},
            outcome=Outcome.DETAIL,
        )

    async def number_fact(self, turn: TurnRequest) -> TurnResult:
        """NumberFact - speak a fact about the requested number."""
        try:
            number = turn.slot(NUMBER_SLOT)
        except MissingSlot:
            return self._prompt(turn, "Which number would you like a fact about?")

        try:
            text = await asyncio.wait_for(
                self.number_facts.fact(number, turn.slots.get(FACT_TYPE_SLOT)),
                timeout=self.lookup_timeout,
            )
        except (ContentLookupError, asyncio.TimeoutError) as e:
            logger.warning(f"Number fact lookup failed for {number}: {e!r}")
            return TurnResult(
                speech_text=f"Sorry, I couldn't find a fact about {number}.",
                session_attributes=dict(turn.session_attributes),
                outcome=Outcome.RESOLUTION_FAILED,
            )

        return TurnResult(
            speech_text=text,
            session_attributes=dict(turn.session_attributes),
            outcome=Outcome.NUMBER_FACT,
        )

    async def help(self, turn: TurnRequest) -> TurnResult:
        return TurnResult(
            speech_text=HELP_PROMPT,
            session_attributes=dict(turn.session_attributes),
            outcome=Outcome.HELP,
        )

    async def goodbye(self, turn: TurnRequest) -> TurnResult:
        return TurnResult(speech_text="Goodbye!", end_session=True, outcome=Outcome.GOODBYE)

    async def fallback(self, turn: TurnRequest) -> TurnResult:
        """Unknown intent - ask the user to rephrase, keeping the conversation open."""
        return self._prompt(turn, FALLBACK_PROMPT)

    async def _resolve(self, title: str) -> Subject | None:
        """Resolve a title once, returning None when the lookup fails or times out."""
        try:
            return await asyncio.wait_for(self.lookup.resolve(title), timeout=self.lookup_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Lookup for '{title}' timed out after {self.lookup_timeout}s")
        except ContentLookupError as e:
            logger.warning(f"Lookup for '{title}' failed: {e}")
        return None

    def _prompt(self, turn: TurnRequest, speech: str) -> TurnResult:
        return TurnResult(
            speech_text=speech,
            session_attributes=dict(turn.session_attributes),
            outcome=Outcome.FALLBACK,
        )

    def _resolution_failed(self, turn: TurnRequest, title: str) -> TurnResult:
        return TurnResult(
            speech_text=f"Sorry, I couldn't find a movie called {title}.",
            session_attributes=dict(turn.session_attributes),
            outcome=Outcome.RESOLUTION_FAILED,
        )


def _directed_by(subject: Subject) -> str:
    if not subject.contributors:
        return f"I don't know who directed {subject.name}."
    return f"{subject.name} was directed by {', '.join(subject.contributors)}"


def _starred(subject: Subject) -> str:
    if not subject.participants:
        return f"I don't know who starred in {subject.name}."
    return f"{subject.name} starred {', '.join(subject.participants)}"


def build_intent_table(skill: MovieFactsSkill) -> Mapping[str, IntentRoute]:
    """Map every intent the skill understands to its handler."""
    movie_facts = StatefulIntent({
        ConversationState.FRESH: skill.summarize_subject,
        ConversationState.ENGAGED: skill.change_subject,
    })
    follow_up = StatefulIntent({
        ConversationState.FRESH: skill.summarize_subject,
        ConversationState.ENGAGED: skill.describe_subject,
    })

    intents: dict[str, IntentRoute] = {}
    for name in CLEAR_SESSION_INTENTS:
        intents[name] = skill.clear_session
    intents[MOVIE_FACTS_INTENT] = movie_facts
    intents[FOLLOW_UP_INTENT] = follow_up
    for name in STOP_INTENTS:
        intents[name] = skill.goodbye
    intents["NumberFact"] = skill.number_fact
    intents["AMAZON.HelpIntent"] = skill.help
    intents["AMAZON.FallbackIntent"] = skill.fallback

    return intents


def build_conversation_router(
    lookup: ContentLookup,
    number_facts: NumberFactLookup,
    lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT,
) -> ConversationRouter:
    """Wire a ConversationRouter around the given lookups."""
    skill = MovieFactsSkill(lookup, number_facts, lookup_timeout=lookup_timeout)
    return ConversationRouter(build_intent_table(skill), fallback=skill.fallback)
