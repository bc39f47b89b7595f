"""Shared fixtures for skill tests."""

import asyncio
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.movie_facts_service.main import app
from src.movie_facts_service.models.subject import Subject
from src.movie_facts_service.routes.skill import get_conversation_router
from src.movie_facts_service.services.content_lookup import ContentLookupError, SubjectNotFound
from src.movie_facts_service.services.movie_facts import build_conversation_router
from src.movie_facts_service.services.router import ConversationRouter

INCEPTION_SYNOPSIS = "A thief steals secrets by entering people's dreams"


class FakeMovieLookup:
    """In-memory ContentLookup recording every title it is asked for."""

    def __init__(
        self,
        subjects: dict[str, Subject] | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ):
        self.subjects = subjects or {}
        self.error = error
        self.delay = delay
        self.calls: list[str] = []

    async def resolve(self, name: str) -> Subject:
        self.calls.append(name)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        try:
            return self.subjects[name]
        except KeyError:
            raise SubjectNotFound(name) from None


class FakeNumberFacts:
    """In-memory number fact source."""

    def __init__(self, facts: dict[str, str] | None = None):
        self.facts = facts or {}
        self.calls: list[tuple[str, str | None]] = []

    async def fact(self, number: str, fact_type: str | None = None) -> str:
        self.calls.append((number, fact_type))
        try:
            return self.facts[number]
        except KeyError:
            raise ContentLookupError(f"No fact for {number}") from None


@pytest.fixture
def inception() -> Subject:
    return Subject(
        name="Inception",
        synopsis=INCEPTION_SYNOPSIS,
        contributors=["C. Nolan"],
        participants=["Leonardo DiCaprio", "Joseph Gordon-Levitt", "Elliot Page"],
    )


@pytest.fixture
def movie_lookup(inception: Subject) -> FakeMovieLookup:
    return FakeMovieLookup({"Inception": inception})


@pytest.fixture
def number_facts() -> FakeNumberFacts:
    return FakeNumberFacts({"42": "42 is the answer to life, the universe and everything."})


@pytest.fixture
def conversation_router(movie_lookup: FakeMovieLookup, number_facts: FakeNumberFacts) -> ConversationRouter:
    return build_conversation_router(movie_lookup, number_facts, lookup_timeout=1.0)


@pytest.fixture
def client(conversation_router: ConversationRouter) -> Iterator[TestClient]:
    """Test client whose skill endpoint uses the fake lookups."""
    app.dependency_overrides[get_conversation_router] = lambda: conversation_router
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
