"""Tests for the Alexa skill webhook endpoint."""

from typing import Any

from fastapi.testclient import TestClient

from src.movie_facts_service.models.subject import Subject

from .conftest import INCEPTION_SYNOPSIS, FakeMovieLookup

LONG_SYNOPSIS = (
    "Dom Cobb is a skilled thief, the absolute best in the dangerous art of extraction, "
    "stealing valuable secrets from deep within the subconscious during the dream state, "
    "when the mind is at its most vulnerable."
)


def envelope(
    intent: str,
    slots: dict[str, str] | None = None,
    new: bool = True,
    attributes: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build an IntentRequest envelope."""
    session: dict[str, Any] = {"sessionId": "session-1", "new": new}
    if attributes is not None:
        session["attributes"] = attributes

    return {
        "version": "1.0",
        "session": session,
        "request": {
            "type": "IntentRequest",
            "intent": {
                "name": intent,
                "slots": {name: {"name": name, "value": value} for name, value in (slots or {}).items()},
            },
        },
    }


def test_movie_facts_new_session_speaks_synopsis(client: TestClient) -> None:
    """Test a fresh MovieFacts turn speaks the synopsis and remembers the movie."""
    response = client.post("/", json=envelope("MovieFacts", {"Movie": "Inception"}))

    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "1.0"
    assert data["sessionAttributes"] == {"subject": "Inception"}
    assert data["response"]["outputSpeech"] == {"type": "PlainText", "text": INCEPTION_SYNOPSIS}
    assert "shouldEndSession" not in data["response"]


def test_movie_facts_long_synopsis_truncated(client: TestClient, movie_lookup: FakeMovieLookup) -> None:
    """Test a synopsis over 140 characters is cut to exactly 140."""
    movie_lookup.subjects["Inception"] = Subject(name="Inception", synopsis=LONG_SYNOPSIS)

    response = client.post("/", json=envelope("MovieFacts", {"Movie": "Inception"}))

    text = response.json()["response"]["outputSpeech"]["text"]
    assert len(text) == 140
    assert text == LONG_SYNOPSIS[:140]


def test_follow_up_directed(client: TestClient, movie_lookup: FakeMovieLookup) -> None:
    """Test an engaged follow-up reports the directors and keeps the subject."""
    response = client.post(
        "/",
        json=envelope("FollowUp", {"Role": "directed"}, new=False, attributes={"subject": "Inception"}),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["response"]["outputSpeech"]["text"] == "Inception was directed by C. Nolan"
    assert data["sessionAttributes"] == {"subject": "Inception"}
    assert "shouldEndSession" not in data["response"]
    assert movie_lookup.calls == ["Inception"]


def test_follow_up_starred_in(client: TestClient) -> None:
    """Test an engaged follow-up reports the cast."""
    response = client.post(
        "/",
        json=envelope("FollowUp", {"Role": "starred in"}, new=False, attributes={"subject": "Inception"}),
    )

    data = response.json()
    assert data["response"]["outputSpeech"]["text"].startswith("Inception starred Leonardo DiCaprio, ")
    assert data["sessionAttributes"] == {"subject": "Inception"}


def test_clear_session_ends_and_drops_attributes(client: TestClient) -> None:
    """Test ClearSession closes the session and sends no attributes."""
    for new in (True, False):
        response = client.post(
            "/",
            json=envelope("ClearSession", {"Movie": "Inception"}, new=new, attributes={"subject": "Inception"}),
        )

        data = response.json()
        assert data["response"]["outputSpeech"]["text"] == "OK, what movie would you like to know about?"
        assert data["response"]["shouldEndSession"] is True
        assert "sessionAttributes" not in data


def test_engaged_subject_not_found(client: TestClient) -> None:
    """Test an unresolvable subject apologizes and keeps the conversation going."""
    response = client.post(
        "/",
        json=envelope("FollowUp", {"Role": "directed"}, new=False, attributes={"subject": "Nonexistent"}),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["response"]["outputSpeech"]["text"].startswith("Sorry")
    assert "shouldEndSession" not in data["response"]
    assert data["sessionAttributes"] == {"subject": "Nonexistent"}


def test_unknown_intent_falls_back(client: TestClient) -> None:
    """Test an unregistered intent gets a clarification prompt."""
    response = client.post("/", json=envelope("OrderPizza"))

    assert response.status_code == 200
    data = response.json()
    assert "didn't get that" in data["response"]["outputSpeech"]["text"]
    assert "shouldEndSession" not in data["response"]
    assert "sessionAttributes" not in data


def test_number_fact_intent(client: TestClient) -> None:
    """Test NumberFact speaks the fact."""
    response = client.post("/", json=envelope("NumberFact", {"Number": "42", "FactType": "trivia"}))

    data = response.json()
    assert data["response"]["outputSpeech"]["text"].startswith("42 is the answer")


def test_stop_intent_ends_session(client: TestClient) -> None:
    """Test Alexa stop intent ends session."""
    response = client.post(
        "/",
        json=envelope("AMAZON.StopIntent", new=False, attributes={"subject": "Inception"}),
    )

    data = response.json()
    assert data["response"]["outputSpeech"]["text"] == "Goodbye!"
    assert data["response"]["shouldEndSession"] is True
    assert "sessionAttributes" not in data


def test_launch_request_is_malformed(client: TestClient) -> None:
    """Test a request without an intent block is rejected."""
    response = client.post(
        "/",
        json={"version": "1.0", "request": {"type": "LaunchRequest", "locale": "en-US"}},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "malformed_request"


def test_missing_request_block_is_malformed(client: TestClient) -> None:
    """Test an envelope without a request block is rejected."""
    response = client.post("/", json={"version": "1.0", "session": {"new": True}})

    assert response.status_code == 400


def test_non_json_body_is_malformed(client: TestClient) -> None:
    """Test a body that is not JSON is rejected."""
    response = client.post("/", content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["error"] == "malformed_request"
