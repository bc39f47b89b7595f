"""Alexa Skill request/response envelope models."""

from typing import Any, Literal

from pydantic import BaseModel


class AlexaSlot(BaseModel):
    """Alexa slot value."""

    name: str | None = None
    value: str | None = None


class AlexaIntent(BaseModel):
    """Alexa intent with slots."""

    name: str
    slots: dict[str, AlexaSlot] = {}


class AlexaRequest(BaseModel):
    """Alexa request payload."""

    type: str = "IntentRequest"
    intent: AlexaIntent | None = None
    locale: str = "en-US"


class AlexaSession(BaseModel):
    """Alexa session information."""

    sessionId: str | None = None
    new: bool = True
    attributes: dict[str, Any] | None = None


class AlexaRequestEnvelope(BaseModel):
    """Full Alexa request envelope."""

    version: str = "1.0"
    session: AlexaSession | None = None
    request: AlexaRequest | None = None
    context: dict[str, Any] = {}


class AlexaOutputSpeech(BaseModel):
    """Alexa speech output."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class AlexaResponseBody(BaseModel):
    """Alexa response body.

    ``shouldEndSession`` is either ``True`` or left out of the wire response.
    """

    outputSpeech: AlexaOutputSpeech
    shouldEndSession: Literal[True] | None = None


class SkillResponse(BaseModel):
    """Full Alexa response envelope.

    ``sessionAttributes`` is ``None`` (and omitted on the wire) when there is
    no state to carry into the next turn.
    """

    version: Literal["1.0"] = "1.0"
    sessionAttributes: dict[str, str] | None = None
    response: AlexaResponseBody
