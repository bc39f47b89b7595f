"""Conversion of raw Alexa envelopes into normalized turns."""

from typing import Any

from pydantic import ValidationError

from ..models.alexa import AlexaRequestEnvelope
from ..models.turn import TurnRequest


class MalformedRequest(ValueError):
    """The envelope lacks the blocks needed to build a turn."""


def parse_request(envelope: dict[str, Any]) -> TurnRequest:
    """
    Parse an Alexa request envelope into a TurnRequest.

    A missing session block is treated as the first turn of a new session.
    Slots the caller sent without a value are left out, so looking them up
    raises MissingSlot instead of yielding an empty string.

    Args:
        envelope: Decoded JSON body of the Alexa request

    Returns:
        TurnRequest for the router

    Raises:
        MalformedRequest: The envelope has no request or intent block, or
            does not match the envelope schema
    """
    if not isinstance(envelope, dict):
        raise MalformedRequest("Request envelope must be a JSON object")

    try:
        parsed = AlexaRequestEnvelope.model_validate(envelope)
    except ValidationError as e:
        raise MalformedRequest(f"Invalid request envelope: {e.error_count()} validation error(s)") from e

    if parsed.request is None:
        raise MalformedRequest("Request envelope has no request block")
    if parsed.request.intent is None:
        raise MalformedRequest(f"{parsed.request.type} has no intent block")

    intent = parsed.request.intent
    slots = {key: slot.value for key, slot in intent.slots.items() if slot.value is not None}

    session = parsed.session
    is_new_session = session.new if session else True
    attributes = session.attributes if session and session.attributes else {}

    return TurnRequest(
        is_new_session=is_new_session,
        intent_name=intent.name,
        slots=slots,
        session_attributes={key: str(value) for key, value in attributes.items()},
    )
