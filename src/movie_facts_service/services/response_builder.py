"""Rendering of turn results into Alexa response envelopes."""

from ..models.alexa import AlexaOutputSpeech, AlexaResponseBody, SkillResponse
from ..models.turn import TurnResult

# Longest speech text the skill sends back
MAX_SPEECH_LENGTH = 140


def truncate_speech(text: str) -> str:
    """Cut speech to MAX_SPEECH_LENGTH characters, ignoring word boundaries."""
    return text[:MAX_SPEECH_LENGTH]


def render(result: TurnResult) -> SkillResponse:
    """
    Build the wire response for a turn result.

    Truncation happens here for every outcome, canned prompts included.
    Empty session attributes and a false end-session flag are left as None
    so they are omitted from the serialized envelope.

    Args:
        result: Handler output for the turn

    Returns:
        SkillResponse ready to serialize with exclude_none
    """
    if not isinstance(result.speech_text, str):
        raise TypeError(f"speech_text must be a string, got {type(result.speech_text).__name__}")

    return SkillResponse(
        sessionAttributes=dict(result.session_attributes) or None,
        response=AlexaResponseBody(
            outputSpeech=AlexaOutputSpeech(text=truncate_speech(result.speech_text)),
            shouldEndSession=True if result.end_session else None,
        ),
    )
