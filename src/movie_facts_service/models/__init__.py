"""Pydantic models for request/response schemas."""

from .alexa import AlexaRequestEnvelope, SkillResponse
from .subject import Subject
from .turn import SUBJECT_KEY, MissingSlot, Outcome, TurnRequest, TurnResult

__all__ = [
    "AlexaRequestEnvelope",
    "SkillResponse",
    "Subject",
    "SUBJECT_KEY",
    "MissingSlot",
    "Outcome",
    "TurnRequest",
    "TurnResult",
]
