"""Normalized turn models passed between parser, router and response builder."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Session attribute holding the movie under discussion
SUBJECT_KEY = "subject"


class MissingSlot(KeyError):
    """Raised when a turn is asked for a slot the caller did not fill."""

    def __init__(self, slot_name: str):
        super().__init__(slot_name)
        self.slot_name = slot_name


class Outcome(str, Enum):
    """Which branch of the conversation produced a turn result."""

    SUMMARY = "summary"
    DETAIL = "detail"
    CLEARED = "cleared"
    NUMBER_FACT = "number_fact"
    HELP = "help"
    GOODBYE = "goodbye"
    FALLBACK = "fallback"
    RESOLUTION_FAILED = "resolution_failed"


class TurnRequest(BaseModel):
    """One inbound turn, immutable once parsed."""

    model_config = ConfigDict(frozen=True)

    is_new_session: bool
    intent_name: str
    slots: dict[str, str] = Field(default_factory=dict)
    session_attributes: dict[str, str] = Field(default_factory=dict)

    def slot(self, name: str) -> str:
        """Return the value of a filled slot, raising MissingSlot otherwise."""
        try:
            return self.slots[name]
        except KeyError:
            raise MissingSlot(name) from None

    @property
    def subject(self) -> str | None:
        """Subject remembered by a previous turn, if any."""
        return self.session_attributes.get(SUBJECT_KEY)

    def without_session_attributes(self) -> "TurnRequest":
        """Copy of this turn with the echoed session state dropped."""
        return self.model_copy(update={"session_attributes": {}})


class TurnResult(BaseModel):
    """Outcome of routing one turn, produced by exactly one handler."""

    model_config = ConfigDict(frozen=True)

    speech_text: str = Field(..., min_length=1)
    session_attributes: dict[str, str] = Field(default_factory=dict)
    end_session: bool = False
    outcome: Outcome

    @field_validator("speech_text")
    @classmethod
    def _speech_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("speech_text must contain non-whitespace characters")
        return value
