"""
Grammar Correction - Data Types

PURE DATA MODELS - NO LOGIC
Defines the language code and the wire contract of the completion API.

Inbound models accept null or missing fields and fall back to empty
values (""/0/[]), so only malformed JSON is a decode failure.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(Enum):
    """The two languages a prompt exists for."""
    DE = "de"
    EN = "en"


# ============================================================================
# OUTBOUND (REQUEST)
# ============================================================================

class ChatMessage(BaseModel):
    """A single chat message (role + content)."""
    role: str = ""
    content: str = ""

    @field_validator("role", "content", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class CorrectionRequest(BaseModel):
    """
    Body POSTed to the completion API.

    Always carries exactly two messages: the prompt, then the user text.
    """
    model: str
    messages: List[ChatMessage]


# ============================================================================
# INBOUND (RESPONSE)
# ============================================================================

class CorrectionChoice(BaseModel):
    """One candidate completion. Only the first one is consumed."""
    index: int = 0
    message: ChatMessage = Field(default_factory=ChatMessage)
    logprobs: Optional[Any] = None
    finish_reason: Optional[str] = None

    @field_validator("index", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("message", mode="before")
    @classmethod
    def _null_as_empty_message(cls, value: Any) -> Any:
        return ChatMessage() if value is None else value


class CorrectionUsage(BaseModel):
    """Token accounting reported by the API."""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @field_validator("prompt_tokens", "completion_tokens", "total_tokens", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class CorrectionResponse(BaseModel):
    """Chat-completion response as returned by the API."""
    model_config = ConfigDict(extra="allow")  # error bodies carry their own keys

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[CorrectionChoice] = Field(default_factory=list)
    usage: CorrectionUsage = Field(default_factory=CorrectionUsage)
    system_fingerprint: Optional[str] = None

    @field_validator("id", "object", "model", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("created", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("choices", mode="before")
    @classmethod
    def _null_as_no_choices(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("usage", mode="before")
    @classmethod
    def _null_as_empty_usage(cls, value: Any) -> Any:
        return CorrectionUsage() if value is None else value
