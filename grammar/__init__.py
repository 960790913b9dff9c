"""
Grammar correction boundary.

This package wraps the remote completion API behind a single interface,
so the HTTP layer never knows which backend answers a request.

Supported correctors:
- MockGrammarCorrector: Deterministic local substitute (mock mode, tests)
- GPTGrammarCorrector: Remote chat-completion API

Example usage:
    from grammar import Language, MockGrammarCorrector

    corrector = MockGrammarCorrector()
    text = await corrector.correct("unused-key", Language.EN, "example")
"""

from .types import (
    Language,
    ChatMessage,
    CorrectionRequest,
    CorrectionChoice,
    CorrectionUsage,
    CorrectionResponse,
)
from .errors import (
    GrammarError,
    UnsupportedLanguage,
    TransportError,
    DecodeError,
    RemoteError,
    ConfigurationError,
)
from .prompts import PROMPT_EN, PROMPT_DE, build_prompt
from .base import GrammarCorrector
from .stub import MockGrammarCorrector
from .openai import GPTGrammarCorrector, OPENAI_API_URL, OPENAI_API_MODEL

__all__ = [
    "Language",
    "ChatMessage",
    "CorrectionRequest",
    "CorrectionChoice",
    "CorrectionUsage",
    "CorrectionResponse",
    "GrammarError",
    "UnsupportedLanguage",
    "TransportError",
    "DecodeError",
    "RemoteError",
    "ConfigurationError",
    "PROMPT_EN",
    "PROMPT_DE",
    "build_prompt",
    "GrammarCorrector",
    "MockGrammarCorrector",
    "GPTGrammarCorrector",
    "OPENAI_API_URL",
    "OPENAI_API_MODEL",
]
