"""Errors raised across the grammar correction boundary."""

from typing import Any


class GrammarError(Exception):
    """Base class for every grammar correction failure."""
    pass


class UnsupportedLanguage(GrammarError):
    """Language tag or code has no prompt."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"language not supported: {value}")


class TransportError(GrammarError):
    """The completion API could not be reached or its body could not be read."""
    pass


class DecodeError(GrammarError):
    """The completion API answered with a body that is not a valid response."""
    pass


class RemoteError(GrammarError):
    """The completion API answered with a non-200 status."""

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"http status code: {status_code} ({body})")


class ConfigurationError(GrammarError):
    """Required configuration is missing. Fatal at startup."""
    pass
