"""
Infrastructure configuration system.

Environment-based corrector selection, loaded once at startup and passed
explicitly into the application factory.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from grammar import (
    ConfigurationError,
    GrammarCorrector,
    GPTGrammarCorrector,
    MockGrammarCorrector,
    OPENAI_API_MODEL,
    OPENAI_API_URL,
)

OPENAI_API_KEY = "OPENAI_API_KEY"
OPENAI_MOCK = "OPENAI_MOCK"


@dataclass(frozen=True)
class InfraConfig:
    """Correction backend configuration from environment."""

    api_key: str
    mock: bool
    api_url: str = OPENAI_API_URL
    api_model: str = OPENAI_API_MODEL
    timeout_s: float = 60.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InfraConfig":
        """
        Load configuration from environment variables.

        The API key is required even in mock mode. Mock mode is enabled
        only by the literal value "true".

        Raises:
            ConfigurationError: OPENAI_API_KEY not set
        """
        env = os.environ if environ is None else environ

        api_key = env.get(OPENAI_API_KEY, "")
        if not api_key:
            raise ConfigurationError(f"Environment variable {OPENAI_API_KEY} not set!")

        return cls(
            api_key=api_key,
            mock=env.get(OPENAI_MOCK) == "true",
            api_url=env.get("OPENAI_API_URL", OPENAI_API_URL),
            api_model=env.get("OPENAI_API_MODEL", OPENAI_API_MODEL),
            timeout_s=float(env.get("OPENAI_TIMEOUT", "60")),
        )

    def create_corrector(self) -> GrammarCorrector:
        """Create corrector instance based on configuration."""
        if self.mock:
            return MockGrammarCorrector()

        return GPTGrammarCorrector(
            api_url=self.api_url,
            model=self.api_model,
            timeout_s=self.timeout_s,
        )

    def __repr__(self) -> str:
        """String representation without the API key."""
        return (
            f"InfraConfig(mock={self.mock}, api_url={self.api_url}, "
            f"api_model={self.api_model}, timeout_s={self.timeout_s})"
        )


def get_config() -> InfraConfig:
    """Get infrastructure configuration from the process environment."""
    return InfraConfig.from_env()
