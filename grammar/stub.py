from .base import GrammarCorrector
from .errors import UnsupportedLanguage
from .types import Language


class MockGrammarCorrector(GrammarCorrector):
    """
    Deterministic fake corrector for mock mode and tests.

    Never touches the network and ignores the API key.
    """

    async def correct(self, api_key: str, language: Language, text: str) -> str:
        if language is Language.EN:
            return "corrected: " + text

        if language is Language.DE:
            return "korrigiert: " + text

        raise UnsupportedLanguage(language)
