"""
Prompt Builder
==============

Maps a Language to the fixed instruction sent ahead of the user text.
"""

from .errors import UnsupportedLanguage
from .types import Language

PROMPT_EN = "Correct the grammar of the following text: "
PROMPT_DE = "Korrigiere die Grammatik des folgenden Textes: "

_PROMPTS = {
    Language.EN: PROMPT_EN,
    Language.DE: PROMPT_DE,
}


def build_prompt(language: Language) -> str:
    """
    Return the instructional prompt for a language.

    Raises:
        UnsupportedLanguage: language is not one of Language.EN / Language.DE
    """
    try:
        return _PROMPTS[language]
    except (KeyError, TypeError):
        raise UnsupportedLanguage(language) from None
