"""
tests/unit/test_prompts.py

Unit tests for the Prompt Builder.
"""

import pytest

from grammar import Language, UnsupportedLanguage, build_prompt, PROMPT_DE, PROMPT_EN


class TestBuildPrompt:

    def test_english_prompt(self):
        assert build_prompt(Language.EN) == "Correct the grammar of the following text: "

    def test_german_prompt(self):
        assert build_prompt(Language.DE) == "Korrigiere die Grammatik des folgenden Textes: "

    def test_constants_match(self):
        assert build_prompt(Language.EN) == PROMPT_EN
        assert build_prompt(Language.DE) == PROMPT_DE

    @pytest.mark.parametrize("value", [99, "fr", None])
    def test_unknown_language_raises(self, value):
        with pytest.raises(UnsupportedLanguage) as exc_info:
            build_prompt(value)
        assert "language not supported" in str(exc_info.value)
        assert exc_info.value.value == value
