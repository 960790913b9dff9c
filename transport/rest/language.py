"""
Language Resolver

Maps an inbound Content-Language tag to a Language and echoes the tag
back as a response header.
"""

from typing import MutableMapping, Optional

from grammar import Language, UnsupportedLanguage

CONTENT_LANGUAGE = "Content-Language"
DEFAULT_TAG = "en"

_SUPPORTED_TAGS = {
    "en": Language.EN,
    "en-US": Language.EN,
    "en-GB": Language.EN,
    "de": Language.DE,
    "de-DE": Language.DE,
}


def resolve_language(
    tag: Optional[str],
    response_headers: MutableMapping[str, str],
) -> Language:
    """
    Resolve a Content-Language tag.

    An absent or empty tag means English and echoes "en". Supported tags
    are echoed verbatim. Nothing is echoed on failure.

    Raises:
        UnsupportedLanguage: tag is not one of the supported tags
    """
    tag = tag or DEFAULT_TAG
    language = _SUPPORTED_TAGS.get(tag)
    if language is None:
        raise UnsupportedLanguage(tag)

    response_headers[CONTENT_LANGUAGE] = tag
    return language
