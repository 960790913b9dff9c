"""REST Transport Layer - Module Exports"""

from .language import CONTENT_LANGUAGE, DEFAULT_TAG, resolve_language
from .router import MethodNotAllowed, create_router, method_not_allowed_handler

__all__ = [
    "CONTENT_LANGUAGE",
    "DEFAULT_TAG",
    "resolve_language",
    "MethodNotAllowed",
    "create_router",
    "method_not_allowed_handler",
]
