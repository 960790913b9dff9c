"""
Grammar Correction Endpoint

FastAPI router for /correctText.
GET reads ?text=, POST reads the raw body. Everything else is 405.
"""

import logging
from typing import Dict

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse
from starlette.requests import ClientDisconnect

from grammar import GrammarCorrector, GrammarError, Language, UnsupportedLanguage

from .language import CONTENT_LANGUAGE, resolve_language

logger = logging.getLogger(__name__)

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


class MethodNotAllowed(Exception):
    """HTTP method has no handler on /correctText."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"method not allowed: {method}")


def create_router(corrector: GrammarCorrector, api_key: str) -> APIRouter:
    """
    Build the /correctText router around an already selected corrector.

    Args:
        corrector: Active GrammarCorrector (mock or remote), chosen at startup
        api_key:   Bearer token forwarded to the corrector

    Returns:
        APIRouter exposing /correctText
    """
    router = APIRouter(tags=["Grammar"])

    async def correct_text(request: Request, text: str) -> PlainTextResponse:
        headers: Dict[str, str] = {}

        try:
            language: Language = resolve_language(
                request.headers.get(CONTENT_LANGUAGE),
                headers,
            )
        except UnsupportedLanguage as e:
            return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)

        try:
            corrected = await corrector.correct(api_key, language, text)
        except GrammarError as e:
            logger.error(f"error: {e}", exc_info=True)
            return PlainTextResponse(
                "error correcting grammar",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                headers=headers,
            )

        return PlainTextResponse(corrected, headers=headers)

    @router.api_route("/correctText", methods=_ALL_METHODS)
    async def handle_request(request: Request) -> PlainTextResponse:
        """
        Dispatch on method.

        Returns:
            200 + corrected text
            400 unsupported Content-Language
            405 any method other than GET / POST (via MethodNotAllowed)
            500 downstream correction failure (details logged only)
        """
        if request.method == "GET":
            return await correct_text(request, request.query_params.get("text", ""))

        if request.method == "POST":
            try:
                body = await request.body()
            except ClientDisconnect as e:
                logger.error(f"error: {e}", exc_info=True)
                return PlainTextResponse(
                    "error reading request body",
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )
            return await correct_text(request, body.decode("utf-8", errors="replace"))

        raise MethodNotAllowed(request.method)

    return router


async def method_not_allowed_handler(request: Request, exc: MethodNotAllowed) -> PlainTextResponse:
    """Map MethodNotAllowed to a plain-text 405."""
    logger.debug(f"{exc.method} {request.url.path} rejected")
    return PlainTextResponse(
        "Method not allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
    )
