import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .base import GrammarCorrector
from .errors import DecodeError, RemoteError, TransportError
from .prompts import build_prompt
from .types import ChatMessage, CorrectionRequest, CorrectionResponse, Language

logger = logging.getLogger(__name__)

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_API_MODEL = "gpt-4"
OPENAI_API_ROLE = "user"


class GPTGrammarCorrector(GrammarCorrector):
    """
    Remote corrector backed by a chat-completion API.

    Sends the prompt and the user text as two "user" messages and returns
    the content of the first choice. No retries.
    """

    def __init__(
        self,
        api_url: str = OPENAI_API_URL,
        model: str = OPENAI_API_MODEL,
        timeout_s: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the remote corrector.

        Args:
            api_url:   Chat-completion endpoint
            model:     Model identifier sent with every request
            timeout_s: Bound on the whole outbound call
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.api_url = api_url
        self.model = model
        self.timeout_s = timeout_s
        self.transport = transport

    def build_request(self, language: Language, text: str) -> CorrectionRequest:
        """Build the outbound body: prompt first, then the text."""
        prompt = build_prompt(language)
        return CorrectionRequest(
            model=self.model,
            messages=[
                ChatMessage(role=OPENAI_API_ROLE, content=prompt),
                ChatMessage(role=OPENAI_API_ROLE, content=text),
            ],
        )

    async def correct(self, api_key: str, language: Language, text: str) -> str:
        """
        Correct text through the completion API.

        Flow:
          1. Resolve the prompt (UnsupportedLanguage propagates unchanged)
          2. POST the two-message request with Bearer auth
          3. Parse the body, THEN check the status so error bodies are kept
          4. Return the first choice's content, or "" when there is none

        Raises:
            UnsupportedLanguage: no prompt for language
            TransportError:      connection failure, timeout or unreadable body
            DecodeError:         body is not a valid completion response
            RemoteError:         status is not 200
        """
        request = self.build_request(language, text)
        logger.info(f"prompt: {request.model_dump()}")

        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        logger.debug(f"request: POST {self.api_url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s,
                transport=self.transport,
            ) as client:
                response = await client.post(
                    self.api_url,
                    content=request.model_dump_json(),
                    headers=headers,
                )
        except httpx.HTTPError as e:
            raise TransportError(f"request to completion API failed: {e}") from e

        try:
            chat_response = CorrectionResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"invalid completion API response: {e}") from e

        logger.info(f"response: {chat_response.model_dump()}")

        if response.status_code != 200:
            raise RemoteError(response.status_code, chat_response.model_dump())

        if chat_response.choices:
            return chat_response.choices[0].message.content

        logger.warning("completion API returned no choices, passing through empty text")
        return ""
