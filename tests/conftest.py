"""Pytest configuration and fixtures."""

import copy
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


COMPLETION_RESPONSE = {
    "id": "chatcmpl-8a6BFWm1yk2eohvtBmvxMhsdslHgy",
    "object": "chat.completion",
    "created": 1703614257,
    "model": "gpt-4-0613",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "xyz"},
            "logprobs": None,
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 37, "completion_tokens": 12, "total_tokens": 49},
    "system_fingerprint": None,
}


@pytest.fixture
def completion_response():
    """A fresh copy of a single-choice completion response."""
    return copy.deepcopy(COMPLETION_RESPONSE)


@pytest.fixture
def recorded_requests():
    """Requests seen by the stub completion API."""
    return []


@pytest.fixture
def stub_transport(completion_response, recorded_requests):
    """httpx transport standing in for the remote completion API."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json=completion_response)

    return httpx.MockTransport(handler)
