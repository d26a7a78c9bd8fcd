"""Advisor relay transports."""

import os
from http.client import HTTPException
from typing import Any, Optional, Protocol
from urllib.parse import quote, urlparse
from urllib.request import Request, urlopen

import orjson
import structlog

from ..config.defaults import AdvisorParams
from ..errors import MalformedDataError

logger = structlog.get_logger(__name__)

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent?key={key}"
NO_ANALYSIS_TEXT = "No analysis available."
API_KEY_MISSING = "API key not configured"


class AdvisorTransport(Protocol):
    """Sends a prompt, returns ``{"text": ...}`` or ``{"error": ...}``."""

    def send(self, prompt: str) -> dict[str, Any]:
        ...


def _post_json(url: str, body: dict[str, Any], timeout: float) -> Any:
    data = orjson.dumps(body)
    req = Request(
        url,
        data=data,
        headers={
            "Content-Type": "application/json",
            "Content-Length": str(len(data)),
            "User-Agent": "satsignal/0.1"
        },
        method="POST"
    )
    with urlopen(req, timeout=timeout) as response:
        return orjson.loads(response.read())


class HttpRelayTransport:
    """Posts the prompt to an analysis relay endpoint."""

    def __init__(self, url: str, timeout_seconds: float = 20.0):
        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Invalid relay URL: {url}")
        self.url = url
        self.timeout_seconds = timeout_seconds

    def send(self, prompt: str) -> dict[str, Any]:
        """
        Relay the prompt.

        Raises:
            OSError: On network failure or a non-2xx status
            HTTPException: If the response is cut short
            MalformedDataError: If the relay responds with something other than an object
        """
        payload = _post_json(self.url, {"prompt": prompt}, self.timeout_seconds)
        if not isinstance(payload, dict):
            raise MalformedDataError("Relay response must be an object", expected_format="object")
        return payload


class GeminiRelay:
    """Calls the Gemini generateContent API directly."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-1.5-flash",
        timeout_seconds: float = 20.0,
        api_key_env: str = "GEMINI_API_KEY"
    ):
        self.api_key = api_key if api_key is not None else os.environ.get(api_key_env)
        self.model = model
        self.timeout_seconds = timeout_seconds

    def send(self, prompt: str) -> dict[str, Any]:
        if not self.api_key:
            logger.error("Gemini relay has no API key")
            return {"error": API_KEY_MISSING}

        url = GEMINI_ENDPOINT.format(model=quote(self.model), key=quote(self.api_key))
        body = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            payload = _post_json(url, body, self.timeout_seconds)
        except (OSError, HTTPException, orjson.JSONDecodeError) as e:
            logger.error("Gemini request failed", error=str(e))
            return {"error": "Failed to analyze"}

        return {"text": extract_candidate_text(payload)}


def extract_candidate_text(payload: Any) -> str:
    """First candidate's first text part, or the no-analysis placeholder."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return NO_ANALYSIS_TEXT
    return text or NO_ANALYSIS_TEXT


def create_transport(params: AdvisorParams) -> AdvisorTransport:
    """Build the transport selected by configuration."""
    if params.use_direct_gemini:
        return GeminiRelay(
            model=params.gemini_model,
            timeout_seconds=params.timeout_seconds,
            api_key_env=params.api_key_env
        )
    return HttpRelayTransport(params.relay_url, timeout_seconds=params.timeout_seconds)
