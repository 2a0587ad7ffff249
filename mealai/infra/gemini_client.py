"""Upstream generative-language API access, used only by the relay endpoints.

The API key is passed in by the caller and only ever travels in the
x-goog-api-key request header, never in a URL (httpx logs request URLs).
"""
import logging
from typing import Any, Optional

import httpx

from mealai.utilities.config import GEMINI_API_BASE, GEMINI_MODEL, UPSTREAM_TIMEOUT

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-goog-api-key"


class UpstreamResponse:
    """Status plus decoded body of an upstream call (JSON when possible, text otherwise)."""

    def __init__(self, status_code: int, payload: Any):
        self.status_code = status_code
        self.payload = payload

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class GeminiClient:
    def __init__(self, api_key: str, model: str = GEMINI_MODEL, base_url: str = GEMINI_API_BASE,
                 transport: Optional[httpx.AsyncBaseTransport] = None, timeout: float = UPSTREAM_TIMEOUT):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self.transport,
            timeout=self.timeout,
            headers={API_KEY_HEADER: self.api_key},
        )

    async def generate_content(self, prompt: str, temperature: float, max_output_tokens: int) -> UpstreamResponse:
        """POST the prompt to :generateContent. Transport errors propagate as httpx.HTTPError."""
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens,
            },
        }
        async with self._client() as client:
            response = await client.post(url, json=payload)
        if response.status_code != 200:
            logger.warning("Upstream generateContent failed with status %s", response.status_code)
        return UpstreamResponse(response.status_code, _decode(response))

    async def list_models(self) -> UpstreamResponse:
        async with self._client() as client:
            response = await client.get(f"{self.base_url}/models")
        return UpstreamResponse(response.status_code, _decode(response))
