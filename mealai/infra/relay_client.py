"""Client side of the relay: one POST per generation, no retries.

The relay holds the upstream credential; this client never sees it.
"""
import logging
from typing import Any, Optional

import httpx

from mealai.domain.MealPlanRequest import MealPlanRequest
from mealai.utilities.config import DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_TEMPERATURE, RELAY_URL
from mealai.utilities.errors import RelayError, RelayUnavailableError

logger = logging.getLogger(__name__)


class RelayClient:
    def __init__(self, relay_url: str = RELAY_URL, client: Optional[httpx.Client] = None):
        self.relay_url = relay_url
        self._client = client

    def send(self, request: MealPlanRequest) -> Any:
        """POST the request body to the relay and return the decoded completion envelope."""
        body = request.to_body()
        try:
            if self._client is not None:
                response = self._client.post(self.relay_url, json=body)
            else:
                # single attempt, no client-side timeout
                with httpx.Client(timeout=None) as client:
                    response = client.post(self.relay_url, json=body)
        except httpx.HTTPError as e:
            logger.error("Relay request to %s failed: %s", self.relay_url, e)
            raise RelayUnavailableError() from e

        if not response.is_success:
            try:
                data = response.json()
            except ValueError:
                data = {"error": response.text}
            if not isinstance(data, dict):
                data = {"error": str(data)}
            logger.error("Relay returned %s: %s", response.status_code, data)
            raise RelayError(response.status_code, data.get("error", ""), data.get("details", data.get("message")))

        try:
            return response.json()
        except ValueError as e:
            raise RelayError(response.status_code, "Relay returned a non-JSON body", response.text) from e

    def generate(self, prompt: str, temperature: float = DEFAULT_TEMPERATURE,
                 max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS) -> Any:
        return self.send(MealPlanRequest(prompt=prompt, temperature=temperature,
                                         max_output_tokens=max_output_tokens))
