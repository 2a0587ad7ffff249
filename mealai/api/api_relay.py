import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mealai.infra.gemini_client import GeminiClient
from mealai.utilities.config import DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_TEMPERATURE, get_gemini_api_key
from mealai.utilities.validators import GenerateRequestBody

logger = logging.getLogger(__name__)

# Tests swap this for an httpx.MockTransport
UPSTREAM_TRANSPORT: Optional[httpx.AsyncBaseTransport] = None

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


# === Helper: Get upstream client ===
def _get_upstream_client() -> Optional[GeminiClient]:
    """Return an upstream client if GEMINI_API_KEY is set, otherwise None."""
    api_key = get_gemini_api_key()
    if not api_key:
        return None
    return GeminiClient(api_key, transport=UPSTREAM_TRANSPORT)


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


router = APIRouter()


# === Relay: generate ===
@router.api_route("/api/generate-meal-plan", methods=ALL_METHODS)
async def generate_meal_plan_relay(request: Request):
    if request.method != "POST":
        return _error(405, "Method not allowed")

    client = _get_upstream_client()
    if client is None:
        logger.error("GEMINI_API_KEY not set, refusing relay request")
        return _error(500, "Server configuration error: API key not set")

    try:
        raw = await request.json()
    except ValueError:
        raw = None
    if not isinstance(raw, dict):
        return _error(400, "Invalid request: prompt required")
    try:
        body = GenerateRequestBody(**raw)
    except ValidationError as e:
        return _error(400, "Invalid request", details=e.errors(include_url=False, include_context=False))
    if not body.prompt:
        return _error(400, "Invalid request: prompt required")

    temperature = body.temperature if body.temperature is not None else DEFAULT_TEMPERATURE
    max_tokens = body.maxOutputTokens or DEFAULT_MAX_OUTPUT_TOKENS

    try:
        upstream = await client.generate_content(body.prompt, temperature, max_tokens)
    except httpx.HTTPError as e:
        logger.exception("Error in meal plan generation")
        return _error(500, "Failed to generate meal plan", message=str(e))

    if not upstream.ok:
        return _error(upstream.status_code, "API request failed", details=upstream.payload)
    return JSONResponse(status_code=200, content=upstream.payload)


# === Relay: list models ===
@router.get("/api/list-models")
async def list_models_relay():
    client = _get_upstream_client()
    if client is None:
        return _error(500, "Server configuration error: API key not set")
    try:
        upstream = await client.list_models()
    except httpx.HTTPError as e:
        logger.exception("Error listing upstream models")
        return _error(500, "Failed to list models", message=str(e))
    if not upstream.ok:
        return _error(upstream.status_code, "Failed to list models", details=upstream.payload)
    return JSONResponse(status_code=200, content=upstream.payload)
