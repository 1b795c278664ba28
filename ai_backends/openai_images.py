"""
Image backend: OpenAI Images API
Uses dall-e-3 with response_format "url"; the caller downloads the result.
Requires OPENAI_API_KEY in config.env.
"""
from typing import Literal

import httpx
from pydantic import BaseModel, Field, ValidationError

from errors import GenerationError

API_KEY_NAME    = "OPENAI_API_KEY"
ENDPOINT        = "https://api.openai.com/v1/images/generations"
MODEL           = "dall-e-3"
REQUEST_TIMEOUT = 120.0  # seconds


class GenerationRequest(BaseModel):
    model:           str = MODEL
    prompt:          str = Field(min_length=1)
    n:               Literal[1] = 1
    size:            Literal["1024x1024", "1792x1024", "1024x1792"]
    quality:         Literal["standard", "hd"] = "standard"
    response_format: Literal["url"] = "url"


class GeneratedImage(BaseModel):
    url:            str | None = None
    revised_prompt: str | None = None


class GenerationResponse(BaseModel):
    data: list[GeneratedImage] = []


def build_request(prompt: str, size: str) -> dict:
    """Validate and serialize the JSON body for one generation call."""
    try:
        return GenerationRequest(prompt=prompt, size=size).model_dump()
    except ValidationError as e:
        raise GenerationError(f"Invalid generation request: {e}") from e


def call(prompt: str, size: str, api_key: str | None, client: httpx.Client | None = None) -> dict:
    if not api_key:
        raise GenerationError(f"No {API_KEY_NAME} found")

    payload = build_request(prompt, size)
    headers = {
        "Content-Type":  "application/json",
        "Authorization": f"Bearer {api_key}",
    }

    try:
        if client is None:
            with httpx.Client(timeout=REQUEST_TIMEOUT) as own_client:
                response = own_client.post(ENDPOINT, headers=headers, json=payload)
        else:
            response = client.post(ENDPOINT, headers=headers, json=payload, timeout=REQUEST_TIMEOUT)
    except httpx.HTTPError as e:
        raise GenerationError(f"Image API request failed: {e}") from e

    if not response.is_success:
        raise GenerationError(f"Image API: {response.status_code} {response.text}")

    try:
        parsed = GenerationResponse.model_validate(response.json())
    except ValueError as e:  # bad JSON or schema mismatch (ValidationError is a ValueError)
        raise GenerationError(f"Malformed Image API response: {e}") from e

    first = parsed.data[0] if parsed.data else None
    if first is None or not first.url:
        raise GenerationError("No image URL in response")

    return {
        "url":            first.url,
        "revised_prompt": first.revised_prompt,
        "_model":         MODEL,
    }
