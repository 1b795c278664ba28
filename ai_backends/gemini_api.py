"""
Image backend: Google Imagen
Uses imagen-4.0-generate-001 through the google-genai SDK.
The SDK returns image bytes inline, so there is no URL to download.
Requires GEMINI_API_KEY in config.env.
"""
import json

from google import genai
from google.genai import types

from errors import GenerationError

API_KEY_NAME = "GEMINI_API_KEY"
MODEL        = "imagen-4.0-generate-001"

# Pixel sizes used by the catalog → Imagen aspect ratios
_ASPECT_RATIOS = {
    "1024x1024": "1:1",
    "1792x1024": "16:9",
    "1024x1792": "9:16",
}


def _quota_message(msg: str) -> str:
    retry = ""
    try:
        data = json.loads(msg[msg.index("{"):])
        for d in data.get("error", {}).get("details", []):
            if d.get("@type", "").endswith("RetryInfo"):
                retry = f" Retry after: {d['retryDelay']}."
    except (ValueError, KeyError, AttributeError):
        pass
    return f"Gemini API quota exceeded.{retry} Wait and try again or use another key."


def call(prompt: str, size: str, api_key: str | None, client=None) -> dict:
    """Generate one image and return its bytes.

    `client` is accepted for signature parity with HTTP backends and ignored.
    """
    if not api_key:
        raise GenerationError(f"No {API_KEY_NAME} found")

    aspect_ratio = _ASPECT_RATIOS.get(size)
    if aspect_ratio is None:
        raise GenerationError(f"Unsupported size for Imagen: {size}")

    genai_client = genai.Client(api_key=api_key)

    try:
        response = genai_client.models.generate_images(
            model=MODEL,
            prompt=prompt,
            config=types.GenerateImagesConfig(
                number_of_images=1,
                aspect_ratio=aspect_ratio,
            ),
        )
    except Exception as e:
        msg = str(e)
        if "429" in msg or "RESOURCE_EXHAUSTED" in msg:
            raise GenerationError(_quota_message(msg)) from e
        raise GenerationError(f"Gemini API error: {msg}") from e

    images = response.generated_images or []
    first  = images[0] if images else None
    if first is None or first.image is None or not first.image.image_bytes:
        raise GenerationError("No image in response")

    return {
        "image_bytes":    first.image.image_bytes,
        "revised_prompt": first.enhanced_prompt,
        "_model":         MODEL,
    }
