"""
Image-generation client dispatcher.
Selects the active backend from the IMAGE_PROVIDER key of the loaded config
(~/.continuum/config.env) and delegates the call to it.

Supported backends (ai_backends/<name>.py, each must expose API_KEY_NAME and call()):
  openai_images  OpenAI Images API, DALL-E 3 (default, returns an image URL)
  gemini_api     Google Imagen via google-genai SDK (returns image bytes)

To add a new backend:
  1. Create ai_backends/my_provider.py with API_KEY_NAME and a call() matching the signature below.
  2. Set IMAGE_PROVIDER=my_provider in config.env.
"""
import importlib

DEFAULT_PROVIDER = "openai_images"


def get_backend(config: dict):
    """Import and return the backend module selected by `config`."""
    provider = config.get("IMAGE_PROVIDER") or DEFAULT_PROVIDER
    try:
        return importlib.import_module(f"ai_backends.{provider}")
    except ModuleNotFoundError:
        raise RuntimeError(
            f"Image backend '{provider}' not found. "
            f"Create ai_backends/{provider}.py or change IMAGE_PROVIDER in config.env."
        )


def api_key_for(config: dict) -> str | None:
    """Return the credential the active backend needs, or None if it is not configured."""
    backend = get_backend(config)
    return config.get(backend.API_KEY_NAME) or None


def call_ai(prompt: str, size: str, config: dict, client=None) -> dict:
    """Send a prompt to the active backend and return its result.

    Args:
        prompt: Scene description.
        size:   Output size, e.g. "1792x1024".
        config: Loaded credentials / settings.
        client: Optional httpx.Client reused for HTTP backends.

    Returns:
        Dict with "url" or "image_bytes", plus "revised_prompt" and "_model".
    """
    backend = get_backend(config)
    return backend.call(prompt, size, config.get(backend.API_KEY_NAME), client=client)
