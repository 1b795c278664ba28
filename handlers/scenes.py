"""
Handler: Scene images
Asks the active image backend for one scene and writes the result under the
scene's own filename.

A missing API key is a per-item error: the scene is reported and skipped,
and the batch moves on to the next one.
"""
import os
import sys

from ai_client import api_key_for, call_ai, get_backend
from asset_catalog import ScenePrompt
from downloader import download, write_image
from errors import DownloadError, GenerationError


def _error(dest: str, message: str) -> dict:
    print(f"  [error] {message}", file=sys.stderr)
    return {"path": dest, "status": "error", "error": message}


def process(scene: ScenePrompt, dest_dir: str, config: dict, client=None) -> dict:
    dest = os.path.join(dest_dir, scene.filename)
    if os.path.exists(dest):
        print(f"  [skip] {dest} already exists")
        return {"path": dest, "status": "skip", "error": None}

    try:
        if not api_key_for(config):
            return _error(dest, f"No {get_backend(config).API_KEY_NAME} found")
    except RuntimeError as e:
        return _error(dest, str(e))

    print(f"  [generating] {dest}...")
    try:
        result = call_ai(scene.prompt, scene.size, config, client=client)
    except GenerationError as e:
        return _error(dest, str(e))

    if result.get("revised_prompt"):
        print(f"  [revised prompt] {result['revised_prompt']}")

    try:
        if result.get("url"):
            download(result["url"], dest, client)
        elif result.get("image_bytes"):
            write_image(result["image_bytes"], dest)
        else:
            return _error(dest, "Backend returned neither a URL nor image data")
    except DownloadError as e:
        return _error(dest, str(e))

    return {"path": dest, "status": "done", "error": None}
