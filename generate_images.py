"""
Low Ratings Academy Awards - image generator

Downloads CC-licensed photos from Wikimedia Commons for the nominees and
generates satirical scene art through the configured image backend.

Usage (from the site root, where public/images/ is written):
  python generate_images.py
  low-ratings-generate-images

Requires OPENAI_API_KEY (or the key of the backend named by IMAGE_PROVIDER)
in ~/.continuum/config.env.  Safe to re-run: existing files are skipped.
"""
import os
import sys

import httpx

from asset_catalog import PEOPLE_IMAGES, SCENE_PROMPTS, PersonImage, ScenePrompt
from downloader import make_client
from env_config import load_config
from errors import ConfigError
from handlers import people, scenes

IMAGES_SUBDIR     = os.path.join("public", "images")
ATTRIBUTIONS_FILE = "ATTRIBUTIONS.txt"


# ── Steps ─────────────────────────────────────────────────────────────────────

def default_images_dir() -> str:
    """public/images/ under the current working directory (the site root)."""
    return os.path.join(os.getcwd(), IMAGES_SUBDIR)


def output_dirs(images_dir: str) -> tuple[str, str]:
    return os.path.join(images_dir, "people"), os.path.join(images_dir, "scenes")


def ensure_dirs(*dirs: str) -> None:
    for d in dirs:
        os.makedirs(d, exist_ok=True)


def attribution_lines(people_images: list[PersonImage]) -> list[str]:
    return [f"{p.name}: {p.attribution}" for p in people_images]


def write_attributions(people_images: list[PersonImage], images_dir: str) -> str:
    """Rewrite ATTRIBUTIONS.txt from the catalog on every run."""
    path = os.path.join(images_dir, ATTRIBUTIONS_FILE)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(attribution_lines(people_images)))
    print(f"Wrote {ATTRIBUTIONS_FILE}\n")
    return path


def run(
    config: dict,
    images_dir: str | None = None,
    people_images: list[PersonImage] | None = None,
    scene_prompts: list[ScenePrompt] | None = None,
    client: httpx.Client | None = None,
) -> list[dict]:
    """Run both phases in order and return one result dict per catalog item."""
    images_dir    = images_dir or default_images_dir()
    people_images = PEOPLE_IMAGES if people_images is None else people_images
    scene_prompts = SCENE_PROMPTS if scene_prompts is None else scene_prompts
    people_dir, scenes_dir = output_dirs(images_dir)

    ensure_dirs(people_dir, scenes_dir)
    write_attributions(people_images, images_dir)

    own_client = client is None
    client     = client or make_client()
    results: list[dict] = []
    try:
        print("=== Downloading people photos from Wikimedia Commons ===\n")
        for person in people_images:
            print(f"{person.name}:")
            results.append({"name": person.name, **people.process(person, people_dir, client)})

        print("\n=== Generating scene images ===\n")
        for scene in scene_prompts:
            print(f"{scene.name}:")
            results.append({"name": scene.name, **scenes.process(scene, scenes_dir, config, client)})
    finally:
        if own_client:
            client.close()

    return results


def summarize(results: list[dict]) -> dict[str, int]:
    counts = {"done": 0, "skip": 0, "error": 0}
    for r in results:
        counts[r["status"]] = counts.get(r["status"], 0) + 1
    return counts


# ── Entry point ───────────────────────────────────────────────────────────────

def main() -> int:
    try:
        config = load_config()
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return 1

    images_dir = default_images_dir()
    results    = run(config, images_dir)
    counts     = summarize(results)
    people_dir, scenes_dir = output_dirs(images_dir)

    print("\n=== Done! ===")
    print(f"People photos: {people_dir}")
    print(f"Scene images: {scenes_dir}")
    print(f"{counts['done']} written, {counts['skip']} skipped, {counts['error']} failed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
