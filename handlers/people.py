"""
Handler: People photos
Downloads one Wikimedia Commons photo per nominee.
Failures are reported and returned; they never stop the batch.
"""
import os
import sys

from asset_catalog import PersonImage
from downloader import download
from errors import DownloadError


def process(person: PersonImage, dest_dir: str, client=None) -> dict:
    dest = os.path.join(dest_dir, person.filename)
    try:
        written = download(person.url, dest, client)
    except DownloadError as e:
        print(f"  [error] {e}", file=sys.stderr)
        return {"path": dest, "status": "error", "error": str(e)}

    return {
        "path":   dest,
        "status": "done" if written else "skip",
        "error":  None,
    }
