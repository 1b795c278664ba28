"""
HTTP download helper for the asset pipeline.

Redirects (301/302) are followed by hand, at most MAX_REDIRECTS hops.  The
file is always written under the caller's destination name, never a name
taken from the redirect target.
"""
import os

import httpx

from errors import DownloadError, InvalidImageError
from image_processor import verify_image, save_image_bytes

USER_AGENT      = "LowRatingsBot/1.0"
REQUEST_TIMEOUT = 30.0   # seconds, per request
MAX_REDIRECTS   = 5

_REDIRECT_CODES = {301, 302}


def make_client() -> httpx.Client:
    return httpx.Client(
        headers={"User-Agent": USER_AGENT},
        timeout=REQUEST_TIMEOUT,
        follow_redirects=False,
    )


def fetch_bytes(url: str, client: httpx.Client, max_redirects: int = MAX_REDIRECTS) -> bytes:
    """GET a URL, following at most `max_redirects` redirects.

    Returns:
        The full body of the final 200 response.

    Raises:
        DownloadError: on a non-200 status, a redirect without Location,
                       too many redirects, or a transport failure.
    """
    current = url
    for _ in range(max_redirects + 1):
        try:
            response = client.get(current)
        except httpx.HTTPError as e:
            raise DownloadError(f"Request failed for {current}: {e}") from e

        if response.status_code in _REDIRECT_CODES:
            location = response.headers.get("location")
            if not location:
                raise DownloadError(f"HTTP {response.status_code} without Location for {current}")
            current = str(httpx.URL(current).join(location))
            continue

        if response.status_code != 200:
            raise DownloadError(f"HTTP {response.status_code} for {current}")
        return response.content

    raise DownloadError(f"Too many redirects (>{max_redirects}) for {url}")


def write_image(data: bytes, dest: str) -> None:
    """Check that `data` is an image and write it to `dest`."""
    try:
        verify_image(data)
    except InvalidImageError as e:
        raise DownloadError(f"{e} for {dest}") from e
    try:
        save_image_bytes(data, dest)
    except OSError as e:
        raise DownloadError(f"Could not write {dest}: {e}") from e
    print(f"  [done] {dest}")


def download(url: str, dest: str, client: httpx.Client | None = None) -> bool:
    """Download `url` to `dest` unless `dest` already exists.

    Returns True when a file was written, False when it was skipped.
    """
    if os.path.exists(dest):
        print(f"  [skip] {dest} already exists")
        return False

    if client is None:
        with make_client() as own_client:
            data = fetch_bytes(url, own_client)
    else:
        data = fetch_bytes(url, client)

    write_image(data, dest)
    return True
