"""Image checks and file writes shared by the download and generation steps."""
import io
import os

from PIL import Image

from errors import InvalidImageError


def verify_image(data: bytes) -> str:
    """
    Make sure a response body is a decodable image before it lands on disk.
    Returns the Pillow format name (e.g. "JPEG", "PNG").
    """
    if not data:
        raise InvalidImageError("empty response body")
    try:
        image = Image.open(io.BytesIO(data))
        image.verify()  # raises on corrupt / non-image data
    except Exception as e:
        raise InvalidImageError(f"response body is not an image ({e})") from e
    return image.format or "unknown"


def save_image_bytes(data: bytes, path: str) -> None:
    """Write the whole body once to a temp file, then rename it into place."""
    tmp_path = f"{path}.part"
    try:
        with open(tmp_path, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
