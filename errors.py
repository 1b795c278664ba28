"""Exception types shared by the asset pipeline."""


class ConfigError(RuntimeError):
    """The credentials file is missing or unreadable."""


class DownloadError(RuntimeError):
    """A single download failed (HTTP status, transport, redirect or body)."""


class GenerationError(RuntimeError):
    """The image-generation backend rejected or could not serve a request."""


class InvalidImageError(RuntimeError):
    """Bytes meant to be saved as an image do not decode as one."""
