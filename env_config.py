"""
Credential loading for the asset pipeline.

Reads KEY=VALUE pairs from ~/.continuum/config.env via python-dotenv.
Blank lines and # comments are skipped, values are split on the first '='
and a key defined twice keeps its last value.
"""
import os

from dotenv import dotenv_values

from errors import ConfigError

CONFIG_DIR  = ".continuum"
CONFIG_FILE = "config.env"


def default_config_path() -> str:
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR, CONFIG_FILE)


def load_config(path: str | None = None) -> dict[str, str]:
    """Load the credentials file and return its keys as a plain dict.

    Raises:
        ConfigError: if the file does not exist.
    """
    path = path or default_config_path()
    if not os.path.isfile(path):
        raise ConfigError(f"Config not found: {path}")

    values = dotenv_values(path, interpolate=False)
    # dotenv yields None for bare keys with no '='
    return {key: value for key, value in values.items() if key and value is not None}
