# config.py
import os
from dotenv import load_dotenv

# Load environment variables from .env file.
load_dotenv()

DEFAULT_IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "bmp", "webp")

_config = None


def parse_extensions(raw: str | None) -> tuple[str, ...]:
    """
    Parses a comma separated extension list ("png, .JPG,webp").

    Entries are lower-cased and stripped of a leading dot. An empty
    result falls back to DEFAULT_IMAGE_EXTENSIONS.
    """
    if not raw:
        return DEFAULT_IMAGE_EXTENSIONS
    extensions = []
    for item in raw.split(","):
        ext = item.strip().lower().lstrip(".")
        if ext and ext not in extensions:
            extensions.append(ext)
    return tuple(extensions) or DEFAULT_IMAGE_EXTENSIONS


def load_config():
    """
    Loads configuration from environment variables and returns a dictionary.
    """
    try:
        port = int(os.getenv("PORT", 8050))
    except ValueError:
        port = 8050

    try:
        quit_delay = float(os.getenv("QUIT_DELAY_SECONDS", 0.5))
    except ValueError:
        quit_delay = 0.5

    config = {
        # General Settings
        "DEBUG_MODE": os.getenv("DEBUG_MODE", "False").lower() == "true",
        "LOG_DIR": os.getenv("LOG_DIR", ""),

        # Web Interface
        "HOST": os.getenv("HOST", "127.0.0.1"),
        "PORT": port,
        "QUIT_DELAY_SECONDS": quit_delay,

        # Launch-time ingest
        "SUPPORTED_IMAGE_EXTENSIONS": parse_extensions(
            os.getenv("SUPPORTED_IMAGE_EXTENSIONS")
        ),
    }
    return config


def get_config():
    """Returns the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


if __name__ == "__main__":
    # For testing purposes, print the configuration
    config = load_config()
    from pprint import pprint

    pprint(config)
