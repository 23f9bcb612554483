# logging_config.py
import logging
import os

from config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "imageshell.log"

config = get_config()
DEBUG_MODE = config["DEBUG_MODE"]
LOG_DIR = config["LOG_DIR"]


def build_handlers(log_dir: str) -> list[logging.Handler]:
    """
    Returns the log handlers: stdout always, plus a file in log_dir if set.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME)))
    return handlers


# Configure logging once for the entire application.
logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format=LOG_FORMAT,
    handlers=build_handlers(LOG_DIR),
)

def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger with the given name.
    """
    return logging.getLogger(name)
