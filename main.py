# ------------------------------------------------------------------------------
# Main Script for the Image Viewer Shell
# main.py
# ------------------------------------------------------------------------------
import argparse
import json
import sys

from config import get_config
config = get_config()
from logging_config import get_logger
logger = get_logger(__name__)

from core.image_registry import ImageRegistry
from core.ingest_core import ingest_launch_paths


def parse_args(argv=None):
    """
    Parses launch arguments. --img may be repeated; values accumulate in order.

    A path beginning with "-" reads as an option, so it must be passed
    attached: --img=-scan.png
    """
    parser = argparse.ArgumentParser(description="Image Viewer Shell")
    parser.add_argument(
        "--img",
        nargs="*",
        action="extend",
        default=None,
        metavar="PATH",
        help="Image file(s) to open at launch. Use --img=PATH for a path starting with '-'",
    )
    parser.add_argument("--host", default=None, help="Interface to bind the web interface on")
    parser.add_argument("--port", type=int, default=None, help="Port of the web interface")
    return parser.parse_args(argv)


def bootstrap(image_candidates):
    """
    Creates the process-wide registry and runs the launch ingest once.

    Returns:
        The populated ImageRegistry
    """
    registry = ImageRegistry()
    ingest_launch_paths(
        registry, image_candidates, config["SUPPORTED_IMAGE_EXTENSIONS"]
    )
    return registry


def main(argv=None):
    args = parse_args(argv)

    # --------------------------------------------------------------------------
    # Configuration Parameters
    # --------------------------------------------------------------------------
    _debug = config["DEBUG_MODE"]
    logger.info(f"Debug mode is {'enabled' if _debug else 'disabled'}.")
    logger.info(f"Configuration: {json.dumps(config, indent=2)}")

    registry = bootstrap(args.img)

    # -----------------------------
    # Import and Run the Web Interface
    # -----------------------------
    from web.web_interface import create_web_interface

    interface = create_web_interface(registry)
    try:
        interface["run"](host=args.host, port=args.port)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt received. Shutting down...")
    return 0


if __name__ == '__main__':
    sys.exit(main())
