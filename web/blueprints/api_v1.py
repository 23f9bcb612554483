"""
API v1 Blueprint.

This blueprint provides the versioned command endpoints under /api/v1/*
used by the presentation layer:

    GET  /api/v1/images  - list registered image paths
    POST /api/v1/images  - append an image path (no validation)
    POST /api/v1/quit    - close the presentation window

The registry and the window are stored per app by init_api_v1():
    app.extensions["imageshell"] = {"registry": registry, "window": None}
"""

from flask import Blueprint, current_app, jsonify, request

from logging_config import get_logger
from web.services import viewer_service

logger = get_logger(__name__)

# Create Blueprint
api_v1 = Blueprint("api_v1", __name__, url_prefix="/api/v1")

EXTENSION_KEY = "imageshell"


def init_api_v1(app, registry):
    """
    Registers the blueprint on app and attaches the shared registry to it.

    Returns the per-app state dict; its "window" entry is set once the
    presentation window exists.
    """
    state = {"registry": registry, "window": None}
    app.extensions[EXTENSION_KEY] = state
    app.register_blueprint(api_v1)
    return state


def _state() -> dict:
    return current_app.extensions[EXTENSION_KEY]


# =============================================================================
# Images
# =============================================================================


@api_v1.route("/images", methods=["GET"])
def get_image_paths():
    """
    Returns all registered image paths in insertion order.
    An untouched registry yields an empty list.
    """
    paths = viewer_service.get_image_paths(_state()["registry"])
    return jsonify({"status": "success", "paths": paths})


@api_v1.route("/images", methods=["POST"])
def add_image():
    """
    Appends an image path to the registry.

    The path is stored as sent. Unlike the launch-time ingest, it is NOT
    checked for existence or a supported extension.
    """
    data = request.get_json(silent=True) or {}
    path = data.get("path") if isinstance(data, dict) else None

    if not isinstance(path, str):
        return (
            jsonify({"status": "error", "message": "Field 'path' must be a string"}),
            400,
        )

    viewer_service.add_image(_state()["registry"], path)
    return jsonify({"status": "success"})


# =============================================================================
# Window Control
# =============================================================================


@api_v1.route("/quit", methods=["POST"])
def quit_app():
    """
    Requests the presentation window to close.
    """
    window = _state()["window"]
    if window is None:
        logger.warning("Quit ignored: no window attached.")
        return (
            jsonify({"status": "error", "message": "No window attached"}),
            503,
        )

    viewer_service.quit_app(window)
    return jsonify({"status": "success", "message": "Closing window..."})
