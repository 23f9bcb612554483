# ------------------------------------------------------------------------------
# web_interface.py
# ------------------------------------------------------------------------------

import logging

from flask import Flask, jsonify

from config import get_config
from web.blueprints.api_v1 import init_api_v1
from web.window import ServerWindow


def create_web_interface(registry, window_factory=None):
    """
    Creates and returns the web interface (Flask server) for the project.

    The registry is attached to this app only (app.extensions). The window
    is created lazily by run(); window_factory(app, host, port, close_delay)
    defaults to ServerWindow.create.

    Returns a dict with:
      - server: the Flask app (WSGI callable)
      - run: run(host=None, port=None), blocks until the window is closed
    """
    logger = logging.getLogger(__name__)
    config = get_config()

    if window_factory is None:
        window_factory = ServerWindow.create

    server = Flask(__name__)
    state = init_api_v1(server, registry)

    @server.route("/health")
    def health():
        return jsonify({"status": "ok"})

    def run(host=None, port=None):
        host = config["HOST"] if host is None else host
        port = config["PORT"] if port is None else port
        window = window_factory(server, host, port, config["QUIT_DELAY_SECONDS"])
        state["window"] = window
        try:
            window.serve()
        finally:
            state["window"] = None
            logger.info("Web interface stopped")

    return {"server": server, "run": run}
