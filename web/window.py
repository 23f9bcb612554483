"""Presentation window backed by the local WSGI server, plus delayed close."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Callable

from werkzeug.serving import BaseWSGIServer, make_server

logger = logging.getLogger(__name__)

CLOSE_FAILURE_EXIT_CODE = 1


def schedule_close(
    close_func: Callable[[], None],
    logger: logging.Logger,
    *,
    delay_seconds: float = 0.5,
) -> threading.Thread:
    """
    Runs close_func on a daemon thread after delay_seconds.

    The delay lets the pending HTTP response reach the client first.
    A failing close is fatal: it is logged and the process exits.
    """

    def _delayed() -> None:
        time.sleep(delay_seconds)
        try:
            close_func()
        except Exception as e:
            logger.critical(f"Closing window failed: {e}", exc_info=True)
            os._exit(CLOSE_FAILURE_EXIT_CODE)

    t = threading.Thread(target=_delayed, name="window-close", daemon=True)
    t.start()
    return t


class ServerWindow:
    """
    The presentation surface: a threaded WSGI server serving the Flask app.

    serve() blocks until close() has shut the server down.
    """

    def __init__(self, server: BaseWSGIServer, close_delay: float = 0.5):
        self._server = server
        self._close_delay = close_delay
        self._closed = threading.Event()

    @classmethod
    def create(
        cls, app, host: str, port: int, close_delay: float = 0.5
    ) -> ServerWindow:
        server = make_server(host, port, app, threaded=True)
        return cls(server, close_delay=close_delay)

    @property
    def url(self) -> str:
        return f"http://{self._server.host}:{self._server.port}/"

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def serve(self) -> None:
        logger.info(f"Serving on {self.url}")
        try:
            self._server.serve_forever()
        finally:
            self._closed.set()

    def close(self) -> threading.Thread:
        """Schedules the server shutdown; returns the closing thread."""
        return schedule_close(self._shutdown, logger, delay_seconds=self._close_delay)

    def _shutdown(self) -> None:
        self._server.shutdown()
        logger.info("Window closed")
