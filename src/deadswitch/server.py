"""HTTP control surface for deadswitch.

Routes:
    GET  /         countdown page (static/index.html)
    GET  /time     remaining seconds as plain text
    POST /delCode  arm the countdown
"""

from __future__ import annotations

from flask import Flask, Response

from .config import Configuration
from .constants import ARMED_MESSAGE
from .countdown import CountdownController
from .logging import get_logger

logger = get_logger(__name__)


def create_app(controller: CountdownController, config: Configuration) -> Flask:
    """Build the Flask app bound to one controller and configuration."""
    app = Flask(__name__, static_folder="static", static_url_path="/static")

    def _text(body: str) -> Response:
        return Response(body, status=200, mimetype="text/plain")

    # ---------- pages ----------
    @app.get("/")
    def index() -> Response:
        return app.send_static_file("index.html")

    # ---------- countdown ----------
    @app.get("/time")
    def remaining_time() -> Response:
        return _text(str(controller.remaining_seconds()))

    @app.post("/delCode")
    def arm_countdown() -> Response:
        started = controller.arm(config)
        logger.debug("Arm request from client (started=%s)", started)
        return _text(ARMED_MESSAGE)

    return app
