"""HTTP boundary: a Flask app around one shared :class:`BitVector`."""
from __future__ import annotations

import logging
import re
from dataclasses import replace

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from .engine.bitvector import BitVector
from .models import ServerConfig
from .page import render_page

logger = logging.getLogger(__name__)

VECTOR_KEY = "CHECKBOXES"
SETTINGS_KEY = "CHECKBOXES_SETTINGS"

_INDEX_RE = re.compile(r"[+-]?[0-9]+")

routes = Blueprint("checkboxes", __name__)


def parse_index(raw: str | None) -> int:
    """Parse a base-10 ``index`` query value, raising ``ValueError`` if malformed."""
    if raw is None or not _INDEX_RE.fullmatch(raw):
        raise ValueError(f"invalid index: {raw!r}")
    return int(raw)


def _vector() -> BitVector:
    return current_app.config[VECTOR_KEY]


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


@routes.get("/")
def index() -> str:
    settings: ServerConfig = current_app.config[SETTINGS_KEY]
    return render_page(settings.demo_count, settings.poll_interval_ms, settings.capacity)


@routes.get("/toggle")
def toggle() -> Response:
    raw = request.args.get("index")
    try:
        position = parse_index(raw)
        _vector().toggle(position)
    except (ValueError, IndexError) as exc:
        logger.debug("Rejected toggle: %s", exc)
        return _text("Invalid index", 400)
    logger.debug("Toggled checkbox %d", position)
    return _text(f"Toggled checkbox {position}")


@routes.get("/count")
def count() -> Response:
    return _text(str(_vector().count_checked()))


@routes.get("/state")
def state() -> Response:
    return jsonify(_vector().snapshot())


def create_app(vector: BitVector, config: ServerConfig | None = None) -> Flask:
    """Build an app serving ``vector``; the config capacity follows the vector."""
    if config is None:
        config = ServerConfig(capacity=len(vector))
    config = config.validate()
    if config.capacity != len(vector):
        config = replace(config, capacity=len(vector))
    app = Flask(__name__)
    app.config[VECTOR_KEY] = vector
    app.config[SETTINGS_KEY] = config
    app.register_blueprint(routes)
    return app
