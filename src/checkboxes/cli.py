"""Command line interface for the checkboxes server."""
from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from . import __version__
from .engine.bitvector import BitVector
from .models import LogLevel, ServerConfig
from .server import create_app

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def _parse_log_level(value: str) -> LogLevel:
    """Parse a log level name, case-insensitively."""
    try:
        return LogLevel(value.upper())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid log level: {value}") from None


def _build_parser() -> argparse.ArgumentParser:
    defaults = ServerConfig()
    parser = argparse.ArgumentParser(prog="checkboxes", description="Shared checkbox server")
    parser.add_argument("-V", "--version", action="version", version=f"checkboxes {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the HTTP server")
    serve.add_argument("--host", default=defaults.host)
    serve.add_argument("--port", type=int, default=defaults.port)
    serve.add_argument("--capacity", type=int, default=defaults.capacity)
    serve.add_argument(
        "--demo-count",
        type=int,
        default=defaults.demo_count,
        help="Checkboxes drawn by the demo page",
    )
    serve.add_argument("--poll-interval-ms", type=int, default=defaults.poll_interval_ms)
    serve.add_argument(
        "--log-level",
        type=_parse_log_level,
        default=defaults.log_level,
        help="DEBUG, INFO, WARNING or ERROR",
    )
    return parser


def _build_config(args: argparse.Namespace) -> ServerConfig:
    return ServerConfig(
        host=args.host,
        port=args.port,
        capacity=args.capacity,
        demo_count=args.demo_count,
        poll_interval_ms=args.poll_interval_ms,
        log_level=args.log_level,
    ).validate()


def _command_serve(config: ServerConfig) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=config.log_level.value)
    vector = BitVector(config.capacity)
    app = create_app(vector, config)
    logger.info("Server starting on %s:%d (capacity=%d)", config.host, config.port, config.capacity)
    app.run(host=config.host, port=config.port, threaded=True, debug=False, use_reloader=False)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    command = args.command
    if command == "serve":
        try:
            config = _build_config(args)
        except ValueError as exc:
            parser.error(str(exc))
        _command_serve(config)
    else:
        parser.error(f"unknown command {command}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
