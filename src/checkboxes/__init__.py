"""checkboxes: a shared, bit-packed checkbox board served over HTTP."""
from __future__ import annotations

from collections.abc import Sequence

__version__ = "0.1.0"

from .engine.bitvector import BitVector
from .server import create_app


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`checkboxes.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = ["BitVector", "create_app", "main"]
