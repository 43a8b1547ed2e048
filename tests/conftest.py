"""Test configuration: local sources and a fresh board per test."""

from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from checkboxes.engine.bitvector import BitVector  # noqa: E402
from checkboxes.server import create_app  # noqa: E402


@pytest.fixture
def vector() -> BitVector:
    return BitVector(1_000_000)


@pytest.fixture
def client(vector: BitVector):
    app = create_app(vector)
    app.config["TESTING"] = True
    return app.test_client()
