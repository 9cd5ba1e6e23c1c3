"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from shopcart.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

DATA_DIR_ENV = "SHOPCART_DATA_DIR"
STORE_FILE = "shopcart.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def resolve_data_dir(override: Path | None = None) -> Path:
    """``--data-dir`` wins, then ``$SHOPCART_DATA_DIR``, then ``<repo>/data``."""
    if override is not None:
        return override
    configured = os.environ.get(DATA_DIR_ENV)
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def unit_of_work(data_dir: Path | None = None) -> JsonUnitOfWork:
    return JsonUnitOfWork(resolve_data_dir(data_dir) / STORE_FILE)
