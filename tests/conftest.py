from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _reset_cmdbuild_logger():
    # cli.configure_logging detaches the logger from root; undo it so caplog sees records.
    yield
    logger = logging.getLogger("cmdbuild")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def plugin_root(tmp_path: Path) -> Path:
    """A plugin tree with an empty `src/commands` directory."""
    (tmp_path / "src" / "commands").mkdir(parents=True)
    return tmp_path
