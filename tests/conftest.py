from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.source_builder import SourceBuilder

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def source_builder(tmp_path: Path) -> SourceBuilder:
    """Provide a reusable source tree builder rooted at the pytest tmp_path."""
    return SourceBuilder(tmp_path)


@pytest.fixture
def log_levels_path() -> Path:
    return DATA_DIR / "log_levels.ts"


@pytest.fixture
def log_levels_source(log_levels_path: Path) -> str:
    return log_levels_path.read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def _reset_docable_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog keeps seeing docable records."""
    yield
    logger = logging.getLogger("docable")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
