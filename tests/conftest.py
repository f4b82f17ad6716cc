from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable React project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo configure_logging() between tests so caplog keeps seeing records."""
    yield
    logger = logging.getLogger("reactrefactor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
