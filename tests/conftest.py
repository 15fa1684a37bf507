"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """configure_logging() binds a stream; don't let it leak into other tests."""
    yield
    structlog.reset_defaults()
