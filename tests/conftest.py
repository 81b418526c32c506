"""Global pytest configuration."""

from __future__ import annotations

import logging

import pytest

from spgraph.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Keep log level changes made by one test from leaking into the next."""
    yield
    set_global_log_level(logging.INFO)
