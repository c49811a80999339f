"""Shared fixtures for the phrase comparison tests."""

import sys
from pathlib import Path

import pytest

# Ensure project root is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from phrase_compare import ComparisonConfig, PhraseComparer


@pytest.fixture
def comparer():
    """Comparer with the default thresholds and vote weights."""
    return PhraseComparer(ComparisonConfig())


@pytest.fixture
def client():
    """Flask test client for the comparison service."""
    from api.app import app

    app.testing = True
    with app.test_client() as test_client:
        yield test_client

