# test/conftest.py
"""
Shared fixtures for the rebrand test suite.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rebrand.engine import SubstitutionEngine
from rebrand.grammar import DEFAULT_TARGET


@pytest.fixture
def default_engine():
    """Engine using the shipped replacement string."""
    return SubstitutionEngine(DEFAULT_TARGET)


class FakeClassifier:
    """Classifier stub answering the same way for every path."""

    def __init__(self, text: bool = True):
        self.text = text
        self.calls = []

    def is_text(self, path) -> bool:
        self.calls.append(path)
        return self.text


@pytest.fixture
def text_classifier():
    return FakeClassifier(text=True)


@pytest.fixture
def binary_classifier():
    return FakeClassifier(text=False)
