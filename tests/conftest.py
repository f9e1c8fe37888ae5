"""Pytest configuration and shared fixtures for the mdinline test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from mdinline import IdDef, InlineContext, InlineOptions, resolve_context

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by hypothesis")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def test_links() -> dict[str, IdDef]:
    """Reference definitions shared by the reference link and image tests."""
    return {
        "id1": IdDef(url="url 1", title="title 1"),
        "id2": IdDef(url="url 2"),
        "img1": IdDef(url="img 1", title="image 1"),
        "img2": IdDef(url="img 2"),
    }


@pytest.fixture
def pedantic_context(test_links) -> InlineContext:
    """Strict classic context with the shared reference definitions."""
    return resolve_context(InlineOptions(gfm=False, pedantic=True), test_links)


@pytest.fixture
def gfm_context() -> InlineContext:
    """Default extended-mode context without references."""
    return resolve_context()
