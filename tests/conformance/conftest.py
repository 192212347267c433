"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.frontend_runner import FrontendRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [FrontendRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - frontend: Uses the sdwlib lexer and parser
    """
    return request.param
