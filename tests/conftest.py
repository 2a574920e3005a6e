"""
Central pytest configuration for the Manicurista Pro tests.

Provides environment setup, markers and the shared Flask fixtures. The
text-generation collaborator is always a mock, so no test reaches the
network.
"""

import os
from unittest.mock import Mock

import pytest

# Test environment (set before the application modules are imported)
os.environ["TESTING"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "0"  # Disable rate limiting in tests
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["LOG_TO_FILE"] = "0"
os.environ["FLASK_SECRET_KEY"] = "test-secret-key"

from tests.config.markers import pytest_collection_modifyitems, pytest_configure  # noqa: E402,F401
from tests.factories.test_factories import TextGeneratorFactory, build_state  # noqa: E402


@pytest.fixture
def text_generator() -> Mock:
    """Configured text generator mock returning a fixed message."""
    return TextGeneratorFactory.create_mock()


@pytest.fixture
def state(text_generator):
    """Empty salon state with default profile/prices and a mocked text generator."""
    return build_state(text_generator=text_generator)


@pytest.fixture
def app(state):
    """Create Flask app for testing with an isolated in-memory state."""
    from manicurista.main import create_app

    flask_app = create_app(testing=True, state=state)
    yield flask_app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
