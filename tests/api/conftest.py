"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from config import Settings
    from core.history_buffer import HistoryBuffer
    from main import app

    test_settings = Settings()
    test_settings.history.buffer_size = 5
    test_settings.image.max_upload_mb = 1

    # Set in app state
    app.state.history_buffer = HistoryBuffer(max_size=test_settings.history.buffer_size)
    app.state.config = test_settings.to_dict()

    # Create test client (no context manager to avoid running the lifespan)
    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client

    app.state.history_buffer.clear()
