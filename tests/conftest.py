"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path
from dotenv import load_dotenv

# Load test environment
test_env = Path(__file__).parent / ".env"
if test_env.exists():
    load_dotenv(test_env)


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")


@pytest.fixture
def annotated_query():
    """Query using every annotation kind."""
    return "hi [tag1] there {interest1}[tag2] all {interest2} after"


@pytest.fixture
def parameter_query():
    """Query mixing free text, plain and quoted key:value pairs."""
    return " hello abc: dave   hi there def :thielen some more ghi: 'david thielen' and some more"


@pytest.fixture
def test_client():
    """Create FastAPI test client."""
    from fastapi.testclient import TestClient
    from query_annotations.main import app
    return TestClient(app)
