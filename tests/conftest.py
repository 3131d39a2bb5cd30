"""
Global test configuration with support for different test types.
"""

import logging
import os

import pytest

from gemini_mocks.adapters import ScriptedAdapter
from gemini_mocks.config import resolve_config
from gemini_mocks.core import InlineImage
from gemini_mocks.studio import MockStudio

# Smallest valid PNG: 1x1 transparent pixel
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-in escape hatch: mark a test with @pytest.mark.allow_dotenv
    to permit .env loading for that specific test.
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(
        "gemini_mocks.config.resolver.load_dotenv",
        lambda *_args, **_kwargs: False,
    )


@pytest.fixture(autouse=True)
def isolate_gemini_env(request, monkeypatch):
    """Ensure a clean GEMINI_* environment for each test.

    Removes GEMINI_* variables, the bare API_KEY alias and debug toggles.
    Tests marked with @pytest.mark.api keep the real environment.
    """
    if "api" in request.node.keywords:
        return

    for key in list(os.environ.keys()):
        if key.startswith("GEMINI_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)


# --- Logging Fixtures ---
@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Sets the log level for noisy external libraries to WARNING."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Behavioral contracts of public components",
        "api: Real API integration tests (requires API key)",
        "allow_dotenv: Permit python-dotenv to load files in this test",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Automatically skip API tests when API key is unavailable."""
    if not (
        (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"))
        and os.getenv("ENABLE_API_TESTS")
    ):
        skip_api = pytest.mark.skip(
            reason="API tests require GEMINI_API_KEY or API_KEY and ENABLE_API_TESTS=1",
        )
        for item in items:
            if "api" in item.keywords:
                item.add_marker(skip_api)


# --- Core Fixtures ---


@pytest.fixture
def mock_api_key():
    """Provide a consistent, fake API key for tests."""
    return "test_api_key_12345_67890_abcdef_ghijkl"


@pytest.fixture
def scripted_adapter():
    """An adapter with an empty reply queue; tests queue what they need."""
    return ScriptedAdapter()


@pytest.fixture
def offline_config(mock_api_key):
    """Frozen configuration that never selects the real endpoint."""
    return resolve_config({"api_key": mock_api_key, "use_real_api": False}).to_frozen()


@pytest.fixture
def studio(offline_config, scripted_adapter):
    """A studio wired to the scripted adapter."""
    return MockStudio(offline_config, scripted_adapter)


@pytest.fixture
def png_image():
    return InlineImage(data=PNG_BYTES, mime_type="image/png")
