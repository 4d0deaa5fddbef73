import logging
import os

import pytest

# Environment setup for testing
os.environ.setdefault("MOCK_ENGINE_LOG_LEVEL", "DEBUG")

from mock_engine.core.config import MockBehavior, Settings
from mock_engine.core.container import Container
from mock_engine.services.mock_engine import MockEngine


MY_INTERFACE = "IMyInterface"


@pytest.fixture
def test_settings():
    """Settings with safe defaults, independent of the developer's environment"""
    return Settings(
        DEFAULT_BEHAVIOR=MockBehavior.LOOSE,
        DEFAULT_TYPE_NAME="IMock",
        MESSAGE_LINE_SEPARATOR="\r\n",
        LOG_DIAGNOSTICS=True,
    )


@pytest.fixture
def strict_mock(test_settings):
    """Strict mock of IMyInterface"""
    return MockEngine(MY_INTERFACE, MockBehavior.STRICT, settings=test_settings)


@pytest.fixture
def loose_mock(test_settings):
    """Loose mock of IMyInterface"""
    return MockEngine(MY_INTERFACE, MockBehavior.LOOSE, settings=test_settings)


@pytest.fixture(params=[MockBehavior.STRICT, MockBehavior.LOOSE], ids=["strict", "loose"])
def any_mock(request, test_settings):
    """Runs a test once per behavior"""
    return MockEngine(MY_INTERFACE, request.param, settings=test_settings)


@pytest.fixture
def test_container(test_settings):
    """Container whose engines use the test settings"""
    container = Container()
    container.app_settings.override(test_settings)
    yield container
    container.app_settings.reset_override()


@pytest.fixture
def capture_logs(caplog):
    """Capture logs for testing"""
    caplog.set_level(logging.DEBUG, logger="mock_engine")
    yield caplog
