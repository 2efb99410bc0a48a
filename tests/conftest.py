from __future__ import annotations

import pytest

from specreadme.builder import ReadMeBuilder
from specreadme.manipulator import ReadMeManipulator
from tests._fixtures.readmes import CDN_README, SUBSCRIPTIONS_README, RecordingLogger


@pytest.fixture
def cdn_readme() -> str:
    """Readme declaring two Cdn tags and a Basic Information block."""
    return CDN_README


@pytest.fixture
def subscriptions_readme() -> str:
    """Readme with a populated Suppression section."""
    return SUBSCRIPTIONS_README


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def manipulator(logger: RecordingLogger) -> ReadMeManipulator:
    return ReadMeManipulator(logger, ReadMeBuilder())
