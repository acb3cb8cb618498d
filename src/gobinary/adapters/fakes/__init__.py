"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from gobinary.adapters.fakes.fake_archive_extractor import FakeArchiveExtractor
from gobinary.adapters.fakes.fake_command_runner import FakeCommandRunner
from gobinary.adapters.fakes.fake_http_client import FakeHttpClient, FakeStreamedResponse
from gobinary.adapters.fakes.fake_platform_detector import FakePlatformDetector

__all__ = [
    "FakeArchiveExtractor",
    "FakeCommandRunner",
    "FakeHttpClient",
    "FakePlatformDetector",
    "FakeStreamedResponse",
]
