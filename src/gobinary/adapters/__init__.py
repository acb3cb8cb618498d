"""Interface adapters: platform detection, subprocess, HTTP and archive I/O."""

from gobinary.adapters.httpx_release_client import HttpxReleaseClient
from gobinary.adapters.platform_detector import OsPlatformDetector
from gobinary.adapters.ports import (
    ArchiveExtractorPort,
    CommandResult,
    CommandRunnerPort,
    HttpClientPort,
    PlatformDetectorPort,
    StreamedResponse,
)
from gobinary.adapters.subprocess_command_runner import SubprocessCommandRunner
from gobinary.adapters.tar_gz_extractor import TarGzExtractor

__all__ = [
    "ArchiveExtractorPort",
    "CommandResult",
    "CommandRunnerPort",
    "HttpClientPort",
    "HttpxReleaseClient",
    "OsPlatformDetector",
    "PlatformDetectorPort",
    "StreamedResponse",
    "SubprocessCommandRunner",
    "TarGzExtractor",
]
