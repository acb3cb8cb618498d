"""Pytest configuration and shared fixtures for gobinary core unit tests."""

from __future__ import annotations

import io
import json
import tarfile
from pathlib import Path
from typing import Any, Callable

import pytest

from gobinary.domain.binary import BinaryDistribution, InstallOptions, Platform
from gobinary.domain.settings import InstallerEnvironment


def pytest_configure(config: Any) -> None:
    """Register custom markers for unit tests."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def build_tar_gz(files: dict[str, bytes]) -> bytes:
    """Build an in-memory .tar.gz holding ``files`` (name -> content)."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for name, content in files.items():
            info = tarfile.TarInfo(name=name)
            info.size = len(content)
            info.mode = 0o755
            archive.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


def valid_descriptor(**overrides: Any) -> dict[str, Any]:
    """Return a complete goBinary descriptor with optional overrides."""
    descriptor: dict[str, Any] = {
        "name": "mytool",
        "path": "./bin",
        "version": "v1.0.0",
        "owner": "acme",
        "repo": "mytool",
        "assetName": "mytool-{{platform}}-{{arch}}",
    }
    descriptor.update(overrides)
    return descriptor


@pytest.fixture
def tar_gz() -> Callable[[dict[str, bytes]], bytes]:
    """Provide the in-memory archive builder."""
    return build_tar_gz


@pytest.fixture
def environment(tmp_path: Path) -> InstallerEnvironment:
    """Invocation environment rooted at a temporary package directory."""
    return InstallerEnvironment(cwd=tmp_path, environ={})


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a package.json into the temporary package directory."""

    def _write(manifest: Any) -> Path:
        path = tmp_path / "package.json"
        path.write_text(json.dumps(manifest))
        return path

    return _write


@pytest.fixture
def linux_amd64() -> Platform:
    return Platform(os="linux", arch="amd64")


@pytest.fixture
def sample_options(tmp_path: Path, linux_amd64: Platform) -> InstallOptions:
    """Install options as resolved from valid_descriptor() on linux/amd64."""
    return InstallOptions(
        bin_name="mytool",
        bin_path=tmp_path / "bin",
        version="1.0.0",
        owner="acme",
        repo="mytool",
        asset_name="mytool-linux-amd64",
        auth=False,
        platform=linux_amd64,
    )


@pytest.fixture
def sample_distribution() -> BinaryDistribution:
    return BinaryDistribution.from_manifest(valid_descriptor())


@pytest.fixture
def make_descriptor() -> Callable[..., dict[str, Any]]:
    """Provide the goBinary descriptor builder."""
    return valid_descriptor
