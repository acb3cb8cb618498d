"""Shared fixtures for BDD tests."""

import io
import tarfile
from pathlib import Path

import pytest


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """Create a temporary npm package root.

    Returns:
        Path to the directory package.json is written to.
    """
    root = tmp_path / "package"
    root.mkdir()
    return root


@pytest.fixture
def tar_gz():
    """Return a builder for in-memory .tar.gz archives (name -> content)."""

    def _build(files: dict) -> bytes:
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
            for name, content in files.items():
                info = tarfile.TarInfo(name=name)
                info.size = len(content)
                info.mode = 0o755
                archive.addfile(info, io.BytesIO(content))
        return buffer.getvalue()

    return _build
