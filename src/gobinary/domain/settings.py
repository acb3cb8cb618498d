"""Invocation environment for gobinary.

Everything the pipeline would otherwise read from process globals (working
directory and environment variables) is captured here once and passed down
explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

MANIFEST_FILENAME = "package.json"
MANIFEST_KEY = "goBinary"

TOKEN_ENV_VAR = "GITHUB_TOKEN"
API_URL_ENV_VAR = "GITHUB_API_URL"
NPM_PREFIX_ENV_VAR = "npm_config_prefix"

DEFAULT_API_URL = "https://api.github.com"

# Relative to the working directory
LOCAL_BIN_DIR = Path("node_modules") / ".bin"


@dataclass(frozen=True)
class InstallerEnvironment:
    """Snapshot of the process state an invocation depends on.

    Attributes:
        cwd: Directory holding package.json; relative paths resolve here.
        environ: Environment variables visible to the invocation.
    """

    cwd: Path
    environ: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_process(cls) -> InstallerEnvironment:
        """Capture the current working directory and ``os.environ``."""
        return cls(cwd=Path.cwd(), environ=dict(os.environ))

    @property
    def manifest_path(self) -> Path:
        return self.cwd / MANIFEST_FILENAME

    @property
    def token(self) -> str | None:
        """Release host token, or None when unset or empty."""
        return self.environ.get(TOKEN_ENV_VAR) or None

    @property
    def api_url(self) -> str:
        return self.environ.get(API_URL_ENV_VAR) or DEFAULT_API_URL

    @property
    def npm_prefix(self) -> str | None:
        return self.environ.get(NPM_PREFIX_ENV_VAR) or None
