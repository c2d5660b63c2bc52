"""
Repository-level pytest configuration.

Why this exists:
  - Point the library at the repository's config/contrib.yaml regardless of
    the directory pytest is started from
  - Keep behavior explicit and discoverable

Values set here are defaults only; anything already exported by the user or
CI wins.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _contrib_env_defaults(project_root: Path) -> Generator[None, None, None]:
    """Set environment defaults if not already provided by the user/CI."""
    defaults = {
        "PW_CONTRIB_CONFIG": str(project_root / "config" / "contrib.yaml"),
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
