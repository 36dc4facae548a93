"""Shared fixtures for dbbackup tests."""

from pathlib import Path
from typing import Tuple

import pytest

from helpers import FAKE_GZIP, FAKE_MYSQLDUMP, make_executable


@pytest.fixture
def fake_tools(tmp_path: Path) -> Tuple[Path, Path]:
    """Executable mysqldump and gzip stand-ins, as (mysqldump, gzip)."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    return (
        make_executable(bin_dir / "mysqldump", FAKE_MYSQLDUMP),
        make_executable(bin_dir / "gzip", FAKE_GZIP),
    )


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    path = tmp_path / "backups"
    path.mkdir()
    return path
