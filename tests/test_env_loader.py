from pathlib import Path

import pytest

from dbbackup.config import EnvLoader


def test_env_loader_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("DBBACKUP_USER=file\nDBBACKUP_PASSWORD=file\n")

    monkeypatch.setenv("DBBACKUP_PASSWORD", "env")

    loader = EnvLoader(env_file)
    data = loader.load({"DBBACKUP_PASSWORD": "override", "DBBACKUP_GZIP": "override"})

    assert data["DBBACKUP_USER"] == "file"
    assert data["DBBACKUP_PASSWORD"] == "override"
    assert data["DBBACKUP_GZIP"] == "override"


def test_env_loader_reads_dotenv_from_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("DBBACKUP_USER=from-cwd\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DBBACKUP_USER", raising=False)

    assert EnvLoader().load()["DBBACKUP_USER"] == "from-cwd"


def test_env_loader_without_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DBBACKUP_USER", "env-only")

    data = EnvLoader(tmp_path / "missing.env").load()
    assert data["DBBACKUP_USER"] == "env-only"


def test_env_loader_prefix_filters_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("DBBACKUP_USER=file\nOTHER=file\n")
    monkeypatch.setenv("UNRELATED", "x")

    data = EnvLoader(env_file, prefix="DBBACKUP_").load({"ALSO_UNRELATED": "y"})

    assert data["DBBACKUP_USER"] == "file"
    assert "OTHER" not in data
    assert "UNRELATED" not in data
    assert "ALSO_UNRELATED" not in data
