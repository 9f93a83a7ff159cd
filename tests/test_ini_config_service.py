# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from mdlive.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture()
def user_dir(monkeypatch, tmp_path) -> Path:
    """Point platformdirs at an isolated per-test directory."""
    d = tmp_path / "usercfg"
    monkeypatch.setattr(
        "mdlive.services.config.ini_config_service.user_config_dir",
        lambda appname: str(d),
    )
    return d


def test_defaults_when_no_config_files(user_dir):
    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"
    assert cfg.loaded_from is None

    # getters with defaults
    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get_int("app", "nonint", 42) == 42


def test_project_root_config_is_used_when_present(user_dir, tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[app]\nversion = 1.2.3\n[preview]\nasync_threshold = 500\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "1.2.3"
    assert cfg.get_int("preview", "async_threshold") == 500
    assert cfg.loaded_from == ini


def test_user_dir_preferred_over_project_root(user_dir, tmp_path):
    write_ini(user_dir / "config.ini", "[app]\nversion = 2.0.0\n")
    proj_root = tmp_path / "repo"
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "2.0.0"
    assert cfg.loaded_from == user_dir / "config.ini"


def test_explicit_path_wins(user_dir, ini_path):
    write_ini(user_dir / "config.ini", "[app]\nversion = 2.0.0\n")
    write_ini(ini_path, "[app]\nversion = 3.0.0\n")

    cfg = IniConfigService(explicit_path=ini_path)
    assert cfg.app_version() == "3.0.0"
    assert cfg.loaded_from == ini_path


def test_malformed_file_is_skipped(user_dir, ini_path, tmp_path):
    write_ini(ini_path, "this is not [ini\n= nope")
    proj_root = tmp_path / "repo"
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.1.1\n")

    cfg = IniConfigService(explicit_path=ini_path, project_root=proj_root)
    assert cfg.app_version() == "1.1.1"
    assert cfg.loaded_from == proj_root / "config" / "config.ini"


def test_hash_values_are_not_comments(user_dir, ini_path):
    write_ini(ini_path, "[editor]\nseed_text = # Heading\n")
    cfg = IniConfigService(explicit_path=ini_path)
    assert cfg.get("editor", "seed_text") == "# Heading"
