# tests/test_app_config.py
from __future__ import annotations

from pathlib import Path

import pytest

from mdlive.services.config.app_config import AppConfig, build_app_config


# ------------------------------
# Helpers
# ------------------------------
def _write(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


class FakeIni:
    """
    Minimal IniConfigService-like fake backed by a dict.
    """

    def __init__(self, values: dict[str, dict[str, str]] | None = None, *, version: str = "0.0.0",
                 loaded_from: Path | None = None) -> None:
        self._values = values or {}
        self._version = version
        self._loaded_from = loaded_from

    def app_version(self) -> str:
        return self._version

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._values.get(section, {}).get(key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        v = self.get(section, key)
        try:
            return int(v) if v is not None else default
        except ValueError:
            return default

    @property
    def loaded_from(self) -> Path | None:
        return self._loaded_from


# ------------------------------
# get_version()
# ------------------------------
def test_get_version_prefers_version_file_and_strips_v(tmp_path: Path):
    root = tmp_path / "proj"
    _write(root / "version", "v1.0.5\n")
    cfg = AppConfig(ini=FakeIni(version="9.9.9"), project_root=root)
    assert cfg.get_version() == "1.0.5"


def test_get_version_falls_back_to_ini(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni(version="v2.3.4"), project_root=tmp_path)
    assert cfg.get_version() == "2.3.4"


def test_get_version_invalid_file_uses_ini(tmp_path: Path):
    _write(tmp_path / "version", "not-a-version")
    cfg = AppConfig(ini=FakeIni(version="1.2.3"), project_root=tmp_path)
    assert cfg.get_version() == "1.2.3"


def test_get_version_default(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni(version=""), project_root=tmp_path)
    assert cfg.get_version() == "0.0.0"


# ------------------------------
# typed settings
# ------------------------------
def test_typed_defaults(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni(), project_root=tmp_path)
    assert cfg.seed_text() == "# Hello Markdown"
    assert cfg.log_level() == "INFO"
    assert cfg.render_cache_size() == 64
    assert cfg.async_render_threshold() == 20000
    assert cfg.wide_breakpoint_px() == 600
    assert cfg.default_export_name() == "untitled.md"


def test_typed_overrides(tmp_path: Path):
    ini = FakeIni(
        {
            "logging": {"level": "debug"},
            "editor": {"seed_text": "Start here"},
            "preview": {"cache_size": "0", "async_threshold": "100"},
            "layout": {"wide_breakpoint_px": "900"},
            "export": {"default_name": "notes.md"},
        }
    )
    cfg = AppConfig(ini=ini, project_root=tmp_path)
    assert cfg.log_level() == "debug"
    assert cfg.seed_text() == "Start here"
    assert cfg.render_cache_size() == 0
    assert cfg.async_render_threshold() == 100
    assert cfg.wide_breakpoint_px() == 900
    assert cfg.default_export_name() == "notes.md"


@pytest.mark.parametrize("bad", ["-5", "zero", "0"])
def test_bad_breakpoint_uses_default(tmp_path: Path, bad: str):
    cfg = AppConfig(ini=FakeIni({"layout": {"wide_breakpoint_px": bad}}), project_root=tmp_path)
    assert cfg.wide_breakpoint_px() == 600


def test_negative_sizes_clamp_to_zero(tmp_path: Path):
    ini = FakeIni({"preview": {"cache_size": "-1", "async_threshold": "-10"}})
    cfg = AppConfig(ini=ini, project_root=tmp_path)
    assert cfg.render_cache_size() == 0
    assert cfg.async_render_threshold() == 0


def test_delegates_and_loaded_from(tmp_path: Path):
    src = tmp_path / "c.ini"
    cfg = AppConfig(ini=FakeIni({"a": {"b": "c"}}, loaded_from=src), project_root=tmp_path)
    assert cfg.get("a", "b") == "c"
    assert cfg.loaded_from == src


def test_build_app_config_reads_explicit_ini(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(
        "mdlive.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "none"),
    )
    ini = tmp_path / "custom.ini"
    _write(ini, "[layout]\nwide_breakpoint_px = 750\n")

    cfg = build_app_config(explicit_ini=ini, project_root=tmp_path)
    assert cfg.wide_breakpoint_px() == 750
    assert cfg.loaded_from == ini
