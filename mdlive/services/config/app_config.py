from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path

from mdlive.domain.interfaces import IAppConfig, IConfigService
from mdlive.services.config.ini_config_service import IniConfigService
from mdlive.utils.constants import (
    ASYNC_RENDER_THRESHOLD,
    DEFAULT_EXPORT_NAME,
    DEFAULT_SEED_TEXT,
    RENDER_CACHE_SIZE,
    WIDE_BREAKPOINT_PX,
)

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode walks upward from this file
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # mdlive/services/config/app_config.py -> repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps the INI service with the editor's typed settings.

    Version precedence:
      1) <project_root>/version file (e.g. v1.0.5)
      2) [app] version from the INI file
      3) "0.0.0"
    """

    ini: IConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    # ---- typed settings ----

    def log_level(self) -> str:
        return (self.ini.get("logging", "level", "INFO") or "INFO").strip()

    def seed_text(self) -> str:
        # empty value means "use default"
        return self.ini.get("editor", "seed_text", None) or DEFAULT_SEED_TEXT

    def render_cache_size(self) -> int:
        v = self.ini.get_int("preview", "cache_size", RENDER_CACHE_SIZE)
        return max(0, v if v is not None else RENDER_CACHE_SIZE)

    def async_render_threshold(self) -> int:
        v = self.ini.get_int("preview", "async_threshold", ASYNC_RENDER_THRESHOLD)
        return max(0, v if v is not None else ASYNC_RENDER_THRESHOLD)

    def wide_breakpoint_px(self) -> int:
        v = self.ini.get_int("layout", "wide_breakpoint_px", WIDE_BREAKPOINT_PX)
        return v if v and v > 0 else WIDE_BREAKPOINT_PX

    def default_export_name(self) -> str:
        return (self.ini.get("export", "default_name", None) or "").strip() or DEFAULT_EXPORT_NAME

    # ---- delegate IConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return getattr(self.ini, "loaded_from", None)


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
