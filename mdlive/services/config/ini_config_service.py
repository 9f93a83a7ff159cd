# mdlive/services/config/ini_config_service.py
from __future__ import annotations

import configparser
from pathlib import Path
from typing import Optional

from loguru import logger
from platformdirs import user_config_dir

from mdlive.domain.interfaces import IConfigService


class IniConfigService(IConfigService):
    r"""
    Read-only INI configuration.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/MarkdownLiveEditor/config.ini or %APPDATA%\MarkdownLiveEditor\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)

    Nothing is ever written back; the editor does not persist settings.
    """

    DEFAULT_APP_DIR = "MarkdownLiveEditor"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser(interpolation=None)
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)

        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)

        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            try:
                with path.open("r", encoding="utf-8") as fh:
                    self._parser.read_file(fh)
            except (OSError, UnicodeDecodeError, configparser.Error) as e:
                # Malformed config must not stop the editor; fall through to defaults.
                logger.warning("Ignoring unreadable config {}: {}", path, e)
                self._parser = configparser.ConfigParser(interpolation=None)
                continue
            self._loaded_from = path
            logger.debug("Loaded config from {}", path)
            break

        if "app" not in self._parser:
            self._parser["app"] = {}
        self._parser["app"].setdefault("version", "0.0.0")

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics/logging."""
        return self._loaded_from
