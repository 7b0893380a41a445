"""Configuration loading for docsync (.docsync.yml and the app global file)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError
from .logging import get_logger

CONFIG_FILENAME = ".docsync.yml"

_logger = get_logger("config")


@dataclass
class DocSyncConfig:
    """Represents the settings defined in .docsync.yml."""

    root: Path
    components_dir: str = "components"
    component_extension: str = ".tsx"
    docs_route: str = "/tools/docs/components"
    global_file: str = "app/global.ts"
    app_name_constant: str = "APPNAME"
    nav_manifest: str = "navLinks.ts"
    metadata_manifest: str = "metadata.json"
    max_workers: int = 8


@dataclass(frozen=True)
class ProjectLayout:
    """Resolved filesystem locations for one project, loaded once per run."""

    root: Path
    app_name: str
    components_dir: Path
    docs_dir: Path
    nav_manifest_path: Path
    metadata_manifest_path: Path
    component_extension: str
    docs_route: str
    max_workers: int

    @property
    def page_filename(self) -> str:
        return f"page{self.component_extension}"


def load_config(config_path: Path) -> DocSyncConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocSyncConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DocSyncConfig(root=root)
    for key in (
        "components_dir",
        "docs_route",
        "global_file",
        "app_name_constant",
        "nav_manifest",
        "metadata_manifest",
    ):
        value = _as_str(data.get(key))
        if value:
            setattr(config, key, value)

    extension = _as_str(data.get("component_extension"))
    if extension:
        config.component_extension = extension if extension.startswith(".") else f".{extension}"

    max_workers = _as_int(data.get("max_workers"))
    if max_workers is not None:
        if max_workers < 1:
            raise ConfigError("max_workers must be a positive integer")
        config.max_workers = max_workers

    config.docs_route = "/" + config.docs_route.strip("/")
    return config


def load_app_name(root: Path, config: DocSyncConfig) -> str:
    """Read the application short name constant from the global file."""
    global_path = root / config.global_file
    try:
        content = global_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"{config.global_file} file not found") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read {config.global_file}: {exc}") from exc

    pattern = re.compile(
        rf"export const {re.escape(config.app_name_constant)} = [\"'](.+?)[\"']"
    )
    match = pattern.search(content)
    if not match:
        raise ConfigError(
            f"{config.app_name_constant} constant not found in {global_path.name}"
        )
    return match.group(1)


def load_layout(root: Path, config: Optional[DocSyncConfig] = None) -> ProjectLayout:
    """Build the project layout for ``root``; raises ConfigError when it cannot."""
    root = root.expanduser().resolve()
    if config is None:
        config = load_config(root)
    app_name = load_app_name(root, config)
    docs_dir = root / "app" / app_name / "docs" / "components"
    layout = ProjectLayout(
        root=root,
        app_name=app_name,
        components_dir=root / config.components_dir,
        docs_dir=docs_dir,
        nav_manifest_path=docs_dir / config.nav_manifest,
        metadata_manifest_path=root / config.metadata_manifest,
        component_extension=config.component_extension,
        docs_route=config.docs_route,
        max_workers=config.max_workers,
    )
    _logger.debug("Resolved layout for %s (app=%s, docs=%s)", root, app_name, docs_dir)
    return layout


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "DocSyncConfig",
    "ProjectLayout",
    "load_app_name",
    "load_config",
    "load_layout",
]
