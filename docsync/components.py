"""Scaffolding and YAML export/import of component source files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

import yaml
from jinja2 import Environment

from .errors import ComponentNotFoundError, DocSyncError
from .logging import get_logger
from .pages import create_environment

COMPONENT_TEMPLATE = "component.tsx.j2"
EXPORTS_DIRNAME = "exports"

_NAME_RE = re.compile(r"^[A-Za-z_$][\w$-]*$")


def _pascal_case(name: str) -> str:
    parts = re.split(r"[-_\s]+", name)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def _display_name(name: str) -> str:
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", _pascal_case(name))
    return spaced.strip()


class ComponentManager:
    """Creates, exports and imports component files in the components directory."""

    def __init__(
        self,
        root: Path,
        *,
        components_dir: str = "components",
        extension: str = ".tsx",
        force: bool = False,
        environment: Optional[Environment] = None,
    ) -> None:
        self.root = Path(root).expanduser().resolve()
        self.components_path = self.root / components_dir
        self.extension = extension
        self.force = force
        self._env = environment or create_environment()
        self.logger = get_logger("components")

    def list_components(self) -> List[str]:
        try:
            names = [entry.name for entry in self.components_path.iterdir()]
        except OSError as exc:
            raise DocSyncError(f"Error listing components: {exc}") from exc
        return sorted(name for name in names if name.endswith(self.extension))

    def create_component(self, name: str) -> Path:
        """Write a scaffold for ``name`` that already carries documentation markers."""
        if not _NAME_RE.match(name):
            raise DocSyncError(f"Invalid component name: {name!r}")
        component_path = self._component_path(name)
        if component_path.exists() and not self.force:
            raise DocSyncError(
                f"Component {component_path.name} already exists. Use --force to overwrite."
            )

        identifier = _pascal_case(name)
        content = self._env.get_template(COMPONENT_TEMPLATE).render(
            name=identifier,
            suggested_filename=f"{identifier}{self.extension}",
            display_name=_display_name(name),
            example_set_name=f"examples{identifier}",
        )
        try:
            component_path.parent.mkdir(parents=True, exist_ok=True)
            component_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise DocSyncError(f"Error creating component: {exc}") from exc
        self.logger.debug("Created component scaffold %s", component_path)
        return component_path

    def export_component(self, name: str) -> Path:
        """Write ``exports/<name>.yaml`` holding the component's name and source."""
        component_path = self._component_path(name)
        export_path = self.root / EXPORTS_DIRNAME / f"{Path(component_path.name).stem}.yaml"
        try:
            content = component_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ComponentNotFoundError(f"Component file not found: {component_path.name}") from exc
        except OSError as exc:
            raise DocSyncError(f"Error exporting component: {exc}") from exc

        payload = {"name": component_path.stem, "content": content}
        try:
            export_path.parent.mkdir(parents=True, exist_ok=True)
            export_path.write_text(
                yaml.safe_dump(payload, sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise DocSyncError(f"Error exporting component: {exc}") from exc
        return export_path

    def import_component(self, source_file: Path) -> Path:
        """Restore a component from a YAML export produced by ``export_component``."""
        try:
            payload = yaml.safe_load(Path(source_file).read_text(encoding="utf-8"))
        except OSError as exc:
            raise DocSyncError(f"Error importing component: {exc}") from exc
        except yaml.YAMLError as exc:
            raise DocSyncError(f"Error importing component: {exc}") from exc

        if not isinstance(payload, dict):
            raise DocSyncError("Error importing component: export must be a mapping")
        name = payload.get("name")
        content = payload.get("content")
        if not isinstance(name, str) or not isinstance(content, str):
            raise DocSyncError("Error importing component: 'name' and 'content' are required")
        if not _NAME_RE.match(name):
            raise DocSyncError(f"Error importing component: invalid name {name!r}")

        component_path = self._component_path(name)
        if component_path.exists() and not self.force:
            raise DocSyncError(
                f"Component {component_path.name} already exists. Use --force to overwrite."
            )
        try:
            component_path.parent.mkdir(parents=True, exist_ok=True)
            component_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise DocSyncError(f"Error importing component: {exc}") from exc
        return component_path

    def _component_path(self, name: str) -> Path:
        filename = name if name.endswith(self.extension) else f"{name}{self.extension}"
        return self.components_path / filename


__all__ = ["ComponentManager"]
