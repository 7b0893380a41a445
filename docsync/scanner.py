"""Discovery of component source files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .logging import get_logger
from .models import ComponentFile

_EXCLUDED_FILES = {
    ".DS_Store",
    "Thumbs.db",
}

_logger = get_logger("scanner")


class ComponentScanner:
    """Lists component files directly under the components directory."""

    def __init__(self, components_dir: Path, extension: str = ".tsx") -> None:
        self.components_dir = components_dir
        self.extension = extension

    def scan(self) -> List[ComponentFile]:
        """Return component files sorted by filename; empty when the directory is absent."""
        if not self.components_dir.exists():
            _logger.debug("Components directory %s does not exist", self.components_dir)
            return []
        if not self.components_dir.is_dir():
            raise NotADirectoryError(
                f"Components path is not a directory: {self.components_dir}"
            )

        files: List[ComponentFile] = []
        for path in sorted(self.components_dir.iterdir(), key=lambda item: item.name):
            if path.name in _EXCLUDED_FILES or not path.name.endswith(self.extension):
                continue
            if not path.is_file():
                continue
            stat_result = path.stat()
            files.append(
                ComponentFile(
                    path=path.resolve(),
                    filename=path.name,
                    modified_ns=stat_result.st_mtime_ns,
                )
            )
        _logger.debug("Discovered %d component files in %s", len(files), self.components_dir)
        return files

    def resolve(self, component_name: str) -> Path:
        """Return the path for ``component_name`` given with or without its extension."""
        filename = component_name
        if not filename.endswith(self.extension):
            filename = f"{filename}{self.extension}"
        return self.components_dir / filename


__all__ = ["ComponentScanner"]
