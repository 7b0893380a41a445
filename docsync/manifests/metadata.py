"""Persisted JSON manifest of documented components keyed by display name."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable

from ..errors import MetadataManifestError
from ..logging import get_logger
from ..models import ComponentMetadata
from ..reporting import Reporter


class MetadataManifest:
    """Read-merge-write access to ``metadata.json``."""

    def __init__(self, path: Path, reporter: Reporter, *, verbose: bool = False) -> None:
        self.path = path
        self.reporter = reporter
        self.verbose = verbose
        self.logger = get_logger("manifests.metadata")

    def load(self) -> Dict[str, object]:
        return self._parse(self._read_text())

    def update(self, components: Iterable[ComponentMetadata]) -> bool:
        """Merge ``components`` into the manifest; returns True when the file changed."""
        existing_text = self._read_text()
        manifest = self._parse(existing_text)
        for component in components:
            manifest[component.display_name] = {
                "filename": component.suggested_filename,
                "exampleFunctionName": component.example_set_name,
            }

        content = json.dumps(manifest, indent=2, ensure_ascii=False)
        if content == existing_text:
            self.logger.debug("Metadata manifest %s unchanged", self.path)
            return False

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise MetadataManifestError(f"Failed to write metadata file: {exc}") from exc

        if self.verbose:
            self.reporter.info("Metadata file updated")
        return True

    def _read_text(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise MetadataManifestError(f"Failed to read metadata file: {exc}") from exc

    def _parse(self, text: str | None) -> Dict[str, object]:
        if text is None or not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MetadataManifestError(f"Failed to read metadata file: {exc}") from exc
        if not isinstance(data, dict):
            raise MetadataManifestError("Metadata file must contain a JSON object")
        return data


__all__ = ["MetadataManifest"]
