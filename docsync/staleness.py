"""Decide whether a component's generated documentation page is out of date."""

from __future__ import annotations

from .config import ProjectLayout
from .errors import ComponentNotFoundError, DocSyncError
from .extraction import MetadataExtractor
from .logging import get_logger
from .paths import doc_page_path
from .scanner import ComponentScanner


class StalenessDetector:
    """Compares a component source against its generated page."""

    def __init__(
        self,
        layout: ProjectLayout,
        extractor: MetadataExtractor,
        scanner: ComponentScanner,
    ) -> None:
        self.layout = layout
        self.extractor = extractor
        self.scanner = scanner
        self.logger = get_logger("staleness")

    def needs_update(self, component_name: str) -> bool:
        """Return True when the page is missing, older than the source, or stale.

        Components without documentation metadata never need an update. A
        missing component file raises ComponentNotFoundError.
        """
        component_path = self.scanner.resolve(component_name)
        try:
            content = component_path.read_text(encoding="utf-8", errors="replace")
            component_mtime = component_path.stat().st_mtime_ns
        except FileNotFoundError as exc:
            raise ComponentNotFoundError(
                f"Component file not found: {component_path.name}"
            ) from exc
        except OSError as exc:
            raise DocSyncError(
                f"Failed to check if documentation needs update: {exc}"
            ) from exc

        metadata = self.extractor.extract(content)
        if metadata is None:
            self.logger.debug("%s declares no documentation metadata", component_path.name)
            return False

        page_path = doc_page_path(self.layout, metadata.suggested_filename)
        try:
            page_mtime = page_path.stat().st_mtime_ns
        except FileNotFoundError:
            self.logger.debug("No documentation page at %s", page_path)
            return True
        except OSError as exc:
            raise DocSyncError(
                f"Failed to check if documentation needs update: {exc}"
            ) from exc

        if component_mtime > page_mtime:
            self.logger.debug("%s is newer than %s", component_path.name, page_path)
            return True

        try:
            page_content = page_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise DocSyncError(
                f"Failed to check if documentation needs update: {exc}"
            ) from exc
        return metadata.example_set_name not in page_content


__all__ = ["StalenessDetector"]
