"""Documentation synchronization pipeline for list/generate/check flows."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional

from .config import DocSyncConfig, ProjectLayout, load_layout
from .errors import ComponentNotFoundError, ConfigError, DocSyncError
from .extraction import ConventionMetadataExtractor, MetadataExtractor
from .logging import get_logger
from .manifests import MetadataManifest, NavigationManifest
from .models import ComponentFile, ComponentInfo, GenerationResult
from .pages import PageGenerator
from .paths import doc_page_path
from .reporting import Reporter
from .scanner import ComponentScanner
from .staleness import StalenessDetector


class ManagerState(Enum):
    """Lifecycle of a DocumentationManager within one invocation."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    GENERATING_ALL = "generating_all"
    GENERATING_ONE = "generating_one"
    CHECKING = "checking"
    LISTING = "listing"
    DONE = "done"


class DocumentationManager:
    """Coordinates extraction, staleness checks, page generation and manifests.

    Pass a ``layout`` loaded with :func:`docsync.config.load_layout` to start
    ready; without one, the first operation initializes from ``root``.
    """

    def __init__(
        self,
        root: Path,
        reporter: Reporter,
        *,
        layout: ProjectLayout | None = None,
        config: DocSyncConfig | None = None,
        verbose: bool = False,
        force: bool = False,
        extractor: MetadataExtractor | None = None,
    ) -> None:
        self.root = Path(root).expanduser().resolve()
        self.reporter = reporter
        self.verbose = verbose
        self.force = force
        self.extractor = extractor or ConventionMetadataExtractor()
        self.logger = get_logger("manager")
        self._config = config
        self.layout: Optional[ProjectLayout] = None
        self.state = ManagerState.UNINITIALIZED
        if layout is not None:
            self._bind(layout)

    def initialize(self) -> ProjectLayout:
        """Resolve the project layout; ConfigError here is fatal for the run."""
        if self.layout is not None:
            return self.layout
        self.state = ManagerState.INITIALIZING
        try:
            layout = load_layout(self.root, self._config)
        except ConfigError as exc:
            self.state = ManagerState.UNINITIALIZED
            raise ConfigError(f"Failed to initialize DocumentationManager: {exc}") from exc
        self._bind(layout)
        return layout

    @property
    def components_path(self) -> Path:
        return self.initialize().components_dir

    @property
    def docs_path(self) -> Path:
        return self.initialize().docs_dir

    def list_components(self) -> List[ComponentInfo]:
        """Return every component file with its metadata (possibly None) and page status."""
        with self._operation(ManagerState.LISTING):
            return self._inventory()

    def generate_documentation(self, component_name: str | None = None) -> GenerationResult:
        """Generate pages for documented components, optionally only ``component_name``.

        ``component_name`` matches the display name. Failures for individual
        components are reported and the batch continues; pages already written
        are kept.
        """
        state = ManagerState.GENERATING_ONE if component_name else ManagerState.GENERATING_ALL
        with self._operation(state):
            selected = [info for info in self._inventory() if info.metadata is not None]
            if component_name:
                selected = [
                    info
                    for info in selected
                    if info.metadata is not None and info.metadata.display_name == component_name
                ]
                if not selected:
                    raise ComponentNotFoundError(f'Component "{component_name}" not found.')

            result = GenerationResult()
            for info in selected:
                metadata = info.metadata
                if metadata is None:
                    continue
                try:
                    page = self.pages.create_page(metadata, info.filename)
                except DocSyncError as exc:
                    self.logger.debug("Page generation failed for %s", info.filename, exc_info=True)
                    self.reporter.error(
                        f"Error generating documentation for {metadata.display_name}: {exc}"
                    )
                    result.failed[metadata.display_name] = str(exc)
                    continue
                result.processed.append(metadata)
                if page.written:
                    result.written.append(page.path)
                else:
                    result.skipped.append(page.path)

            if result.processed:
                self.metadata_manifest.update(result.processed)

            self.reporter.success(
                f"Documentation generated for {len(result.written)} component(s); "
                f"{len(result.skipped)} already up to date."
            )
            return result

    def check_if_documentation_needs_update(self, component_name: str) -> bool:
        """Report and return whether ``component_name``'s page must be regenerated."""
        with self._operation(ManagerState.CHECKING):
            needs_update = self.staleness.needs_update(component_name)
            if needs_update:
                self.reporter.warn(f"Documentation for {component_name} needs updating.")
            else:
                self.reporter.success(f"Documentation for {component_name} is up to date.")
            return needs_update

    # ------------------------------------------------------------------
    # Internal helpers

    def _bind(self, layout: ProjectLayout) -> None:
        self.layout = layout
        self.scanner = ComponentScanner(layout.components_dir, layout.component_extension)
        self.navigation = NavigationManifest(layout, self.reporter, verbose=self.verbose)
        self.metadata_manifest = MetadataManifest(
            layout.metadata_manifest_path, self.reporter, verbose=self.verbose
        )
        self.pages = PageGenerator(
            layout,
            self.navigation,
            self.reporter,
            force=self.force,
            verbose=self.verbose,
        )
        self.staleness = StalenessDetector(layout, self.extractor, self.scanner)
        self.state = ManagerState.READY

    @contextmanager
    def _operation(self, state: ManagerState) -> Iterator[None]:
        self.initialize()
        self.state = state
        self.logger.debug("Manager entering %s", state.value)
        try:
            yield
        finally:
            self.state = ManagerState.DONE

    def _inventory(self) -> List[ComponentInfo]:
        layout = self.initialize()
        if not layout.components_dir.exists():
            self.reporter.warn(f"Components directory not found: {layout.components_dir}")
        files = self.scanner.scan()
        if not files:
            return []
        workers = min(layout.max_workers, len(files))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self._inspect, files))

    def _inspect(self, component: ComponentFile) -> ComponentInfo:
        try:
            content = component.path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise DocSyncError(f"Failed to read {component.filename}: {exc}") from exc

        metadata = self.extractor.extract(content)
        if metadata is None:
            return ComponentInfo(component=component, metadata=None, has_documentation=False)

        doc_path = doc_page_path(self.initialize(), metadata.suggested_filename)
        return ComponentInfo(
            component=component,
            metadata=metadata,
            has_documentation=doc_path.is_file(),
            doc_path=doc_path,
        )


__all__ = ["DocumentationManager", "ManagerState"]
