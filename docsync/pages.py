"""Rendering and writing of component documentation pages."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from .config import ProjectLayout
from .errors import DocumentationWriteError
from .logging import get_logger
from .manifests.navigation import NavigationManifest
from .models import ComponentMetadata, PageResult
from .paths import doc_page_path
from .reporting import Reporter

TEMPLATES_DIR = Path(__file__).with_name("templates")
PAGE_TEMPLATE = "page.tsx.j2"
EXPORT_SUFFIX = "Documentation"


def export_name(display_name: str) -> str:
    return re.sub(r"\s+", "", display_name) + EXPORT_SUFFIX


def create_environment(templates_dir: Path | None = None) -> Environment:
    loader = FileSystemLoader(str(templates_dir or TEMPLATES_DIR))
    return Environment(
        loader=loader,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class PageGenerator:
    """Writes documentation pages and registers them in the navigation manifest."""

    def __init__(
        self,
        layout: ProjectLayout,
        navigation: NavigationManifest,
        reporter: Reporter,
        *,
        force: bool = False,
        verbose: bool = False,
        environment: Optional[Environment] = None,
    ) -> None:
        self.layout = layout
        self.navigation = navigation
        self.reporter = reporter
        self.force = force
        self.verbose = verbose
        self._env = environment or create_environment()
        self.logger = get_logger("pages")

    def render(self, metadata: ComponentMetadata, source_filename: str) -> str:
        template = self._env.get_template(PAGE_TEMPLATE)
        return template.render(
            example_set_name=metadata.example_set_name,
            component_module=Path(source_filename).stem,
            export_name=export_name(metadata.display_name),
        )

    def create_page(self, metadata: ComponentMetadata, source_filename: str) -> PageResult:
        """Write the page for ``metadata`` unless it exists and force is unset."""
        page_path = doc_page_path(self.layout, metadata.suggested_filename)
        content = self.render(metadata, source_filename)

        try:
            page_path.parent.mkdir(parents=True, exist_ok=True)
            exists = page_path.exists()
            if exists and not self.force:
                self._note(
                    f"Documentation already exists for {metadata.display_name}. "
                    "Use --force to overwrite."
                )
                return PageResult(path=page_path, written=False)
            page_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise DocumentationWriteError(
                f"Failed to create documentation page: {exc}"
            ) from exc

        self.logger.debug("Wrote %s", page_path)
        self._note(f"Documentation created for {metadata.display_name}")
        nav_updated = self.navigation.update(metadata)
        return PageResult(path=page_path, written=True, nav_updated=nav_updated)

    def _note(self, message: str) -> None:
        if self.verbose:
            self.reporter.info(message)


__all__ = ["PageGenerator", "create_environment", "export_name"]
