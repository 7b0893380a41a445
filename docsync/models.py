"""Core data models shared across docsync components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ComponentFile:
    """A component source file discovered in the components directory."""

    path: Path
    filename: str
    modified_ns: int

    @property
    def stem(self) -> str:
        return self.path.stem


@dataclass(frozen=True)
class ComponentMetadata:
    """Documentation markers declared by a component source file."""

    suggested_filename: str
    display_name: str
    example_set_name: str


@dataclass
class ComponentInfo:
    """Inventory row describing a component and its documentation status."""

    component: ComponentFile
    metadata: Optional[ComponentMetadata]
    has_documentation: bool
    doc_path: Optional[Path] = None

    @property
    def filename(self) -> str:
        return self.component.filename


@dataclass(frozen=True)
class NavLink:
    """Single entry of the navigation manifest."""

    href: str
    label: str

    def to_dict(self) -> Dict[str, str]:
        return {"href": self.href, "label": self.label}


@dataclass
class PageResult:
    """Outcome of rendering one documentation page."""

    path: Path
    written: bool
    nav_updated: bool = False


@dataclass
class GenerationResult:
    """Aggregate outcome of a documentation generation run."""

    processed: List[ComponentMetadata] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed
