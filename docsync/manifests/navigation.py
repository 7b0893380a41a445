"""Navigation link manifest stored as an exported array literal."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import List, Sequence

import yaml

from ..config import ProjectLayout
from ..errors import NavigationManifestError
from ..logging import get_logger
from ..models import ComponentMetadata, NavLink
from ..paths import nav_href
from ..reporting import Reporter

NAV_EXPORT_NAME = "navLinks"

_PREFIX_RE = re.compile(
    rf"^\s*export\s+const\s+{NAV_EXPORT_NAME}\s*(?::[^=]+)?=\s*", re.MULTILINE
)


def _strip_comments(literal: str) -> str:
    """Drop ``//`` and ``/* */`` comments and turn tabs into spaces outside strings."""
    out: List[str] = []
    quote: str | None = None
    index = 0
    length = len(literal)
    while index < length:
        char = literal[index]
        if quote:
            out.append(char)
            if char == "\\" and index + 1 < length:
                out.append(literal[index + 1])
                index += 1
            elif char == quote:
                quote = None
        elif char in "'\"`":
            quote = char
            out.append(char)
        elif literal.startswith("//", index):
            newline = literal.find("\n", index)
            index = length if newline == -1 else newline
            continue
        elif literal.startswith("/*", index):
            end = literal.find("*/", index + 2)
            if end == -1:
                raise NavigationManifestError("Unterminated comment in navigation manifest")
            out.append(" ")
            index = end + 2
            continue
        elif char == "\t":
            out.append(" ")
        else:
            out.append(char)
        index += 1
    return "".join(out)


def parse_nav_links(text: str) -> List[NavLink]:
    """Parse the manifest source into links without evaluating it.

    Comments are dropped and the array literal is handed to a YAML safe
    loader, which reads JSON as well as object literals with bare keys and
    trailing commas.
    """
    text = _strip_comments(text)
    match = _PREFIX_RE.search(text)
    literal = text[match.end():] if match else text
    literal = literal.strip().rstrip(";").strip()
    if not literal:
        return []

    try:
        payload = yaml.safe_load(literal)
    except yaml.YAMLError as exc:
        raise NavigationManifestError(f"Unable to parse navigation manifest: {exc}") from exc

    if payload is None:
        return []
    if not isinstance(payload, list):
        raise NavigationManifestError("Navigation manifest must export an array")

    links: List[NavLink] = []
    for entry in payload:
        if not isinstance(entry, dict):
            raise NavigationManifestError("Navigation manifest entries must be objects")
        href = entry.get("href")
        label = entry.get("label")
        if not isinstance(href, str) or not isinstance(label, str):
            raise NavigationManifestError(
                "Navigation manifest entries need string 'href' and 'label' fields"
            )
        links.append(NavLink(href=href, label=label))
    return links


def render_nav_links(links: Sequence[NavLink]) -> str:
    payload = json.dumps([link.to_dict() for link in links], indent=2, ensure_ascii=False)
    return f"export const {NAV_EXPORT_NAME} = {payload};\n"


def sort_links(links: Sequence[NavLink]) -> List[NavLink]:
    return sorted(links, key=lambda link: link.label.casefold())


class NavigationManifest:
    """Keeps the navigation manifest unique by href and sorted by label."""

    def __init__(self, layout: ProjectLayout, reporter: Reporter, *, verbose: bool = False) -> None:
        self.layout = layout
        self.path: Path = layout.nav_manifest_path
        self.reporter = reporter
        self.verbose = verbose
        self.logger = get_logger("manifests.navigation")

    def load(self) -> List[NavLink]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self.logger.debug("Navigation manifest %s missing; starting empty", self.path)
            return []
        except OSError as exc:
            raise NavigationManifestError(f"Failed to update {self.path.name}: {exc}") from exc
        return parse_nav_links(text)

    def update(self, metadata: ComponentMetadata) -> bool:
        """Add a link for ``metadata``; returns False when its href is already listed."""
        links = self.load()
        candidate = NavLink(
            href=nav_href(self.layout, metadata.suggested_filename),
            label=metadata.display_name,
        )

        if any(link.href == candidate.href for link in links):
            self._note(f"{metadata.display_name} already exists in {self.path.name}")
            return False

        links.append(candidate)
        content = render_nav_links(sort_links(links))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise NavigationManifestError(f"Failed to update {self.path.name}: {exc}") from exc

        self._note(f"Updated {self.path.name} with {metadata.display_name}")
        return True

    def _note(self, message: str) -> None:
        if self.verbose:
            self.reporter.info(message)


__all__ = ["NavigationManifest", "parse_nav_links", "render_nav_links", "sort_links"]
