"""Convention-based extraction of documentation markers from component sources.

Components opt into documentation by exporting three markers::

    export const SUGGESTED_FILE = "AccountCard.tsx";
    export const SUGGESTED_DISPLAYNAME = "Account Card";
    export const examplesAccountCard: ComponentDoc[] = [ ... ];

Extraction is lexical. ``iter_exports`` finds ``export const`` declarations
anywhere in the file and the extractor picks markers out of that stream by
name or by declared type. Nothing is evaluated.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

from .models import ComponentMetadata

SUGGESTED_FILE_KEY = "SUGGESTED_FILE"
DISPLAY_NAME_KEY = "SUGGESTED_DISPLAYNAME"
EXAMPLE_SET_TYPES = frozenset({"ComponentDoc[]", "Array<ComponentDoc>"})

_EXPORT_RE = re.compile(
    r"(?<![\w$.])export[ \t]+const[ \t]+(?P<name>[A-Za-z_$][\w$]*)[ \t]*"
    r"(?::[ \t]*(?P<annotation>[^=\n;]+?))?[ \t]*=(?![=>])[ \t]*"
    r"(?=(?P<initializer>[^\n]*))"
)
_STRING_RE = re.compile(r"^(?P<quote>['\"`])(?P<value>.*?)(?P=quote)")


@dataclass(frozen=True)
class ExportDeclaration:
    """A single ``export const`` declaration found in a source file."""

    name: str
    annotation: Optional[str]
    initializer: str

    def string_value(self) -> Optional[str]:
        """Return the literal value when the initializer is a quoted string."""
        match = _STRING_RE.match(self.initializer.strip())
        if not match:
            return None
        return match.group("value")

    def declared_type(self) -> Optional[str]:
        if self.annotation is None:
            return None
        return re.sub(r"\s+", "", self.annotation)


def _in_line_comment(content: str, position: int) -> bool:
    """Return True when ``position`` follows a ``//`` comment opener on its line."""
    line_start = content.rfind("\n", 0, position) + 1
    quote: Optional[str] = None
    index = line_start
    while index < position:
        char = content[index]
        if quote:
            if char == "\\":
                index += 1
            elif char == quote:
                quote = None
        elif char in "'\"`":
            quote = char
        elif content.startswith("//", index):
            return True
        index += 1
    return False


def iter_exports(content: str) -> Iterator[ExportDeclaration]:
    """Yield ``export const`` declarations in source order, wherever they sit on a line.

    Declarations inside a ``//`` comment are skipped.
    """
    for match in _EXPORT_RE.finditer(content):
        if _in_line_comment(content, match.start()):
            continue
        yield ExportDeclaration(
            name=match.group("name"),
            annotation=match.group("annotation"),
            initializer=match.group("initializer"),
        )


class MetadataExtractor(ABC):
    """Derives documentation metadata from component source text."""

    @abstractmethod
    def extract(self, content: str) -> Optional[ComponentMetadata]:
        """Return metadata when every marker is present, otherwise None."""


class ConventionMetadataExtractor(MetadataExtractor):
    """Finds the three documentation markers by their conventional names."""

    def extract(self, content: str) -> Optional[ComponentMetadata]:
        suggested_filename: Optional[str] = None
        display_name: Optional[str] = None
        example_set_name: Optional[str] = None

        for declaration in iter_exports(content):
            if declaration.name == SUGGESTED_FILE_KEY and suggested_filename is None:
                suggested_filename = declaration.string_value()
            elif declaration.name == DISPLAY_NAME_KEY and display_name is None:
                display_name = declaration.string_value()
            elif example_set_name is None and declaration.declared_type() in EXAMPLE_SET_TYPES:
                example_set_name = declaration.name

        if suggested_filename and display_name and example_set_name:
            return ComponentMetadata(
                suggested_filename=suggested_filename,
                display_name=display_name,
                example_set_name=example_set_name,
            )
        return None


__all__ = [
    "ConventionMetadataExtractor",
    "ExportDeclaration",
    "MetadataExtractor",
    "iter_exports",
]
