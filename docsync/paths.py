"""Naming rules that map component metadata onto documentation locations."""

from __future__ import annotations

import re
from pathlib import Path

from .config import ProjectLayout

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_UPPER_RE = re.compile(r"[A-Z]")


def strip_extension(filename: str) -> str:
    return _EXTENSION_RE.sub("", filename)


def doc_folder_name(suggested_filename: str) -> str:
    """Convert ``MyWidget.tsx`` into the kebab-case folder name ``my-widget``."""
    stem = strip_extension(suggested_filename)
    return _UPPER_RE.sub(
        lambda match: ("-" if match.start() > 0 else "") + match.group(0).lower(),
        stem,
    )


def doc_page_path(layout: ProjectLayout, suggested_filename: str) -> Path:
    return layout.docs_dir / doc_folder_name(suggested_filename) / layout.page_filename


def nav_href(layout: ProjectLayout, suggested_filename: str) -> str:
    # Same folder the page is written to, so the link always resolves.
    return f"{layout.docs_route}/{doc_folder_name(suggested_filename)}"


__all__ = ["doc_folder_name", "doc_page_path", "nav_href", "strip_extension"]
