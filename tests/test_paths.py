"""Tests for docsync.paths naming rules."""

from __future__ import annotations

import pytest

from docsync.paths import doc_folder_name, doc_page_path, nav_href, strip_extension
from tests._fixtures.project_builder import ProjectBuilder


@pytest.mark.parametrize(
    ("suggested", "expected"),
    [
        ("MyWidget.tsx", "my-widget"),
        ("widget.tsx", "widget"),
        ("AccountCard.tsx", "account-card"),
        ("advanced-search.tsx", "advanced-search"),
        ("Map", "map"),
    ],
)
def test_doc_folder_name_converts_camel_case(suggested: str, expected: str) -> None:
    assert doc_folder_name(suggested) == expected


def test_strip_extension_only_removes_last_suffix() -> None:
    assert strip_extension("card.story.tsx") == "card.story"
    assert strip_extension("card") == "card"


def test_doc_page_path_and_href_share_folder(project: ProjectBuilder) -> None:
    layout = project.layout()

    assert doc_page_path(layout, "AccountCard.tsx") == project.docs_dir.resolve() / "account-card" / "page.tsx"
    assert nav_href(layout, "AccountCard.tsx") == "/tools/docs/components/account-card"
    assert nav_href(layout, "map.tsx") == "/tools/docs/components/map"
