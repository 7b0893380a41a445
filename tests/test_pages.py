"""Tests for docsync.pages."""

from __future__ import annotations

import json

from docsync.manifests import NavigationManifest
from docsync.models import ComponentMetadata
from docsync.pages import PageGenerator, export_name
from docsync.reporting import JsonReporter
from tests._fixtures.project_builder import ProjectBuilder

CARD = ComponentMetadata(
    suggested_filename="AccountCard.tsx",
    display_name="Account Card",
    example_set_name="examplesAccountCard",
)


def _generator(project: ProjectBuilder, reporter: JsonReporter, *, force: bool = False) -> PageGenerator:
    layout = project.layout()
    navigation = NavigationManifest(layout, reporter, verbose=True)
    return PageGenerator(layout, navigation, reporter, force=force, verbose=True)


def test_export_name_strips_whitespace() -> None:
    assert export_name("Account  Card\tView") == "AccountCardViewDocumentation"


def test_create_page_writes_wrapper_and_nav_link(project: ProjectBuilder, reporter: JsonReporter) -> None:
    result = _generator(project, reporter).create_page(CARD, "main-account-card.tsx")

    page = project.docs_dir / "account-card" / "page.tsx"
    assert result.written is True
    assert result.nav_updated is True
    assert result.path == page.resolve()
    content = page.read_text(encoding="utf-8")
    assert content.startswith("'use client';\n")
    assert "import { examplesAccountCard } from '@/components/main-account-card';" in content
    assert "export default function AccountCardDocumentation()" in content
    assert "...examplesAccountCard" in content
    assert "<ComponentDocumentationHub components={componentDocs} />" in content

    nav = (project.docs_dir / "navLinks.ts").read_text(encoding="utf-8")
    assert '"href": "/tools/docs/components/account-card"' in nav
    assert "Documentation created for Account Card" in json.loads(reporter.format_output())["infos"]


def test_create_page_skips_existing_without_force(project: ProjectBuilder, reporter: JsonReporter) -> None:
    page = project.docs_dir / "account-card" / "page.tsx"
    page.parent.mkdir(parents=True)
    page.write_text("custom", encoding="utf-8")

    result = _generator(project, reporter).create_page(CARD, "main-account-card.tsx")

    assert result.written is False
    assert page.read_text(encoding="utf-8") == "custom"
    assert not (project.docs_dir / "navLinks.ts").exists()
    infos = json.loads(reporter.format_output())["infos"]
    assert any("already exists" in message for message in infos)


def test_create_page_overwrites_with_force(project: ProjectBuilder, reporter: JsonReporter) -> None:
    page = project.docs_dir / "account-card" / "page.tsx"
    page.parent.mkdir(parents=True)
    page.write_text("custom", encoding="utf-8")

    result = _generator(project, reporter, force=True).create_page(CARD, "main-account-card.tsx")

    assert result.written is True
    assert "examplesAccountCard" in page.read_text(encoding="utf-8")
