"""Read-merge-write stores for the navigation and metadata manifests."""

from .metadata import MetadataManifest
from .navigation import NavigationManifest, parse_nav_links, render_nav_links

__all__ = [
    "MetadataManifest",
    "NavigationManifest",
    "parse_nav_links",
    "render_nav_links",
]
