"""Pure link-rewriting routines: path resolution, tag stripping/injection, page linking."""

from html_linker.core.linker import AssetKind, Page, link_assets, link_page
from html_linker.core.paths import resolve_relative_path, split_segments
from html_linker.core.tags import (
    SCRIPT_TAG,
    STYLESHEET_TAG,
    TagSpec,
    inject_tag,
    strip_tags,
)

__all__ = [
    "AssetKind",
    "Page",
    "SCRIPT_TAG",
    "STYLESHEET_TAG",
    "TagSpec",
    "inject_tag",
    "link_assets",
    "link_page",
    "resolve_relative_path",
    "split_segments",
    "strip_tags",
]
