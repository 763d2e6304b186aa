"""
Asset linking for a single page.

Existing tags of a kind are stripped, then one tag per asset is inserted
before ``</head>`` with a path relative to the page's output location.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from os import PathLike
from pathlib import Path

from loguru import logger

from html_linker.core.paths import resolve_relative_path
from html_linker.core.tags import (
    HEAD_CLOSE,
    SCRIPT_TAG,
    STYLESHEET_TAG,
    TagSpec,
    inject_tag,
    script_tag,
    stylesheet_tag,
    strip_tags,
)


@dataclass(frozen=True)
class Page:
    """One HTML page: where it will be written and its current content."""

    output_path: Path
    content: str


class AssetKind(Enum):
    """Linkable asset kinds with their marker pair and tag formatter."""

    SCRIPT = "script"
    STYLESHEET = "stylesheet"

    @property
    def tag_spec(self) -> TagSpec:
        return SCRIPT_TAG if self is AssetKind.SCRIPT else STYLESHEET_TAG

    @property
    def formatter(self) -> Callable[[str], str]:
        return script_tag if self is AssetKind.SCRIPT else stylesheet_tag


def link_assets(page: Page, asset_paths: Sequence[str | PathLike], kind: AssetKind) -> Page:
    """
    Replace the ``kind`` tags of ``page`` with tags for ``asset_paths``.

    Args:
        page: Page with its final output location
        asset_paths: Asset output locations, in the order tags should appear
        kind: Which tags to strip and create

    Returns:
        New Page; the same page when there is nothing to link
    """
    if not asset_paths:
        return page

    if HEAD_CLOSE not in page.content:
        logger.warning(f"No {HEAD_CLOSE} in {page.output_path}, {kind.value} tags appended at the end")

    spec = kind.tag_spec
    content = strip_tags(page.content, spec.start_marker, spec.end_marker)

    for asset_path in asset_paths:
        tag = kind.formatter(resolve_relative_path(asset_path, page.output_path))
        logger.debug(f"{page.output_path.name}: {tag}")
        content = inject_tag(content, tag)

    return replace(page, content=content)


def link_page(
    page: Page,
    js_paths: Sequence[str | PathLike] = (),
    css_paths: Sequence[str | PathLike] = (),
) -> Page:
    """Stylesheet pass, then script pass."""
    page = link_assets(page, css_paths, AssetKind.STYLESHEET)
    return link_assets(page, js_paths, AssetKind.SCRIPT)
