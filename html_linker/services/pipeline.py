"""
Pipeline driver and build-tool hook.

Discovers HTML/JS/CSS files, minifies every page, rewrites its asset tags and
writes it under the output directory. Page reads, asset listings and page
writes each fan out concurrently; the first error aborts the whole run.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol

from loguru import logger

from html_linker.config import LinkerOptions
from html_linker.core.linker import Page, link_page
from html_linker.exceptions import MissingConfigurationError
from html_linker.services.filesystem import list_files, make_dirs, read_html, write_html
from html_linker.services.minifier import minify_html

HTML_SUFFIXES = (".html", ".htm")
SCRIPT_SUFFIXES = (".js", ".mjs")
STYLESHEET_SUFFIXES = (".css",)

PLUGIN_NAME = "htmlLinkerPlugin"


def html_output_path(html_path: Path, html_dir: Path, out_path: Path) -> Path:
    """Mirror ``html_path`` (relative to ``html_dir``) under ``out_path``."""
    return out_path / html_path.relative_to(html_dir)


async def read_page(html_path: Path, html_dir: Path, out_path: Path) -> Page:
    source = await read_html(html_path)
    return Page(
        output_path=html_output_path(html_path, html_dir, out_path),
        content=minify_html(source),
    )


async def _list_assets(directory: Optional[Path], suffixes: Iterable[str]) -> list[Path]:
    if directory is None:
        return []
    return await list_files(directory.resolve(), suffixes)


async def _write_page(page: Page) -> None:
    await write_html(page.output_path, page.content)
    logger.info(f"Html file copied at path {page.output_path}")


async def run_pipeline(options: LinkerOptions) -> list[Path]:
    """
    Run the linking pipeline once.

    Args:
        options: Run options; ``html_from_dir`` is required

    Returns:
        Paths of the written HTML files

    Raises:
        MissingConfigurationError: ``html_from_dir`` is not set (nothing is created)
        LinkerError: any read, listing, tag or write failure
    """
    if not options.html_from_dir:
        raise MissingConfigurationError("Must indicate where html come from")

    out_path = options.out_path.resolve()
    html_dir = options.html_dir.resolve()

    await asyncio.to_thread(make_dirs, out_path)

    html_paths = await list_files(html_dir, HTML_SUFFIXES)
    pages, js_paths, css_paths = await asyncio.gather(
        asyncio.gather(*(read_page(p, html_dir, out_path) for p in html_paths)),
        _list_assets(options.js_dir, SCRIPT_SUFFIXES),
        _list_assets(options.css_dir, STYLESHEET_SUFFIXES),
    )
    logger.debug(
        f"Discovered {len(pages)} pages, {len(js_paths)} scripts, {len(css_paths)} stylesheets"
    )

    linked = [link_page(page, js_paths, css_paths) for page in pages]
    await asyncio.gather(*(_write_page(page) for page in linked))

    logger.info(f"Linked {len(linked)} pages into {out_path}")
    return [page.output_path for page in linked]


async def on_end(options: LinkerOptions) -> bool:
    """
    Build-tool hook: run the pipeline, log any failure, never raise.

    Returns:
        True when every page was written
    """
    try:
        await run_pipeline(options)
    except Exception as e:
        logger.error(f"html_linker error - on_end - {e}")
        return False
    return True


class HostBuild(Protocol):
    """Anything that accepts a callback to run after each build."""

    def on_end(self, callback: Callable[[Any], Awaitable[Any]]) -> Any: ...


@dataclass
class HtmlLinkerPlugin:
    """Registers the pipeline with a host build tool."""

    options: LinkerOptions
    name: str = PLUGIN_NAME

    def setup(self, build: HostBuild) -> None:
        build.on_end(self._on_build_end)

    async def _on_build_end(self, result: Any = None) -> bool:
        return await on_end(self.options)


def html_linker_plugin(options: Optional[LinkerOptions] = None, **kwargs: Any) -> HtmlLinkerPlugin:
    """
    Create the plugin from a ``LinkerOptions`` or from keyword options,
    e.g. ``html_linker_plugin(html_from_dir="src/pages", js_from_dir="build/js")``.
    """
    if options is None:
        options = LinkerOptions(**kwargs)
    return HtmlLinkerPlugin(options=options)
