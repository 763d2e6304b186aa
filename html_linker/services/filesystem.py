"""
Filesystem collaborators of the pipeline: recursive listing, reading and
writing. Blocking calls run in worker threads so pages are handled
concurrently.
"""

import asyncio
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from html_linker.exceptions import FileReadError, FilesystemError


def walk_files(root: Path, suffixes: Iterable[str] | None = None) -> list[Path]:
    """
    All files beneath ``root``, sorted.

    Args:
        root: Directory to scan recursively
        suffixes: Keep only files with one of these extensions (case-insensitive)

    Returns:
        Absolute file paths
    """
    wanted = {s.lower() for s in suffixes} if suffixes is not None else None
    found: list[Path] = []
    stack = [Path(root).resolve()]

    try:
        while stack:
            directory = stack.pop()
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_dir():
                        stack.append(Path(entry.path))
                    elif wanted is None or Path(entry.name).suffix.lower() in wanted:
                        found.append(Path(entry.path))
    except OSError as e:
        raise FilesystemError(f"Can't list directory {root}: {e.strerror or e}", root) from e

    return sorted(found)


async def list_files(root: Path, suffixes: Iterable[str] | None = None) -> list[Path]:
    return await asyncio.to_thread(walk_files, root, suffixes)


def is_folder(path: Path) -> bool:
    """True for an existing directory; a missing path is not an error."""
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise FilesystemError(f"Can't stat path {path}: {e.strerror or e}", path) from e


def read_text(path: Path) -> str:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Can't read file {path}: {e}", path) from e
    if not content:
        raise FileReadError(f"Can't read file {path}", path)
    return content


def write_text(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories first."""
    folder = path.parent
    try:
        if not is_folder(folder):
            folder.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except FilesystemError:
        raise
    except OSError as e:
        raise FilesystemError(f"Can't write file {path}: {e.strerror or e}", path) from e


def make_dirs(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Can't create directory {path}: {e.strerror or e}", path) from e


async def read_html(path: Path) -> str:
    return await asyncio.to_thread(read_text, path)


async def write_html(path: Path, content: str) -> None:
    await asyncio.to_thread(write_text, path, content)
