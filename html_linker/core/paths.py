"""
Relative path resolution between an output HTML page and an asset.

Paths are compared as sequences of segments. The shared prefix is the run of
leading segments that are equal at the same index; whatever follows is the
divergent suffix of each path.
"""

from os import PathLike
from pathlib import PurePath

FilePath = tuple[str, ...]


def split_segments(path: str | PathLike) -> FilePath:
    """Split a path into its non-empty segments, ``/`` and ``\\`` both separate."""
    if isinstance(path, PurePath):
        path = path.as_posix()
    text = str(path).replace("\\", "/")
    return tuple(segment for segment in text.split("/") if segment)


def divergent_suffix(path: FilePath, other: FilePath) -> FilePath:
    """Segments of ``path`` from the first index where ``other`` differs."""
    for index, segment in enumerate(path):
        if index >= len(other) or other[index] != segment:
            return path[index:]
    return ()


def relative_dots(depth: int) -> str:
    """
    Prefix for a page whose divergent suffix has ``depth`` segments.

    The last segment is the page file itself, so ``depth - 1`` levels are
    walked upward. ``"."`` means same directory; an empty string is returned
    for the degenerate ``depth == 0`` case.
    """
    levels = depth - 1
    if levels == 0:
        return "."
    if levels < 0:
        return ""
    return "/".join([".."] * levels)


def resolve_relative_path(asset_path: str | PathLike, from_path: str | PathLike) -> str:
    """
    Shortest relative path from ``from_path``'s directory to ``asset_path``.

    Args:
        asset_path: Output location of the linked asset
        from_path: Output location of the HTML page

    Returns:
        POSIX relative path, e.g. ``../../js/bundle.js`` or ``./app.css``
    """
    asset = split_segments(asset_path)
    page = split_segments(from_path)

    dots = relative_dots(len(divergent_suffix(page, asset)))
    parts = [dots] if dots else []
    parts.extend(divergent_suffix(asset, page))
    return "/".join(parts)
