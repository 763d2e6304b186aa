"""
Custom exceptions for the HTML asset-linking pipeline.

Provides specific exception types for each pipeline stage, so that the
top-level hook can log a precise message before aborting the run.
"""

from pathlib import Path


class LinkerError(Exception):
    """
    Base error of the asset-linking pipeline.
    """

    def __init__(self, message: str, path: Path | str | None = None):
        self.message = message
        self.path = path
        super().__init__(self.message)


class MissingConfigurationError(LinkerError):
    """
    A required option is missing or blank.

    Raised before any filesystem access.
    """
    pass


class FileReadError(LinkerError):
    """
    An HTML source file could not be read or is empty.
    """
    pass


class FilesystemError(LinkerError):
    """
    stat/mkdir/listing/write failure.

    "Not found" during existence checks is not an error and never ends up here.
    """
    pass


class UnbalancedTagError(LinkerError):
    """
    A start marker has no usable end marker.

    Raised when the end marker is missing entirely or its first occurrence
    lies before the first start marker.
    """

    def __init__(self, start_marker: str, end_marker: str):
        self.start_marker = start_marker
        self.end_marker = end_marker
        super().__init__(
            f"Can't pair '{start_marker}' with '{end_marker}': end marker missing or misplaced"
        )
