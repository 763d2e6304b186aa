"""
HTML asset linker.

Minifies built HTML pages and rewrites their ``<script>`` and stylesheet
``<link>`` tags to point at the actual JS/CSS build output.
"""

from html_linker.config import LinkerOptions, LinkerSettings, get_settings
from html_linker.services.pipeline import HtmlLinkerPlugin, html_linker_plugin, on_end, run_pipeline

__version__ = "1.0.0"

__all__ = [
    "HtmlLinkerPlugin",
    "LinkerOptions",
    "LinkerSettings",
    "get_settings",
    "html_linker_plugin",
    "on_end",
    "run_pipeline",
]
