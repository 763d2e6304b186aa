"""
Pytest configuration and shared fixtures.
Provides a loguru capture sink and a small source tree builder.
"""

from pathlib import Path

import pytest
from loguru import logger

from html_linker.config import get_settings

PAGE_HTML = """<!DOCTYPE html>
<html>
  <head>
    <title>{title}</title>
    <script src="old.js"></script>
  </head>
  <body>
    <p>Hello   world</p>
  </body>
</html>
"""


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_tree(tmp_path: Path):
    """Create files under tmp_path from a {relative path: content} mapping."""

    def _write(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def site(write_tree):
    """Two pages, one built script (plus its source map) and one stylesheet."""
    return write_tree(
        {
            "src/pages/index.html": PAGE_HTML.format(title="Home"),
            "src/pages/about/index.html": PAGE_HTML.format(title="About"),
            "build/js/main.js": "console.log('main');",
            "build/js/main.js.map": "{}",
            "build/css/site.css": "body{margin:0}",
        }
    )
