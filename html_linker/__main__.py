#!/usr/bin/env python3
"""
Run the HTML asset linker once.

Usage:
    python -m html_linker --html-from src/pages --js-from build/js --out-dir build
    python -m html_linker --html-from src/pages --css-from build/css --log-level DEBUG

Unset flags fall back to HTML_LINKER_* environment variables / .env.
"""

import argparse
import asyncio
from pathlib import Path

from html_linker.config import get_settings
from html_linker.logging_config import setup_logging
from html_linker.services.pipeline import on_end


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="html_linker",
        description="Minify HTML pages and link them to built JS/CSS files",
    )
    parser.add_argument("--html-from", dest="html_from_dir", help="Directory with source HTML pages")
    parser.add_argument("--js-from", dest="js_from_dir", help="Directory with built JS files")
    parser.add_argument("--css-from", dest="css_from_dir", help="Directory with built CSS files")
    parser.add_argument("--out-dir", dest="out_dir", help="Output directory (default: out)")
    parser.add_argument("--root", type=Path, default=None, help="Base directory (default: cwd)")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()

    setup_logging(
        log_level=args.log_level or settings.log_level,
        log_file=settings.log_file,
        serialize=settings.log_json,
    )

    options = settings.to_options(
        root_dir=args.root,
        html_from_dir=args.html_from_dir,
        js_from_dir=args.js_from_dir,
        css_from_dir=args.css_from_dir,
        out_dir=args.out_dir,
    )
    asyncio.run(on_end(options))
    # Failures are reported through the log only
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
