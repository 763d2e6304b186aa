"""
Root conftest.py - loaded FIRST by pytest before any test collection.

This ensures the html_linker package can be imported in test files without
an editable install.
"""

import sys
from pathlib import Path

# Add project root to sys.path so "import html_linker" works
root = Path(__file__).parent.resolve()

if str(root) not in sys.path:
    # insert at front so it takes precedence over other entries
    sys.path.insert(0, str(root))
