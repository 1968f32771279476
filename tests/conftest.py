"""
Pytest configuration and fixtures.
"""

import os
import sys
import textwrap

import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def make_program(tmp_path):
    """Write a throwaway script and return a catalog entry for it."""

    def _make(name, source, expected, category="scratch"):
        path = tmp_path / f"{name}.py"
        path.write_text(textwrap.dedent(source))
        return {
            "name": name,
            "path": str(path),
            "category": category,
            "expected": expected,
        }

    return _make
