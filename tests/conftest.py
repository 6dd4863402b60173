"""
Shared pytest fixtures and helpers.

Pytest automatically discovers this file and makes the fixtures available
to all tests in this folder.
"""

import sys
from pathlib import Path

import pytest


ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
# Allow tests to import shape_program without installing it first.
sys.path.insert(0, str(SRC_DIR))


@pytest.fixture()
def demo_circle():
    # Same circle the entry routine prints.
    from shape_program.shapes import Circle

    return Circle(5)


@pytest.fixture()
def demo_rectangle():
    from shape_program.shapes import Rectangle

    return Rectangle(4, 7)


@pytest.fixture()
def make_rectangle():
    # Factory so tests can build rectangles with just the sides they care about.
    from shape_program.shapes import Rectangle

    def _rectangle(width=1.0, height=1.0):
        return Rectangle(width, height)

    return _rectangle
