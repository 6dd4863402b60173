"""
Centralized settings for the shape demo.

The entry routine reads its dimensions and labels from here so the printed
report and the tests agree on a single source. Nothing is read from the
environment: the report is the same on every run.
"""

from __future__ import annotations


# Demo circle
CIRCLE_LABEL = "Circle"
CIRCLE_RADIUS = 5.0

# Demo rectangle
RECTANGLE_LABEL = "Rectangle"
RECTANGLE_WIDTH = 4.0
RECTANGLE_HEIGHT = 7.0
