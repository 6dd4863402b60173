"""Area and perimeter of simple two-dimensional shapes."""

from .cli import format_report, main
from .shapes import Circle, Rectangle, Shape

__all__ = ["Shape", "Circle", "Rectangle", "format_report", "main"]
