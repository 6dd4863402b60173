"""
Entry routine for the shape demo.

Builds one Circle and one Rectangle from the values in config.py and prints
their area and perimeter, circle first.
"""

try:
    from .config import (
        CIRCLE_LABEL,
        CIRCLE_RADIUS,
        RECTANGLE_HEIGHT,
        RECTANGLE_LABEL,
        RECTANGLE_WIDTH,
    )
    from .shapes import Circle, Rectangle, Shape
except ImportError:  # fallback when run as a script
    from config import (
        CIRCLE_LABEL,
        CIRCLE_RADIUS,
        RECTANGLE_HEIGHT,
        RECTANGLE_LABEL,
        RECTANGLE_WIDTH,
    )
    from shapes import Circle, Rectangle, Shape


def format_report(label: str, shape: Shape) -> list[str]:
    """Return the labelled area and perimeter lines for one shape."""
    return [
        f"{label} Area: {shape.area()}",
        f"{label} Perimeter: {shape.perimeter()}",
    ]


def main():
    """Print the area and perimeter of the demo circle and rectangle."""
    circle = Circle(CIRCLE_RADIUS)
    for line in format_report(CIRCLE_LABEL, circle):
        print(line)

    rectangle = Rectangle(RECTANGLE_WIDTH, RECTANGLE_HEIGHT)
    for line in format_report(RECTANGLE_LABEL, rectangle):
        print(line)


if __name__ == "__main__":
    main()
