"""Basic polycolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from polycolor import (
    Color,
    Gradient,
    HsbColor,
    Matrix,
    PillowSurface,
    np_convert,
)


class Node:
    """Stand-in for a document node that repaints when its color changes."""

    def __init__(self, name: str) -> None:
        self.name = name

    def notify_style_changed(self) -> None:
        print(f"  {self.name}: style changed")


def demonstrate_colors() -> None:
    # Any argument shape builds the same color.
    accent = Color("#ff8040")
    print("Hex as rgb:", accent)
    print("Same color:", accent == Color(1, 128 / 255, 64 / 255))

    # Reading a component of another representation leaves the color alone.
    print("Hue of rgb color:", accent.hue, accent.type.value)

    # Writing one converts in place.
    accent.owner = node = Node("accent")
    accent.hue = 200
    print("After setting hue:", accent.type.value, accent.to_css())

    faded = HsbColor(120, 1, 1, 0.5)
    print("CSS with alpha:", faded.to_css())
    print("Serialized:", faded.serialize())
    del node


def demonstrate_gradients() -> None:
    surface = PillowSurface()
    gradient = Gradient(["red", ("gold", 0.5), "navy"])
    fill = Color(gradient, (0, 0), (63, 0))

    style = fill.to_paint_style(surface)
    print("Linear stops:", style.stops)

    fill.transform_gradient(Matrix().scale(0.5))
    pixels = fill.to_paint_style(surface).render(64, 4)
    print("Rendered strip:", pixels.shape, pixels[0, 0], pixels[0, -1])

    spot = Color(Gradient(["white", "black"], radial=True), (32, 32), (32, 0), (80, 80))
    print("Radial focus pulled inside:", spot.to_paint_style(surface))


def demonstrate_arrays() -> None:
    rgb = np.random.default_rng(0).random((2, 3, 3))
    hsl = np_convert(rgb, "rgb", "hsl")
    back = np_convert(hsl, "hsl", "rgb")
    print("Vectorized round trip ok:", np.allclose(rgb, back))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
    demonstrate_arrays()
