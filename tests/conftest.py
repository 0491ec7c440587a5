import pytest

from polycolor.colors.named import named_colors
from polycolor.surface import set_default_surface


class RecordingPaintStyle:
    def __init__(self, kind, args):
        self.kind = kind
        self.args = args
        self.stops = []

    def add_color_stop(self, offset, css):
        self.stops.append((offset, css))


class RecordingSurface:
    """Drawing surface that records every call instead of drawing."""

    NAMES = {
        "red": [1.0, 0.0, 0.0],
        "white": [1.0, 1.0, 1.0],
        "teal": [0.0, 128 / 255, 128 / 255],
    }

    def __init__(self):
        self.resolved = []
        self.created = []

    def resolve_named_color(self, name):
        self.resolved.append(name)
        return list(self.NAMES.get(name, [0.0, 0.0, 0.0]))

    def create_linear_paint_style(self, x0, y0, x1, y1):
        style = RecordingPaintStyle("linear", (x0, y0, x1, y1))
        self.created.append(style)
        return style

    def create_radial_paint_style(self, fx, fy, r0, cx, cy, r1):
        style = RecordingPaintStyle("radial", (fx, fy, r0, cx, cy, r1))
        self.created.append(style)
        return style


class RecordingOwner:
    def __init__(self):
        self.notifications = 0

    def notify_style_changed(self):
        self.notifications += 1


@pytest.fixture(autouse=True)
def isolated_named_colors():
    named_colors.clear()
    yield
    named_colors.clear()
    set_default_surface(None)


@pytest.fixture
def surface():
    surface = RecordingSurface()
    set_default_surface(surface)
    return surface


@pytest.fixture
def owner():
    return RecordingOwner()
