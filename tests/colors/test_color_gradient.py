from polycolor import Color, Gradient, GradientStop, Matrix, Point, Representation, UnsupportedConversionError
import pytest


def make_gradient(radial=False):
    return Gradient([Color(1, 0, 0), Color(1, 1, 1)], radial=radial)


def test_gradient_color():
    gradient = make_gradient()
    color = Color(gradient, [0, 0], [100, 0])
    assert color.type is Representation.GRADIENT
    assert color.gradient is gradient
    assert color.origin == Point(0, 0)
    assert color.destination == Point(100, 0)
    assert color.hilite is None
    assert color.id is not None
    assert color in gradient.owners


def test_gradient_color_forms():
    gradient = make_gradient()
    expected = Color(gradient, (0, 0), (10, 0))
    assert Color("gradient", gradient, (0, 0), (10, 0)) == expected
    assert Color({"gradient": gradient, "origin": {"x": 0, "y": 0}, "destination": (10, 0)}) == expected


def test_gradient_ids_are_unique():
    gradient = make_gradient()
    first = Color(gradient, (0, 0), (1, 0))
    second = Color(gradient, (0, 0), (1, 0))
    assert first.id != second.id
    assert Color(1, 0, 0).id is None


def test_anchors_are_cloned():
    origin = Point(0, 0)
    color = Color(make_gradient(), origin, Point(100, 0))
    origin.x = 50
    assert color.origin.x == 0

    destination = Point(5, 5)
    color.destination = destination
    destination.y = 0
    assert color.destination == Point(5, 5)


def test_gradient_has_no_scalar_components():
    color = Color(make_gradient(), (0, 0), (1, 0))
    with pytest.raises(UnsupportedConversionError):
        color.red
    with pytest.raises(UnsupportedConversionError):
        color.red = 1
    with pytest.raises(UnsupportedConversionError):
        color.convert("rgb")
    with pytest.raises(UnsupportedConversionError):
        Color(1, 0, 0).origin


def test_linear_paint_style(surface):
    color = Color(make_gradient(), (0, 0), (100, 0))
    style = color.to_paint_style()
    assert style.kind == "linear"
    assert style.args == (0.0, 0.0, 100.0, 0.0)
    assert style.stops == [(0.0, "rgb(255, 0, 0)"), (1.0, "rgb(255, 255, 255)")]


def test_stop_colors_drop_alpha(surface):
    gradient = Gradient([Color(1, 0, 0, 0.5), Color(0, 0, 1)])
    style = Color(gradient, (0, 0), (1, 0)).to_paint_style()
    assert style.stops[0] == (0.0, "rgb(255, 0, 0)")


def test_paint_style_is_cached(surface):
    color = Color(make_gradient(), (0, 0), (100, 0))
    assert color.to_paint_style() is color.to_paint_style()
    assert len(surface.created) == 1


def test_radial_paint_style(surface):
    gradient = make_gradient(radial=True)

    style = Color(gradient, (0, 0), (10, 0)).to_paint_style()
    assert style.kind == "radial"
    assert style.args == (0.0, 0.0, 0, 0.0, 0.0, 10.0)

    style = Color(gradient, (0, 0), (10, 0), (3, 4)).to_paint_style()
    assert style.args == (3.0, 4.0, 0, 0.0, 0.0, 10.0)


def test_radial_hilite_is_pulled_inside(surface):
    color = Color(make_gradient(radial=True), (0, 0), (10, 0), (30, 40))
    fx, fy, r0, cx, cy, r1 = color.to_paint_style().args
    assert abs(fx - 5.94) < 1e-9
    assert abs(fy - 7.92) < 1e-9
    assert r1 == 10.0
    # the stored hilite is left alone
    assert color.hilite == Point(30, 40)


def test_changing_gradient_invalidates(surface, owner):
    gradient = make_gradient()
    color = Color(gradient, (0, 0), (100, 0))
    color.owner = owner
    first = color.to_paint_style()

    gradient.stops = [Color(0, 0, 0), Color(0, 0, 1)]
    second = color.to_paint_style()
    assert second is not first
    assert second.stops == [(0.0, "rgb(0, 0, 0)"), (1.0, "rgb(0, 0, 255)")]
    assert owner.notifications == 1


def test_replacing_gradient_registers_owner():
    color = Color(make_gradient(), (0, 0), (1, 0))
    other = make_gradient(radial=True)
    color.gradient = other
    assert color in other.owners


def test_clone_keeps_id_and_gradient(surface):
    gradient = make_gradient()
    color = Color(gradient, (0, 0), (100, 0), (10, 10))
    clone = color.clone()
    assert clone == color
    assert clone.id == color.id
    assert clone.gradient is gradient
    assert clone.origin is not color.origin
    assert clone in gradient.owners

    clone.origin = (1, 1)
    assert color.origin == Point(0, 0)


def test_transform_gradient(surface, owner):
    color = Color(make_gradient(), (0, 0), (100, 0), (10, 0))
    color.owner = owner
    first = color.to_paint_style()

    color.transform_gradient(Matrix().translate(10, 5))
    assert color.origin == Point(10, 5)
    assert color.destination == Point(110, 5)
    assert color.hilite == Point(20, 5)
    assert owner.notifications == 0

    second = color.to_paint_style()
    assert second is not first
    assert second.args == (10.0, 5.0, 110.0, 5.0)


def test_transform_ignores_plain_colors():
    color = Color(1, 0, 0)
    color.transform_gradient(Matrix().scale(2))
    assert color.components == [1.0, 0.0, 0.0]


def test_serialize_gradient():
    gradient = make_gradient()
    color = Color(gradient, (0, 0), (100, 0))
    assert color.serialize() == ["gradient", gradient, Point(0, 0), Point(100, 0)]
    assert Color(color.serialize()) == color


def test_display_string():
    color = Color(make_gradient(), (0, 0), (100, 0))
    text = str(color)
    assert "origin: { x: 0, y: 0 }" in text
    assert "destination: { x: 100, y: 0 }" in text
    assert "hilite" not in text


def test_string_stops_resolve_through_surface(surface):
    gradient = Gradient(["red", ("white", 0.75)])
    assert [stop.offset for stop in gradient.stops] == [0.0, 0.75]
    assert isinstance(gradient.stops[1], GradientStop)
    style = Color(gradient, (0, 0), (1, 0)).to_paint_style()
    assert style.stops == [(0.0, "rgb(255, 0, 0)"), (0.75, "rgb(255, 255, 255)")]
    assert surface.resolved == ["red", "white"]


def test_paint_style_needs_a_gradient(surface):
    color = Color("gradient")
    with pytest.raises(ValueError, match="no gradient"):
        color.to_paint_style()
