from polycolor import Color, Representation
import numpy as np
import pytest


def test_reading_other_representation_does_not_convert():
    color = Color(1, 0, 0)
    assert color.hue == 0.0
    assert color.saturation == 1.0
    assert color.lightness == 0.5
    assert color.brightness == 1.0
    assert abs(color.gray - 0.2989) < 1e-12
    assert color.type is Representation.RGB
    assert color.components == [1.0, 0.0, 0.0]


def test_shared_components_read_directly(monkeypatch):
    color = Color("hsb", 200, 0.5, 0.25)

    def fail(*args, **kwargs):
        raise AssertionError("unexpected conversion")

    monkeypatch.setattr("polycolor.colors.color.convert", fail)
    assert color.hue == 200.0
    assert color.saturation == 0.5
    color.saturation = 0.75
    color.hue = 10
    assert color.type is Representation.HSB
    assert color.components == [10.0, 0.75, 0.25]


def test_reading_lightness_of_hsb_keeps_type():
    color = Color("hsb", 0, 1, 1)
    assert color.lightness == 0.5
    assert color.type is Representation.HSB


def test_setting_converts_in_place():
    color = Color(1, 0, 0)
    color.hue = 120
    # hue is owned by hsl
    assert color.type is Representation.HSL
    assert np.allclose(color.components, [120.0, 1.0, 0.5])
    assert abs(color.green - 1.0) < 1e-9
    assert abs(color.red) < 1e-9

    color.brightness = 0.5
    assert color.type is Representation.HSB
    assert np.allclose(color.components, [120.0, 1.0, 0.5])

    color.gray = 0.25
    assert color.type is Representation.GRAY
    assert color.components == [0.25]


def test_setter_clamps_and_wraps():
    color = Color(0, 0, 0)
    color.red = 2
    color.green = -1
    assert color.components == [1.0, 0.0, 0.0]
    color.hue = -30
    assert color.hue == 330.0


def test_none_value_converts_without_writing():
    color = Color(1, 0, 0)
    color.set_component("lightness", None)
    assert color.type is Representation.HSL
    assert np.allclose(color.components, [0.0, 1.0, 0.5])


def test_unknown_component():
    color = Color()
    with pytest.raises(AttributeError):
        color.get_component("cyan")
    with pytest.raises(AttributeError):
        color.set_component("cyan", 1)


def test_type_setter_converts():
    color = Color(1, 0, 0)
    color.type = "hsb"
    assert color.type is Representation.HSB
    assert color.components == [0.0, 1.0, 1.0]
    with pytest.raises(ValueError):
        color.type = "cmyk"


def test_components_is_a_copy():
    color = Color(1, 0, 0)
    color.components[0] = 0.0
    assert color.red == 1.0


def test_alpha():
    color = Color(1, 0, 0)
    assert color.alpha == 1.0
    assert not color.has_alpha()
    color.alpha = 0.5
    assert color.has_alpha()
    assert color.alpha == 0.5
    color.alpha = 3
    assert color.alpha == 1.0
    color.alpha = None
    assert not color.has_alpha()


def test_owner_is_notified(owner):
    color = Color(1, 0, 0)
    color.owner = owner
    assert color.owner is owner

    color.red = 0.5
    color.alpha = 0.5
    color.type = "hsb"
    assert owner.notifications == 3

    color.hue  # reads never notify
    assert owner.notifications == 3


def test_owner_is_weak():
    class Node:
        def notify_style_changed(self):
            raise AssertionError("owner should be gone")

    color = Color()
    node = Node()
    color.owner = node
    del node
    assert color.owner is None
    color.red = 1.0


def test_convert_returns_new_color():
    color = Color(1, 0, 0, 0.5)
    hsl = color.convert("hsl")
    assert hsl.type is Representation.HSL
    assert hsl.components == [0.0, 1.0, 0.5]
    assert hsl.alpha == 0.5
    assert color.type is Representation.RGB


def test_clone_is_independent():
    color = Color("hsl", 40, 0.5, 0.5, 0.3)
    clone = color.clone()
    assert clone == color
    clone.lightness = 0.9
    assert color.lightness == 0.5


def test_equality():
    assert Color(1, 0, 0) == Color("rgb", 1, 0, 0)
    assert Color(1, 0, 0).equals(Color([1, 0, 0]))
    assert Color(1, 0, 0) != Color(1, 0, 0, 0.5)
    assert Color(1, 0, 0) != Color("hsb", 0, 1, 1)
    assert Color(1, 0, 0) != "red"
    assert not Color(1, 0, 0).equals(None)
