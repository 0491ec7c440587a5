import numpy as np
from polycolor import Color
from polycolor.samples.colors import CSS_SAMPLES, SAMPLES


def test_to_css():
    for rgb, css in CSS_SAMPLES:
        assert Color(*rgb).to_css() == css


def test_to_css_rounds_half_up():
    # 0.5 * 255 = 127.5
    assert Color(0.5).to_css() == "rgb(128, 128, 128)"


def test_to_css_from_other_representations():
    for name, (rgb, hsb, hsl) in SAMPLES.items():
        if not np.allclose(rgb * 255, np.round(rgb * 255)):
            continue
        expected = Color(*rgb).to_css()
        assert Color("hsb", *hsb).to_css() == expected, name
        assert Color("hsl", *hsl).to_css() == expected, name


def test_to_css_alpha():
    assert Color(1, 0, 0, 0.5).to_css() == "rgba(255, 0, 0, 0.5)"
    assert Color(0, 0, 0, 1 / 3).to_css() == "rgba(0, 0, 0, 0.333)"
    assert Color(1, 0, 0, 1).to_css() == "rgb(255, 0, 0)"


def test_omit_alpha_does_not_touch_cache():
    color = Color(1, 0, 0, 0.5)
    assert color.to_css(omit_alpha=True) == "rgb(255, 0, 0)"
    assert color.to_css() == "rgba(255, 0, 0, 0.5)"
    assert color.to_css(omit_alpha=True) == "rgb(255, 0, 0)"


def test_css_cache_is_invalidated():
    color = Color(1, 0, 0)
    assert color.to_css() == "rgb(255, 0, 0)"
    color.blue = 1
    assert color.to_css() == "rgb(255, 0, 255)"
    color.alpha = 0.25
    assert color.to_css() == "rgba(255, 0, 255, 0.25)"


def test_paint_style_of_plain_color_is_css():
    assert Color(0, 1, 0).to_paint_style() == "rgb(0, 255, 0)"


def test_display_string():
    assert str(Color(1, 0, 0)) == "{ red: 1, green: 0, blue: 0 }"
    assert Color(1, 0, 0, 0.5).to_display_string() == "{ red: 1, green: 0, blue: 0, alpha: 0.5 }"
    assert str(Color("hsb", 120, 1 / 3, 1)) == "{ hue: 120, saturation: 0.33333, brightness: 1 }"
    assert str(Color(0.25)) == "{ gray: 0.25 }"


def test_repr():
    assert repr(Color(1, 0, 0, 0.5)) == "Color('rgb', [1.0, 0.0, 0.0], alpha=0.5)"
    assert repr(Color(0.5)) == "Color('gray', [0.5])"


def test_serialize():
    assert Color(1, 0, 0).serialize() == [1.0, 0.0, 0.0]
    assert Color(0.5).serialize() == [0.5]
    assert Color("hsb", 120, 1, 1).serialize() == ["hsb", 120.0, 1.0, 1.0]
    assert Color(1, 0, 0, 0.5).serialize() == [1.0, 0.0, 0.0]


def test_serialize_round_trip():
    for color in (Color(0.2, 0.4, 0.6), Color(0.5), Color("hsb", 120, 1, 1), Color("hsl", 300, 0.5, 0.25)):
        assert Color(color.serialize()) == color
