from polycolor.conversions.to_rgb import hsb_to_rgb, hsl_to_rgb, gray_to_rgb, np_hsb_to_rgb, np_hsl_to_rgb, np_gray_to_rgb
from polycolor.samples.colors import SAMPLES
import numpy as np


def test_hsb_to_rgb():
    for name, (rgb, hsb, _) in SAMPLES.items():
        r, g, b = hsb_to_rgb(*hsb)

        assert abs(r - rgb[0]) < 1e-9, name
        assert abs(g - rgb[1]) < 1e-9, name
        assert abs(b - rgb[2]) < 1e-9, name


def test_hsb_to_rgb_numpy():
    hsb = np.array([sample[1] for sample in SAMPLES.values()])
    expected = np.array([sample[0] for sample in SAMPLES.values()])
    result = np_hsb_to_rgb(hsb[..., 0], hsb[..., 1], hsb[..., 2])
    assert result.shape == expected.shape
    assert np.allclose(result, expected)


def test_hsb_to_rgb_every_sector():
    # one hue inside each 60 degree sector
    expected = [
        (1.0, 0.5, 0.0),
        (0.5, 1.0, 0.0),
        (0.0, 1.0, 0.5),
        (0.0, 0.5, 1.0),
        (0.5, 0.0, 1.0),
        (1.0, 0.0, 0.5),
    ]
    for sector, rgb in enumerate(expected):
        assert np.allclose(hsb_to_rgb(sector * 60 + 30, 1.0, 1.0), rgb)


def test_hsb_to_rgb_hue_at_upper_bound():
    assert np.allclose(hsb_to_rgb(360.0, 1.0, 1.0), (1.0, 0.0, 0.0))
    assert np.allclose(np_hsb_to_rgb(360.0, 1.0, 1.0), (1.0, 0.0, 0.0))


def test_hsl_to_rgb():
    for name, (rgb, _, hsl) in SAMPLES.items():
        r, g, b = hsl_to_rgb(*hsl)

        assert abs(r - rgb[0]) < 1e-9, name
        assert abs(g - rgb[1]) < 1e-9, name
        assert abs(b - rgb[2]) < 1e-9, name


def test_hsl_to_rgb_numpy():
    hsl = np.array([sample[2] for sample in SAMPLES.values()])
    expected = np.array([sample[0] for sample in SAMPLES.values()])
    result = np_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    assert np.allclose(result, expected)


def test_hsl_zero_saturation_is_gray():
    assert hsl_to_rgb(200.0, 0.0, 0.3) == (0.3, 0.3, 0.3)
    assert np.allclose(np_hsl_to_rgb(200.0, 0.0, 0.3), (0.3, 0.3, 0.3))


def test_gray_to_rgb():
    assert gray_to_rgb(0.25) == (0.25, 0.25, 0.25)
    result = np_gray_to_rgb(np.array([0.0, 0.5, 1.0]))
    assert result.shape == (3, 3)
    assert np.allclose(result[1], (0.5, 0.5, 0.5))
