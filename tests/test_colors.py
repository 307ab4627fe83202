import numpy as np
import pytest

from modules.utils.colors import (
    format_rgb,
    hex_to_rgb,
    is_dark_color,
    relative_luminance,
    rgb_to_hex,
)
from modules.utils.exceptions import InvalidFormatException


def test_hex_to_rgb_parses_either_case():
    assert hex_to_rgb("#FF0080") == (255, 0, 128)
    assert hex_to_rgb("#ff0080") == (255, 0, 128)
    assert hex_to_rgb("#000000") == (0, 0, 0)


@pytest.mark.parametrize(
    "value",
    ["FF0080", "#FF008", "#FF00800", "#GG0000", "#FF 080", "", "#FFFFFF\n", None, 0xFFFFFF],
)
def test_hex_to_rgb_rejects_malformed_input(value):
    with pytest.raises(InvalidFormatException):
        hex_to_rgb(value)


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        hex_to_rgb("#12345")


def test_rgb_to_hex_is_uppercase_and_zero_padded():
    assert rgb_to_hex(255, 0, 128) == "#FF0080"
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(10, 11, 12) == "#0A0B0C"


def test_rgb_to_hex_clamps_channels():
    assert rgb_to_hex(-5, 300, 128) == "#00FF80"


def test_hex_round_trip_is_identity():
    # Stride through the full 24-bit space, plus both ends.
    values = list(range(0, 1 << 24, 4099)) + [0, (1 << 24) - 1]
    for value in values:
        h = f"#{value:06x}"
        assert rgb_to_hex(*hex_to_rgb(h)) == h.upper()


def test_format_rgb():
    assert format_rgb(255, 255, 255) == "255, 255, 255"


def test_relative_luminance_reference_values():
    assert relative_luminance(0, 0, 0) == pytest.approx(0.0)
    assert relative_luminance(255, 255, 255) == pytest.approx(1.0)
    assert relative_luminance(255, 0, 0) == pytest.approx(0.2126)
    assert relative_luminance(0, 255, 0) == pytest.approx(0.7152)
    assert relative_luminance(0, 0, 255) == pytest.approx(0.0722)
    assert relative_luminance(119, 119, 119) == pytest.approx(0.1845, abs=1e-4)


def test_relative_luminance_uses_linear_segment_for_dark_channels():
    # 10/255 is below the 0.03928 knee
    assert relative_luminance(10, 10, 10) == pytest.approx((10 / 255) / 12.92)


def test_relative_luminance_accepts_sequences_and_arrays():
    assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)

    pixels = np.array([[[0, 0, 0], [255, 255, 255]], [[255, 0, 0], [0, 0, 255]]], dtype=np.uint8)
    lum = relative_luminance(pixels)
    assert lum.shape == (2, 2)
    np.testing.assert_allclose(lum, [[0.0, 1.0], [0.2126, 0.0722]], atol=1e-9)


def test_relative_luminance_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        relative_luminance((1, 2))


def test_is_dark_color_threshold():
    assert is_dark_color(0, 0, 0)
    assert not is_dark_color(255, 255, 255)
    # #BBBBBB sits just under 0.5, #C0C0C0 just over
    assert is_dark_color(0xBB, 0xBB, 0xBB)
    assert not is_dark_color(0xC0, 0xC0, 0xC0)
