import colorsys
import math
import random
import re
from collections import namedtuple
from numbers import Integral, Real

HEX_DIGITS = "0123456789ABCDEF"
HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])


class InvalidFormat(ValueError):
    """Raised for a malformed hex string, RGB triple or HSL value."""


class OutOfRange(ValueError):
    """Raised when a channel, saturation or lightness leaves its domain."""


def random_hex(rng=random):
    """
    Random color as '#RRGGBB', each digit drawn uniformly from 0-9A-F.
    """
    return "#" + "".join(rng.choice(HEX_DIGITS) for _ in range(6))


def hex_to_rgb(hex_str):
    """
    Convert '#RRGGBB' (either case) to RGB (0-255).
    """
    if not isinstance(hex_str, str) or not HEX_PATTERN.fullmatch(hex_str):
        raise InvalidFormat(f"invalid hex color: {hex_str!r} (expected #RRGGBB)")
    digits = hex_str[1:]
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r, g, b):
    for c in (r, g, b):
        _check_channel(c)
    return f"#{r:02x}{g:02x}{b:02x}"


def _check_channel(c):
    if isinstance(c, bool) or not isinstance(c, Integral):
        raise InvalidFormat(f"RGB channel must be an integer, got {c!r}")
    if not 0 <= c <= 255:
        raise OutOfRange(f"RGB channel {c} outside 0-255")


def rgb_to_hsl(rgb):
    """
    Convert RGB (0-255) to HSL with hue in degrees [0, 360) and
    saturation/lightness in [0, 1]. Grays come back with h = s = 0.
    """
    try:
        r, g, b = rgb
    except (TypeError, ValueError):
        raise InvalidFormat(f"expected an (r, g, b) triple, got {rgb!r}") from None
    for c in (r, g, b):
        _check_channel(c)

    # colorsys uses HLS ordering and hue in turns
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return HSL(h * 360.0, s, l)


def hex_to_hsl(hex_str):
    return rgb_to_hsl(hex_to_rgb(hex_str))


def normalize_hue(h):
    """
    Wrap a hue in degrees into [0, 360).
    """
    if isinstance(h, bool) or not isinstance(h, Real):
        raise InvalidFormat(f"hue must be a number, got {h!r}")
    if not math.isfinite(h):
        raise OutOfRange(f"hue must be finite, got {h!r}")
    h = h % 360.0
    # -1e-20 % 360.0 rounds up to 360.0
    return 0.0 if h >= 360.0 else h


def _check_fraction(name, value):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidFormat(f"{name} must be a number, got {value!r}")
    if not 0.0 <= value <= 1.0:
        raise OutOfRange(f"{name} {value!r} outside 0-1")


def _round_half_up(x):
    return int(math.floor(x + 0.5))


def _round_channel(x):
    # Clamp in case of float error
    return max(0, min(255, _round_half_up(x * 255)))


def hsl_to_hex(h, s, l):
    """
    Convert HSL (hue in degrees, any finite value) to '#rrggbb'.
    """
    turns = normalize_hue(h) / 360.0
    _check_fraction("saturation", s)
    _check_fraction("lightness", l)

    if s == 0:
        r = g = b = l  # achromatic
    else:
        r, g, b = colorsys.hls_to_rgb(turns, l, s)
    return rgb_to_hex(_round_channel(r), _round_channel(g), _round_channel(b))


def hsl_to_css(hsl):
    """
    Format HSL as 'hsl(h, s%, l%)' for display.
    """
    h, s, l = hsl
    _check_fraction("saturation", s)
    _check_fraction("lightness", l)
    return f"hsl({_round_half_up(normalize_hue(h)) % 360}, {_round_half_up(s * 100)}%, {_round_half_up(l * 100)}%)"
