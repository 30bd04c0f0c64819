import logging
import random
from collections import namedtuple

from color_logic import HSL, InvalidFormat, hex_to_hsl, hsl_to_hex, normalize_hue, random_hex

logger = logging.getLogger(__name__)

# Hue spreads for the named color schemes (degrees)
SCHEME_SPREADS = {
    "analogous": 30,
    "triadic": 120,
    "split_complementary": 165,
}

BOLDNESS_SPREADS = {
    "reserved": SCHEME_SPREADS["analogous"],
    "balanced": SCHEME_SPREADS["split_complementary"],
    "bold": SCHEME_SPREADS["triadic"],
}

DEFAULT_SPREAD = SCHEME_SPREADS["split_complementary"]

# Warm range straddles 0 and is left unwrapped here
WARMTH_HUE_RANGES = {
    "cool": (90.0, 270.0),
    "warm": (-90.0, 45.0),
}

SATURATION_RANGE = (0.5, 1.0)
LIGHTNESS_RANGE = (0.5, 0.8)


class Palette(namedtuple("Palette", ["primary", "secondary", "tertiary"])):
    """
    Three HSL colors sharing saturation and lightness.
    """
    __slots__ = ()

    def normalized(self):
        return Palette(*(HSL(normalize_hue(c.h), c.s, c.l) for c in self))


def mod_hue(color, angle):
    """
    Shift hue by angle degrees. The result is not wrapped into [0, 360).
    """
    return HSL(color.h + angle, color.s, color.l)


def derive_palette(base, spread):
    """
    Returns Palette(base, base + spread, base - spread).
    """
    base = HSL(*base)
    palette = Palette(base, mod_hue(base, spread), mod_hue(base, -spread))
    logger.debug("Derived palette from %s with spread %s", base, spread)
    return palette


def palette_hex_codes(palette):
    return [hsl_to_hex(*color) for color in palette]


def spread_for(boldness):
    """
    Hue spread for a boldness preset. No selection means no spread.
    """
    if boldness is None:
        return 0
    try:
        return BOLDNESS_SPREADS[boldness]
    except KeyError:
        raise InvalidFormat(f"unknown boldness {boldness!r}") from None


def random_base_color(rng=random, warmth=None):
    """
    Random base color with saturation/lightness from the policy ranges
    and, when warmth is 'cool' or 'warm', a hue drawn from that range.
    """
    if warmth is not None and warmth not in WARMTH_HUE_RANGES:
        raise InvalidFormat(f"unknown warmth {warmth!r}")

    h = hex_to_hsl(random_hex(rng)).h
    s = rng.uniform(*SATURATION_RANGE)
    l = rng.uniform(*LIGHTNESS_RANGE)

    if warmth is not None:
        h = rng.uniform(*WARMTH_HUE_RANGES[warmth])
    return HSL(h, s, l)


def initial_palette(rng=random):
    """
    Palette shown before any user choice: a fully random color with the
    default spread.
    """
    return derive_palette(hex_to_hsl(random_hex(rng)), DEFAULT_SPREAD)


def generate_palette(boldness=None, warmth=None, rng=random):
    spread = spread_for(boldness)
    return derive_palette(random_base_color(rng, warmth), spread)
