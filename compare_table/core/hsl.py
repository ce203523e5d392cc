"""RGB <-> HSL conversion.

RGB channels are ints in [0, 255]. HSL components are floats in [0, 1],
hue included (a full turn is 1.0, not 360).

The two conversions are inverses up to rounding: an integer RGB triple
survives rgb_to_hsl -> hsl_to_rgb within one unit per channel.
"""

Colour = tuple[int, int, int]


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 0-255 RGB channels to (h, s, l), each in [0, 1]."""
    r, g, b = r / 255, g / 255, b / 255
    hi = max(r, g, b)
    lo = min(r, g, b)
    l = (hi + lo) / 2  # noqa: E741

    if hi == lo:
        # Achromatic
        return 0.0, 0.0, l

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)

    if hi == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return h / 6, s, l


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    """Channel value for hue offset t, between the p and q bounds."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Colour:  # noqa: E741
    """Convert (h, s, l) in [0, 1] back to 0-255 RGB channels."""
    if s == 0:
        v = round(l * 255)
        return v, v, v

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        round(_hue_to_rgb(p, q, h + 1 / 3) * 255),
        round(_hue_to_rgb(p, q, h) * 255),
        round(_hue_to_rgb(p, q, h - 1 / 3) * 255),
    )


def lightness(colour: Colour) -> float:
    """HSL lightness of an RGB triple."""
    return rgb_to_hsl(*colour)[2]
