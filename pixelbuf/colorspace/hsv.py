"""RGB <-> HSV conversions, in place on 3-channel images.

All channels are in [0, 1] and hue in [0, 1) (one full turn = 1.0). The two
conversions form an approximate round trip; black (V=0) loses hue and
saturation and grays (C=0) lose hue.

Hue tie-break: when two channels share the maximum, R is checked before
G and G before B. Changing the order changes output for e.g. yellow.
"""

import logging
import math

import numpy as np

from pixelbuf import defaults
from pixelbuf.colorspace.grayscale import require_rgb
from pixelbuf.errors import HueError
from pixelbuf.image import get_pixel, set_pixel
from pixelbuf.types import Image

logger = logging.getLogger(__name__)


def three_way_max(a: float, b: float, c: float) -> float:
    return (a if a > c else c) if a > b else (b if b > c else c)


def three_way_min(a: float, b: float, c: float) -> float:
    return (a if a < c else c) if a < b else (b if b < c else c)


def _hue(r: float, g: float, b: float, v: float, chroma: float) -> float:
    """Hue in [0, 1) from RGB, its max v and chroma."""
    if chroma == 0:
        h_prime = 0.0
    elif v == r:
        h_prime = (g - b) / chroma
    elif v == g:
        h_prime = (b - r) / chroma + 2
    else:
        h_prime = (r - g) / chroma + 4

    sectors = defaults.HUE_SECTORS
    return h_prime / sectors + 1 if h_prime < 0 else h_prime / sectors


def rgb_to_hsv(im: Image) -> None:
    """Convert an RGB image to HSV in place (channels 0/1/2 become H/S/V).

    Raises:
        InvalidChannelCount: im does not have 3 channels
    """
    require_rgb(im, 'rgb_to_hsv')
    logger.debug("rgb_to_hsv on %r", im)

    for j in range(im.h):
        for k in range(im.w):
            r = get_pixel(im, 0, j, k)
            g = get_pixel(im, 1, j, k)
            b = get_pixel(im, 2, j, k)

            v = three_way_max(r, g, b)
            chroma = v - three_way_min(r, g, b)
            s = 0.0 if v == 0 else chroma / v
            h = _hue(r, g, b, v, chroma)
            # A hue just below 1 can round up to 1.0 in float32 storage
            if np.float32(h) >= 1.0:
                h = 0.0

            set_pixel(im, 0, j, k, h)
            set_pixel(im, 1, j, k, s)
            set_pixel(im, 2, j, k, v)


def hsv_pixel_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert one HSV triple to RGB.

    Hue wraps, so h=1.25 is the same as h=0.25.

    Raises:
        HueError: h is NaN or infinite
    """
    if not math.isfinite(h):
        raise HueError(f"Hue must be finite, got {h}")

    scaled = h * defaults.HUE_SECTORS
    sector_start = math.floor(scaled)
    i = sector_start % defaults.HUE_SECTORS
    f = scaled - sector_start

    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    return (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i]


def hsv_to_rgb(im: Image) -> None:
    """Convert an HSV image back to RGB in place.

    Every hue is checked before any sample is written, so a HueError
    leaves the image untouched.

    Raises:
        InvalidChannelCount: im does not have 3 channels
        HueError: some hue is NaN or infinite
    """
    require_rgb(im, 'hsv_to_rgb')
    logger.debug("hsv_to_rgb on %r", im)

    for j in range(im.h):
        for k in range(im.w):
            h = get_pixel(im, 0, j, k)
            if not math.isfinite(h):
                raise HueError(f"Hue must be finite, got {h} at ({j}, {k})")

    for j in range(im.h):
        for k in range(im.w):
            r, g, b = hsv_pixel_to_rgb(
                get_pixel(im, 0, j, k),
                get_pixel(im, 1, j, k),
                get_pixel(im, 2, j, k),
            )
            set_pixel(im, 0, j, k, r)
            set_pixel(im, 1, j, k, g)
            set_pixel(im, 2, j, k, b)
