"""Whole-image operations built on the pixel accessors."""

import logging

from pixelbuf import defaults
from pixelbuf.image import clamp_value, get_pixel, set_pixel, make_image_like
from pixelbuf.types import Image

logger = logging.getLogger(__name__)


def copy_image(im: Image) -> Image:
    """Deep copy of im, sample by sample, on the same backend and device."""
    copy = make_image_like(im)
    for i in range(im.c):
        for j in range(im.h):
            for k in range(im.w):
                set_pixel(copy, i, j, k, get_pixel(im, i, j, k))
    return copy


def shift_image(im: Image, c: int, v: float) -> None:
    """Add v to every sample of channel c, in place.

    Results are not bounded; follow with clamp_image() if needed.
    """
    if im.size == 0:
        return
    for j in range(im.h):
        for k in range(im.w):
            set_pixel(im, c, j, k, get_pixel(im, c, j, k) + v)


def scale_image(im: Image, c: int, v: float) -> None:
    """Multiply every sample of channel c by v, in place.

    Useful on HSV images, e.g. scale_image(im, 1, 2.0) doubles saturation.
    """
    if im.size == 0:
        return
    for j in range(im.h):
        for k in range(im.w):
            set_pixel(im, c, j, k, get_pixel(im, c, j, k) * v)


def clamp_image(im: Image) -> None:
    """Saturate every sample into [CLAMP_MIN, CLAMP_MAX], in place."""
    logger.debug("Clamping %r", im)
    for i in range(im.c):
        for j in range(im.h):
            for k in range(im.w):
                value = clamp_value(get_pixel(im, i, j, k), defaults.CLAMP_MIN, defaults.CLAMP_MAX)
                set_pixel(im, i, j, k, value)
