"""RGB -> grayscale reduction using Rec. 601 luma weights."""

import logging

from pixelbuf import defaults
from pixelbuf.errors import InvalidChannelCount
from pixelbuf.image import get_pixel, set_pixel, make_image_like
from pixelbuf.types import Image

logger = logging.getLogger(__name__)


def require_rgb(im: Image, operation: str) -> None:
    """Raise InvalidChannelCount unless im has exactly 3 channels."""
    if im.c != defaults.RGB_CHANNELS:
        raise InvalidChannelCount(operation, defaults.RGB_CHANNELS, im.c)


def luma(im: Image, h: int, w: int) -> float:
    """Weighted R, G, B sum at (h, w)."""
    wr, wg, wb = defaults.LUMA_WEIGHTS
    r = get_pixel(im, 0, h, w)
    g = get_pixel(im, 1, h, w)
    b = get_pixel(im, 2, h, w)
    return wr * r + wg * g + wb * b


def rgb_to_grayscale(im: Image) -> Image:
    """Reduce a 3-channel RGB image to a new (1, h, w) luma image.

    Raises:
        InvalidChannelCount: im does not have 3 channels
    """
    require_rgb(im, 'rgb_to_grayscale')
    logger.debug("rgb_to_grayscale on %r", im)

    gray = make_image_like(im, c=1)
    for j in range(im.h):
        for k in range(im.w):
            set_pixel(gray, 0, j, k, luma(im, j, k))
    return gray
