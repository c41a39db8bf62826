"""Colorspace conversions for 3-channel images.

This module provides:
- RGB -> grayscale (new single-channel image)
- RGB <-> HSV (in place)
- Backend-agnostic: works on numpy- or torch-backed images

Example:
    from pixelbuf import make_image, set_pixel
    from pixelbuf.colorspace import rgb_to_hsv, hsv_to_rgb

    im = make_image(3, 1, 1)
    set_pixel(im, 0, 0, 0, 1.0)  # pure red
    rgb_to_hsv(im)               # (H, S, V) = (0, 1, 1)
    hsv_to_rgb(im)               # back to (1, 0, 0)
"""

from .grayscale import rgb_to_grayscale, luma, require_rgb

from .hsv import (
    rgb_to_hsv,
    hsv_to_rgb,
    hsv_pixel_to_rgb,
    three_way_max,
    three_way_min,
)

__all__ = [
    # Grayscale
    'rgb_to_grayscale',
    'luma',
    'require_rgb',
    # HSV
    'rgb_to_hsv',
    'hsv_to_rgb',
    'hsv_pixel_to_rgb',
    'three_way_max',
    'three_way_min',
]
