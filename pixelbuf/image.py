"""Image allocation, pixel addressing and accessors.

Boundary policy lives in clamped_offset() and nowhere else: coordinates
outside the image are clamped to the nearest edge pixel, so filter-style
callers can probe past the border without bounds checks.

Example:
    from pixelbuf import make_image, get_pixel, set_pixel

    im = make_image(3, 2, 2)
    set_pixel(im, 0, 1, 1, 0.5)
    get_pixel(im, 0, 5, 5)  # 0.5, clamped to (0, 1, 1)
"""

import logging
from typing import Optional

import numpy as np

from pixelbuf import defaults
from pixelbuf import _backend as B
from pixelbuf._backend import Array
from pixelbuf.errors import EmptyImageError, ShapeError
from pixelbuf.types import Image

logger = logging.getLogger(__name__)


def clamp_value(v: float, lo: float, hi: float) -> float:
    """Saturate v into [lo, hi]."""
    return lo if v < lo else (hi if v > hi else v)


# === Allocation ===

def make_image(
    c: int,
    h: int,
    w: int,
    backend: str = defaults.DEFAULT_BACKEND,
    device: Optional[str] = None,
) -> Image:
    """Allocate a zero-filled image.

    Args:
        c: Channels
        h: Height
        w: Width
        backend: 'numpy' or 'torch'
        device: Torch device name ('cpu', 'cuda', 'mps'); ignored for numpy

    Returns:
        Image with c*h*w zero samples
    """
    if c < 0 or h < 0 or w < 0:
        raise ShapeError(f"Image dimensions must be non-negative, got {(c, h, w)}")
    data = B.zeros(c * h * w, backend=backend, device=device)
    logger.debug("Allocated %dx%dx%d image on %s", c, h, w, backend)
    return Image(c, h, w, data)


def make_image_like(im: Image, c: Optional[int] = None) -> Image:
    """Zero-filled image with im's spatial size, backend and device.

    Args:
        im: Template image
        c: Channel count for the new image (defaults to im.c)
    """
    c = im.c if c is None else c
    return Image(c, im.h, im.w, B.zeros_like(im.data, c * im.h * im.w))


def from_array(array: Array) -> Image:
    """Build an image from a CHW (3-D) or HW (2-D) array or tensor.

    Samples are copied and cast to float32; the result stays on the
    array's backend and device.
    """
    if array.ndim == 2:
        c, (h, w) = 1, tuple(array.shape)
    elif array.ndim == 3:
        c, h, w = tuple(array.shape)
    else:
        raise ShapeError(f"Expected a 2-D or 3-D array, got shape {tuple(array.shape)}")
    return Image(int(c), int(h), int(w), B.flatten_copy(array))


def to_array(im: Image) -> Array:
    """Copy of the samples shaped (c, h, w) on the image's backend."""
    return B.reshape_copy(im.data, im.shape)


# === Addressing ===

def clamped_offset(im: Image, c: int, h: int, w: int) -> int:
    """Linear storage offset of (c, h, w) with clamp-to-edge boundaries.

    Each coordinate is clamped into [0, dim-1] on its own axis, then the
    CHW offset c*(H*W) + h*W + w is returned.
    """
    if im.size == 0:
        raise EmptyImageError(f"Cannot address a pixel in empty image {im!r}")
    c = clamp_value(c, 0, im.c - 1)
    h = clamp_value(h, 0, im.h - 1)
    w = clamp_value(w, 0, im.w - 1)
    return c * (im.h * im.w) + h * im.w + w


# === Accessors ===

def get_pixel(im: Image, c: int, h: int, w: int) -> float:
    return float(im.data[clamped_offset(im, c, h, w)])


def set_pixel(im: Image, c: int, h: int, w: int, value: float) -> None:
    """Write value at (c, h, w); out-of-range coordinates hit the edge pixel."""
    im.data[clamped_offset(im, c, h, w)] = value


# === Comparison ===

def same_image(a: Image, b: Image, epsilon: float = defaults.SAME_IMAGE_EPSILON) -> bool:
    """True if a and b have the same shape and all samples are within epsilon."""
    if a.shape != b.shape:
        return False
    diff = np.abs(B.to_numpy(a.data).astype(np.float64) - B.to_numpy(b.data).astype(np.float64))
    return bool(np.all(diff < epsilon))
