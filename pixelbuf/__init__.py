"""pixelbuf - in-memory CHW float images and pixel-level transforms."""

from .errors import (
    ImageError,
    ShapeError,
    EmptyImageError,
    BackendError,
    HueError,
    InvalidChannelCount,
)

from .types import Image

from .image import (
    make_image,
    make_image_like,
    from_array,
    to_array,
    clamped_offset,
    get_pixel,
    set_pixel,
    same_image,
)

from .ops import copy_image, shift_image, scale_image, clamp_image

from .colorspace import rgb_to_grayscale, rgb_to_hsv, hsv_to_rgb

__all__ = [
    'Image',
    # Errors
    'ImageError',
    'ShapeError',
    'EmptyImageError',
    'BackendError',
    'HueError',
    'InvalidChannelCount',
    # Allocation and access
    'make_image',
    'make_image_like',
    'from_array',
    'to_array',
    'clamped_offset',
    'get_pixel',
    'set_pixel',
    'same_image',
    # Whole-image ops
    'copy_image',
    'shift_image',
    'scale_image',
    'clamp_image',
    # Colorspace
    'rgb_to_grayscale',
    'rgb_to_hsv',
    'hsv_to_rgb',
]
