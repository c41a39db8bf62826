"""Core data types for pixelbuf - backend-agnostic."""

from pixelbuf import _backend as B
from pixelbuf._backend import Array
from pixelbuf.errors import ShapeError


class Image:
    """Dense multi-channel float image stored flat in CHW order.

    All of channel 0 comes first, then channel 1, and so on; within a
    channel samples are row-major. Whether a 3-channel image holds RGB or
    HSV is not recorded here, the caller keeps track of it.

    Attributes:
        c: Number of channels
        h: Height in pixels
        w: Width in pixels
        data: Flat float32 buffer of length c*h*w (numpy array or torch tensor)
    """

    __slots__ = ('c', 'h', 'w', 'data')

    def __init__(self, c: int, h: int, w: int, data: Array):
        if c < 0 or h < 0 or w < 0:
            raise ShapeError(f"Image dimensions must be non-negative, got {(c, h, w)}")
        if B.length(data) != c * h * w:
            raise ShapeError(
                f"Storage holds {B.length(data)} samples, expected {c * h * w} for shape {(c, h, w)}"
            )
        self.c = c
        self.h = h
        self.w = w
        self.data = data

    @property
    def shape(self) -> tuple[int, int, int]:
        return (self.c, self.h, self.w)

    @property
    def size(self) -> int:
        return self.c * self.h * self.w

    @property
    def backend(self) -> str:
        return B.backend_name(self.data)

    def __repr__(self) -> str:
        return f"Image(c={self.c}, h={self.h}, w={self.w}, backend={self.backend!r})"
