"""Image construction and conversion errors."""


class ImageError(Exception):
    """Base class for image errors."""
    pass


class ShapeError(ImageError):
    """Image dimensions or storage length are invalid."""
    pass


class EmptyImageError(ImageError):
    """Pixel access on an image with no samples."""
    pass


class BackendError(ImageError):
    """Unknown storage backend."""
    pass


class HueError(ImageError):
    """Hue does not map to one of the six HSV sectors."""
    pass


class InvalidChannelCount(ImageError):
    """Operation received an image with the wrong number of channels."""

    def __init__(self, operation: str, expected: int, actual: int):
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation} requires {expected} channels, got {actual}"
        )
