"""Central place for pixelbuf default settings."""

# Storage
DEFAULT_BACKEND: str = "numpy"  # "numpy" or "torch"
DEFAULT_DTYPE: str = "float32"
SUPPORTED_BACKENDS: tuple[str, ...] = ("numpy", "torch")

# Sample range enforced by clamp_image
CLAMP_MIN: float = 0.0
CLAMP_MAX: float = 1.0

# Colorspace
RGB_CHANNELS: int = 3
LUMA_WEIGHTS: tuple[float, float, float] = (0.299, 0.587, 0.114)  # Rec. 601
HUE_SECTORS: int = 6

# Comparison tolerances
SAME_IMAGE_EPSILON: float = 0.005
ROUNDTRIP_TOLERANCE: float = 1e-5
