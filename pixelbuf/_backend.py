"""Storage backend dispatch for flat sample buffers.

Image samples live in a flat float32 array that is either a numpy array or
a torch tensor. The helpers here hide which one is in use so the image
layer can allocate, copy and reshape without caring.

torch is imported lazily so numpy-only callers never pay for it.
"""

import logging
from typing import Any, Optional

import numpy as np

from pixelbuf import defaults
from pixelbuf.errors import BackendError

logger = logging.getLogger(__name__)

Array = Any

# Lazy torch reference
_torch = None


def _get_torch():
    global _torch
    if _torch is None:
        import torch
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    """True if x is a torch tensor (without importing torch)."""
    return type(x).__module__.startswith('torch')


def backend_name(x: Array) -> str:
    return 'torch' if is_torch(x) else 'numpy'


def check_backend(backend: str) -> str:
    if backend not in defaults.SUPPORTED_BACKENDS:
        raise BackendError(
            f"Unknown backend {backend!r}, expected one of {defaults.SUPPORTED_BACKENDS}"
        )
    return backend


def resolve_device(device: Optional[str] = None):
    """Map a device name to a torch.device, falling back to CPU.

    Asking for 'cuda' or 'mps' on a machine without that accelerator logs
    a warning and returns the CPU device instead of failing.
    """
    torch = _get_torch()
    if device is None:
        return torch.device('cpu')

    dev = torch.device(device)
    if dev.type == 'cuda' and not torch.cuda.is_available():
        logger.warning("CUDA requested but not available, using CPU")
        return torch.device('cpu')
    if dev.type == 'mps':
        mps_ok = hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()
        if not mps_ok:
            logger.warning("MPS requested but not available, using CPU")
            return torch.device('cpu')
    return dev


def zeros(n: int, backend: str = defaults.DEFAULT_BACKEND, device: Optional[str] = None) -> Array:
    """Allocate a zero-filled flat float32 buffer of length n."""
    check_backend(backend)
    if backend == 'torch':
        torch = _get_torch()
        return torch.zeros(n, dtype=getattr(torch, defaults.DEFAULT_DTYPE), device=resolve_device(device))
    return np.zeros(n, dtype=defaults.DEFAULT_DTYPE)


def zeros_like(x: Array, n: Optional[int] = None) -> Array:
    """Zero-filled flat buffer on the same backend and device as x."""
    if n is None:
        n = int(x.numel()) if is_torch(x) else int(x.size)
    if is_torch(x):
        torch = _get_torch()
        return torch.zeros(n, dtype=getattr(torch, defaults.DEFAULT_DTYPE), device=x.device)
    return np.zeros(n, dtype=defaults.DEFAULT_DTYPE)


def flatten_copy(x: Array) -> Array:
    """Flat float32 copy of x, keeping its backend and device."""
    if is_torch(x):
        torch = _get_torch()
        return x.detach().reshape(-1).to(dtype=getattr(torch, defaults.DEFAULT_DTYPE)).clone()
    return np.array(x, dtype=defaults.DEFAULT_DTYPE).reshape(-1)


def reshape_copy(x: Array, shape: tuple[int, ...]) -> Array:
    """Copy of flat buffer x reshaped to shape."""
    if is_torch(x):
        return x.reshape(shape).clone()
    return x.reshape(shape).copy()


def length(x: Array) -> int:
    return int(x.numel()) if is_torch(x) else int(x.size)


def to_numpy(x: Array) -> np.ndarray:
    """Download tensor to numpy, or pass numpy arrays through."""
    if is_torch(x):
        return x.detach().cpu().numpy()
    return np.asarray(x)
