"""Shared test fixtures for tests/ and the colorspace tests beside the code."""

import numpy as np
import pytest

from pixelbuf import from_array


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def ramp_image():
    """2x3x4 image whose samples equal their flat CHW offset."""
    return from_array(np.arange(24, dtype=np.float32).reshape(2, 3, 4))


@pytest.fixture
def rgb_image(rng):
    """Random 3x5x7 RGB image with samples in [0, 1)."""
    return from_array(rng.random((3, 5, 7)).astype(np.float32))


@pytest.fixture
def torch():
    pytest.importorskip('torch')
    import torch
    return torch
