"""Tests for copy, shift, scale and clamp."""

import numpy as np
import pytest

from pixelbuf import (
    make_image,
    from_array,
    to_array,
    get_pixel,
    set_pixel,
    same_image,
    copy_image,
    shift_image,
    scale_image,
    clamp_image,
)


class TestCopyImage:
    """Test deep copies."""

    def test_copy_equals_source(self, rgb_image):
        """A copy has the same shape and samples."""
        copy = copy_image(rgb_image)
        assert copy.shape == rgb_image.shape
        np.testing.assert_array_equal(copy.data, rgb_image.data)

    def test_copy_is_independent(self, rgb_image):
        """Mutating the copy leaves the source untouched."""
        before = to_array(rgb_image)
        copy = copy_image(rgb_image)
        set_pixel(copy, 0, 0, 0, 9.0)
        shift_image(copy, 2, 1.0)
        np.testing.assert_array_equal(to_array(rgb_image), before)
        assert copy.data is not rgb_image.data

    def test_copy_empty_image(self):
        """Copying an empty image keeps its shape."""
        copy = copy_image(make_image(3, 0, 2))
        assert copy.shape == (3, 0, 2)


class TestShiftImage:
    """Test per-channel additive shift."""

    def test_shift_only_touches_channel(self, rgb_image):
        """Shift adds to the chosen channel and no other."""
        before = to_array(rgb_image)
        shift_image(rgb_image, 1, 0.4)
        after = to_array(rgb_image)
        np.testing.assert_allclose(after[1], before[1] + 0.4, atol=1e-6)
        np.testing.assert_array_equal(after[0], before[0])
        np.testing.assert_array_equal(after[2], before[2])

    def test_shift_is_unbounded(self):
        """Shift may leave samples below 0 or above 1."""
        im = make_image(1, 2, 2)
        shift_image(im, 0, -0.5)
        assert (im.data == -0.5).all()
        shift_image(im, 0, 2.0)
        assert (im.data == 1.5).all()

    def test_shift_roundtrip(self, rgb_image):
        """Shifting by +d then -d restores the channel."""
        before = to_array(rgb_image)
        shift_image(rgb_image, 0, 0.3)
        shift_image(rgb_image, 0, -0.3)
        np.testing.assert_allclose(to_array(rgb_image), before, atol=1e-6)

    def test_shift_empty_image_is_noop(self):
        """Shifting an empty image does nothing."""
        im = make_image(0, 3, 3)
        shift_image(im, 0, 1.0)
        assert im.size == 0


class TestScaleImage:
    """Test per-channel multiplicative scale."""

    def test_scale_channel(self, rgb_image):
        """Scale multiplies the chosen channel and no other."""
        before = to_array(rgb_image)
        scale_image(rgb_image, 2, 2.0)
        after = to_array(rgb_image)
        np.testing.assert_allclose(after[2], before[2] * 2.0, rtol=1e-6)
        np.testing.assert_array_equal(after[:2], before[:2])

    def test_scale_by_zero(self, rgb_image):
        """Scaling by zero blanks the channel."""
        scale_image(rgb_image, 0, 0.0)
        assert not to_array(rgb_image)[0].any()


class TestClampImage:
    """Test saturating clamp to [0, 1]."""

    def test_clamp_range(self, rng):
        """After clamping every sample is in [0, 1]."""
        im = from_array((rng.random((3, 6, 6)) * 4 - 2).astype(np.float32))
        clamp_image(im)
        assert (im.data >= 0).all()
        assert (im.data <= 1).all()

    def test_clamp_values(self):
        """Below 0 becomes 0, above 1 becomes 1, the rest is unchanged."""
        im = from_array(np.array([[[-0.5, 0.0, 0.25, 1.0, 1.5]]], dtype=np.float32))
        clamp_image(im)
        np.testing.assert_array_equal(im.data, [0.0, 0.0, 0.25, 1.0, 1.0])

    def test_clamp_idempotent(self, rng):
        """Clamping twice equals clamping once."""
        im = from_array((rng.random((2, 4, 4)) * 3 - 1).astype(np.float32))
        clamp_image(im)
        once = copy_image(im)
        clamp_image(im)
        np.testing.assert_array_equal(im.data, once.data)

    def test_in_range_untouched(self, rgb_image):
        """Samples already in [0, 1] are not modified."""
        before = copy_image(rgb_image)
        clamp_image(rgb_image)
        assert same_image(rgb_image, before, epsilon=1e-9)


class TestTorchBackend:
    """Whole-image ops on torch storage (if torch available)."""

    def test_copy_stays_on_torch(self, torch):
        """Copies keep the tensor backend and device."""
        im = from_array(torch.rand(3, 4, 4))
        copy = copy_image(im)
        assert isinstance(copy.data, torch.Tensor)
        assert copy.data.device == im.data.device
        assert torch.equal(copy.data, im.data)

    def test_numpy_parity(self, torch, rgb_image):
        """Shift, scale and clamp agree between numpy and torch."""
        im_t = from_array(torch.from_numpy(to_array(rgb_image)))
        for im in (rgb_image, im_t):
            shift_image(im, 0, 0.7)
            scale_image(im, 1, -1.0)
            clamp_image(im)
        np.testing.assert_allclose(im_t.data.numpy(), rgb_image.data, atol=1e-6)
        assert get_pixel(im_t, 1, 0, 0) == 0.0
