"""Unit tests for the device-side star shell.

Tests cover:
- Upload counts, clearing and capacity limits
- Agreement between the Taichi kernel and the host generator
- Shell geometry of the device positions
- Reading positions from other kernels via get_position
"""

import numpy as np
import pytest
import taichi as ti


class TestUpload:
    """Tests for uploading star positions."""

    def test_upload_sets_count(self, seeded_source):
        """Test that the star count matches the requested size."""
        from src.starfield.shell.kernels import (
            get_position_count,
            get_positions_numpy,
            upload_positions,
        )

        assert upload_positions(25, source=seeded_source) == 25
        assert get_position_count() == 25
        assert get_positions_numpy().shape == (25, 3)

    def test_upload_zero(self):
        """Test that size 0 leaves the device empty."""
        from src.starfield.shell.kernels import get_positions_numpy, upload_positions

        assert upload_positions(0) == 0
        assert get_positions_numpy().shape == (0, 3)

    def test_clear_positions(self, seeded_source):
        """Test that clearing resets the count."""
        from src.starfield.shell.kernels import (
            clear_positions,
            get_position_count,
            upload_positions,
        )

        upload_positions(10, source=seeded_source)
        clear_positions()
        assert get_position_count() == 0

    def test_reupload_replaces_previous(self):
        """Test that a smaller upload replaces a larger one."""
        from src.starfield.shell.kernels import get_position_count, upload_positions

        upload_positions(40)
        upload_positions(6)
        assert get_position_count() == 6

    def test_capacity_exceeded(self):
        """Test that oversized uploads raise RuntimeError."""
        from src.starfield.shell.kernels import MAX_POSITIONS, upload_positions

        with pytest.raises(RuntimeError):
            upload_positions(MAX_POSITIONS + 1)

    @pytest.mark.parametrize("size", [-1, 2.0, "8"])
    def test_invalid_size(self, size):
        """Test that invalid sizes are rejected like on the host."""
        from src.starfield.core.errors import InvalidArgumentError
        from src.starfield.shell.kernels import upload_positions

        with pytest.raises(InvalidArgumentError):
            upload_positions(size)

    def test_first_jitter_zero(self, seeded_source):
        """Test that the uploaded jitter leaves star 0 unperturbed."""
        from src.starfield.shell.kernels import get_star_jitter_numpy, upload_positions

        upload_positions(12, source=seeded_source)
        jitter = get_star_jitter_numpy()
        assert jitter[0] == 0.0
        assert np.all(jitter >= 0.0)
        assert np.all(jitter < 10.0)


class TestHostAgreement:
    """Tests that the kernel matches the host generator."""

    @pytest.mark.parametrize("size", [1, 2, 7, 64])
    def test_matches_generate_positions(self, size):
        """Test device and host layouts for the same seed."""
        from src.starfield.core.point import positions_to_numpy
        from src.starfield.core.random_source import NumpyRandomSource
        from src.starfield.shell.kernels import get_positions_numpy, upload_positions
        from src.starfield.shell.positions import generate_positions

        host = positions_to_numpy(generate_positions(size, source=NumpyRandomSource(seed=21)))
        upload_positions(size, source=NumpyRandomSource(seed=21))
        device = get_positions_numpy()

        assert device.shape == host.shape
        assert np.allclose(device, host, atol=1e-3)

    def test_matches_custom_layout(self):
        """Test agreement with a non-default layout."""
        from src.starfield.core.point import positions_to_numpy
        from src.starfield.core.random_source import FixedRandomSource
        from src.starfield.shell.kernels import get_positions_numpy, upload_positions
        from src.starfield.shell.layout import ShellLayout
        from src.starfield.shell.positions import generate_positions

        layout = ShellLayout(radius=10.0, odd_polar_deg=100.0, even_polar_deg=20.0)
        host = positions_to_numpy(
            generate_positions(9, source=FixedRandomSource(0.4), layout=layout)
        )
        upload_positions(9, source=FixedRandomSource(0.4), layout=layout)
        assert np.allclose(get_positions_numpy(), host, atol=1e-3)

    def test_device_points_on_shell(self, seeded_source):
        """Test that every device star lies at radius 40."""
        from src.starfield.shell.kernels import get_positions_numpy, upload_positions

        upload_positions(200, source=seeded_source)
        norms = np.linalg.norm(get_positions_numpy(), axis=1)
        assert np.allclose(norms, 40.0, atol=1e-3)


class TestGetPosition:
    """Tests for reading stars from inside kernels."""

    def test_get_position_in_kernel(self):
        """Test that get_position returns the uploaded star."""
        from src.starfield.core.random_source import FixedRandomSource
        from src.starfield.shell.kernels import get_position, get_positions_numpy, upload_positions

        upload_positions(5, source=FixedRandomSource(0.2))
        expected = get_positions_numpy()[3]

        result = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = get_position(3)

        test_kernel()

        got = result[None]
        assert abs(got[0] - expected[0]) < 1e-6
        assert abs(got[1] - expected[1]) < 1e-6
        assert abs(got[2] - expected[2]) < 1e-6
