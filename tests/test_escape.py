"""Tests for the escape-time evaluator."""

import numpy as np
import pytest


class TestIterateMandelbrot:
    """Orbits of zero under z*z + c."""

    def test_origin_never_escapes(self):
        from fractals import Complex, FractalKind, MAX_ITERATIONS, iterate

        assert MAX_ITERATIONS == 255
        assert iterate(Complex(0.0, 0.0), FractalKind.MANDELBROT) == 255

    def test_far_point_escapes_after_one_step(self):
        from fractals import Complex, FractalKind, iterate

        assert iterate(Complex(5.0, 5.0), FractalKind.MANDELBROT) == 1

    def test_escape_test_is_strict(self):
        from fractals import Complex, FractalKind, iterate

        # the orbit of -2 settles on 2, where |z|^2 == 4 exactly
        assert iterate(Complex(-2.0, 0.0), FractalKind.MANDELBROT) == 255

    def test_known_counts(self):
        from fractals import Complex, FractalKind, iterate

        assert iterate(Complex(-1.6, -1.1), FractalKind.MANDELBROT) == 2
        assert iterate(Complex(-1.6, -0.55), FractalKind.MANDELBROT) == 3

    def test_deterministic(self):
        from fractals import Complex, FractalKind, iterate

        c = Complex(-0.7453, 0.1127)
        assert iterate(c, FractalKind.MANDELBROT) == iterate(c, FractalKind.MANDELBROT)


class TestIterateJulia:
    """Orbits of the pixel coordinate under z*z + (-0.4, 0.6)."""

    def test_point_outside_radius_returns_zero(self):
        from fractals import Complex, FractalKind, iterate

        assert iterate(Complex(5.0, 5.0), FractalKind.JULIA) == 0
        assert iterate(Complex(2.001, 0.0), FractalKind.JULIA) == 0

    def test_point_on_radius_takes_one_step(self):
        from fractals import Complex, FractalKind, iterate

        assert iterate(Complex(2.0, 0.0), FractalKind.JULIA) == 1

    def test_fixed_point_reaches_cap(self):
        import cmath
        from fractals import FractalKind, RenderWindow, escape_counts, iterate
        from fractals.escape import JULIA_SEED

        # z = (1 - sqrt(1 - 4c)) / 2 solves z*z + c == z; its multiplier is
        # close to 1, so rounding cannot push the orbit out in 255 steps
        seed = complex(float(JULIA_SEED.real), float(JULIA_SEED.imag))
        fixed = (1 - cmath.sqrt(1 - 4 * seed)) / 2
        window = RenderWindow(
            window_width=1,
            window_height=1,
            x_offset=0,
            y_offset=0,
            scale_x=np.float32(1.0),
            scale_y=np.float32(1.0),
            x_shift=np.float32(-fixed.real),
            y_shift=np.float32(-fixed.imag),
        )
        start = window.to_complex(0, 0)
        assert start.real == pytest.approx(fixed.real)
        assert start.imag == pytest.approx(fixed.imag)

        assert iterate(start, FractalKind.JULIA) == 255
        assert escape_counts(window, FractalKind.JULIA)[0, 0] == 255

    def test_window_contains_non_escaping_pixels(self):
        from fractals import FractalKind, compute_window, escape_counts

        counts = escape_counts(compute_window(150, 100, FractalKind.JULIA), FractalKind.JULIA)
        assert counts.max() == 255

    def test_result_in_range(self):
        from fractals import Complex, FractalKind, iterate

        for real in np.linspace(-1.5, 1.5, 7):
            for imag in np.linspace(-1.0, 1.0, 5):
                count = iterate(Complex(real, imag), FractalKind.JULIA)
                assert 0 <= count <= 255

    def test_deterministic(self):
        from fractals import Complex, FractalKind, iterate

        z = Complex(0.1, -0.2)
        assert iterate(z, FractalKind.JULIA) == iterate(z, FractalKind.JULIA)


class TestEscapeCounts:
    """The vectorized evaluator agrees with the per-point one."""

    @pytest.mark.parametrize("kind_name", ["JULIA", "MANDELBROT"])
    def test_shape_and_dtype(self, kind_name):
        from fractals import FractalKind, compute_window, escape_counts

        window = compute_window(45, 20, FractalKind[kind_name])
        counts = escape_counts(window, FractalKind[kind_name])
        assert counts.shape == (window.window_height, window.window_width)
        assert counts.dtype == np.uint8

    @pytest.mark.parametrize("kind_name", ["JULIA", "MANDELBROT"])
    def test_matches_iterate(self, kind_name):
        from fractals import FractalKind, compute_window, escape_counts, iterate

        kind = FractalKind[kind_name]
        window = compute_window(12, 8, kind)
        counts = escape_counts(window, kind)

        expected = np.array(
            [
                [iterate(window.to_complex(px, py), kind) for px in range(window.window_width)]
                for py in range(window.window_height)
            ],
            dtype=np.uint8,
        )
        np.testing.assert_array_equal(counts, expected)

    def test_single_pixel_window(self):
        from fractals import FractalKind, compute_window, escape_counts, iterate

        window = compute_window(1, 1, FractalKind.MANDELBROT)
        counts = escape_counts(window, FractalKind.MANDELBROT)
        assert counts.shape == (1, 1)
        assert counts[0, 0] == iterate(window.to_complex(0, 0), FractalKind.MANDELBROT)
