"""Escape-time evaluation for the Julia and Mandelbrot recurrences."""

from __future__ import annotations

from typing import Optional

import numpy as np
import tensorflow as tf

from .complexmath import Complex
from .geometry import RenderWindow
from .kinds import FractalKind

MAX_ITERATIONS = 255
JULIA_SEED = Complex(-0.4, 0.6)
ESCAPE_RADIUS = np.float32(2.0)
ESCAPE_RADIUS_SQR = np.float32(4.0)


def _escaped(z: Complex, kind: FractalKind) -> bool:
    if kind is FractalKind.JULIA:
        return bool(z.magnitude() > ESCAPE_RADIUS)
    return bool(z.norm_sqr() > ESCAPE_RADIUS_SQR)


def iterate(c: Complex, kind: FractalKind) -> int:
    """Return the number of iterations before ``c`` escapes, capped at 255.

    For a Julia set ``c`` is the starting point of the orbit and the recurrence
    adds the fixed seed; for the Mandelbrot set the orbit starts at zero and
    ``c`` is added on each step.
    """

    if kind is FractalKind.JULIA:
        z, offset = c, JULIA_SEED
    else:
        z, offset = Complex(0.0, 0.0), c

    count = 0
    while count < MAX_ITERATIONS and not _escaped(z, kind):
        z = z * z + offset
        count += 1
    return count


def _escaped_tensor(zr: tf.Tensor, zi: tf.Tensor, julia: bool) -> tf.Tensor:
    norm_sqr = zr * zr + zi * zi
    if julia:
        return tf.sqrt(norm_sqr) > tf.constant(ESCAPE_RADIUS)
    return norm_sqr > tf.constant(ESCAPE_RADIUS_SQR)


@tf.function
def _escape_step(zr: tf.Tensor, zi: tf.Tensor, cr: tf.Tensor, ci: tf.Tensor, ns: tf.Tensor, active: tf.Tensor, julia: bool):
    """Advance every orbit that has not escaped by one step."""

    zr_new = (zr * zr - zi * zi) + cr
    zi_new = (zr * zi + zi * zr) + ci
    zr = tf.where(active, zr_new, zr)
    zi = tf.where(active, zi_new, zi)
    ns = ns + tf.cast(active, tf.int32)
    active = tf.logical_and(active, tf.logical_not(_escaped_tensor(zr, zi, julia)))
    return zr, zi, ns, active


@tf.function
def _escape_run(zr: tf.Tensor, zi: tf.Tensor, cr: tf.Tensor, ci: tf.Tensor, julia: bool) -> tf.Tensor:
    """Iterate all orbits in a TensorFlow while loop and return the counts."""

    max_iterations = tf.constant(MAX_ITERATIONS, dtype=tf.int32)
    i = tf.constant(0, dtype=tf.int32)
    ns = tf.zeros_like(zr, dtype=tf.int32)
    active = tf.logical_not(_escaped_tensor(zr, zi, julia))

    def cond(i, zr, zi, ns, active):
        return tf.logical_and(tf.less(i, max_iterations), tf.reduce_any(active))

    def body(i, zr, zi, ns, active):
        zr, zi, ns, active = _escape_step(zr, zi, cr, ci, ns, active, julia)
        return i + 1, zr, zi, ns, active

    _, _, _, ns, _ = tf.while_loop(cond, body, (i, zr, zi, ns, active))
    return ns


def escape_counts(window: RenderWindow, kind: FractalKind, *, device: Optional[str] = None) -> np.ndarray:
    """Escape counts for every pixel of ``window`` as a ``(height, width)`` uint8 array."""

    julia = kind is FractalKind.JULIA

    with tf.device(device if device is not None else "/CPU:0"):
        px = tf.range(window.window_width, dtype=tf.float32)
        py = tf.range(window.window_height, dtype=tf.float32)
        xs = px * tf.constant(window.scale_x) - tf.constant(window.x_shift)
        ys = py * tf.constant(window.scale_y) - tf.constant(window.y_shift)
        X, Y = tf.meshgrid(xs, ys)

        if julia:
            zr, zi = X, Y
            cr = tf.fill(tf.shape(X), tf.constant(JULIA_SEED.real))
            ci = tf.fill(tf.shape(X), tf.constant(JULIA_SEED.imag))
        else:
            zr, zi = tf.zeros_like(X), tf.zeros_like(Y)
            cr, ci = X, Y

        ns = _escape_run(zr, zi, cr, ci, julia)

    return ns.numpy().astype(np.uint8)
