"""Synthetic property-map builders shared by the tests."""
import numpy as np

WHITE = (1.0, 1.0, 1.0)
GREEN = (0.0, 1.0, 0.0)
RED = (1.0, 0.0, 0.0)
GREY = (0.88, 0.88, 0.88)


def blank(height=20, width=20) -> np.ndarray:
    return np.ones((height, width, 3), dtype=float)


def draw_ring(pixels, lo, hi, color=RED):
    """Square outline with corners (lo, lo) and (hi, hi), storage coords."""
    pixels[lo, lo:hi + 1] = color
    pixels[hi, lo:hi + 1] = color
    pixels[lo:hi + 1, lo] = color
    pixels[lo:hi + 1, hi] = color
    return pixels


def draw_block(pixels, lo, hi, color=GREY):
    pixels[lo:hi + 1, lo:hi + 1] = color
    return pixels


def make_map(size=20, marker=(1, 1), ring=(5, 15), block=(8, 12)) -> np.ndarray:
    pixels = blank(size, size)
    if marker is not None:
        col, row = marker
        pixels[row, col] = GREEN
    if ring is not None:
        draw_ring(pixels, *ring)
    if block is not None:
        draw_block(pixels, *block)
    return pixels
