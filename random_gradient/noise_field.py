"""
2D gradient noise sampled over a pixel grid.

Wraps OpenSimplex noise and linearly rescales the sampled field into the
range of the color component it will drive.
"""

import logging
import math

import numpy as np
from opensimplex import OpenSimplex

logger = logging.getLogger(__name__)


def generate_noise_field(width, height, frequency, seed, minimum, maximum):
    """
    Generate a dense 2D noise field scaled into [minimum, maximum].

    Args:
        width: Number of samples per row
        height: Number of rows
        frequency: Number of noise cycles per pixel
        seed: Integer seed, the same seed always gives the same field
        minimum: Lowest value of the scaled field
        maximum: Highest value of the scaled field

    Returns:
        float32 array of shape (height, width); sample (x, y) sits at
        flat index width * y + x
    """
    if width == 0 or height == 0:
        return np.empty((height, width), dtype=np.float32)

    if not math.isfinite(frequency):
        # No noise can be sampled; NaN fails the color range checks downstream
        logger.debug("Non-finite frequency %r, returning a NaN field", frequency)
        return np.full((height, width), np.nan, dtype=np.float32)

    xs = np.arange(width, dtype=np.float64) * frequency
    ys = np.arange(height, dtype=np.float64) * frequency
    raw = OpenSimplex(seed=seed).noise2array(xs, ys)

    low = float(raw.min())
    high = float(raw.max())
    logger.debug(
        "Sampled %dx%d noise (seed=%d, frequency=%g), raw range [%g, %g]",
        width, height, seed, frequency, low, high,
    )

    if high > low:
        scaled = (raw - low) / (high - low) * (maximum - minimum) + minimum
        scaled = np.clip(scaled, minimum, maximum)
    else:
        # Flat field (one pixel, zero frequency): nothing to stretch
        scaled = np.full(raw.shape, minimum, dtype=np.float64)

    return scaled.astype(np.float32)
