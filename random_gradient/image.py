"""
Image synthesis: noise field -> HSV -> RGB pixel buffer.
"""

import logging
import re
from dataclasses import dataclass

import numpy as np

from random_gradient.color import hsv_to_rgb_array
from random_gradient.noise_field import generate_noise_field

logger = logging.getLogger(__name__)

U32_MAX = 2**32 - 1
I32_MIN = -2**31
I32_MAX = 2**31 - 1
CHANNELS = 3

_DIMENSION = re.compile(r'\+?[0-9]+')


@dataclass(frozen=True)
class Size:
    """Size of the image in pixels."""
    width: int
    height: int

    def __post_init__(self):
        for name in ('width', 'height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f'{name} must be an integer, got {value!r}')
            if not 0 <= value <= U32_MAX:
                raise ValueError(f'{name} must be between 0 and {U32_MAX}, got {value}')

    @classmethod
    def parse(cls, text):
        """
        Parse a size written as WxH, e.g. "512x256".

        Parts after the second 'x' are ignored.
        """
        parts = text.split('x')
        if len(parts) < 2:
            raise ValueError(f'invalid size {text!r}, expected WxH')
        if not all(_DIMENSION.fullmatch(part) for part in parts[:2]):
            raise ValueError(f'invalid size {text!r}, expected WxH')
        return cls(int(parts[0]), int(parts[1]))

    def __str__(self):
        return f'{self.width}x{self.height}'


@dataclass(frozen=True)
class NoiseOptions:
    """Parameters to construct the noise with."""
    # Value that changes the output of the noise
    seed: int
    # Number of cycles per unit length that the noise outputs
    frequency: float

    def __post_init__(self):
        if not I32_MIN <= self.seed <= I32_MAX:
            raise ValueError(f'seed must fit in a signed 32-bit integer, got {self.seed}')


def generate_image(size, pixel_init, noise_options):
    """
    Generate an RGB image from gradient noise.

    The noise drives the component selected by pixel_init, the two other
    components come from pixel_init unchanged.

    Args:
        size: Size of the image
        pixel_init: PixelInit variant
        noise_options: NoiseOptions with seed and frequency

    Returns:
        uint8 array of shape (height, width, 3)

    Raises:
        OutOfRangeValue: if any pixel's hue, saturation or brightness is
            outside its range; no partial image is returned
    """
    if size.width == 0 or size.height == 0:
        return np.zeros((size.height, size.width, CHANNELS), dtype=np.uint8)

    minimum, maximum = pixel_init.valid_range()
    noise = generate_noise_field(
        size.width,
        size.height,
        noise_options.frequency,
        noise_options.seed,
        minimum,
        maximum,
    )

    pixels = hsv_to_rgb_array(*pixel_init.components(noise))
    logger.debug("Generated %s image with %r", size, pixel_init)
    return pixels
