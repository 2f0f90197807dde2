"""
Random gradient images from 2D gradient noise mapped through HSV.
"""

from random_gradient.color import Component, OutOfRangeValue, hsv_to_rgb, hsv_to_rgb_array
from random_gradient.image import NoiseOptions, Size, generate_image
from random_gradient.noise_field import generate_noise_field
from random_gradient.pixel_init import BrightnessInit, HueInit, PixelInit, SaturationInit

__version__ = '0.1.0'
