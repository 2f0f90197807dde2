#!/usr/bin/env python3

"""
Generate a random gradient image.

This script fills an image with colors driven by 2D gradient noise and
saves it to the specified output file. One of hue, saturation or
brightness is randomized, the two others are fixed.
"""

import argparse
import logging
import math
import sys

import numpy as np
from PIL import Image

from random_gradient.color import OutOfRangeValue
from random_gradient.image import I32_MAX, I32_MIN, NoiseOptions, Size, generate_image
from random_gradient.pixel_init import PixelInit

# Color parameter defaults
RANDOM_STR = 'RANDOM'
DEFAULT_HUE = None
DEFAULT_SATURATION = 1.0
DEFAULT_BRIGHTNESS = 1.0


def color_parameter(text):
    """
    Parse a color component argument.

    Returns None for RANDOM (or an empty string), the float value otherwise.
    """
    if text in ('', RANDOM_STR):
        return None
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f'expected a number or {RANDOM_STR}, got {text!r}'
        ) from None


def size_parameter(text):
    try:
        return Size.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def format_color_parameter(value):
    return RANDOM_STR if value is None else str(value)


def default_frequency(size):
    """One noise cycle across the larger image dimension."""
    magnitude = max(size.width, size.height)
    if magnitude == 0:
        return math.inf
    return 1.0 / magnitude


def random_seed():
    rng = np.random.default_rng()
    return int(rng.integers(low=I32_MIN, high=I32_MAX, endpoint=True))


def build_parser():
    parser = argparse.ArgumentParser(
        description='Generate random gradient images using Perlin-style noise'
    )
    parser.add_argument(
        'output',
        metavar='PATH',
        help='Path to the output image (format is taken from the extension)'
    )
    parser.add_argument(
        '-s', '--size',
        type=size_parameter,
        required=True,
        help='Size of the image in pixels (format: WxH, e.g. 512x256)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print debug logging'
    )

    color = parser.add_argument_group('Pixel color options')
    color.add_argument(
        '--hue',
        type=color_parameter,
        default=DEFAULT_HUE,
        metavar='FLOAT',
        help=f'Hue component of the colors (range: 0 <= hue < 360, default: {RANDOM_STR})'
    )
    color.add_argument(
        '--saturation',
        type=color_parameter,
        default=DEFAULT_SATURATION,
        metavar='FLOAT',
        help=f'Saturation component of the colors (range: 0 <= saturation <= 1, default: {DEFAULT_SATURATION})'
    )
    color.add_argument(
        '--brightness',
        type=color_parameter,
        default=DEFAULT_BRIGHTNESS,
        metavar='FLOAT',
        help=f'Brightness component of the colors (range: 0 <= brightness <= 1, default: {DEFAULT_BRIGHTNESS})'
    )

    noise = parser.add_argument_group('Noise options')
    noise.add_argument(
        '--seed',
        type=int,
        metavar='INT',
        help='Value that changes the output of the noise (random if not specified)'
    )
    noise.add_argument(
        '--frequency',
        type=float,
        metavar='FLOAT',
        help='Number of cycles per unit length that the noise outputs '
             '(default: 1 / larger image dimension)'
    )
    return parser


def save_image(pixels, path):
    """Save an (height, width, 3) uint8 pixel buffer with Pillow."""
    image = Image.fromarray(pixels)
    image.save(path)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    randomized = [args.hue, args.saturation, args.brightness].count(None)
    if randomized != 1:
        parser.error(
            f'exactly one of --hue, --saturation, --brightness must be {RANDOM_STR} '
            f'(got {randomized})'
        )
    pixel_init = PixelInit.from_components(args.hue, args.saturation, args.brightness)

    seed = args.seed if args.seed is not None else random_seed()
    frequency = args.frequency if args.frequency is not None else default_frequency(args.size)
    try:
        noise_options = NoiseOptions(seed=seed, frequency=frequency)
    except ValueError as e:
        parser.error(str(e))

    print(f"Generating '{args.output}' with the following parameters:")
    for key, value in (
        ('size', args.size),
        ('hue', format_color_parameter(args.hue)),
        ('saturation', format_color_parameter(args.saturation)),
        ('brightness', format_color_parameter(args.brightness)),
        ('seed', noise_options.seed),
        ('frequency', noise_options.frequency),
    ):
        print(f"\t--{key}={value}")

    try:
        pixels = generate_image(args.size, pixel_init, noise_options)
    except OutOfRangeValue as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if pixels.size == 0:
        print(f"Image is empty ({args.size}), nothing written to: {args.output}")
        return 0

    save_image(pixels, args.output)
    print(f"Image saved to: {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
