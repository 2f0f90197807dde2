"""
HSV to RGB conversion.

Hue is an angle in degrees in [0, 360), saturation and brightness are
fractions in [0, 1]. Output channels are truncated (not rounded) to bytes.
"""

import enum
import math

import numpy as np

HUE_LIMIT = 360.0


class Component(enum.Enum):
    HUE = 'hue'
    SATURATION = 'saturation'
    BRIGHTNESS = 'brightness'

    @property
    def interval(self):
        """Human readable range the component must lie in."""
        if self is Component.HUE:
            return '0 <= hue < 360'
        return f'0 <= {self.value} <= 1'


class OutOfRangeValue(ValueError):
    """Raised when a hue, saturation or brightness value is not in its range."""

    def __init__(self, component, value=None):
        self.component = component
        self.value = value
        message = f'{component.value.capitalize()} is out of range: {component.interval}'
        if value is not None:
            message += f' (got {value})'
        super().__init__(message)


def _check_ranges(hue, saturation, brightness):
    if not 0.0 <= hue < HUE_LIMIT:
        raise OutOfRangeValue(Component.HUE, hue)
    if not 0.0 <= saturation <= 1.0:
        raise OutOfRangeValue(Component.SATURATION, saturation)
    if not 0.0 <= brightness <= 1.0:
        raise OutOfRangeValue(Component.BRIGHTNESS, brightness)


def hsv_to_rgb(hue, saturation, brightness):
    """
    Convert a single HSV color to an RGB byte triple.

    Args:
        hue: Hue in degrees, 0 <= hue < 360
        saturation: Saturation, 0 <= saturation <= 1
        brightness: Brightness (value), 0 <= brightness <= 1

    Returns:
        Tuple of three ints in [0, 255]

    Raises:
        OutOfRangeValue: for the first component (in hue, saturation,
            brightness order) that is outside its range
    """
    _check_ranges(hue, saturation, brightness)

    c = saturation * brightness
    x = c * (1.0 - abs(math.fmod(hue / 60.0, 2.0) - 1.0))
    m = brightness - c
    if hue < 60.0:
        r, g, b = c, x, 0.0
    elif hue < 120.0:
        r, g, b = x, c, 0.0
    elif hue < 180.0:
        r, g, b = 0.0, c, x
    elif hue < 240.0:
        r, g, b = 0.0, x, c
    elif hue < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    # int() drops the fractional part
    return int((r + m) * 255.0), int((g + m) * 255.0), int((b + m) * 255.0)


def hsv_to_rgb_array(hue, saturation, brightness):
    """
    Vectorized hsv_to_rgb over broadcastable arrays.

    Every element gives the same bytes as hsv_to_rgb would. If any element
    is out of range, the first failing element in row-major order is
    reported, with its first failing component.

    Returns:
        uint8 array with the broadcast shape plus a trailing axis of 3
    """
    hue, saturation, brightness = np.broadcast_arrays(
        np.asarray(hue, dtype=np.float64),
        np.asarray(saturation, dtype=np.float64),
        np.asarray(brightness, dtype=np.float64),
    )

    # Written as negated "inside" tests so NaN counts as out of range
    invalid = (
        ~((hue >= 0.0) & (hue < HUE_LIMIT)),
        ~((saturation >= 0.0) & (saturation <= 1.0)),
        ~((brightness >= 0.0) & (brightness <= 1.0)),
    )
    failing = invalid[0] | invalid[1] | invalid[2]
    if failing.any():
        index = np.flatnonzero(failing)[0]
        values = (hue, saturation, brightness)
        for component, mask, value in zip(Component, invalid, values):
            if mask.ravel()[index]:
                raise OutOfRangeValue(component, float(value.ravel()[index]))

    c = saturation * brightness
    x = c * (1.0 - np.abs(np.fmod(hue / 60.0, 2.0) - 1.0))
    m = brightness - c
    zero = np.zeros_like(c)

    sextants = [hue < 60.0, hue < 120.0, hue < 180.0, hue < 240.0, hue < 300.0]
    r = np.select(sextants, [c, x, zero, zero, x], default=c)
    g = np.select(sextants, [x, c, c, x, zero], default=zero)
    b = np.select(sextants, [zero, zero, x, c, c], default=x)

    rgb = np.stack([r + m, g + m, b + m], axis=-1) * 255.0
    return rgb.astype(np.uint8)
