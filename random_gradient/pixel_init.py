"""
Which HSV component the noise drives, and the fixed values of the other two.
"""

from dataclasses import dataclass

HUE_RANGE = (0.0, 359.99)
UNIT_RANGE = (0.0, 1.0)


class PixelInit:
    """
    Initial components of the pixel colors.

    Each subclass names the component that will be randomized and stores
    the two others. Build one directly or with from_components().
    """

    def valid_range(self):
        """Return the (min, max) range the randomized component is scaled into."""
        raise NotImplementedError

    def components(self, noise):
        """Return (hue, saturation, brightness) with noise as the free component."""
        raise NotImplementedError

    @staticmethod
    def from_components(hue=None, saturation=None, brightness=None):
        """
        Build a PixelInit from three color values where None means "random".

        Exactly one value must be None. Any other combination is a bug in
        the caller, not a bad color value, so it raises ValueError rather
        than OutOfRangeValue.
        """
        if hue is None and saturation is not None and brightness is not None:
            return HueInit(saturation=saturation, brightness=brightness)
        if hue is not None and saturation is None and brightness is not None:
            return SaturationInit(hue=hue, brightness=brightness)
        if hue is not None and saturation is not None and brightness is None:
            return BrightnessInit(hue=hue, saturation=saturation)
        raise ValueError(
            f'(hue={hue!r}, saturation={saturation!r}, brightness={brightness!r}) '
            'must have exactly one component set to None (random)'
        )


@dataclass(frozen=True)
class HueInit(PixelInit):
    """Randomize hue."""
    saturation: float
    brightness: float

    def valid_range(self):
        return HUE_RANGE

    def components(self, noise):
        return noise, self.saturation, self.brightness


@dataclass(frozen=True)
class SaturationInit(PixelInit):
    """Randomize saturation."""
    hue: float
    brightness: float

    def valid_range(self):
        return UNIT_RANGE

    def components(self, noise):
        return self.hue, noise, self.brightness


@dataclass(frozen=True)
class BrightnessInit(PixelInit):
    """Randomize brightness."""
    hue: float
    saturation: float

    def valid_range(self):
        return UNIT_RANGE

    def components(self, noise):
        return self.hue, self.saturation, noise
