"""
Tests for random_gradient/pixel_init.py
"""

import dataclasses

import pytest

from random_gradient.color import OutOfRangeValue
from random_gradient.pixel_init import BrightnessInit, HueInit, PixelInit, SaturationInit


class TestFromComponents:

    def test_random_hue(self):
        assert PixelInit.from_components(None, 1.0, 0.5) == HueInit(saturation=1.0, brightness=0.5)

    def test_random_saturation(self):
        assert PixelInit.from_components(90.0, None, 0.5) == SaturationInit(hue=90.0, brightness=0.5)

    def test_random_brightness(self):
        assert PixelInit.from_components(90.0, 0.25, None) == BrightnessInit(hue=90.0, saturation=0.25)

    def test_zero_is_a_value(self):
        assert PixelInit.from_components(None, 0.0, 0.0) == HueInit(saturation=0.0, brightness=0.0)

    def test_values_are_not_range_checked(self):
        # Bad color values surface later as OutOfRangeValue during conversion
        assert PixelInit.from_components(None, 2.0, 0.5) == HueInit(saturation=2.0, brightness=0.5)

    @pytest.mark.parametrize('components', [
        (1.0, 0.5, 0.5),
        (None, None, 0.5),
        (None, 0.5, None),
        (1.0, None, None),
        (None, None, None),
    ])
    def test_not_exactly_one_random(self, components):
        with pytest.raises(ValueError) as excinfo:
            PixelInit.from_components(*components)
        assert not isinstance(excinfo.value, OutOfRangeValue)
        assert 'exactly one' in str(excinfo.value)
        assert repr(components[0]) in str(excinfo.value)


class TestValidRange:

    def test_hue(self):
        assert HueInit(saturation=1.0, brightness=1.0).valid_range() == (0.0, 359.99)

    def test_saturation(self):
        assert SaturationInit(hue=0.0, brightness=1.0).valid_range() == (0.0, 1.0)

    def test_brightness(self):
        assert BrightnessInit(hue=0.0, saturation=1.0).valid_range() == (0.0, 1.0)

    def test_hue_range_excludes_360(self):
        low, high = HueInit(saturation=1.0, brightness=1.0).valid_range()
        assert low == 0.0
        assert high < 360.0


class TestComponents:

    def test_noise_replaces_free_component(self):
        assert HueInit(saturation=0.2, brightness=0.3).components(42.0) == (42.0, 0.2, 0.3)
        assert SaturationInit(hue=10.0, brightness=0.3).components(0.7) == (10.0, 0.7, 0.3)
        assert BrightnessInit(hue=10.0, saturation=0.2).components(0.7) == (10.0, 0.2, 0.7)

    def test_immutable(self):
        pixel_init = HueInit(saturation=0.2, brightness=0.3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pixel_init.saturation = 0.5
