"""
Tests for service/responsive.py
"""

from django.test import SimpleTestCase

from imagecdn.service.responsive import (
    ResponsiveAttributes,
    compute_responsive_attributes,
    parse_dimension,
    scale,
)


class ResponsiveAttributesTest(SimpleTestCase):
    """Tests for width/height/srcset computation"""

    def test_landscape_width(self):
        """Test a landscape image resized by width"""
        result = compute_responsive_attributes(1000, 500, {'w': '300'})
        self.assertEqual(result.width, 300)
        self.assertEqual(result.height, 150)
        self.assertFalse(result.allow_srcset)
        self.assertFalse(result.is_crop)

    def test_landscape_height(self):
        """Test a landscape image resized by height derives the width"""
        result = compute_responsive_attributes(1000, 500, {'h': '400'})
        self.assertEqual((result.width, result.height), (800, 400))
        self.assertTrue(result.allow_srcset)

    def test_portrait_height(self):
        """Test a portrait image resized by height"""
        result = compute_responsive_attributes(600, 1200, {'h': '800'})
        self.assertEqual((result.width, result.height), (400, 800))

    def test_portrait_width(self):
        """Test a portrait image resized by width derives the height"""
        result = compute_responsive_attributes(600, 1200, {'w': '450'})
        self.assertEqual((result.width, result.height), (450, 900))

    def test_square_both(self):
        """Test that a square image takes both dimensions as given"""
        result = compute_responsive_attributes(500, 500, {'w': '200', 'h': '100'})
        self.assertEqual((result.width, result.height), (200, 100))

    def test_square_width_only(self):
        """Test a square image with only a width"""
        result = compute_responsive_attributes(500, 500, {'w': '250'})
        self.assertEqual((result.width, result.height), (250, 250))

    def test_landscape_both_follows_width(self):
        """Test that a landscape image keeps its ratio from the width"""
        result = compute_responsive_attributes(1000, 500, {'w': '600', 'h': '600'})
        self.assertEqual((result.width, result.height), (600, 300))

    def test_crop_keeps_requested_dimensions(self):
        """Test that cropping skips the orientation rules"""
        result = compute_responsive_attributes(1000, 500, {'w': '600', 'h': '600', 'fit': 'crop'})
        self.assertTrue(result.is_crop)
        self.assertEqual((result.width, result.height), (600, 600))

    def test_crop_derives_missing_dimension(self):
        result = compute_responsive_attributes(1000, 500, {'w': '600', 'fit': 'crop'})
        self.assertEqual((result.width, result.height), (600, 300))

    def test_no_dimensions(self):
        """Test that intrinsic dimensions are kept without h/w"""
        result = compute_responsive_attributes(1000, 500, {'auto': 'format'})
        self.assertEqual(result, ResponsiveAttributes(width=1000, height=500))

    def test_empty_params(self):
        result = compute_responsive_attributes(1000, 500, None)
        self.assertEqual((result.width, result.height), (1000, 500))
        self.assertTrue(result.allow_srcset)


class ScaleUpTest(SimpleTestCase):
    """Tests for fit modes that must not scale up"""

    def test_max_clamps_to_intrinsic(self):
        result = compute_responsive_attributes(1000, 500, {'w': '2000', 'fit': 'max'})
        self.assertEqual((result.width, result.height), (1000, 500))

    def test_fillmax_and_min_clamp(self):
        for fit in ['fillmax', 'min']:
            result = compute_responsive_attributes(600, 1200, {'h': '2400', 'fit': fit})
            self.assertEqual((result.width, result.height), (600, 1200), fit)

    def test_clip_scales_up(self):
        """Test that other fit modes allow upscaling"""
        result = compute_responsive_attributes(1000, 500, {'w': '2000', 'fit': 'clip'})
        self.assertEqual((result.width, result.height), (2000, 1000))

    def test_smaller_request_not_clamped(self):
        result = compute_responsive_attributes(1000, 500, {'w': '800', 'fit': 'max'})
        self.assertEqual((result.width, result.height), (800, 400))


class SrcsetThresholdTest(SimpleTestCase):
    """The srcset threshold compares strings, not numbers"""

    def test_below_threshold(self):
        self.assertFalse(compute_responsive_attributes(1000, 500, {'w': '399'}).allow_srcset)
        self.assertFalse(compute_responsive_attributes(1000, 500, {'h': '100'}).allow_srcset)

    def test_at_threshold(self):
        self.assertTrue(compute_responsive_attributes(1000, 500, {'w': '400'}).allow_srcset)

    def test_string_comparison(self):
        """Test that '1000' sorts before '400' while '50' sorts after it"""
        self.assertFalse(compute_responsive_attributes(2000, 1000, {'w': '1000'}).allow_srcset)
        self.assertTrue(compute_responsive_attributes(2000, 1000, {'w': '800'}).allow_srcset)
        self.assertTrue(compute_responsive_attributes(1000, 500, {'w': '50'}).allow_srcset)

    def test_integer_values_compared_as_strings(self):
        self.assertFalse(compute_responsive_attributes(1000, 500, {'w': 300}).allow_srcset)
        self.assertTrue(compute_responsive_attributes(1000, 500, {'w': 500}).allow_srcset)

    def test_other_keys_ignored(self):
        self.assertTrue(compute_responsive_attributes(1000, 500, {'q': '10', 'dpr': '2'}).allow_srcset)


class HelpersTest(SimpleTestCase):
    def test_parse_dimension(self):
        self.assertEqual(parse_dimension('300'), 300)
        self.assertEqual(parse_dimension('300px'), 300)
        self.assertEqual(parse_dimension(' 42'), 42)
        self.assertEqual(parse_dimension('auto'), 0)
        self.assertEqual(parse_dimension(None), 0)
        self.assertEqual(parse_dimension(''), 0)
        self.assertEqual(parse_dimension(120), 120)

    def test_scale_floors(self):
        self.assertEqual(scale(100, 3, 1), 33)

    def test_zero_intrinsic_dimensions(self):
        """Test that missing dimensions produce zeros instead of failing"""
        self.assertEqual(scale(300, 0, 500), 0)
        result = compute_responsive_attributes(0, 0, {'w': '300'})
        self.assertEqual((result.width, result.height), (300, 0))
