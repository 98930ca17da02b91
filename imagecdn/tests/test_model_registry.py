"""
Tests for imagecdn/registry.py
"""

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, TestCase, override_settings

from imagecdn.models import ImageAsset, ImageRendition
from imagecdn.registry import (
    ImageSource,
    MediaRegistry,
    ModelRegistry,
    get_registry,
    matches_ratio,
)
from imagecdn.service.srcset import SrcsetCandidate

ORIGIN = 'https://site.test/wp-content/uploads'


class ModelRegistryTest(TestCase):
    """Tests for the model-backed registry"""

    def setUp(self):
        self.asset = ImageAsset.objects.create(
            url=f'{ORIGIN}/a.jpg', width=1600, height=800, title='Sunset'
        )
        for name, width, height, cropped in [
            ('thumbnail', 150, 150, True),
            ('medium', 300, 150, False),
            ('large', 1024, 512, False),
        ]:
            ImageRendition.objects.create(
                asset=self.asset,
                name=name,
                url=f'{ORIGIN}/a-{width}x{height}.jpg',
                width=width,
                height=height,
                cropped=cropped,
            )
        self.registry = ModelRegistry()

    def test_full_size(self):
        src = self.registry.get_image_src(self.asset.pk, 'full')
        self.assertEqual(src, ImageSource(f'{ORIGIN}/a.jpg', 1600, 800, False))

    def test_named_size(self):
        src = self.registry.get_image_src(self.asset.pk, 'thumbnail')
        self.assertEqual(src, ImageSource(f'{ORIGIN}/a-150x150.jpg', 150, 150, True))

    def test_unknown_size_falls_back_to_full(self):
        src = self.registry.get_image_src(self.asset.pk, 'poster')
        self.assertEqual(src.url, f'{ORIGIN}/a.jpg')

    def test_unknown_asset(self):
        self.assertIsNone(self.registry.get_image_src(self.asset.pk + 100, 'full'))
        self.assertEqual(self.registry.get_srcset(self.asset.pk + 100, 'full', 1600, 800), [])

    def test_invalid_id(self):
        """Test that an id that is not a primary key resolves to nothing"""
        self.assertIsNone(self.registry.get_image_src('not-a-number', 'full'))

    def test_srcset_matches_ratio(self):
        """Test that only same-ratio images become candidates, sorted by width"""
        candidates = self.registry.get_srcset(self.asset.pk, 'large', 1024, 512)
        self.assertEqual(
            candidates,
            [
                SrcsetCandidate(f'{ORIGIN}/a-300x150.jpg', '300w'),
                SrcsetCandidate(f'{ORIGIN}/a-1024x512.jpg', '1024w'),
                SrcsetCandidate(f'{ORIGIN}/a.jpg', '1600w'),
            ],
        )

    def test_srcset_needs_two_candidates(self):
        candidates = self.registry.get_srcset(self.asset.pk, 'thumbnail', 150, 150)
        self.assertEqual(candidates, [])

    def test_srcset_skips_wide_images(self):
        self.asset.width, self.asset.height = 4000, 2000
        self.asset.save()
        candidates = self.registry.get_srcset(self.asset.pk, 'large', 1024, 512)
        self.assertNotIn('4000w', [c.descriptor for c in candidates])

    def test_render_image(self):
        html = self.registry.render_image({'src': 'a.jpg', 'alt': 'A & B', 'title': None, 'hidden': True})
        self.assertEqual(html, '<img alt="A &amp; B" src="a.jpg" hidden>')


class MatchesRatioTest(SimpleTestCase):
    def test_same_ratio(self):
        self.assertTrue(matches_ratio(1600, 800, 300, 150))
        self.assertTrue(matches_ratio(300, 150, 1600, 800))

    def test_rounding_tolerance(self):
        self.assertTrue(matches_ratio(1000, 667, 300, 200))

    def test_different_ratio(self):
        self.assertFalse(matches_ratio(1600, 800, 150, 150))

    def test_zero_dimensions(self):
        self.assertFalse(matches_ratio(0, 0, 300, 150))


class GetRegistryTest(SimpleTestCase):
    def test_default(self):
        self.assertIsInstance(get_registry(), ModelRegistry)

    @override_settings(IMAGECDN_REGISTRY='imagecdn.registry.MediaRegistry')
    def test_custom_path(self):
        self.assertIs(type(get_registry()), MediaRegistry)

    @override_settings(IMAGECDN_REGISTRY='imagecdn.registry.DoesNotExist')
    def test_missing_class(self):
        with self.assertRaises(ImproperlyConfigured):
            get_registry()

    @override_settings(IMAGECDN_REGISTRY='imagecdn.service.config.CdnConfig')
    def test_wrong_type(self):
        with self.assertRaises(ImproperlyConfigured):
            get_registry()

    def test_base_registry_requires_lookup(self):
        with self.assertRaises(NotImplementedError):
            MediaRegistry().get_image_src(1)
        self.assertEqual(MediaRegistry().get_srcset(1, 'full', 10, 10), [])
