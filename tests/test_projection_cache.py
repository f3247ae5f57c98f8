from unittest import TestCase

from tests import get_test_dir
from uriproj.cache.projection_cache import ProjectionCache
from uriproj.projections.projection_interface import FunctionProjection
from uriproj.projections.source import TextDefinition
from uriproj.utils.crs import CRS84_URI, EPSG4979_URI, EPSG_PREFIX
from uriproj.utils.exceptions import InvalidArgument, ParseError

BNG_URI = EPSG_PREFIX + "27700"


class TestProjectionCache(TestCase):
    """Test storing and retrieving projections"""

    def setUp(self):
        self.cache = ProjectionCache()
        self.bng_proj4 = (
            (get_test_dir() / "test_assets" / "epsg_27700.proj4").read_text().strip()
        )

    def test_crs84_is_identity(self):
        proj = self.cache.get(CRS84_URI)
        coords = (-71, 41)

        for result in [proj.forward(coords), proj.inverse(coords)]:
            self.assertAlmostEqual(result[0], -71, places=9)
            self.assertAlmostEqual(result[1], 41, places=9)

    def test_epsg4979_is_lat_lon(self):
        proj = self.cache.get(EPSG4979_URI)

        lat, lon = proj.forward((-71, 41))
        self.assertAlmostEqual(lat, 41, places=9)
        self.assertAlmostEqual(lon, -71, places=9)

        lon, lat = proj.inverse((41, -71))
        self.assertAlmostEqual(lon, -71, places=9)
        self.assertAlmostEqual(lat, 41, places=9)

    def test_unseeded_cache_is_empty(self):
        cache = ProjectionCache(seed=False)

        self.assertEqual(len(cache), 0)
        self.assertIsNone(cache.get(CRS84_URI))

    def test_get_missing_returns_none(self):
        self.assertIsNone(self.cache.get(BNG_URI))

    def test_set_proj4_string_then_get(self):
        stored = self.cache.set(BNG_URI, self.bng_proj4)

        proj = self.cache.get(BNG_URI)
        self.assertIs(proj, stored)

        lon, lat = proj.inverse(proj.forward((-1.54, 55.5)))
        self.assertAlmostEqual(lon, -1.54, delta=1e-3)
        self.assertAlmostEqual(lat, 55.5, delta=1e-3)

    def test_set_text_definition(self):
        proj = self.cache.set(BNG_URI, TextDefinition(self.bng_proj4))

        easting, _ = proj.forward((-1.54, 55.5))
        self.assertAlmostEqual(easting, 429158, delta=10)

    def test_set_reverse_axes(self):
        plain = self.cache.set(BNG_URI, self.bng_proj4)
        reversed_ = self.cache.set("urn:test:reversed", self.bng_proj4, reverse_axes=True)

        x, y = plain.forward((-1.54, 55.5))
        self.assertEqual(reversed_.forward((-1.54, 55.5)), (y, x))

    def test_set_ready_projection(self):
        proj = FunctionProjection(lambda p: (p[0], p[1]), lambda p: (p[0], p[1]))

        self.assertIs(self.cache.set("urn:test:identity", proj), proj)
        self.assertIs(self.cache.get("urn:test:identity"), proj)

    def test_set_overwrites(self):
        first = FunctionProjection(lambda p: p, lambda p: p)
        second = FunctionProjection(lambda p: p, lambda p: p)

        self.cache.set(BNG_URI, first)
        self.cache.set(BNG_URI, second)

        self.assertIs(self.cache.get(BNG_URI), second)

    def test_set_empty_arguments(self):
        proj = self.cache.get(CRS84_URI)

        with self.assertRaises(InvalidArgument):
            self.cache.set("", proj)
        with self.assertRaises(InvalidArgument):
            self.cache.set(None, proj)
        with self.assertRaises(InvalidArgument):
            self.cache.set(BNG_URI, None)
        with self.assertRaises(InvalidArgument):
            self.cache.set(BNG_URI, "")
        with self.assertRaises(InvalidArgument):
            self.cache.set(BNG_URI, TextDefinition(""))

        self.assertNotIn(BNG_URI, self.cache)

    def test_set_unparsable_string(self):
        with self.assertRaises(ParseError) as ctx:
            self.cache.set(BNG_URI, "+proj=doesnotexist")

        self.assertEqual(ctx.exception.definition, "+proj=doesnotexist")
        self.assertNotIn(BNG_URI, self.cache)

    def test_inspection(self):
        self.assertIn(CRS84_URI, self.cache)
        self.assertIn(EPSG4979_URI, self.cache)
        self.assertEqual(sorted(self.cache.uris()), sorted([CRS84_URI, EPSG4979_URI]))

        self.cache.set(BNG_URI, self.bng_proj4)

        self.assertEqual(len(self.cache), 3)

    def test_caches_are_independent(self):
        other = ProjectionCache()

        self.cache.set(BNG_URI, self.bng_proj4)

        self.assertIsNone(other.get(BNG_URI))
