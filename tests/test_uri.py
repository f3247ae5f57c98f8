from unittest import TestCase

from uriproj.utils.crs import CRS84_URI, EPSG_PREFIX
from uriproj.utils.exceptions import UnsupportedURI, UriProjError
from uriproj.utils.uri import crs_uri_to_epsg
from uriproj.utils.url import registry_url


class TestCrsUriToEpsg(TestCase):
    def test_epsg_uri_returns_code(self):
        self.assertEqual(crs_uri_to_epsg(EPSG_PREFIX + "27700"), "27700")

    def test_code_is_returned_verbatim(self):
        self.assertEqual(crs_uri_to_epsg(EPSG_PREFIX + "0042"), "0042")

    def test_crs84_is_not_parsed(self):
        with self.assertRaises(UnsupportedURI) as ctx:
            crs_uri_to_epsg(CRS84_URI)

        self.assertEqual(ctx.exception.uri, CRS84_URI)
        self.assertIn(CRS84_URI, str(ctx.exception))

    def test_other_strings_are_unsupported(self):
        for uri in ["EPSG:4326", "urn:ogc:def:crs:EPSG::4326", "", "http://epsg.io/4326"]:
            with self.subTest(uri=uri):
                with self.assertRaises(UnsupportedURI):
                    crs_uri_to_epsg(uri)

    def test_unsupported_uri_is_a_value_error(self):
        with self.assertRaises(ValueError):
            crs_uri_to_epsg("foo")
        with self.assertRaises(UriProjError):
            crs_uri_to_epsg("foo")


class TestRegistryUrl(TestCase):
    def test_registry_url(self):
        self.assertEqual(
            registry_url("http://epsg.io", "27700"), "http://epsg.io/27700.proj4"
        )

    def test_registry_url_trailing_slash(self):
        self.assertEqual(
            registry_url("http://localhost:8080/registry/", "4326"),
            "http://localhost:8080/registry/4326.proj4",
        )

    def test_registry_url_quotes_code(self):
        self.assertEqual(
            registry_url("http://epsg.io", "../x"), "http://epsg.io/..%2Fx.proj4"
        )
