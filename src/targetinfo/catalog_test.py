import unittest

from targetinfo import catalog
from targetinfo.generated import LIST
from targetinfo.parser import decompose
from targetinfo.target import Arch


class CatalogTests(unittest.TestCase):
    def test_every_catalogued_target_decomposes(self):
        """Test that decomposition agrees with the reference compiler for every known target"""
        failures = []
        for triple, expected, _features in LIST:
            try:
                actual = decompose(triple)
            except ValueError as e:
                failures.append(f"{triple}: {e}")
                continue
            if actual != expected:
                failures.append(f"{triple}:\n  expected: {expected}\n    actual: {actual}")
        self.assertEqual(failures, [], "\n".join(failures))

    def test_catalogued_fields_are_well_formed(self):
        for triple, info, _features in LIST:
            self.assertEqual(info.full_arch, triple.split('-')[0], triple)
            self.assertIn(info.arch, Arch.families(), triple)
            self.assertTrue(info.vendor, triple)
            self.assertTrue(info.os, triple)

    def test_triples_are_unique(self):
        triples = catalog.triples()
        self.assertEqual(len(triples), len(set(triples)))

    def test_lookup(self):
        info, features = catalog.lookup("x86_64-unknown-linux-gnu")
        self.assertEqual(info.env, "gnu")
        self.assertIn("sse2", features)
        self.assertIsNone(catalog.lookup("bogusarch-unknown-linux-gnu"))

    def test_features(self):
        self.assertIn("neon", catalog.features("aarch64-unknown-linux-gnu"))
        self.assertEqual(catalog.features("amdgcn-amd-amdhsa"), [])
        self.assertEqual(catalog.features("not-a-target"), [])


if __name__ == '__main__':
    unittest.main()
