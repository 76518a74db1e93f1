import gc
import unittest

from orrery.catalog import build_solar_system
from orrery.data_models import BodyKind, find_body, iter_bodies, to_info_string


class TestSolarSystemCatalog(unittest.TestCase):

    def setUp(self):
        self.sun = build_solar_system()

    def test_single_center_body_at_root(self):
        centers = [b for b in iter_bodies(self.sun) if b.is_center]
        self.assertEqual(centers, [self.sun])
        self.assertIsNone(self.sun.parent)
        self.assertIs(self.sun.kind, BodyKind.STAR)

    def test_sun_children(self):
        names = [c.name for c in self.sun.children]
        self.assertEqual(names, ["Mercury", "Venus", "Earth", "Mars", "Jupiter",
                                 "Saturn", "Uranus", "Neptune", "Pluto"])
        self.assertIs(find_body(self.sun, "Pluto").kind, BodyKind.DWARF_PLANET)

    def test_moons_per_planet(self):
        expected = {
            "Mercury": [],
            "Venus": [],
            "Earth": ["The Moon"],
            "Mars": ["Phobos", "Deimos"],
            "Jupiter": ["Io", "Europa", "Ganymede", "Callisto"],
            "Saturn": ["Mimas", "Enceladus", "Tethys"],
            "Uranus": ["Miranda", "Ariel", "Umbriel", "Titania", "Oberon"],
            "Neptune": ["Triton", "Proteus", "Nereid"],
            "Pluto": [],
        }
        actual = {p.name: [m.name for m in p.children] for p in self.sun.children}
        self.assertEqual(actual, expected)

    def test_moons_are_moon_kind(self):
        for planet in self.sun.children:
            for moon in planet.children:
                with self.subTest(moon=moon.name):
                    self.assertIs(moon.kind, BodyKind.MOON)
                    self.assertIs(moon.parent, planet)
                    self.assertEqual(moon.children, [])

    def test_parent_children_consistency(self):
        for body in iter_bodies(self.sun):
            for child in body.children:
                self.assertIs(child.parent, body)

    def test_earth_info(self):
        earth = find_body(self.sun, "Earth")
        self.assertEqual(len(earth.children), 1)
        self.assertIn("Moons: The Moon", to_info_string(earth))

    def test_jupiter_info_lists_moons_in_order(self):
        info = to_info_string(find_body(self.sun, "Jupiter"))
        self.assertIn("Moons: Io, Europa, Ganymede, Callisto", info)
        self.assertIn("Orbital radius: 778,500,000.0km", info)

    def test_every_orbiting_body_has_positive_period(self):
        for body in iter_bodies(self.sun):
            if not body.is_center:
                self.assertGreater(body.orbital_period, 0)

    def test_lookup_from_temporary_tree_keeps_parents(self):
        moon = find_body(build_solar_system(), "The Moon")
        gc.collect()
        self.assertEqual(moon.parent.name, "Earth")
        self.assertIs(moon.parent.parent.kind, BodyKind.STAR)

    def test_builds_independent_trees(self):
        other = build_solar_system()
        self.assertIsNot(other.children[0], self.sun.children[0])


if __name__ == '__main__':
    unittest.main()
