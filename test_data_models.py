import gc
import math
import unittest

from orrery.data_models import (
    Body,
    BodyKind,
    CatalogError,
    HierarchyError,
    Position,
    add_child,
    find_body,
    iter_bodies,
    to_info_string,
)
from orrery.physics import orbital_offset, recompute_position


def make_star():
    return Body("Sun", BodyKind.STAR, 0.0, 0.0, 696_340.0, 27.0, "red", is_center=True)


def make_planet(name="Earth", kind=BodyKind.PLANET):
    return Body(name, kind, 149_600_000, 365.26, 6387, 0.99, "green")


def make_moon(name="The Moon"):
    return Body(name, BodyKind.MOON, 348_000, 27, 1737.4, 29.5)


class TestPosition(unittest.TestCase):

    def test_addition(self):
        self.assertEqual(Position(1.5, -2.0) + Position(0.5, 4.0), Position(2.0, 2.0))

    def test_subtraction(self):
        self.assertEqual(Position(3.0, 3.0) - Position(1.0, 2.0), Position(2.0, 1.0))

    def test_default_is_origin(self):
        self.assertEqual(Position(), Position(0.0, 0.0))

    def test_immutable(self):
        p = Position(1.0, 2.0)
        with self.assertRaises(AttributeError):
            p.x = 5.0

    def test_str(self):
        self.assertEqual(str(Position(1.0, 2.5)), "(x: 1.0, y: 2.5)")


class TestBodyKind(unittest.TestCase):

    def test_labels(self):
        expected = {
            BodyKind.STAR: "Star",
            BodyKind.PLANET: "Planet",
            BodyKind.MOON: "Moon",
            BodyKind.COMET: "Comet",
            BodyKind.ASTEROID: "Asteroid",
            BodyKind.ASTEROID_BELT: "Asteroid Belt",
            BodyKind.DWARF_PLANET: "Dwarf Planet",
        }
        self.assertEqual({k: k.label for k in BodyKind}, expected)

    def test_only_planets_list_moons(self):
        listing = {k for k in BodyKind if k.lists_moons}
        self.assertEqual(listing, {BodyKind.PLANET, BodyKind.DWARF_PLANET})


class TestBodyValidation(unittest.TestCase):

    def test_center_body_may_have_zero_radius_and_period(self):
        sun = make_star()
        self.assertTrue(sun.is_center)
        self.assertIsNone(sun.parent)
        self.assertEqual(sun.position, Position(0.0, 0.0))

    def test_zero_period_rejected_for_orbiting_body(self):
        with self.assertRaises(CatalogError):
            Body("Stuck", BodyKind.PLANET, 1_000_000, 0, 100)

    def test_negative_period_rejected(self):
        with self.assertRaises(CatalogError):
            Body("Backwards", BodyKind.COMET, 1_000_000, -5, 100)

    def test_radius_outside_scaling_domain_rejected(self):
        for radius in (0, -10, 1, math.nan, math.inf):
            with self.subTest(radius=radius):
                with self.assertRaises(CatalogError):
                    Body("Bad", BodyKind.ASTEROID, radius, 10, 1)

    def test_catalog_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Body("Bad", BodyKind.MOON, 1, 10, 1)

    def test_set_orbital_radius(self):
        earth = make_planet()
        earth.set_orbital_radius(150_000_000)
        self.assertEqual(earth.orbital_radius, 150_000_000)

    def test_set_orbital_radius_keeps_previous_on_error(self):
        earth = make_planet()
        with self.assertRaises(CatalogError):
            earth.set_orbital_radius(1)
        self.assertEqual(earth.orbital_radius, 149_600_000)

    def test_children_and_position_not_constructor_arguments(self):
        moon = make_moon()
        with self.assertRaises(TypeError):
            Body("Earth", BodyKind.PLANET, 149_600_000, 365.26, 6387, children=[moon])
        with self.assertRaises(TypeError):
            Body("Earth", BodyKind.PLANET, 149_600_000, 365.26, 6387, position=Position(5.0, 5.0))
        self.assertIsNone(moon.parent)


class TestAddChild(unittest.TestCase):

    def test_sets_back_reference_and_appends_once(self):
        sun = make_star()
        earth = make_planet()
        add_child(sun, earth)
        self.assertIs(earth.parent, sun)
        self.assertEqual(sum(1 for c in sun.children if c is earth), 1)

    def test_method_form_returns_child(self):
        sun = make_star()
        earth = make_planet()
        self.assertIs(sun.add_child(earth), earth)
        self.assertIs(earth.parent, sun)

    def test_children_keep_insertion_order(self):
        sun = make_star()
        names = ["Mercury", "Venus", "Earth"]
        for name in names:
            sun.add_child(make_planet(name))
        self.assertEqual([c.name for c in sun.children], names)

    def test_reparenting_rejected(self):
        sun = make_star()
        earth = sun.add_child(make_planet("Earth"))
        mars = sun.add_child(make_planet("Mars"))
        moon = earth.add_child(make_moon())
        with self.assertRaises(HierarchyError):
            mars.add_child(moon)
        self.assertIs(moon.parent, earth)
        self.assertEqual(mars.children, [])

    def test_adding_twice_rejected(self):
        sun = make_star()
        earth = sun.add_child(make_planet())
        with self.assertRaises(HierarchyError):
            sun.add_child(earth)
        self.assertEqual(len(sun.children), 1)

    def test_self_rejected(self):
        earth = make_planet()
        with self.assertRaises(HierarchyError):
            earth.add_child(earth)

    def test_center_body_cannot_be_child(self):
        earth = make_planet()
        with self.assertRaises(HierarchyError):
            earth.add_child(make_star())

    def test_cycle_rejected(self):
        earth = make_planet()
        moon = earth.add_child(make_moon())
        with self.assertRaises(HierarchyError):
            moon.add_child(earth)

    def test_ancestors(self):
        sun = make_star()
        earth = sun.add_child(make_planet())
        moon = earth.add_child(make_moon())
        self.assertEqual(moon.ancestors(), [earth, sun])
        self.assertEqual(sun.ancestors(), [])


def _detached_moon():
    sun = make_star()
    earth = sun.add_child(make_planet("Earth"))
    return earth.add_child(make_moon())


class TestParentLifetime(unittest.TestCase):

    def test_parent_survives_when_only_moon_is_kept(self):
        moon = _detached_moon()
        gc.collect()
        self.assertIsNotNone(moon.parent)
        self.assertEqual([b.name for b in moon.ancestors()], ["Earth", "Sun"])

    def test_composition_uses_parent_after_builder_returns(self):
        moon = _detached_moon()
        gc.collect()
        earth = moon.parent
        recompute_position(earth, 40.0)
        self.assertEqual(recompute_position(moon, 40.0), orbital_offset(moon, 40.0) + earth.position)

    def test_reparenting_still_rejected_after_builder_returns(self):
        moon = _detached_moon()
        gc.collect()
        mars = make_planet("Mars")
        with self.assertRaises(HierarchyError):
            mars.add_child(moon)
        self.assertEqual(mars.children, [])


class TestTraversal(unittest.TestCase):

    def setUp(self):
        self.sun = make_star()
        self.earth = self.sun.add_child(make_planet("Earth"))
        self.moon = self.earth.add_child(make_moon("The Moon"))
        self.mars = self.sun.add_child(make_planet("Mars"))
        self.phobos = self.mars.add_child(make_moon("Phobos"))

    def test_parent_first_preorder(self):
        names = [b.name for b in iter_bodies(self.sun)]
        self.assertEqual(names, ["Sun", "Earth", "The Moon", "Mars", "Phobos"])

    def test_find_body(self):
        self.assertIs(find_body(self.sun, "Phobos"), self.phobos)
        self.assertIsNone(find_body(self.sun, "Vulcan"))


class TestInfoString(unittest.TestCase):

    def test_planet_lists_moons(self):
        earth = make_planet()
        earth.add_child(make_moon())
        expected = (
            "Name: Earth\n"
            "Orbital radius: 149,600,000.0km\n"
            "Orbital period: 365.3 earth days\n"
            "Polar radius: 6,387.0km\n"
            "Rotational period: 1.0 earth days\n"
            "Moons: The Moon"
        )
        self.assertEqual(to_info_string(earth), expected)

    def test_planet_without_moons(self):
        self.assertTrue(to_info_string(make_planet("Venus")).endswith("Moons: "))

    def test_dwarf_planet_lists_moons(self):
        pluto = make_planet("Pluto", kind=BodyKind.DWARF_PLANET)
        pluto.add_child(make_moon("Charon"))
        pluto.add_child(make_moon("Nix"))
        self.assertIn("Moons: Charon, Nix", to_info_string(pluto))

    def test_moon_has_no_moons_line(self):
        self.assertNotIn("Moons:", to_info_string(make_moon()))

    def test_star_summary(self):
        info = to_info_string(make_star())
        self.assertIn("Polar radius: 696,340.0km", info)
        self.assertNotIn("Moons:", info)

    def test_describe_uses_kind_label(self):
        pluto = make_planet("Pluto", kind=BodyKind.DWARF_PLANET)
        self.assertTrue(pluto.describe().startswith("Dwarf Planet: Pluto\nPosition: (x: 0.0, y: 0.0)"))

    def test_str_is_name(self):
        self.assertEqual(str(make_moon("Io")), "Io")


if __name__ == '__main__':
    unittest.main()
