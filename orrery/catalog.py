#!/usr/bin/env python3
"""
Built-in body catalog: the Sun, the eight planets, Pluto and their named moons.

Values are nominal orbital radii (km), orbital periods (earth days), polar
radii (km) and rotational periods (earth days). Moons whose day length is not
tracked carry a rotational period of 0.
"""
import logging

from .data_models import Body, BodyKind, iter_bodies

logger = logging.getLogger(__name__)


def _planet(name, orbital_radius, orbital_period, object_radius, rotational_period, color_tag,
            kind=BodyKind.PLANET) -> Body:
    return Body(name, kind, orbital_radius, orbital_period, object_radius, rotational_period, color_tag)


def _moon(name, orbital_radius, orbital_period, object_radius, rotational_period=0.0) -> Body:
    return Body(name, BodyKind.MOON, orbital_radius, orbital_period, object_radius, rotational_period, "white")


def build_solar_system() -> Body:
    """
    Sun + Mercury..Neptune + Pluto, each with its catalogued moons.
    Returns the Sun, the root and only center body of the tree.
    """
    sun = Body("Sun", BodyKind.STAR, 0.0, 0.0, 696_340.0, 27.0, "red", is_center=True)

    sun.add_child(_planet("Mercury", 57_910_000, 87.97, 2439, 58.6, "orangered"))
    sun.add_child(_planet("Venus", 108_200_000, 224.7, 6052, 243, "dimgray"))

    earth = sun.add_child(_planet("Earth", 149_600_000, 365.26, 6387, 0.99, "green"))
    earth.add_child(_moon("The Moon", 348_000, 27, 1737.4, 29.5))

    mars = sun.add_child(_planet("Mars", 227_940_000, 686.98, 3393, 1.025, "darkorange"))
    mars.add_child(_moon("Phobos", 9375, 0.38, 11.266))
    mars.add_child(_moon("Deimos", 23_457.8, 1.263, 6200))

    jupiter = sun.add_child(_planet("Jupiter", 778_500_000, 4331, 69_911, 1.025, "sandybrown"))
    jupiter.add_child(_moon("Io", 421_700, 1.769, 1821.6))
    jupiter.add_child(_moon("Europa", 670_900, 3.551, 1560.8))
    jupiter.add_child(_moon("Ganymede", 1_070_000, 7.154, 2634.1))
    jupiter.add_child(_moon("Callisto", 1_883_000, 16.689, 2410.3))

    saturn = sun.add_child(_planet("Saturn", 1_432_000_000, 10_747, 58_232, 1.025, "brown"))
    saturn.add_child(_moon("Mimas", 185.539, 0.942, 198.2))
    saturn.add_child(_moon("Enceladus", 237.948, 1.370, 252.1))
    saturn.add_child(_moon("Tethys", 294.619, 1.887, 531.1))

    uranus = sun.add_child(_planet("Uranus", 2_867_000_000, 30_589, 24_622, 1.025, "aliceblue"))
    uranus.add_child(_moon("Miranda", 129_900, 1.413, 235.8))
    uranus.add_child(_moon("Ariel", 190_900, 2.520, 578.9))
    uranus.add_child(_moon("Umbriel", 266_000, 4.144, 584.7))
    uranus.add_child(_moon("Titania", 436_300, 8.706, 788.4))
    uranus.add_child(_moon("Oberon", 583_500, 13.463, 761.4))

    neptune = sun.add_child(_planet("Neptune", 4_515_000_000, 59_800, 25_622, 1.025, "deepskyblue"))
    neptune.add_child(_moon("Triton", 354_800, 5.88, 1353.4))
    neptune.add_child(_moon("Proteus", 117_647, 1.122, 210))
    neptune.add_child(_moon("Nereid", 5_513_400, 360.11, 180))

    sun.add_child(_planet("Pluto", 5_905_400_000, 90_560, 1188, 1.025, "cadetblue",
                          kind=BodyKind.DWARF_PLANET))

    logger.info("Built solar system catalog with %d bodies", sum(1 for _ in iter_bodies(sun)))
    return sun
