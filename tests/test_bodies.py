import math

import pytest

from labkit.bodies import Compound, Cone, Cylinder, Parallelepiped, Sphere


def test_create_sphere():
    sphere = Sphere(1000, 10)
    assert sphere.density == 1000.0
    assert sphere.radius == 10.0
    assert sphere.volume == (4 // 3) * (10.0**3 * math.pi)
    assert sphere.mass == sphere.volume * 1000.0


def test_create_parallelepiped():
    box = Parallelepiped(1000, 10, 10, 10)
    assert box.density == 1000.0
    assert box.width == 10.0
    assert box.height == 10.0
    assert box.depth == 10.0
    assert box.volume == 10.0 * 10.0 * 10.0
    assert box.mass == box.volume * 1000.0


def test_create_cone():
    cone = Cone(1000, 10, 10)
    assert cone.density == 1000.0
    assert cone.height == 10.0
    assert cone.base_radius == 10.0
    assert cone.volume == pytest.approx((10**2 * math.pi) * 10 / 3.0)
    assert cone.mass == cone.volume * 1000.0


def test_create_cylinder():
    cylinder = Cylinder(1000, 10, 10)
    assert cylinder.density == 1000.0
    assert cylinder.height == 10.0
    assert cylinder.base_radius == 10.0
    assert cylinder.volume == (10**2 * math.pi) * 10
    assert cylinder.mass == cylinder.volume * 1000.0


def test_create_compound():
    sphere = Sphere(1200, 12)
    cylinder = Cylinder(1200, 12, 12)
    cone = Cone(1200, 12, 12)
    box = Parallelepiped(1200, 12, 12, 12)
    compound = Compound()
    for body in (sphere, cylinder, cone, box):
        compound.add_child(body)
    assert compound.children == [sphere, cylinder, cone, box]
    assert len(compound) == 4


def test_children_returns_copy():
    compound = Compound()
    compound.add_child(Sphere(1, 1))
    compound.children.clear()
    assert len(compound) == 1


def test_compound_totals():
    sphere = Sphere(1200, 2)
    box = Parallelepiped(500, 1, 2, 3)
    compound = Compound()
    compound.add_child(sphere)
    compound.add_child(box)
    assert compound.volume == pytest.approx(sphere.volume + box.volume)
    assert compound.mass == pytest.approx(sphere.mass + box.mass)
    assert compound.density == pytest.approx(compound.mass / compound.volume)


def test_empty_compound_density_is_nan():
    compound = Compound()
    assert compound.volume == 0
    assert compound.mass == 0
    assert math.isnan(compound.density)


def test_parallelepiped_to_string():
    box = Parallelepiped(1, 1, 1, 1)
    assert box.to_string() == (
        "Parallelepiped:\n"
        "\tDensity: 1.000\n"
        "\tVolume: 1.000\n"
        "\tMass: 1.000\n"
        "\tHeight: 1.000\n"
        "\tWidth: 1.000\n"
        "\tDepth: 1.000\n"
    )


def test_sphere_to_string_fields():
    text = Sphere(1000, 10).to_string()
    assert text.startswith("Sphere:\n\tDensity: 1000.000\n")
    assert text.endswith("\tRadius: 10.000\n")


def test_cone_and_cylinder_to_string_fields():
    assert Cone(1, 2, 3).to_string().endswith("\tRadius: 2.000\n\tHeight: 3.000\n")
    assert Cylinder(1, 2, 3).to_string().endswith("\tRadius: 2.000\n\tHeight: 3.000\n")


def test_compound_to_string_lists_children():
    compound = Compound()
    compound.add_child(Parallelepiped(1, 1, 1, 1))
    text = compound.to_string()
    assert text.startswith("Compound:\n")
    assert "\tChild bodies: \n" in text
    assert "\t\tParallelepiped\n\t\t\t\tDensity: 1.000\n" in text
    assert text.endswith("\t\t\t\tVolume: 1.000\n\n")


def test_nested_compound_to_string_includes_inner():
    inner = Compound()
    inner.add_child(Sphere(1, 1))
    outer = Compound()
    outer.add_child(inner)
    text = outer.to_string()
    assert text.count("Compound:\n") == 2
    assert inner.to_string() in text
    assert str(outer) == text