import io
import sys

from labkit.bodies import Compound, Cone, Cylinder, Parallelepiped, Sphere
from labkit.body_handler import BodyHandler, main


def run(text, bodies=None):
    bodies = [] if bodies is None else bodies
    out = io.StringIO()
    BodyHandler(io.StringIO(text), out, bodies).operate()
    return out.getvalue(), bodies


def test_introduce_lists_commands():
    out = io.StringIO()
    BodyHandler(io.StringIO(""), out, []).introduce()
    text = out.getvalue()
    assert text.startswith("Add bodies:\n")
    assert "\t\tSpehere example: 1 800.5 1.5\n" in text
    assert text.endswith("Exit: 10\n")


def test_add_sphere():
    _, bodies = run("1 800.5 1.5\n")
    assert len(bodies) == 1
    sphere = bodies[0]
    assert isinstance(sphere, Sphere)
    assert sphere.density == 800.5
    assert sphere.radius == 1.5


def test_add_parallelepiped_argument_order():
    _, bodies = run("2 250.25 2 6.8 14.7\n")
    box = bodies[0]
    assert isinstance(box, Parallelepiped)
    assert (box.density, box.height, box.width, box.depth) == (250.25, 2, 6.8, 14.7)


def test_add_cone_and_cylinder():
    _, bodies = run("3 250 6.5 15.5\n4 250 6.5 15.5\n")
    assert [type(b) for b in bodies] == [Cone, Cylinder]
    assert bodies[0].base_radius == 6.5
    assert bodies[1].height == 15.5


def test_wrong_arg_count():
    out, bodies = run("1 800 1 2\n")
    assert out == "Invalid args count\n"
    assert bodies == []


def test_non_positive_arg():
    out, bodies = run("1 -800 1\n")
    assert out == "Arg can't be lower or equal 0\n"
    assert bodies == []


def test_unparsable_arg():
    out, bodies = run("4 abc 1 1\n")
    assert out == "Can't parse args to double\n"
    assert bodies == []


def test_unknown_commands():
    out, bodies = run("hello\n6\n\n")
    assert out == "Unknown command\n" * 3
    assert bodies == []


def test_compound_mode():
    out, bodies = run("5\n1 1000 1\n4 1000 1 1\n6\n")
    assert out == "Compound mode enabled\nCompound mode disabled\n"
    compound = bodies[0]
    assert isinstance(compound, Compound)
    assert [type(c) for c in compound.children] == [Sphere, Cylinder]


def test_empty_compound_not_added():
    out, bodies = run("5\n6\n")
    assert bodies == []
    assert "Compound mode disabled\n" in out


def test_nested_compound():
    _, bodies = run("5\n5\n1 1000 1\n6\n3 10 1 1\n6\n")
    outer = bodies[0]
    inner = outer.children[0]
    assert isinstance(inner, Compound)
    assert len(inner) == 1
    assert isinstance(outer.children[1], Cone)


def test_compound_closes_at_end_of_input():
    out, bodies = run("5\n1 1000 1\n")
    assert len(bodies) == 1
    assert out.endswith("Compound mode disabled\n")


def test_max_mass_and_min_weight():
    light = Sphere(100, 10)
    heavy = Parallelepiped(5000, 10, 10, 10)
    handler = BodyHandler(io.StringIO(""), io.StringIO(), [light, heavy])
    assert handler.max_mass() is heavy
    assert handler.min_weight() is light


def test_queries_on_empty_list():
    out = io.StringIO()
    handler = BodyHandler(io.StringIO(""), out, [])
    assert handler.max_mass() is None
    assert handler.min_weight() is None
    assert out.getvalue() == (
        "Can't find max mass body: bodies empty\n"
        "Can't find min weight body: bodies empty\n"
    )


def test_max_mass_command_prints_body():
    out, bodies = run("1 800 1\n7\n")
    assert out == "Max mass body: " + bodies[0].to_string() + "\n"


def test_min_weight_command_prints_body():
    out, bodies = run("1 800 1\n8\n")
    assert out == "Min weight body: " + bodies[0].to_string() + "\n"


def test_print_bodies():
    out, bodies = run("1 800 1\n9\n")
    assert out == f"Bodies size: {len(bodies)}\n" + bodies[0].to_string() + "\n"


def test_print_empty_bodies():
    out = io.StringIO()
    BodyHandler(io.StringIO(""), out, []).print_bodies()
    assert out.getvalue() == "Bodies is empty\nBodies size: 0\n"


def test_exit_stops_processing():
    out, bodies = run("10\n1 800 1\n")
    assert bodies == []
    assert out == (
        "Bodies is empty\nBodies size: 0\n"
        "Can't find max mass body: bodies empty\n"
        "Can't find min weight body: bodies empty\n"
    )


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 800.5 1.5\n9\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("Add bodies:\n")
    assert "Bodies size: 1\n" in out
    assert "\tRadius: 1.500\n" in out