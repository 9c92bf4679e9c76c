import pytest

from labkit.findtext import find_lines, main


def test_find_lines_reports_matching_numbers():
    assert list(find_lines(["alpha", "beta", "alphabet"], "alpha")) == [1, 3]


@pytest.mark.parametrize(
    "lines, needle",
    [
        (["one two", "three", "two three", ""], "two"),
        (["abc", "ABC", "xabcx"], "abc"),
        (["строка", "line", "ещё строка"], "строка"),
    ],
)
def test_find_lines_matches_exactly_lines_with_needle(lines, needle):
    found = set(find_lines(lines, needle))
    for number, line in enumerate(lines, start=1):
        assert (number in found) == (needle in line)


def test_find_lines_without_match_is_empty():
    assert list(find_lines(["a", "b"], "zzz")) == []


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 2
    assert capsys.readouterr().out.startswith("Invalid arguments count\n")


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing), "x"]) == 2
    assert capsys.readouterr().out == f"Failed open file for reading: {missing}\n"


def test_main_not_found(tmp_path, capsys):
    path = tmp_path / "text.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    assert main([str(path), "third"]) == 1
    assert capsys.readouterr().out == "No string found\n"


def test_main_prints_line_numbers(tmp_path, capsys):
    lines = ["needle here", "nothing", "another needle", "end"]
    path = tmp_path / "text.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert main([str(path), "needle"]) == 0
    printed = [int(value) for value in capsys.readouterr().out.split()]
    assert printed == list(find_lines(lines, "needle"))