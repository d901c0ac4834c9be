import pytest

from digitclassifier.utils import (
    enough_arguments,
    format_all_arguments,
    not_too_much_arguments,
    split,
)


def test_split_basic():
    assert split("1 2.5 3", " ") == ["1", "2.5", "3"]


def test_split_drops_trailing_empty_item():
    assert split("a b ", " ") == ["a", "b"]


def test_split_keeps_inner_empty_items():
    assert split("a  b", " ") == ["a", "", "b"]


def test_split_empty_string():
    assert split("", " ") == []


@pytest.mark.parametrize("text", ["x/y/z", "only", "a=b/c=d"])
def test_split_round_trip(text):
    assert "/".join(split(text, "/")) == text


def test_enough_arguments_read():
    assert not enough_arguments(["prog", "-r", "in"], "r")
    assert enough_arguments(["prog", "-r", "in", "out"], "r")


def test_enough_arguments_compare_depends_on_count():
    base = ["prog", "-c", "train", "test", "2", "1"]
    assert not enough_arguments(base, "c")
    assert enough_arguments(base + ["2"], "c")


def test_enough_arguments_unknown_choice():
    assert not enough_arguments(["prog", "-z", "a", "b", "c"], "z")


def test_not_too_much_arguments_algorithms():
    assert not_too_much_arguments(["prog", "-a"], "a")
    assert not not_too_much_arguments(["prog", "-a", "extra"], "a")


def test_not_too_much_arguments_compare():
    argv = ["prog", "-c", "train", "test", "1", "2", "5"]
    assert not_too_much_arguments(argv, "c")
    assert not not_too_much_arguments(argv + ["9"], "c")


def test_compare_count_must_be_integer():
    with pytest.raises(ValueError):
        enough_arguments(["prog", "-c", "train", "test", "many"], "c")
    with pytest.raises(ValueError):
        not_too_much_arguments(["prog", "-c", "train", "test", "many"], "c")


def test_format_all_arguments():
    text = format_all_arguments(["prog", "-g", "x", "y"])
    lines = text.splitlines()
    assert lines[0] == "--------PRINT ALL ARGUMENTS--------"
    assert lines[1] == "number of arguments = 2"
    assert lines[2:4] == ["x", "y"]
    assert lines[-1] == "-----PRINT ALL ARGUMENTS ENDED-----"