import pytest

from pocketccu.versions import MAJOR, compatibility_verified, parse_version


def test_parse_documented_example():
    assert parse_version("0.1.0") == [0, 1, 0]


def test_parse_empty_string():
    assert parse_version("") == []


def test_parse_single_component():
    assert parse_version("7") == [7]


def test_parse_invalid_component_raises():
    with pytest.raises(ValueError):
        parse_version("a.b")


def test_parse_empty_component_raises():
    with pytest.raises(ValueError):
        parse_version("1..2")


def test_only_major_version_matters():
    assert compatibility_verified(MAJOR, 5, 9) is True
    assert compatibility_verified(MAJOR + 1, 1, 0) is False


def test_parse_then_check_round_trip():
    major, minor, patch = parse_version("0.4.2")
    assert compatibility_verified(major, minor, patch) is True