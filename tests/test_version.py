import pytest

from lefthook.version import (
    InvalidMinVersionError,
    InvalidVersionError,
    UncoveredVersionError,
    check,
    check_covered,
    version,
)


def test_version_plain():
    assert version(False) == "1.11.13"


def test_version_verbose_starts_with_plain():
    assert version(True).startswith(version(False) + " ")


@pytest.mark.parametrize(
    "wanted, given",
    [
        ("1.0.0", "1.0.0"),
        ("1.0.0", "1.0.1"),
        ("1.2", "1.2.0"),
        ("1", "2"),
        ("1.9.9", "2.0.0"),
        ("1.1.9", "1.2"),
    ],
)
def test_check_covered_versions(wanted, given):
    assert check(wanted, given) is None


@pytest.mark.parametrize(
    "wanted, given",
    [
        ("1.0.1", "1.0.0"),
        ("1.2", "1.1.9"),
        ("2", "1.99.99"),
        ("1.0.1", "1"),
    ],
)
def test_check_uncovered_versions(wanted, given):
    with pytest.raises(UncoveredVersionError):
        check(wanted, given)


@pytest.mark.parametrize(
    "wanted, given",
    [
        ("abc", "1.0.0"),
        ("1.0.0", "abc"),
        ("1.0.0.0", "1.0.0"),
        ("1.0.0", "v1.0.0"),
        ("1..0", "1.0.0"),
        ("1.0.0\n", "1.0.0"),
    ],
)
def test_check_invalid_versions(wanted, given):
    with pytest.raises(InvalidVersionError):
        check(wanted, given)


def test_check_covered_empty_target():
    assert check_covered("") is None


def test_check_covered_current_version():
    assert check_covered(version(False)) is None


def test_check_covered_too_high():
    with pytest.raises(UncoveredVersionError) as excinfo:
        check_covered("99.0.0")
    assert "99.0.0" in str(excinfo.value)
    assert version(False) in str(excinfo.value)


def test_check_covered_invalid_target():
    with pytest.raises(InvalidMinVersionError):
        check_covered("not-a-version")