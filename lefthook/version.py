"""Version information and minimum-version checks."""

from __future__ import annotations

import os
import re
import sys

VERSION = "1.11.13"

# Filled in by release builds.
COMMIT = ""

_VERSION_RE = re.compile(
    r"(?P<major>\d+)(?:\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?)?",
    re.ASCII,
)


class VersionError(ValueError):
    """Base class for version check failures."""


class InvalidVersionError(VersionError):
    """A version string does not have the form MAJOR[.MINOR[.PATCH]]."""

    def __init__(self, message: str = "invalid version format") -> None:
        super().__init__(message)


class UncoveredVersionError(VersionError):
    """The given version is lower than the required one."""

    def __init__(self, message: str = "version is lower than required") -> None:
        super().__init__(message)


class InvalidMinVersionError(VersionError):
    """The 'min_version' setting is malformed."""

    def __init__(
        self, message: str = "format of 'min_version' setting is incorrect"
    ) -> None:
        super().__init__(message)


def version(verbose: bool = False) -> str:
    """Return the current version, with the commit hash when verbose."""
    if verbose:
        return f"{VERSION} {COMMIT}"
    return VERSION


def _parse_version(text: str) -> tuple[int, int, int]:
    """Parse "1.2.3", "1.2" or "1" into a (major, minor, patch) tuple."""
    match = _VERSION_RE.fullmatch(text)
    if match is None:
        raise InvalidVersionError()
    return (
        int(match["major"]),
        int(match["minor"] or 0),
        int(match["patch"] or 0),
    )


def check(wanted: str, given: str) -> None:
    """Raise unless ``given`` is at least ``wanted``."""
    given_parts = _parse_version(given)
    wanted_parts = _parse_version(wanted)
    if given_parts < wanted_parts:
        raise UncoveredVersionError()


def _executable_path() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.abspath(sys.argv[0])
    return "<unknown>"


def check_covered(target_version: str) -> None:
    """Raise unless the current version satisfies ``target_version``."""
    if not target_version:
        return
    try:
        check(target_version, VERSION)
    except UncoveredVersionError as exc:
        raise UncoveredVersionError(
            f"required lefthook version ({target_version}) is higher than "
            f"current ({VERSION}) at {_executable_path()}"
        ) from exc
    except InvalidVersionError as exc:
        raise InvalidMinVersionError() from exc