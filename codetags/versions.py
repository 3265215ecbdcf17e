"""Semantic version comparisons used by rollout plans."""

import typing

import semver


def is_valid(version: typing.Any) -> bool:
    """Check whether a value is a valid semantic version string."""
    if not isinstance(version, str):
        return False
    return semver.Version.is_valid(version)


def less_than(version1: str, version2: str) -> bool | None:
    """
    Compare two versions.

    Returns:
        bool | None: True if version1 < version2, None when either version is invalid.
    """
    if not is_valid(version1) or not is_valid(version2):
        return None
    return semver.Version.parse(version1) < semver.Version.parse(version2)


def less_or_equal(version1: str, version2: str) -> bool | None:
    """Same as less_than, but version1 == version2 is also True."""
    if not is_valid(version1) or not is_valid(version2):
        return None
    return semver.Version.parse(version1) <= semver.Version.parse(version2)
