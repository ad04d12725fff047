# SPDX-License-Identifier: MIT
"""Version comparison helpers.

Major, minor and micro compare numerically, with absent and wildcard
components counting as 0. Qualifiers compare with the custom collating
sequence, an absent or wildcard qualifier counting as empty.
"""

from __future__ import annotations

from typing import Iterable, Union

from .tokenized import TokenizedVersion, parse_version

VersionLike = Union[str, TokenizedVersion]


def _coerce(version: VersionLike, allow_wildcards: bool) -> TokenizedVersion:
    if isinstance(version, TokenizedVersion):
        return version
    return parse_version(version, allow_wildcards)


def compare_versions(
    version1: VersionLike, version2: VersionLike, allow_wildcards: bool = True
) -> int:
    """Compare two tokenized versions.

    Args:
        version1: First version (string or TokenizedVersion)
        version2: Second version (string or TokenizedVersion)
        allow_wildcards: Whether string arguments may contain wildcards

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        A wildcard compares like 0, so ``1.+`` equals ``1.0.0``. Matching a
        version against a wildcard pattern is a different operation.

    Examples:
        >>> compare_versions("1.2.3", "1.2.4")
        -1
        >>> compare_versions("1.8.0_45", "1.8.0_45")
        0
        >>> compare_versions("1.0.0_9", "1.0.0_Z")
        1
    """
    v1 = _coerce(version1, allow_wildcards)
    v2 = _coerce(version2, allow_wildcards)

    if v1 < v2:
        return -1
    if v1 > v2:
        return 1
    return 0


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.8.0_45", "1.7.0_80", "1.8.0_5"], key=version_key)
        ['1.7.0_80', '1.8.0_45', '1.8.0_5']
    """
    return _coerce(version, True).sort_key()


def sort_versions(
    versions: Iterable[VersionLike], reverse: bool = False, allow_wildcards: bool = True
) -> list[TokenizedVersion]:
    """Parse and sort versions, lowest first unless reverse is set.

    The sort is stable: versions that compare equal keep their input order.
    """
    parsed = [_coerce(v, allow_wildcards) for v in versions]
    return sorted(parsed, key=TokenizedVersion.sort_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike], allow_wildcards: bool = True) -> TokenizedVersion:
    """Return the greatest of the given versions.

    Raises:
        ValueError: If no versions are given
        InvalidVersionError: If any version string is invalid
    """
    parsed = [_coerce(v, allow_wildcards) for v in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed, key=TokenizedVersion.sort_key)
