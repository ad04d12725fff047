# SPDX-License-Identifier: MIT
"""Tokenized version parsing.

Supports MAJOR.MINOR.MICRO format with an optional qualifier and a trailing
wildcard component:
- Qualifier: 1.2.3_beta, 1.8.0_45, 1.7.0_u-12
- Wildcard: 1.+, 1.2.+, 1.2.3_+, +
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .collation import qualifier_compare, qualifier_key

# The wildcard component.
WILDCARD = "+"

COMPONENT_NAMES = ("major", "minor", "micro", "qualifier")

_DIGITS = re.compile(r"[0-9]+")
_QUALIFIER = re.compile(r"[-a-zA-Z0-9]*")
_EMPTY_COMPONENT = re.compile(r"\.[._]")


class InvalidVersionError(Exception):
    """Raised when a version string is not a valid tokenized version."""

    def __init__(self, version: Optional[str], message: str = ""):
        self.version = version
        self.message = message or f"Invalid version '{version}'"
        super().__init__(self.message)


class TrailingDelimiterError(InvalidVersionError):
    """Raised when a version ends in '.' or '_'."""

    def __init__(self, version: Optional[str], delimiter: str):
        self.delimiter = delimiter
        super().__init__(version, f"Invalid version '{version}': must not end in '{delimiter}'")


class MissingComponentError(InvalidVersionError):
    """Raised when major, minor or micro is missing and no wildcard is present."""

    def __init__(self, version: Optional[str]):
        super().__init__(version, f"Invalid version '{version}': missing component")


class InvalidComponentError(InvalidVersionError):
    """Raised when major, minor or micro is neither numeric nor a wildcard."""

    def __init__(self, version: Optional[str], component: str, value: str):
        self.component = component
        self.value = value
        super().__init__(version, f"Invalid {component} version '{value}'")


class InvalidQualifierError(InvalidVersionError):
    """Raised when the qualifier contains characters outside [-a-zA-Z0-9]."""

    def __init__(self, version: Optional[str], qualifier: str):
        self.qualifier = qualifier
        super().__init__(version, f"Invalid qualifier '{qualifier}'")


class WildcardNotAllowedError(InvalidVersionError):
    def __init__(self, version: Optional[str]):
        super().__init__(
            version, f"Invalid version '{version}': wildcards are not allowed this context"
        )


class TrailingAfterWildcardError(InvalidVersionError):
    def __init__(self, version: Optional[str]):
        super().__init__(
            version, f"Invalid version '{version}': no characters are allowed after a wildcard"
        )


def _to_int(component: Optional[str]) -> int:
    """Return the value of the leading digits of a component, or 0."""
    if component is None:
        return 0
    match = _DIGITS.match(component)
    return int(match.group()) if match else 0


def _comparable_qualifier(qualifier: Optional[str]) -> str:
    # A wildcard qualifier sorts like an absent one, as a wildcard
    # numeric component sorts like 0.
    if qualifier is None or qualifier == WILDCARD:
        return ""
    return qualifier


@dataclass(frozen=True, slots=True, eq=False)
class TokenizedVersion:
    """Represents a parsed tokenized version.

    Ordering compares major, minor and micro numerically, then the qualifier
    using the collating sequence ``-`` < ``a-z`` < ``A-Z`` < ``0-9``.
    Equality and hashing follow the same ordering, so ``1.2.3`` and
    ``01.2.3`` are equal.

    Attributes:
        raw: The string the version was parsed from, returned by ``str()``
        major: Major version digits, the wildcard, or None
        minor: Minor version digits, the wildcard, or None
        micro: Micro version digits, the wildcard, or None
        qualifier: Qualifier after '_', the wildcard, or None
    """

    raw: str
    major: Optional[str] = None
    minor: Optional[str] = None
    micro: Optional[str] = None
    qualifier: Optional[str] = None

    def __str__(self) -> str:
        """Return the string this version was parsed from."""
        return self.raw

    @property
    def components(self) -> tuple[Optional[str], Optional[str], Optional[str], Optional[str]]:
        """Return (major, minor, micro, qualifier)."""
        return (self.major, self.minor, self.micro, self.qualifier)

    @property
    def is_wildcard(self) -> bool:
        """Return True if any component is the wildcard."""
        return WILDCARD in self.components

    def sort_key(self) -> tuple:
        """Return a tuple whose natural ordering matches version ordering."""
        return (
            _to_int(self.major),
            _to_int(self.minor),
            _to_int(self.micro),
            qualifier_key(_comparable_qualifier(self.qualifier)),
        )

    def _cmp(self, other: object) -> int:
        if not isinstance(other, TokenizedVersion):
            return NotImplemented

        for attr in ("major", "minor", "micro"):
            val1 = _to_int(getattr(self, attr))
            val2 = _to_int(getattr(other, attr))
            if val1 != val2:
                return -1 if val1 < val2 else 1

        return qualifier_compare(
            _comparable_qualifier(self.qualifier), _comparable_qualifier(other.qualifier)
        )

    def __eq__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is NotImplemented:
            return c
        return c == 0

    def __lt__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is NotImplemented:
            return c
        return c < 0

    def __le__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is NotImplemented:
            return c
        return c <= 0

    def __gt__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is NotImplemented:
            return c
        return c > 0

    def __ge__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is NotImplemented:
            return c
        return c >= 0

    def __hash__(self) -> int:
        return hash(self.sort_key())


def _valid_major_minor_or_micro(value: str) -> bool:
    return _DIGITS.fullmatch(value) is not None or value == WILDCARD


def _valid_qualifier(qualifier: Optional[str]) -> bool:
    if qualifier is None or qualifier == WILDCARD:
        return True
    return _QUALIFIER.fullmatch(qualifier) is not None


def _major_or_minor_and_tail(
    version: Optional[str], s: Optional[str], component: str
) -> tuple[Optional[str], Optional[str]]:
    if not s:
        return None, None

    if s.endswith("."):
        raise TrailingDelimiterError(version, ".")
    if _EMPTY_COMPONENT.search(s):
        raise MissingComponentError(version)

    major_or_minor, sep, tail = s.partition(".")
    if not major_or_minor:
        raise MissingComponentError(version)
    if not _valid_major_minor_or_micro(major_or_minor):
        raise InvalidComponentError(version, component, major_or_minor)

    return major_or_minor, tail if sep else None


def _micro_and_qualifier(
    version: Optional[str], s: Optional[str]
) -> tuple[Optional[str], Optional[str]]:
    if not s:
        return None, None

    if s.endswith("_"):
        raise TrailingDelimiterError(version, "_")

    micro, sep, qualifier = s.partition("_")
    if not micro:
        raise MissingComponentError(version)
    if not _valid_major_minor_or_micro(micro):
        raise InvalidComponentError(version, "micro", micro)

    if not sep:
        return micro, None
    if not _valid_qualifier(qualifier):
        raise InvalidQualifierError(version, qualifier)

    return micro, qualifier


def validate_components(
    components: Sequence[Optional[str]],
    allow_wildcards: bool = True,
    version: Optional[str] = None,
) -> None:
    """Check wildcard placement and required components.

    Args:
        components: The (major, minor, micro, qualifier) slots
        allow_wildcards: Whether the wildcard may appear at all
        version: The original string, used in error messages

    Raises:
        WildcardNotAllowedError: If a wildcard appears while disallowed
        TrailingAfterWildcardError: If any component follows a wildcard
        MissingComponentError: If there is no wildcard and fewer than three
            components are present
    """
    wildcarded = False
    for value in components:
        if value == WILDCARD and not allow_wildcards:
            raise WildcardNotAllowedError(version)
        if wildcarded and value is not None:
            raise TrailingAfterWildcardError(version)
        if value == WILDCARD:
            wildcarded = True

    present = sum(1 for value in components if value is not None)
    if not wildcarded and present < 3:
        raise MissingComponentError(version)


def parse_version(version: Optional[str], allow_wildcards: bool = True) -> TokenizedVersion:
    """Parse a version string into a TokenizedVersion.

    Args:
        version: A string of the form MAJOR.MINOR.MICRO[_QUALIFIER], where the
            last populated component may be the wildcard '+'. None is read as
            '+' when wildcards are allowed.
        allow_wildcards: Whether '+' may be used as the last component

    Returns:
        A TokenizedVersion holding the original string and its components

    Raises:
        InvalidVersionError: If the string is not a valid tokenized version.
            The concrete subclass names the failure.

    Examples:
        >>> parse_version("1.8.0_45")
        TokenizedVersion(raw='1.8.0_45', major='1', minor='8', micro='0', qualifier='45')

        >>> parse_version("1.7.+")
        TokenizedVersion(raw='1.7.+', major='1', minor='7', micro='+', qualifier=None)
    """
    if version is None and allow_wildcards:
        version = WILDCARD

    if version is not None and not isinstance(version, str):
        raise InvalidVersionError(
            str(version), f"Version must be a string, got {type(version).__name__}"
        )

    major, tail = _major_or_minor_and_tail(version, version, "major")
    minor, tail = _major_or_minor_and_tail(version, tail, "minor")
    micro, qualifier = _micro_and_qualifier(version, tail)

    components = (major, minor, micro, qualifier)
    validate_components(components, allow_wildcards, version)

    # validate_components rejects a None version: no components are present
    assert version is not None
    return TokenizedVersion(
        raw=version, major=major, minor=minor, micro=micro, qualifier=qualifier
    )


def is_valid_version(version: Optional[str], allow_wildcards: bool = True) -> bool:
    """Check if a string is a valid tokenized version.

    Examples:
        >>> is_valid_version("1.2.3")
        True
        >>> is_valid_version("1.2")
        False
        >>> is_valid_version("1.2.+", allow_wildcards=False)
        False
    """
    try:
        parse_version(version, allow_wildcards)
    except InvalidVersionError:
        return False
    return True
