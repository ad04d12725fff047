# SPDX-License-Identifier: MIT
"""Tokenized version parsing and comparison.

This package parses versions of the form MAJOR.MINOR.MICRO_QUALIFIER, with an
optional trailing wildcard component ('+'), and orders them numerically with
qualifiers compared by a custom collating sequence.

Example:
    >>> from tokenized_version import parse_version, compare_versions
    >>>
    >>> version = parse_version("1.8.0_45")
    >>> version.micro
    '0'
    >>> version.qualifier
    '45'
    >>> str(version)
    '1.8.0_45'
    >>>
    >>> parse_version("1.7.+").is_wildcard
    True
    >>>
    >>> compare_versions("1.8.0_45", "1.8.0_5")
    -1
"""

__version__ = "0.1.0"

from .tokenized import (
    WILDCARD,
    TokenizedVersion,
    parse_version,
    is_valid_version,
    validate_components,
    InvalidVersionError,
    TrailingDelimiterError,
    MissingComponentError,
    InvalidComponentError,
    InvalidQualifierError,
    WildcardNotAllowedError,
    TrailingAfterWildcardError,
)
from .collation import (
    COLLATING_SEQUENCE,
    char_rank,
    qualifier_compare,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)

__all__ = [
    # Version parsing
    "WILDCARD",
    "TokenizedVersion",
    "parse_version",
    "is_valid_version",
    "validate_components",
    # Errors
    "InvalidVersionError",
    "TrailingDelimiterError",
    "MissingComponentError",
    "InvalidComponentError",
    "InvalidQualifierError",
    "WildcardNotAllowedError",
    "TrailingAfterWildcardError",
    # Qualifier collation
    "COLLATING_SEQUENCE",
    "char_rank",
    "qualifier_compare",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
]
