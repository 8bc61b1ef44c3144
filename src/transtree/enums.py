"""Enumerations for transtree type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NodeKind(StrEnum):
    """Structural kind of a catalog value.

    StrEnum provides automatic string conversion: str(NodeKind.LEAF) == "leaf"
    """

    CATALOG = "catalog"
    """Nested catalog: {"root": {"carrot": {...}}}"""

    LEAF = "leaf"
    """Language-keyed variants: {"it": "Carota", "en": "Carrot"}"""

    VARIANT = "variant"
    """Bare variant: "Carrot" or ["1 carrot", "%n carrots", "0 carrots"]"""

    INVALID = "invalid"
    """Anything else (numbers, None, wrong-length sequences)"""


class DiagnosticKind(StrEnum):
    """Classification of a single resolution for diagnostics.

    StrEnum provides automatic string conversion:
    str(DiagnosticKind.MISSING_ID) == "missing_id"
    """

    FOUND = "found"
    """Served from the primary language (never emitted)"""

    FALLBACK_USED = "fallback_used"
    """Missing in the primary language, served from the fallback language"""

    MISSING_IN_ALL = "missing_in_all"
    """Missing in both the primary and the fallback language"""

    MISSING_ID = "missing_id"
    """Missing in the primary language, no fallback configured"""


class LoadStatus(StrEnum):
    """Outcome of loading one catalog resource for one language.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


__all__ = [
    "DiagnosticKind",
    "LoadStatus",
    "NodeKind",
]
