"""Diagnostic codes and data structures.

Defines diagnostic codes, the structured Diagnostic attached to
exceptions and validation entries, and the DiagnosticEvent reported
for each degraded resolution.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Literal

from transtree.constants import COUNT_SUFFIX, LOG_PREFIX
from transtree.enums import DiagnosticKind

if TYPE_CHECKING:
    from transtree.catalog.types import Count, LanguageCode

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticEvent",
    "format_count_suffix",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Resolution diagnostics (missing translations)
        2000-2999: Catalog construction errors (merge, load)
        3000-3999: Usage errors (binding layer)
        5000-5999: Validation findings (completeness check)
    """

    # Resolution diagnostics (1000-1999)
    FALLBACK_USED = 1001
    MISSING_IN_ALL = 1002
    MISSING_ID = 1003

    # Catalog construction errors (2000-2999)
    MERGE_CONFLICT = 2001
    MERGE_INVALID_VALUE = 2002
    LOAD_FAILED = 2003

    # Usage errors (3000-3999)
    NO_TRANSLATOR = 3001

    # Validation findings (5000-5999)
    MISSING_TRANSLATION = 5001
    VARIANT_SHAPE_MISMATCH = 5002
    INVALID_VARIANT = 5003
    INVALID_NODE = 5004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        path: Catalog path the diagnostic refers to (if any)
        hint: Suggestion for fixing the problem
        severity: Severity level
    """

    code: DiagnosticCode
    message: str
    path: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic with code, path and hint.

        Example output:
            error[MERGE_CONFLICT]: 'sub.apple' is a leaf in one entry and a catalog in another
              --> sub.apple
              = help: Rename one of the conflicting keys
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.path is not None:
            lines.append(f"  --> {self.path}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)


def format_count_suffix(count: Count | None) -> str:
    """Return " (n. <count>)" for a count, or "" when there is none."""
    if count is None:
        return ""
    # Local import: the runtime package imports diagnostics
    from transtree.runtime.plural import format_count  # noqa: PLC0415

    return COUNT_SUFFIX.format(count=format_count(count))


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    """Immutable record of one degraded resolution.

    Attributes:
        kind: Classification of the resolution
        message_id: Full catalog path that was resolved
        language: Primary language of the call
        fallback_language: Fallback language of the call (if configured)
        count: Count passed to the call (if any)
    """

    kind: DiagnosticKind
    message_id: str
    language: LanguageCode
    fallback_language: LanguageCode | None = None
    count: Count | None = None

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code matching the event kind."""
        match self.kind:
            case DiagnosticKind.FALLBACK_USED:
                return DiagnosticCode.FALLBACK_USED
            case DiagnosticKind.MISSING_IN_ALL:
                return DiagnosticCode.MISSING_IN_ALL
            case _:
                return DiagnosticCode.MISSING_ID

    def format_line(self) -> str:
        """Format the single diagnostic line for this event.

        Example:
            >>> DiagnosticEvent(DiagnosticKind.MISSING_ID, "sub.apple", "it", count=5).format_line()
            "[Translate] Missing id: sub.apple (n. 5) in language 'it'"
        """
        head = f"{LOG_PREFIX} Missing id: {self.message_id}{format_count_suffix(self.count)}"
        match self.kind:
            case DiagnosticKind.FALLBACK_USED:
                return (
                    f"{head} in language '{self.language}', "
                    f"using fallback language '{self.fallback_language}'"
                )
            case DiagnosticKind.MISSING_IN_ALL:
                return (
                    f"{head} in language '{self.language}' "
                    f"and fallback language '{self.fallback_language}'"
                )
            case _:
                return f"{head} in language '{self.language}'"
