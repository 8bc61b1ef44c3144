"""Catalog completeness validation.

Reports, for a multi-language catalog:
- Errors: values that are neither catalogs, leaves nor variants, and
  malformed variants inside leaves
- Warnings: leaves lacking a language that other leaves provide, and
  leaves mixing single-string and plural variants across languages

Validation is advisory. translate() never consults it: a catalog with
warnings or errors still resolves every well-formed path.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from transtree.catalog.nodes import is_plural_variant, is_variant
from transtree.catalog.types import Catalog, LanguageCode
from transtree.constants import PATH_SEPARATOR

from .codes import DiagnosticCode

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_missing_translations",
]

logger = logging.getLogger(__name__)


# ============================================================================
# VALIDATION ERROR & WARNING TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structural error found in a catalog.

    Attributes:
        code: Diagnostic code (INVALID_NODE, INVALID_VARIANT)
        message: Human-readable error message
        path: Dotted path of the offending value
    """

    code: DiagnosticCode
    message: str
    path: str

    def format(self) -> str:
        """Format error as human-readable string."""
        return f"[{self.code.name}] at '{self.path}': {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Completeness or consistency warning found in a catalog.

    Attributes:
        code: Diagnostic code (MISSING_TRANSLATION, VARIANT_SHAPE_MISMATCH)
        message: Human-readable warning message
        path: Dotted path of the leaf
        language: Language the warning refers to (if any)
    """

    code: DiagnosticCode
    message: str
    path: str
    language: LanguageCode | None = None


# ============================================================================
# UNIFIED VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable outcome of a catalog validation.

    Attributes:
        errors: Structural errors
        warnings: Completeness and consistency warnings
        languages: Languages the catalog was checked against

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]
    languages: tuple[LanguageCode, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings do not affect validity - they're informational.
        """
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @property
    def missing_paths(self) -> dict[LanguageCode, tuple[str, ...]]:
        """Group MISSING_TRANSLATION warnings by language.

        Returns:
            Mapping of language code to the leaf paths lacking it
        """
        grouped: dict[LanguageCode, list[str]] = {}
        for warning in self.warnings:
            if warning.code is DiagnosticCode.MISSING_TRANSLATION and warning.language:
                grouped.setdefault(warning.language, []).append(warning.path)
        return {language: tuple(paths) for language, paths in grouped.items()}

    @staticmethod
    def valid() -> ValidationResult:
        """Create a result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(self, *, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format()}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  [{warning.code.name}] at '{warning.path}': {warning.message}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)


# ============================================================================
# CATALOG WALK
# ============================================================================


def _is_leaf_like(value: Mapping[object, object]) -> bool:
    """A non-empty mapping without nested mappings, well-formed or not."""
    return bool(value) and not any(isinstance(item, Mapping) for item in value.values())


def _walk(
    node: Mapping[object, object],
    path: tuple[str, ...],
    errors: list[ValidationError],
) -> Iterator[tuple[str, dict[LanguageCode, object]]]:
    """Yield (path, well-formed variants) for every leaf, collecting errors."""
    for key, value in node.items():
        child_path = PATH_SEPARATOR.join((*path, str(key)))
        if isinstance(value, Mapping):
            if _is_leaf_like(value):
                variants: dict[LanguageCode, object] = {}
                for language, variant in value.items():
                    if is_variant(variant):
                        variants[str(language)] = variant
                    else:
                        errors.append(
                            ValidationError(
                                code=DiagnosticCode.INVALID_VARIANT,
                                message=(
                                    f"'{language}' holds {type(variant).__name__}, expected "
                                    "a string or [singular, plural, zero]"
                                ),
                                path=child_path,
                            )
                        )
                yield child_path, variants
            else:
                yield from _walk(value, (*path, str(key)), errors)
        else:
            errors.append(
                ValidationError(
                    code=DiagnosticCode.INVALID_NODE,
                    message=(
                        f"{type(value).__name__} found where a catalog or a "
                        "language-keyed leaf was expected"
                    ),
                    path=child_path,
                )
            )


def check_missing_translations(
    catalog: Catalog,
    languages: Iterable[LanguageCode] | None = None,
) -> ValidationResult:
    """Check a catalog for missing and inconsistent translations.

    Args:
        catalog: Multi-language catalog
        languages: Languages every leaf should provide. Defaults to every
            language found in any leaf of the catalog.

    Returns:
        ValidationResult with structural errors and completeness warnings

    Example:
        >>> result = check_missing_translations({"pear": {"it": "Pera", "en": "Pear"},
        ...                                      "banana": {"it": "Banana"}})
        >>> result.missing_paths
        {'en': ('banana',)}
    """
    errors: list[ValidationError] = []
    leaves = list(_walk(catalog, (), errors))

    if languages is None:
        checked = tuple(sorted({language for _, variants in leaves for language in variants}))
    else:
        checked = tuple(dict.fromkeys(languages))

    warnings: list[ValidationWarning] = []
    for path, variants in leaves:
        for language in checked:
            if language not in variants:
                warnings.append(
                    ValidationWarning(
                        code=DiagnosticCode.MISSING_TRANSLATION,
                        message=f"No '{language}' translation",
                        path=path,
                        language=language,
                    )
                )
        shapes = {is_plural_variant(variant) for variant in variants.values()}
        if len(shapes) > 1:
            plural = sorted(lang for lang, v in variants.items() if is_plural_variant(v))
            single = sorted(lang for lang, v in variants.items() if isinstance(v, str))
            warnings.append(
                ValidationWarning(
                    code=DiagnosticCode.VARIANT_SHAPE_MISMATCH,
                    message=(
                        f"Plural in {', '.join(plural)} but single string in {', '.join(single)}"
                    ),
                    path=path,
                )
            )

    logger.debug(
        "Checked %d leaves against %s: %d errors, %d warnings",
        len(leaves),
        checked,
        len(errors),
        len(warnings),
    )
    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings), languages=checked)
