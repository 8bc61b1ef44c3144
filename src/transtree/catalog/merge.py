"""Composition of per-language catalogs.

Translators author one tree per language, without the language dimension:

    it = {"pear": "Pera", "sub": {"strawberry": ["1 fragola", "%n fragole", "0 fragole"]}}
    en = {"pear": "Pear", "sub": {"strawberry": ["1 strawberry", "%n strawberries", ...]}}

merge() wraps every bare variant into a one-language leaf and deep-unions
the results into the multi-language catalog the engine reads:

    {"pear": {"it": "Pera", "en": "Pear"}, "sub": {"strawberry": {"it": [...], "en": [...]}}}

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from transtree.catalog.nodes import is_leaf, is_variant
from transtree.catalog.types import Catalog, LanguageCode, PartialCatalog
from transtree.constants import PATH_SEPARATOR
from transtree.diagnostics.codes import Diagnostic, DiagnosticCode
from transtree.diagnostics.errors import CatalogMergeError

__all__ = ["CatalogEntry", "merge", "wrap_language"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One single-language tree to merge.

    Attributes:
        language: Language code every leaf of ``tree`` is written in
        tree: Partial catalog whose leaves are bare variants
    """

    language: LanguageCode
    tree: PartialCatalog


def _join(path: tuple[str, ...]) -> str:
    return PATH_SEPARATOR.join(path)


def wrap_language(
    language: LanguageCode,
    tree: PartialCatalog,
    _path: tuple[str, ...] = (),
) -> dict[str, object]:
    """Add the language dimension to a single-language tree.

    Args:
        language: Language code for every leaf
        tree: Partial catalog with bare variants as leaves

    Returns:
        New catalog with ``{language: variant}`` leaves

    Raises:
        CatalogMergeError: If a value is neither a mapping nor a variant

    Example:
        >>> wrap_language("it", {"pear": "Pera", "vegetable": {"carrot": "Carota"}})
        {'pear': {'it': 'Pera'}, 'vegetable': {'carrot': {'it': 'Carota'}}}
    """
    wrapped: dict[str, object] = {}
    for key, value in tree.items():
        path = (*_path, key)
        if is_variant(value):
            wrapped[key] = {language: value}
        elif isinstance(value, Mapping):
            wrapped[key] = wrap_language(language, value, path)
        else:
            diagnostic = Diagnostic(
                code=DiagnosticCode.MERGE_INVALID_VALUE,
                message=(
                    f"'{_join(path)}' holds {type(value).__name__} for '{language}', "
                    "expected a string, [singular, plural, zero] or a nested mapping"
                ),
                path=_join(path),
            )
            raise CatalogMergeError(diagnostic, path=_join(path))
    return wrapped


def _union_into(
    target: dict[str, object],
    source: Mapping[str, object],
    path: tuple[str, ...],
) -> None:
    """Deep-union a wrapped catalog into ``target`` (mutates ``target``)."""
    for key, value in source.items():
        existing = target.get(key)
        if not existing:
            target[key] = value
            continue
        if not value:
            continue

        match (is_leaf(existing), is_leaf(value)):
            case (True, True):
                # Same language at the same path: last write wins
                existing.update(value)  # type: ignore[attr-defined]
            case (False, False):
                _union_into(existing, value, (*path, key))  # type: ignore[arg-type]
            case _:
                child = _join((*path, key))
                diagnostic = Diagnostic(
                    code=DiagnosticCode.MERGE_CONFLICT,
                    message=f"'{child}' is a leaf in one entry and a catalog in another",
                    path=child,
                    hint="Rename one of the conflicting keys",
                )
                raise CatalogMergeError(diagnostic, path=child)


def _entry_parts(entry: object) -> tuple[LanguageCode, PartialCatalog]:
    match entry:
        case CatalogEntry(language=language, tree=tree):
            return language, tree
        case {"language": str() as language, "tree": Mapping() as tree}:
            return language, tree
        case (str() as language, Mapping() as tree):
            return language, tree
        case _:
            msg = (
                "merge() entries must be CatalogEntry, (language, tree) pairs or "
                f"{{'language': ..., 'tree': ...}} mappings, got {type(entry).__name__}"
            )
            raise TypeError(msg)


def merge(entries: Iterable[CatalogEntry | tuple[LanguageCode, PartialCatalog]]) -> Catalog:
    """Combine single-language trees into one multi-language catalog.

    Leaves for different languages at the same path are united; when the
    same language is supplied twice at the same path, the later entry wins.
    Inputs are never mutated.

    Args:
        entries: CatalogEntry objects or (language, tree) pairs

    Returns:
        Multi-language catalog

    Raises:
        CatalogMergeError: If a path is a leaf in one entry and a subtree in
            another, or a value is neither a mapping nor a variant
        TypeError: If an entry has an unsupported type

    Example:
        >>> merge([("it", {"pear": "Pera"}), ("en", {"pear": "Pear"})])
        {'pear': {'it': 'Pera', 'en': 'Pear'}}
    """
    catalog: dict[str, object] = {}
    for entry in entries:
        language, tree = _entry_parts(entry)
        _union_into(catalog, wrap_language(language, tree), ())
        logger.debug("Merged catalog entry for language '%s' (%d top-level keys)", language, len(tree))
    return catalog  # type: ignore[return-value]
