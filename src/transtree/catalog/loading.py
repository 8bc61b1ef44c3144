"""Catalog loading from per-language JSON resources.

Provides the protocol for catalog loaders, a filesystem implementation
with path-traversal security, result/summary data structures for tracking
load attempts, and load_catalog(), which loads every (language, resource)
pair and merges the single-language trees into one catalog.

Components:
    CatalogLoader - Protocol for loading partial catalogs (structural typing)
    PathCatalogLoader - Disk-based JSON loader with path-traversal prevention
    CatalogLoadResult - Immutable result of a single resource load attempt
    LoadSummary - Immutable aggregate of all load results
    load_catalog - Load and merge resources for several languages

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from transtree.catalog.merge import CatalogEntry, merge, wrap_language
from transtree.catalog.types import Catalog, LanguageCode, PartialCatalog
from transtree.diagnostics.codes import Diagnostic, DiagnosticCode
from transtree.diagnostics.errors import CatalogLoadError, CatalogMergeError
from transtree.enums import LoadStatus

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogLoader",
    # Concrete loader
    "PathCatalogLoader",
    # Load result types
    "CatalogLoadResult",
    "LoadSummary",
    # Entry point
    "load_catalog",
]

logger = logging.getLogger(__name__)

type ResourceId = str
"""Catalog resource identifier (e.g., 'messages.json', 'errors.json')."""


class CatalogLoader(Protocol):
    """Protocol for loading single-language catalog trees.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, trees):
        ...         self.trees = trees
        ...     def load(self, language, resource_id):
        ...         try:
        ...             return self.trees[language][resource_id]
        ...         except KeyError:
        ...             raise FileNotFoundError(resource_id) from None
        ...     def describe_path(self, language, resource_id):
        ...         return f"memory://{language}/{resource_id}"
    """

    def load(self, language: LanguageCode, resource_id: ResourceId) -> PartialCatalog:
        """Load the partial catalog for one language.

        Raises:
            FileNotFoundError: If the resource doesn't exist for this language
            OSError: If the resource cannot be read
            ValueError: If the resource cannot be decoded
            CatalogLoadError: If the resource does not hold a catalog
        """

    def describe_path(self, language: LanguageCode, resource_id: ResourceId) -> str:
        """Return human-readable path for diagnostics."""
        return f"{language}/{resource_id}"


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system loader for per-language JSON catalogs.

    Uses a {language} placeholder in the path template:

        locales/it/messages.json -> {"pear": "Pera", "sub": {...}}
        locales/en/messages.json -> {"pear": "Pear", "sub": {...}}

    Security:
        Language codes containing path separators or ".." are rejected.
        Resource IDs containing ".." or absolute paths are rejected.
        All resolved paths are validated against a fixed root directory.

    Attributes:
        base_path: Path template with {language} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str = "locales/{language}"
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {language} placeholder
        """
        if "{language}" not in self.base_path:
            msg = (
                "base_path must contain '{language}' placeholder for language substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{language}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_language(language: LanguageCode) -> None:
        if not language:
            msg = "Language code cannot be empty"
            raise ValueError(msg)
        if ".." in language:
            msg = f"Path traversal sequences not allowed in language: '{language}'"
            raise ValueError(msg)
        if "/" in language or "\\" in language:
            msg = f"Path separators not allowed in language: '{language}'"
            raise ValueError(msg)

    @staticmethod
    def _validate_resource_id(resource_id: ResourceId) -> None:
        if resource_id.strip() != resource_id:
            msg = f"Resource ID contains leading/trailing whitespace: {resource_id!r}"
            raise ValueError(msg)
        if Path(resource_id).is_absolute() or resource_id.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)
        if ".." in resource_id:
            msg = f"Path traversal sequences not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)

    def describe_path(self, language: LanguageCode, resource_id: ResourceId) -> str:
        """Return the language-substituted path for diagnostics."""
        return f"{self.base_path.replace('{language}', language)}/{resource_id}"

    def load(self, language: LanguageCode, resource_id: ResourceId) -> PartialCatalog:
        """Load a JSON catalog file from disk.

        Raises:
            ValueError: If language or resource_id is unsafe, or the JSON is invalid
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            CatalogLoadError: If the top-level JSON value is not an object
        """
        self._validate_language(language)
        self._validate_resource_id(resource_id)

        base_dir = Path(self.base_path.replace("{language}", language)).resolve()
        full_path = (base_dir / resource_id).resolve()
        if not full_path.is_relative_to(self._resolved_root):
            msg = (
                "Path traversal detected: resolved path escapes root directory. "
                f"language='{language}', resource_id='{resource_id}'"
            )
            raise ValueError(msg)

        data = json.loads(full_path.read_text(encoding="utf-8"))
        if not isinstance(data, Mapping):
            diagnostic = Diagnostic(
                code=DiagnosticCode.LOAD_FAILED,
                message=f"Expected a JSON object at top level, got {type(data).__name__}",
                path=str(full_path),
            )
            raise CatalogLoadError(diagnostic, language=language, resource_id=resource_id)
        return data


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading a single catalog resource.

    Attributes:
        language: Language code for this resource
        resource_id: Resource identifier (e.g., 'messages.json')
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to resource (if available)
    """

    language: LanguageCode
    resource_id: ResourceId
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if resource loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if resource was not found (expected for partial translations)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if resource load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of catalog load results.

    Attributes:
        results: All individual load results (immutable tuple)
    """

    results: tuple[CatalogLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of resources not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any resources failed to load with errors."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check that every resource was found and loaded."""
        return self.errors == 0 and self.not_found == 0

    def get_errors(self) -> tuple[CatalogLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[CatalogLoadResult, ...]:
        """Get all results where the resource was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_by_language(self, language: LanguageCode) -> tuple[CatalogLoadResult, ...]:
        """Get all results for a specific language."""
        return tuple(r for r in self.results if r.language == language)


def load_catalog(
    languages: Iterable[LanguageCode],
    resource_ids: Iterable[ResourceId],
    loader: CatalogLoader,
) -> tuple[Catalog, LoadSummary]:
    """Load every resource for every language and merge the results.

    Missing resources, unreadable or undecodable files, and files holding
    values that are neither variants nor mappings do not raise: they are
    recorded in the LoadSummary, and the catalog is built from the
    resources that loaded.

    Args:
        languages: Language codes to load
        resource_ids: Resource identifiers loaded for each language
        loader: Loader implementation

    Returns:
        Tuple of (merged catalog, load summary)

    Raises:
        CatalogMergeError: If a path is a leaf in one loaded resource and a
            subtree in another

    Example:
        >>> loader = PathCatalogLoader("locales/{language}")
        >>> catalog, summary = load_catalog(["it", "en"], ["messages.json"], loader)
        >>> summary.all_successful
        True
    """
    resource_list = tuple(resource_ids)
    entries: list[CatalogEntry] = []
    results: list[CatalogLoadResult] = []

    for language in dict.fromkeys(languages):
        for resource_id in resource_list:
            source_path = loader.describe_path(language, resource_id)
            try:
                tree = loader.load(language, resource_id)
                wrap_language(language, tree)
            except FileNotFoundError:
                logger.debug("Catalog resource not found: %s", source_path)
                results.append(
                    CatalogLoadResult(
                        language=language,
                        resource_id=resource_id,
                        status=LoadStatus.NOT_FOUND,
                        source_path=source_path,
                    )
                )
                continue
            except (OSError, ValueError, CatalogLoadError, CatalogMergeError) as e:
                logger.error("Failed to load catalog resource %s: %s", source_path, e)
                results.append(
                    CatalogLoadResult(
                        language=language,
                        resource_id=resource_id,
                        status=LoadStatus.ERROR,
                        error=e,
                        source_path=source_path,
                    )
                )
                continue

            entries.append(CatalogEntry(language=language, tree=tree))
            results.append(
                CatalogLoadResult(
                    language=language,
                    resource_id=resource_id,
                    status=LoadStatus.SUCCESS,
                    source_path=source_path,
                )
            )

    summary = LoadSummary(results=tuple(results))
    logger.info("Catalog loaded: %r", summary)
    return merge(entries), summary
