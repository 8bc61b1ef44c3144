"""transtree exception hierarchy with structured diagnostics.

Translation misses never raise: they degrade to the id or None. The
exceptions here cover catalog construction (merge, load) and usage errors
in the binding layer, which must fail loudly.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TranslateError(Exception):
    """Base exception for all transtree errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TranslatorContextError(TranslateError):
    """Current-translator accessor used outside translator_context().

    This is a programmer error, raised synchronously; it never degrades.
    """


class CatalogMergeError(TranslateError):
    """Per-language catalogs cannot be combined.

    Raised when the same path is a leaf in one entry and a subtree in
    another, or when a value is neither a mapping nor a variant.

    Attributes:
        path: Dotted path of the offending node
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class CatalogLoadError(TranslateError):
    """A catalog resource has an unusable format.

    Loaders raise this for resources that exist but do not hold a catalog
    (e.g., a JSON array at top level). load_catalog() records it as an
    ERROR load result instead of propagating it.

    Attributes:
        language: Language the resource was loaded for
        resource_id: Resource identifier
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        language: str = "",
        resource_id: str = "",
    ) -> None:
        super().__init__(message)
        self.language = language
        self.resource_id = resource_id
