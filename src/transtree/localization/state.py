"""Observable current-language cell.

The engine never stores the current language. LanguageState owns it on
behalf of the binding layer and notifies subscribers (e.g., a UI that
re-renders) whenever it changes.

Thread Safety:
    get(), set(), subscribe() and unsubscribe are safe from any thread.
    Listeners are called outside the lock, in subscription order, on the
    thread that called set().

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from transtree.catalog.types import LanguageCode

__all__ = ["LanguageListener", "LanguageState"]

logger = logging.getLogger(__name__)

type LanguageListener = Callable[[LanguageCode, LanguageCode], None]
"""Called with (old_language, new_language) after a change."""


class LanguageState:
    """Mutable language with change notification.

    Example:
        >>> state = LanguageState("it")
        >>> unsubscribe = state.subscribe(lambda old, new: print(f"{old} -> {new}"))
        >>> state.set("en")
        it -> en
        >>> state.set("en")  # unchanged, no notification
        >>> unsubscribe()
    """

    __slots__ = ("_language", "_listeners", "_lock")

    def __init__(self, language: LanguageCode) -> None:
        if not isinstance(language, str) or not language:
            msg = f"Language must be a non-empty string, got {language!r}"
            raise ValueError(msg)
        self._language = language
        self._listeners: list[LanguageListener] = []
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"LanguageState(language={self._language!r}, listeners={len(self._listeners)})"

    def get(self) -> LanguageCode:
        """Return the current language."""
        return self._language

    def set(self, language: LanguageCode) -> bool:
        """Switch language and notify listeners if it changed.

        Args:
            language: New language code

        Returns:
            True if the language changed

        Raises:
            ValueError: If language is empty or not a string
        """
        if not isinstance(language, str) or not language:
            msg = f"Language must be a non-empty string, got {language!r}"
            raise ValueError(msg)

        with self._lock:
            old = self._language
            if old == language:
                return False
            self._language = language
            listeners = tuple(self._listeners)

        logger.debug("Language changed: %s -> %s", old, language)
        for listener in listeners:
            listener(old, language)
        return True

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Callable that removes the listener (idempotent)
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe
