"""Deferred reporting of missing translations.

Diagnostics never run inside translate(): each report is classified
synchronously and handed to a single worker thread, which logs it after
the call has returned. One worker means one FIFO queue, so lines come out
in the order the translate calls were issued.

Thread Safety:
    report(), flush() and close() may be called from any thread.
    Scheduling is serialized by an internal lock so that the submission
    order matches the order in which report() calls return.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING, Self

from transtree.constants import DIAGNOSTICS_THREAD_NAME
from transtree.enums import DiagnosticKind

from .codes import DiagnosticEvent

if TYPE_CHECKING:
    from transtree.catalog.types import Count, LanguageCode

__all__ = [
    "DiagnosticsEmitter",
    "classify",
    "get_default_emitter",
]

logger = logging.getLogger(__name__)


def classify(*, found: bool, using_fallback: bool) -> DiagnosticKind:
    """Classify a resolution outcome.

    Example:
        >>> classify(found=True, using_fallback=False)
        <DiagnosticKind.FOUND: 'found'>
        >>> classify(found=False, using_fallback=True)
        <DiagnosticKind.MISSING_IN_ALL: 'missing_in_all'>
    """
    match (found, using_fallback):
        case (True, False):
            return DiagnosticKind.FOUND
        case (True, True):
            return DiagnosticKind.FALLBACK_USED
        case (False, True):
            return DiagnosticKind.MISSING_IN_ALL
        case _:
            return DiagnosticKind.MISSING_ID


class DiagnosticsEmitter:
    """Asynchronous, order-preserving diagnostics channel.

    Example:
        >>> with DiagnosticsEmitter() as emitter:
        ...     emitter.report(
        ...         found=False, using_fallback=False, message_id="sub.apple",
        ...         language="it", fallback_language=None, count=5,
        ...         suppress_warnings=False,
        ...     )
        # logs on exit: [Translate] Missing id: sub.apple (n. 5) in language 'it'

    Attributes:
        on_diagnostic: Optional callback invoked on the worker thread with
            each DiagnosticEvent, after it has been logged
    """

    __slots__ = ("_closed", "_executor", "_lock", "_pending", "on_diagnostic")

    def __init__(
        self,
        *,
        on_diagnostic: Callable[[DiagnosticEvent], None] | None = None,
    ) -> None:
        self.on_diagnostic = on_diagnostic
        self._executor: ThreadPoolExecutor | None = None
        self._pending: set[Future[None]] = set()
        self._lock = threading.Lock()
        self._closed = False

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def report(
        self,
        *,
        found: bool,
        using_fallback: bool,
        message_id: str,
        language: LanguageCode,
        fallback_language: LanguageCode | None,
        count: Count | None,
        suppress_warnings: bool,
    ) -> DiagnosticEvent | None:
        """Schedule the diagnostic for one resolution.

        Nothing is scheduled when warnings are suppressed or when the
        translation was served from the primary language. Reports made
        after close() are dropped with a debug log.

        Returns:
            The scheduled event, or None when nothing was scheduled
        """
        if suppress_warnings:
            return None

        kind = classify(found=found, using_fallback=using_fallback)
        if kind is DiagnosticKind.FOUND:
            return None

        event = DiagnosticEvent(
            kind=kind,
            message_id=message_id,
            language=language,
            fallback_language=fallback_language,
            count=count,
        )
        if not self._schedule(event):
            return None
        return event

    def _schedule(self, event: DiagnosticEvent) -> bool:
        future: Future[None] | None = None
        with self._lock:
            if not self._closed:
                if self._executor is None:
                    self._executor = ThreadPoolExecutor(
                        max_workers=1, thread_name_prefix=DIAGNOSTICS_THREAD_NAME
                    )
                future = self._executor.submit(self._emit, event)
                self._pending.add(future)
        if future is None:
            logger.debug("Diagnostic dropped after close: %s", event.format_line())
            return False
        future.add_done_callback(self._discard)
        return True

    def _discard(self, future: Future[None]) -> None:
        with self._lock:
            self._pending.discard(future)

    def _emit(self, event: DiagnosticEvent) -> None:
        logger.warning("%s", event.format_line())
        if self.on_diagnostic is None:
            return
        try:
            self.on_diagnostic(event)
        except Exception:
            logger.exception("on_diagnostic callback failed for '%s'", event.message_id)

    def flush(self, timeout: float | None = None) -> bool:
        """Block until every diagnostic scheduled so far has been emitted.

        Args:
            timeout: Maximum seconds to wait (None waits indefinitely)

        Returns:
            True if all pending diagnostics were emitted within the timeout
        """
        with self._lock:
            pending = set(self._pending)
        if not pending:
            return True
        _done, not_done = wait(pending, timeout=timeout)
        return not not_done

    def close(self) -> None:
        """Emit pending diagnostics and stop the worker thread.

        Reports made after close() are dropped, never emitted on the
        caller's thread.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            executor = self._executor
            self._executor = None
        if executor is not None:
            executor.shutdown(wait=True)
        logger.debug("DiagnosticsEmitter closed")


_default_emitter: DiagnosticsEmitter | None = None
_default_lock = threading.Lock()


def get_default_emitter() -> DiagnosticsEmitter:
    """Return the process-wide emitter, creating it on first use."""
    global _default_emitter  # noqa: PLW0603 - lazily created process singleton
    with _default_lock:
        if _default_emitter is None or _default_emitter.closed:
            _default_emitter = DiagnosticsEmitter()
        return _default_emitter
