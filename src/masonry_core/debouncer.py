from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SizeReportDebouncer(Generic[T]):
    """Coalesce size reports so only the latest one is applied.

    ``schedule`` queues a callback for the host's next commit and returns a
    handle that ``cancel`` accepts.
    """

    def __init__(
        self,
        schedule: Callable[[Callable[[], None]], Any],
        cancel: Callable[[Any], None],
        apply: Callable[[T], None],
    ) -> None:
        self._schedule = schedule
        self._cancel = cancel
        self._apply = apply
        self._after_id: Any | None = None
        self._pending: T | None = None
        self._has_pending = False
        self._last_applied: T | None = None
        self._has_applied = False

    @property
    def pending(self) -> bool:
        return self._has_pending

    def request(self, size: T) -> None:
        if self._has_pending:
            logger.debug("Dropping superseded size report %r", self._pending)
        self._pending = size
        self._has_pending = True
        if self._after_id is not None:
            self._cancel(self._after_id)
        self._after_id = self._schedule(self.flush)

    def flush(self) -> None:
        self._after_id = None
        if not self._has_pending:
            return
        size = self._pending
        self._pending = None
        self._has_pending = False
        if self._has_applied and size == self._last_applied:
            return
        self._last_applied = size
        self._has_applied = True
        self._apply(size)  # type: ignore[arg-type]
