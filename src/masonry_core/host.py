from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Iterable, List, Optional

from .config import MasonryConfig
from .debouncer import SizeReportDebouncer
from .items import MasonryItem
from .models import Size
from .sizing import ContentSize, LayoutResult, ReportedFrame, layout_pass

logger = logging.getLogger(__name__)


class MasonryHost:
    """Keep a masonry laid out as its parent resizes it.

    Every pass reports the settled frame through a debouncer; applying a
    changed frame resizes the container, which runs another pass.
    """

    def __init__(
        self,
        config: MasonryConfig,
        items: Iterable[MasonryItem],
        schedule: Callable[[Callable[[], None]], Any],
        cancel: Callable[[Any], None],
    ) -> None:
        self.config = config
        self.items: List[MasonryItem] = list(items)
        self.frame = ReportedFrame.for_content(config.axis, ContentSize(0.0, 0.0, 0.0))
        self.proposed: Optional[Size] = None
        self.result: Optional[LayoutResult] = None
        self.passes = 0
        self._debouncer: SizeReportDebouncer[ReportedFrame] = SizeReportDebouncer(
            schedule, cancel, self._apply_frame
        )

    @property
    def container(self) -> Optional[Size]:
        if self.proposed is None:
            return None
        return self.frame.resolve(self.proposed)

    def update(self, proposed: Size) -> LayoutResult:
        """The parent offered a new size."""
        self.proposed = proposed
        return self._relayout()

    def set_items(self, items: Iterable[MasonryItem]) -> Optional[LayoutResult]:
        self.items = list(items)
        if self.proposed is None:
            return None
        return self._relayout()

    def _relayout(self) -> LayoutResult:
        container = self.container
        assert container is not None
        self.result = layout_pass(self.config, self.items, container)
        self.passes += 1
        self._debouncer.request(self.result.frame)
        return self.result

    def _apply_frame(self, frame: ReportedFrame) -> None:
        if frame == self.frame:
            return
        logger.debug("Masonry frame changed from %s to %s", self.frame, frame)
        self.frame = frame
        if self.proposed is not None:
            self._relayout()
