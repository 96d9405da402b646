from __future__ import annotations

from masonry_core.debouncer import SizeReportDebouncer
from masonry_core.models import Size


def test_latest_size_wins(scheduler) -> None:
    applied: list[Size] = []
    debouncer = SizeReportDebouncer(scheduler.schedule, scheduler.cancel, applied.append)

    debouncer.request(Size(100, 10))
    debouncer.request(Size(100, 20))
    debouncer.request(Size(100, 30))
    assert scheduler.pending == 1

    scheduler.run_all()

    assert applied == [Size(100, 30)]


def test_repeated_size_applied_once(scheduler) -> None:
    applied: list[Size] = []
    debouncer = SizeReportDebouncer(scheduler.schedule, scheduler.cancel, applied.append)

    debouncer.request(Size(100, 10))
    scheduler.run_all()
    debouncer.request(Size(100, 10))
    scheduler.run_all()

    assert applied == [Size(100, 10)]
    assert not debouncer.pending


def test_cancel_prevents_apply(scheduler) -> None:
    applied: list[Size] = []
    debouncer = SizeReportDebouncer(scheduler.schedule, scheduler.cancel, applied.append)

    debouncer.request(Size(100, 10))
    scheduler.cancel(debouncer._after_id)

    scheduler.run_all()

    assert applied == []


def test_flush_without_request_is_noop(scheduler) -> None:
    applied: list[Size] = []
    debouncer = SizeReportDebouncer(scheduler.schedule, scheduler.cancel, applied.append)
    debouncer.flush()
    assert applied == []
