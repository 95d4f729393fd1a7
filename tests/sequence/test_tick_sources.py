"""Tests for tick sources and handles."""

import threading
from unittest.mock import Mock

from zenith_app.sequence.ticker import ManualTickSource, ThreadingTickSource, TickHandle


class TestTickHandle:
    """Test handle cancellation semantics."""

    def test_cancel_is_idempotent(self):
        """Test that the cancel hook runs only once."""
        on_cancel = Mock()
        handle = TickHandle(1, on_cancel=on_cancel)

        handle.cancel()
        handle.cancel()

        assert handle.cancelled
        on_cancel.assert_called_once_with(handle)

    def test_context_manager_cancels(self):
        with TickHandle(1) as handle:
            assert not handle.cancelled
        assert handle.cancelled


class TestManualTickSource:
    """Test deterministic tick delivery."""

    def test_advance_calls_live_callbacks(self, ticks):
        callback = Mock()
        ticks.schedule(1.0, callback)

        ticks.advance(3)

        assert callback.call_count == 3
        assert ticks.active_count == 1

    def test_cancelled_handle_receives_nothing(self, ticks):
        callback = Mock()
        handle = ticks.schedule(1.0, callback)

        handle.cancel()
        ticks.advance(5)

        callback.assert_not_called()
        assert ticks.active_count == 0

    def test_generations_increase(self, ticks):
        first = ticks.schedule(1.0, Mock())
        second = ticks.schedule(1.0, Mock())

        assert second.generation > first.generation
        assert ticks.scheduled_count == 2

    def test_callback_cancelling_itself_stops_delivery(self):
        source = ManualTickSource()
        calls = []
        holder = {}

        def callback():
            calls.append(1)
            holder["handle"].cancel()

        holder["handle"] = source.schedule(1.0, callback)
        source.advance(4)

        assert len(calls) == 1


class TestThreadingTickSource:
    """Test wall-clock tick delivery on a daemon thread."""

    def test_delivers_ticks_until_cancelled(self):
        fired = threading.Event()
        callback = Mock(side_effect=lambda: fired.set())
        source = ThreadingTickSource()

        handle = source.schedule(0.01, callback)
        assert fired.wait(2.0)
        handle.cancel()
        count_after_cancel = callback.call_count

        # The worker exits after observing the cancellation
        handle.thread.join(timeout=2.0)
        assert not handle.thread.is_alive()
        assert handle.thread.daemon
        assert callback.call_count <= count_after_cancel + 1

    def test_failing_callback_stops_its_handle(self):
        failed = threading.Event()

        def callback():
            failed.set()
            raise RuntimeError("boom")

        handle = ThreadingTickSource().schedule(0.01, callback)

        assert failed.wait(2.0)
        handle.thread.join(timeout=2.0)
        assert handle.cancelled
