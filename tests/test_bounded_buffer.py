"""Tests for the bounded producer/consumer buffer"""

import threading
import time

import pytest

from log_engine.core.bounded_buffer import BoundedBuffer


class TestBoundedBuffer:
    """Test push/pop contracts."""

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            BoundedBuffer(0)
        with pytest.raises(ValueError):
            BoundedBuffer(10, push_timeout=-1)

    def test_fifo_order(self):
        buffer = BoundedBuffer(10)
        for i in range(5):
            assert buffer.push_with_haste(i)

        popped = [buffer.pop_with_haste()[1] for _ in range(5)]
        assert popped == [0, 1, 2, 3, 4]

    def test_pop_with_haste_on_empty(self):
        buffer = BoundedBuffer(4)
        assert buffer.pop_with_haste() == (False, None)

    def test_pop_with_timed_wait_times_out(self):
        buffer = BoundedBuffer(4)
        start = time.monotonic()
        ok, item = buffer.pop_with_timed_wait(0.05)
        elapsed = time.monotonic() - start

        assert ok is False
        assert item is None
        assert elapsed >= 0.04

    def test_pop_with_timed_wait_wakes_on_push(self):
        buffer = BoundedBuffer(4)
        timer = threading.Timer(0.05, buffer.push_with_haste, args=("late",))
        timer.start()

        ok, item = buffer.pop_with_timed_wait(2.0)
        timer.join()

        assert ok is True
        assert item == "late"

    def test_full_buffer_refuses_without_waiting(self):
        buffer = BoundedBuffer(2, push_timeout=0)
        assert buffer.push_with_haste("a")
        assert buffer.push_with_haste("b")
        assert buffer.push_with_haste("c") is False
        assert buffer.qsize() == 2

    def test_full_buffer_wait_is_bounded(self):
        buffer = BoundedBuffer(1, push_timeout=0.05)
        buffer.push_with_haste("a")

        start = time.monotonic()
        assert buffer.push_with_haste("b") is False
        assert time.monotonic() - start < 1.0

    def test_full_buffer_accepts_once_space_frees(self):
        buffer = BoundedBuffer(1, push_timeout=2.0)
        buffer.push_with_haste("a")
        timer = threading.Timer(0.05, buffer.pop_with_haste)
        timer.start()

        assert buffer.push_with_haste("b") is True
        timer.join()
        assert buffer.pop_with_haste() == (True, "b")

    def test_join_waits_for_task_done(self):
        buffer = BoundedBuffer(4)
        buffer.push_with_haste("a")
        ok, _ = buffer.pop_with_haste()
        assert ok
        buffer.task_done()
        buffer.join()
        assert buffer.empty()

    def test_capacity_and_repr(self):
        buffer = BoundedBuffer(8)
        assert buffer.capacity == 8
        assert "capacity=8" in repr(buffer)
