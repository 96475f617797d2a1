"""Unit tests for BoundedQueue."""
from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from mp_logger.delivery import BoundedQueue


class TestBoundedQueue:
    def test_rejects_non_positive_capacity(self) -> None:
        with pytest.raises(ValueError):
            BoundedQueue(0)

    def test_fifo(self) -> None:
        q: BoundedQueue[str] = BoundedQueue(5)
        for item in "abc":
            q.append(item)
        assert list(q) == ["a", "b", "c"]
        assert q.popleft() == "a"

    def test_overflow_evicts_oldest(self) -> None:
        q: BoundedQueue[str] = BoundedQueue(2)
        assert q.append("A") is None
        assert q.append("B") is None
        assert q.append("C") == "A"
        assert list(q) == ["B", "C"]
        assert q.evicted == 1

    def test_peek_does_not_remove(self) -> None:
        q: BoundedQueue[int] = BoundedQueue(10)
        for i in range(5):
            q.append(i)
        assert q.peek(3) == [0, 1, 2]
        assert q.peek(10) == [0, 1, 2, 3, 4]
        assert len(q) == 5

    def test_remove_leading_matches_identity(self) -> None:
        q: BoundedQueue[dict[str, int]] = BoundedQueue(10)
        items = [{"n": i} for i in range(4)]
        for item in items:
            q.append(item)
        batch = q.peek(2)
        assert q.remove_leading(batch) == 2
        assert list(q) == items[2:]

    def test_remove_leading_skips_evicted(self) -> None:
        q: BoundedQueue[dict[str, int]] = BoundedQueue(3)
        items = [{"n": i} for i in range(3)]
        for item in items:
            q.append(item)
        batch = q.peek(2)
        q.append({"n": 3})  # evicts items[0] while the batch is "in flight"
        assert q.remove_leading(batch) == 1
        assert [item["n"] for item in q] == [2, 3]

    def test_push_front_requeues_at_head(self) -> None:
        q: BoundedQueue[str] = BoundedQueue(3)
        q.append("b")
        q.append("c")
        assert q.push_front("a") is None
        assert list(q) == ["a", "b", "c"]

    def test_push_front_when_full_drops_the_requeued_item(self) -> None:
        q: BoundedQueue[str] = BoundedQueue(2)
        q.append("b")
        q.append("c")
        assert q.push_front("a") == "a"
        assert list(q) == ["b", "c"]
        assert q.evicted == 1

    def test_popleft_and_bool(self) -> None:
        q: BoundedQueue[int] = BoundedQueue(2)
        assert not q
        q.append(1)
        assert q and q.full() is False
        assert q.popleft() == 1
        assert len(q) == 0


class TestBoundedQueueProperties:
    @given(maxsize=st.integers(min_value=1, max_value=50), items=st.lists(st.integers(), max_size=200))
    def test_never_exceeds_capacity_and_keeps_newest(self, maxsize: int, items: list[int]) -> None:
        q: BoundedQueue[int] = BoundedQueue(maxsize)
        for item in items:
            q.append(item)
            assert len(q) <= maxsize
        assert list(q) == items[-maxsize:]
        assert q.evicted == max(0, len(items) - maxsize)
