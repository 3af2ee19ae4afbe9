from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import CircularQueue, LinearQueue, QueueOverflow, QueueUnderflow


@pytest.mark.parametrize("cls", [CircularQueue, LinearQueue])
def test_new_queue_is_empty(cls):
    queue = cls(5)
    assert queue.is_empty()
    assert not queue.is_full()
    assert len(queue) == 0
    assert list(queue) == []


@pytest.mark.parametrize("cls", [CircularQueue, LinearQueue])
def test_fifo_order(cls):
    queue = cls(5)
    for value in [10, 20, 30]:
        queue.enqueue(value)
    assert queue.peek() == 10
    assert [queue.dequeue() for _ in range(3)] == [10, 20, 30]
    assert queue.is_empty()


@pytest.mark.parametrize("cls", [CircularQueue, LinearQueue])
def test_overflow_when_full(cls):
    queue = cls(5)
    for value in [10, 20, 30, 40, 50]:
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueOverflow) as info:
        queue.enqueue(60)
    assert info.value.value == 60
    assert "Cannot enqueue 60" in str(info.value)
    assert list(queue) == [10, 20, 30, 40, 50]


@pytest.mark.parametrize("cls", [CircularQueue, LinearQueue])
def test_underflow_on_empty(cls):
    queue = cls(5)
    with pytest.raises(QueueUnderflow):
        queue.dequeue()
    with pytest.raises(QueueUnderflow):
        queue.peek()


@pytest.mark.parametrize("cls", [CircularQueue, LinearQueue])
def test_capacity_must_be_positive(cls):
    with pytest.raises(ValueError):
        cls(0)


def test_circular_queue_wraps_around():
    queue = CircularQueue(5)
    for value in [10, 20, 30, 40, 50]:
        queue.enqueue(value)
    assert queue.dequeue() == 10
    assert queue.dequeue() == 20
    assert list(queue) == [30, 40, 50]
    queue.enqueue(60)
    queue.enqueue(70)
    assert list(queue) == [30, 40, 50, 60, 70]
    assert queue.is_full()
    assert queue.peek() == 30


def test_linear_queue_does_not_reuse_freed_slots():
    queue = LinearQueue(5)
    for value in [10, 20, 30, 40, 50]:
        queue.enqueue(value)
    assert queue.dequeue() == 10
    assert queue.dequeue() == 20
    assert list(queue) == [30, 40, 50]
    assert len(queue) == 3
    with pytest.raises(QueueOverflow):
        queue.enqueue(60)
    assert list(queue) == [30, 40, 50]


def test_linear_queue_resets_once_emptied():
    queue = LinearQueue(5)
    for value in [1, 2, 3, 4, 5]:
        queue.enqueue(value)
    for _ in range(5):
        queue.dequeue()
    assert queue.is_empty()
    assert not queue.is_full()
    queue.enqueue(6)
    assert list(queue) == [6]


_ops = st.lists(st.one_of(st.integers(), st.none()), max_size=60)


@given(_ops)
def test_circular_queue_matches_bounded_deque(operations):
    queue = CircularQueue(4)
    model = deque()
    for op in operations:
        if op is None:
            if model:
                assert queue.dequeue() == model.popleft()
            else:
                with pytest.raises(QueueUnderflow):
                    queue.dequeue()
        elif len(model) == 4:
            with pytest.raises(QueueOverflow):
                queue.enqueue(op)
        else:
            queue.enqueue(op)
            model.append(op)
        assert list(queue) == list(model)
        assert len(queue) == len(model)