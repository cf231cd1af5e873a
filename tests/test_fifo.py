import pytest

from algopractice.fifo import EmptyQueueError, Queue


def test_new_queue_is_empty():
    q = Queue()
    assert q.is_empty()
    assert len(q) == 0


def test_fifo_order_with_pairs():
    q = Queue()
    pairs = [(10, 20), (30, 40), (50, 60)]
    for pair in pairs:
        q.enqueue(pair)
    assert len(q) == 3
    seen = []
    while not q.is_empty():
        assert q.peek() == q.peek()
        seen.append(q.dequeue())
    assert seen == pairs


def test_peek_does_not_remove():
    q = Queue()
    q.enqueue("a")
    q.enqueue("b")
    assert q.peek() == "a"
    assert len(q) == 2
    assert q.dequeue() == "a"
    assert q.peek() == "b"


def test_peek_after_draining_raises():
    q = Queue()
    q.enqueue(1)
    q.dequeue()
    with pytest.raises(EmptyQueueError):
        q.peek()


def test_dequeue_empty_raises():
    with pytest.raises(EmptyQueueError):
        Queue().dequeue()


def test_empty_queue_error_is_index_error():
    with pytest.raises(IndexError):
        Queue().peek()


def test_clear_empties_queue():
    q = Queue([1, 2, 3])
    assert len(q) == 3
    q.clear()
    assert q.is_empty()
    with pytest.raises(EmptyQueueError):
        q.dequeue()


def test_initial_items_keep_order():
    q = Queue(["x", "y"])
    q.enqueue("z")
    assert [q.dequeue() for _ in range(3)] == ["x", "y", "z"]


def test_reuse_after_empty():
    q = Queue()
    q.enqueue(5)
    q.dequeue()
    q.enqueue(6)
    assert q.peek() == 6
    assert len(q) == 1