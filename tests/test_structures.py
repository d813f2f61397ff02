import pytest

from algodrills.structures import (
    BTNode,
    BiLinkNode,
    Deque,
    DisjointSet,
    HeapNode,
    LinkNode,
    LinkNodeWithRand,
    PriorityQueue,
    Queue,
    Stack,
)


def _drain_deque_front(d):
    out = []
    while len(d):
        out.append(d.front())
        d.pop_front()
    return out


def test_nodes_compare_by_identity():
    a, b = BTNode(1), BTNode(1)
    assert a == a
    assert len({a, b}) == 2
    assert a.left is None and a.right is None


def test_link_node_cycle_repr_does_not_recurse():
    node = LinkNode(1)
    node.next = node
    assert repr(node) == "LinkNode(val=1)"


def test_other_nodes_link_up():
    first = BiLinkNode(1)
    second = BiLinkNode(2, pre=first)
    first.next = second
    assert first.next.pre is first
    r = LinkNodeWithRand(3)
    r.rand = r
    assert r.rand is r
    child = HeapNode(4)
    parent = HeapNode(5, left=child)
    child.par = parent
    assert parent.left.par is parent


def test_deque_both_ends_across_blocks():
    d = Deque(2)
    for x in range(5):
        d.push_back(x)
    for x in (-1, -2, -3):
        d.push_front(x)
    assert len(d) == 8
    assert d.front() == -3
    assert d.back() == 4
    assert _drain_deque_front(d) == [-3, -2, -1] + list(range(5))


def test_deque_pop_back_order():
    d = Deque(3)
    values = [10, 20, 30, 40, 50]
    for v in values:
        d.push_back(v)
    out = []
    while len(d):
        out.append(d.back())
        d.pop_back()
    assert out == values[::-1]


def test_deque_empty_behaviour():
    d = Deque(4)
    d.pop_front()
    d.pop_back()
    assert len(d) == 0
    with pytest.raises(IndexError):
        d.front()
    with pytest.raises(IndexError):
        d.back()


def test_deque_clear():
    d = Deque(2)
    for v in range(7):
        d.push_front(v)
    d.clear()
    assert len(d) == 0
    d.push_back(9)
    assert d.front() == 9 and d.back() == 9


def test_deque_rejects_bad_block_size():
    with pytest.raises(ValueError):
        Deque(0)


def test_disjoint_set_union_and_find():
    ds = DisjointSet()
    for x in range(1, 7):
        ds.make_set(x)
    ds.union(1, 2)
    ds.union(2, 3)
    ds.union(4, 5)
    assert ds.is_same_set(1, 3)
    assert ds.is_same_set(4, 5)
    assert not ds.is_same_set(1, 4)
    assert not ds.is_same_set(6, 1)
    assert ds.find(3) == ds.find(1)
    ds.union(3, 5)
    assert ds.is_same_set(1, 4)
    assert ds.find(6) == 6


def test_disjoint_set_unknown_element_is_singleton():
    ds = DisjointSet()
    assert ds.find(42) == 42
    assert not ds.is_same_set(42, 7)


@pytest.mark.parametrize("values", [[5, 1, 9, 3, 7, 3], [1], list(range(20, 0, -1))])
def test_priority_queue_max_order(values):
    pq = PriorityQueue(lambda a, b: a - b)
    for v in values:
        pq.push(v)
    assert len(pq) == len(values)
    out = []
    while len(pq):
        out.append(pq.top())
        pq.pop()
    assert out == sorted(values, reverse=True)


def test_priority_queue_min_order_and_iter():
    values = [8, 2, 6, 4, 2, 0]
    pq = PriorityQueue(lambda a, b: b - a)
    for v in values:
        pq.push(v)
    assert sorted(pq) == sorted(values)
    assert pq.top() == min(values)
    out = []
    while len(pq):
        out.append(pq.top())
        pq.pop()
    assert out == sorted(values)


def test_priority_queue_tuples_by_second_field():
    pq = PriorityQueue(lambda a, b: a[1] - b[1])
    for item in [("a", 3), ("b", 7), ("c", 1)]:
        pq.push(item)
    assert pq.top() == ("b", 7)


def test_priority_queue_empty_and_clear():
    pq = PriorityQueue(lambda a, b: a - b)
    pq.pop()
    assert len(pq) == 0
    with pytest.raises(IndexError):
        pq.top()
    pq.push(3)
    pq.clear()
    assert len(pq) == 0
    pq.push(4)
    assert pq.top() == 4


def test_queue_fifo_with_growth():
    q = Queue(1)
    values = list(range(10))
    for v in values:
        q.enqueue(v)
    assert len(q) == len(values)
    assert q.front() == values[0]
    assert q.rear() == values[-1]
    out = []
    while len(q):
        out.append(q.front())
        q.dequeue()
    assert out == values


def test_queue_empty_behaviour():
    q = Queue(3)
    q.dequeue()
    assert len(q) == 0
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.rear()
    q.enqueue(1)
    q.clear()
    assert len(q) == 0


def test_queue_rejects_bad_size():
    with pytest.raises(ValueError):
        Queue(0)


def test_stack_lifo():
    s = Stack(0)
    values = [3, 1, 4, 1, 5]
    for v in values:
        s.push(v)
    assert len(s) == len(values)
    out = []
    while len(s):
        out.append(s.top())
        s.pop()
    assert out == values[::-1]


def test_stack_empty_and_clear():
    s = Stack(2)
    s.pop()
    assert len(s) == 0
    with pytest.raises(IndexError):
        s.top()
    s.push(1)
    s.push(2)
    s.clear()
    assert len(s) == 0
    with pytest.raises(ValueError):
        Stack(-1)