"""Linked list exercises."""

from __future__ import annotations

from algodrills.structures import BiLinkNode, LinkNode, LinkNodeWithRand


def _length(head: LinkNode | None, end: LinkNode | None = None) -> int:
    count = 0
    while head is not end:
        count += 1
        head = head.next
    return count


def _reverse(head: LinkNode | None) -> LinkNode | None:
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def common_part(head1: LinkNode | None, head2: LinkNode | None) -> list:
    """Values common to two ascending lists, in order."""
    result = []
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            head1 = head1.next
        elif head1.val > head2.val:
            head2 = head2.next
        else:
            result.append(head1.val)
            head1 = head1.next
            head2 = head2.next
    return result


def remove_reciprocal(head: LinkNode | None, k: int) -> LinkNode | None:
    """Remove the k-th node from the end of a singly linked list; return the head."""
    if k <= 0 or k > _length(head):
        return head
    dummy = LinkNode(next=head)
    fast = dummy
    for _ in range(k + 1):
        fast = fast.next
    slow = dummy
    while fast is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return dummy.next


def remove_reciprocal2(head: BiLinkNode | None, k: int) -> BiLinkNode | None:
    """Remove the k-th node from the end of a doubly linked list; return the head."""
    if k <= 0:
        return head
    fast = head
    for _ in range(k):
        if fast is None:
            return head
        fast = fast.next
    slow = head
    while fast is not None:
        slow = slow.next
        fast = fast.next
    if slow.pre is not None:
        slow.pre.next = slow.next
    if slow.next is not None:
        slow.next.pre = slow.pre
    if slow is head:
        head = slow.next
    slow.pre = slow.next = None
    return head


def reverse1(head: LinkNode | None) -> LinkNode | None:
    """Reverse a singly linked list in place."""
    return _reverse(head)


def reverse2(head: BiLinkNode | None) -> BiLinkNode | None:
    """Reverse a doubly linked list in place."""
    prev = None
    while head is not None:
        nxt = head.next
        head.next = prev
        head.pre = nxt
        prev = head
        head = nxt
    return prev


def reverse_part(head: LinkNode | None, start: int, end: int) -> LinkNode | None:
    """Reverse nodes ``start``..``end`` (1-based); leave the list alone if out of range."""
    if not 1 <= start <= end <= _length(head):
        return head
    dummy = LinkNode(next=head)
    before = dummy
    for _ in range(start - 1):
        before = before.next
    first = before.next
    cur = first
    prev = None
    for _ in range(end - start + 1):
        cur.next, prev, cur = prev, cur, cur.next
    before.next = prev
    first.next = cur
    return dummy.next


def get_live(n: int, m: int) -> int:
    """1-based position of the survivor among ``n`` people counting to ``m``."""
    if n < 1 or m < 1:
        raise ValueError("n and m must be positive")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + m - 1) % size + 1
    return survivor


def josephus_last(head: LinkNode | None, m: int) -> LinkNode | None:
    """Return the survivor of a circular (or plain) list as a one-node ring."""
    if head is None:
        return None
    n = 1
    node = head.next
    while node is not None and node is not head:
        n += 1
        node = node.next
    survivor = head
    for _ in range(get_live(n, m) - 1):
        survivor = survivor.next
    survivor.next = survivor
    return survivor


def is_palindrome(head: LinkNode | None) -> bool:
    """Whether the list reads the same both ways; the list is restored afterwards."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = _reverse(slow.next)
    slow.next = None
    try:
        left, right = head, second
        while right is not None:
            if left.val != right.val:
                return False
            left = left.next
            right = right.next
        return True
    finally:
        slow.next = _reverse(second)


def copy_link(head: LinkNodeWithRand | None) -> LinkNodeWithRand | None:
    """Deep copy of a list whose nodes carry a random pointer."""
    copies: dict[int, LinkNodeWithRand] = {}
    node = head
    while node is not None:
        copies[id(node)] = LinkNodeWithRand(node.val)
        node = node.next
    node = head
    while node is not None:
        clone = copies[id(node)]
        clone.next = copies[id(node.next)] if node.next is not None else None
        clone.rand = copies[id(node.rand)] if node.rand is not None else None
        node = node.next
    return copies[id(head)] if head is not None else None


def _digits(head: LinkNode | None) -> list[int]:
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def sum_link(head1: LinkNode | None, head2: LinkNode | None) -> LinkNode | None:
    """Add two numbers stored most significant digit first; return a new list."""
    digits1 = _digits(head1)
    digits2 = _digits(head2)
    result = None
    carry = 0
    while digits1 or digits2:
        total = carry
        if digits1:
            total += digits1.pop()
        if digits2:
            total += digits2.pop()
        carry, digit = divmod(total, 10)
        result = LinkNode(digit, result)
    if carry:
        result = LinkNode(carry, result)
    return result


def loop_entry(head: LinkNode | None) -> LinkNode | None:
    """First node of the cycle, or None when the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    fast = head
    while fast is not slow:
        fast = fast.next
        slow = slow.next
    return fast


def _intersect_before(head1: LinkNode, head2: LinkNode, end: LinkNode | None) -> LinkNode | None:
    len1 = _length(head1, end)
    len2 = _length(head2, end)
    for _ in range(len1 - len2):
        head1 = head1.next
    for _ in range(len2 - len1):
        head2 = head2.next
    while head1 is not head2:
        head1 = head1.next
        head2 = head2.next
    return head1


def get_intersect_node(head1: LinkNode | None, head2: LinkNode | None) -> LinkNode | None:
    """First shared node of two lists that may contain cycles, or None."""
    entry1 = loop_entry(head1)
    entry2 = loop_entry(head2)
    if entry1 is None and entry2 is None:
        return _intersect_before(head1, head2, None)
    if entry1 is None or entry2 is None:
        return None
    if entry1 is entry2:
        return _intersect_before(head1, head2, entry1)
    node = entry1.next
    while node is not entry1:
        if node is entry2:
            return entry1
        node = node.next
    return None


def reverse_every_k(head: LinkNode | None, k: int) -> LinkNode | None:
    """Reverse each full group of ``k`` nodes; a short tail stays as is."""
    if k < 2:
        return head
    dummy = LinkNode(next=head)
    group_prev = dummy
    while True:
        first = group_prev.next
        probe = first
        count = 0
        while probe is not None and count < k:
            probe = probe.next
            count += 1
        if count < k:
            break
        prev, cur = probe, first
        for _ in range(k):
            cur.next, prev, cur = prev, cur, cur.next
        group_prev.next = prev
        group_prev = first
    return dummy.next


def remove_rep1(head: LinkNode | None) -> LinkNode | None:
    """Drop repeated values keeping first occurrences, using O(1) extra space."""
    node = head
    while node is not None:
        runner = node
        while runner.next is not None:
            if runner.next.val == node.val:
                runner.next = runner.next.next
            else:
                runner = runner.next
        node = node.next
    return head


def remove_rep2(head: LinkNode | None) -> LinkNode | None:
    """Drop repeated values keeping first occurrences, in linear time."""
    seen = set()
    dummy = LinkNode(next=head)
    node = dummy
    while node.next is not None:
        if node.next.val in seen:
            node.next = node.next.next
        else:
            node = node.next
            seen.add(node.val)
    return dummy.next


def remove_num(head: LinkNode | None, num) -> LinkNode | None:
    """Remove every node whose value equals ``num``."""
    dummy = LinkNode(next=head)
    prev = dummy
    node = head
    while node is not None:
        if node.val == num:
            prev.next = node.next
        else:
            prev = node
        node = node.next
    return dummy.next


def remove_node_without_head(node: LinkNode | None) -> None:
    """Delete ``node`` by copying its successor into it; the last node cannot be removed."""
    if node is None:
        return
    if node.next is None:
        raise ValueError("cannot remove last node")
    node.val = node.next.val
    node.next = node.next.next


def merge_link_list(head1: LinkNode | None, head2: LinkNode | None) -> LinkNode | None:
    """Merge two ascending lists into one."""
    dummy = LinkNode()
    tail = dummy
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def merge_lr(head: LinkNode | None) -> LinkNode | None:
    """Rearrange L1..Ln R1..Rm into L1 R1 L2 R2 ... (left half has len // 2 nodes)."""
    count = _length(head)
    if count <= 3:
        return head
    left_tail = head
    for _ in range(count // 2 - 1):
        left_tail = left_tail.next
    right = left_tail.next
    left_tail.next = None
    left = head
    dummy = LinkNode()
    tail = dummy
    while left is not None and right is not None:
        next_left, next_right = left.next, right.next
        tail.next = left
        left.next = right
        tail = right
        left, right = next_left, next_right
    return dummy.next