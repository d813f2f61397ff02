"""Binary tree exercises: traversals, serialization, reconstruction and checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from algodrills.structures import BTNode, Stack

_NULL = "#"
_SEP = "!"


def pre_order_recur(root: BTNode | None) -> list[BTNode]:
    """Nodes in pre-order, visited recursively."""
    if root is None:
        return []
    return [root, *pre_order_recur(root.left), *pre_order_recur(root.right)]


def in_order_recur(root: BTNode | None) -> list[BTNode]:
    """Nodes in in-order, visited recursively."""
    if root is None:
        return []
    return [*in_order_recur(root.left), root, *in_order_recur(root.right)]


def post_order_recur(root: BTNode | None) -> list[BTNode]:
    """Nodes in post-order, visited recursively."""
    if root is None:
        return []
    return [*post_order_recur(root.left), *post_order_recur(root.right), root]


def pre_order_iter(root: BTNode | None) -> list[BTNode]:
    """Nodes in pre-order, visited with an explicit stack."""
    result: list[BTNode] = []
    if root is None:
        return result
    stack: Stack[BTNode] = Stack(10)
    stack.push(root)
    while stack:
        node = stack.top()
        stack.pop()
        result.append(node)
        if node.right is not None:
            stack.push(node.right)
        if node.left is not None:
            stack.push(node.left)
    return result


def in_order_iter(root: BTNode | None) -> list[BTNode]:
    """Nodes in in-order, visited with an explicit stack."""
    result: list[BTNode] = []
    stack: Stack[BTNode] = Stack(10)
    node = root
    while stack or node is not None:
        while node is not None:
            stack.push(node)
            node = node.left
        node = stack.top()
        stack.pop()
        result.append(node)
        node = node.right
    return result


def post_order_iter(root: BTNode | None) -> list[BTNode]:
    """Nodes in post-order, visited with two explicit stacks."""
    if root is None:
        return []
    stack: Stack[BTNode] = Stack(10)
    output: Stack[BTNode] = Stack(10)
    stack.push(root)
    while stack:
        node = stack.top()
        stack.pop()
        output.push(node)
        if node.left is not None:
            stack.push(node.left)
        if node.right is not None:
            stack.push(node.right)
    result: list[BTNode] = []
    while output:
        result.append(output.top())
        output.pop()
    return result


def serialize_tree(root: BTNode | None) -> str:
    """Level-order encoding: each value or ``#`` for an empty child, followed by ``!``."""
    parts: list[str] = []
    queue: deque[BTNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append(_NULL)
        else:
            parts.append(str(node.val))
            queue.append(node.left)
            queue.append(node.right)
        parts.append(_SEP)
    return "".join(parts)


def _parse_token(token: str) -> BTNode | None:
    if token == _NULL:
        return None
    try:
        return BTNode(int(token))
    except ValueError:
        raise ValueError(f"invalid tree token: {token!r}") from None


def deserialize_tree(data: str) -> BTNode | None:
    """Rebuild a tree from the encoding produced by :func:`serialize_tree`."""
    tokens = iter(data.split(_SEP)[:-1])

    def next_node() -> BTNode | None:
        token = next(tokens, None)
        return None if token is None else _parse_token(token)

    root = next_node()
    if root is None:
        return None
    queue: deque[BTNode] = deque([root])
    while queue:
        node = queue.popleft()
        node.left = next_node()
        if node.left is not None:
            queue.append(node.left)
        node.right = next_node()
        if node.right is not None:
            queue.append(node.right)
    return root


def morris_in(head: BTNode | None) -> list[BTNode]:
    """In-order traversal in O(1) extra space; the tree is restored afterwards."""
    result: list[BTNode] = []
    cur = head
    while cur is not None:
        pre = cur.left
        if pre is not None:
            while pre.right is not None and pre.right is not cur:
                pre = pre.right
            if pre.right is None:
                pre.right = cur
                cur = cur.left
                continue
            pre.right = None
        result.append(cur)
        cur = cur.right
    return result


def morris_pre(head: BTNode | None) -> list[BTNode]:
    """Pre-order traversal in O(1) extra space; the tree is restored afterwards."""
    result: list[BTNode] = []
    cur = head
    while cur is not None:
        pre = cur.left
        if pre is not None:
            while pre.right is not None and pre.right is not cur:
                pre = pre.right
            if pre.right is None:
                result.append(cur)
                pre.right = cur
                cur = cur.left
                continue
            pre.right = None
        else:
            result.append(cur)
        cur = cur.right
    return result


def _reverse_right_edge(node: BTNode | None) -> BTNode | None:
    prev = None
    while node is not None:
        node.right, prev, node = prev, node, node.right
    return prev


def _right_edge_reversed(node: BTNode | None) -> list[BTNode]:
    tail = _reverse_right_edge(node)
    edge: list[BTNode] = []
    walk = tail
    while walk is not None:
        edge.append(walk)
        walk = walk.right
    _reverse_right_edge(tail)
    return edge


def morris_post(head: BTNode | None) -> list[BTNode]:
    """Post-order traversal in O(1) extra space; the tree is restored afterwards."""
    result: list[BTNode] = []
    cur = head
    while cur is not None:
        pre = cur.left
        if pre is not None:
            while pre.right is not None and pre.right is not cur:
                pre = pre.right
            if pre.right is None:
                pre.right = cur
                cur = cur.left
                continue
            pre.right = None
            result.extend(_right_edge_reversed(cur.left))
        cur = cur.right
    result.extend(_right_edge_reversed(head))
    return result


def biggest_sub_bst(head: BTNode | None) -> BTNode | None:
    """Root of the largest subtree that is a search tree (values are distinct)."""
    best: BTNode | None = None
    best_count = -1

    def visit(node: BTNode | None) -> tuple[bool, object, object, int]:
        nonlocal best, best_count
        if node is None:
            return True, None, None, 0
        left_ok, left_min, left_max, left_count = visit(node.left)
        right_ok, right_min, right_max, right_count = visit(node.right)
        if (
            left_ok
            and right_ok
            and (left_count == 0 or left_max < node.val)
            and (right_count == 0 or node.val < right_min)
        ):
            low = node.val if left_count == 0 else left_min
            high = node.val if right_count == 0 else right_max
            count = left_count + right_count + 1
            if count > best_count:
                best_count = count
                best = node
            return True, low, high, count
        return False, None, None, 0

    visit(head)
    return best


def _contains_topo_at(node: BTNode | None, pattern: BTNode | None) -> bool:
    if pattern is None:
        return True
    if node is None or node.val != pattern.val:
        return False
    return _contains_topo_at(node.right, pattern.right) and _contains_topo_at(node.left, pattern.left)


def contains_topo(head1: BTNode | None, head2: BTNode | None) -> bool:
    """Whether some node of ``head1`` starts the whole shape and values of ``head2``."""
    return any(_contains_topo_at(node, head2) for node in pre_order_iter(head1))


def _pre_order_tokens(root: BTNode | None) -> list:
    tokens: list = []
    stack: list[BTNode | None] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            tokens.append(None)
            continue
        tokens.append(node.val)
        stack.append(node.right)
        stack.append(node.left)
    return tokens


def _kmp_contains(text: list, pattern: list) -> bool:
    if not pattern:
        return True
    fail = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k > 0 and pattern[i] != pattern[k]:
            k = fail[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        fail[i] = k
    j = 0
    for item in text:
        while j > 0 and item != pattern[j]:
            j = fail[j - 1]
        if item == pattern[j]:
            j += 1
        if j == len(pattern):
            return True
    return False


def is_sub_tree(t1: BTNode | None, t2: BTNode | None) -> bool:
    """Whether ``t1`` has a subtree identical in shape and values to ``t2``."""
    return _kmp_contains(_pre_order_tokens(t1), _pre_order_tokens(t2))


def is_balanced_tree(root: BTNode | None) -> tuple[bool, int]:
    """Return ``(balanced, height)``; height is 0 when the tree is not balanced."""
    if root is None:
        return True, 0
    left_ok, left_height = is_balanced_tree(root.left)
    if not left_ok:
        return False, 0
    right_ok, right_height = is_balanced_tree(root.right)
    if not right_ok:
        return False, 0
    if abs(left_height - right_height) > 1:
        return False, 0
    return True, max(left_height, right_height) + 1


def build_tree_by_post_order(post_order: Sequence[int]) -> BTNode | None:
    """Rebuild a search tree of distinct values from its post-order sequence."""

    def build(start: int, end: int) -> BTNode | None:
        if start > end:
            return None
        root_val = post_order[end]
        split = start
        while post_order[split] < root_val:
            split += 1
        node = BTNode(root_val)
        node.left = build(start, split - 1)
        node.right = build(split, end - 1)
        return node

    return build(0, len(post_order) - 1)


def is_bst(root: BTNode | None) -> bool:
    """Whether in-order values strictly increase."""
    values = [node.val for node in morris_in(root)]
    return all(a < b for a, b in zip(values, values[1:]))


def is_cbt(root: BTNode | None) -> bool:
    """Whether the tree is a complete binary tree."""
    if root is None:
        return True
    queue: deque[BTNode] = deque([root])
    leaves_only = False
    while queue:
        node = queue.popleft()
        if node.left is None and node.right is not None:
            return False
        if leaves_only and (node.left is not None or node.right is not None):
            return False
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
        else:
            leaves_only = True
    return True


def build_bst_by_arr(arr: Sequence[int]) -> BTNode | None:
    """Balanced search tree from a sorted sequence."""
    if not arr:
        return None
    mid = len(arr) // 2
    node = BTNode(arr[mid])
    node.left = build_bst_by_arr(arr[:mid])
    node.right = build_bst_by_arr(arr[mid + 1:])
    return node


def find_lowest_common_ancestor(
    root: BTNode | None, p: BTNode | None, q: BTNode | None
) -> BTNode | None:
    """Lowest common ancestor of nodes ``p`` and ``q``."""
    if root is None or root is p or root is q:
        return root
    left = find_lowest_common_ancestor(root.left, p, q)
    right = find_lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def max_distance(head: BTNode | None) -> int:
    """Largest number of nodes on a path between two nodes of the tree."""
    best = 0

    def depth(node: BTNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right + 1)
        return max(left, right) + 1

    depth(head)
    return best


def _index_of(values: Sequence[int], target: int) -> int:
    try:
        return list(values).index(target)
    except ValueError:
        raise ValueError(f"value {target!r} missing from in-order sequence") from None


def build_tree_by_pre_and_in(pre: Sequence[int], inorder: Sequence[int]) -> BTNode | None:
    """Rebuild a tree of distinct values from its pre-order and in-order sequences."""
    if not pre:
        return None
    head = BTNode(pre[0])
    mid = _index_of(inorder, pre[0])
    head.left = build_tree_by_pre_and_in(pre[1:mid + 1], inorder[:mid])
    head.right = build_tree_by_pre_and_in(pre[mid + 1:], inorder[mid + 1:])
    return head


def build_tree_by_in_and_post(inorder: Sequence[int], post: Sequence[int]) -> BTNode | None:
    """Rebuild a tree of distinct values from its in-order and post-order sequences."""
    if not post:
        return None
    head = BTNode(post[-1])
    mid = _index_of(inorder, post[-1])
    head.left = build_tree_by_in_and_post(inorder[:mid], post[:mid])
    head.right = build_tree_by_in_and_post(inorder[mid + 1:], post[mid:-1])
    return head


def build_tree_by_pre_and_post(pre: Sequence[int], post: Sequence[int]) -> BTNode | None:
    """Rebuild a full binary tree (every inner node has two children) from pre- and post-order."""
    if len(pre) != len(post):
        raise ValueError("sequences differ in length")
    if not pre:
        return None
    head = BTNode(pre[0])
    if len(pre) == 1:
        return head
    mid = 1
    while mid < len(pre) and pre[mid] != post[-2]:
        mid += 1
    head.left = build_tree_by_pre_and_post(pre[1:mid], post[:mid - 1])
    head.right = build_tree_by_pre_and_post(pre[mid:], post[mid - 1:-1])
    return head


def build_post_arr_by_pre_and_in(pre: Sequence[int], inorder: Sequence[int]) -> list[int]:
    """Post-order sequence derived from pre-order and in-order without building the tree."""
    if not pre:
        return []
    if len(pre) == 1:
        return list(pre)
    mid = _index_of(inorder, pre[0])
    left = build_post_arr_by_pre_and_in(pre[1:mid + 1], inorder[:mid])
    right = build_post_arr_by_pre_and_in(pre[mid + 1:], inorder[mid + 1:])
    return [*left, *right, pre[0]]


def count_tree(n: int) -> int:
    """Number of distinct binary tree shapes with ``n`` nodes."""
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [1] * (n + 1)
    for i in range(2, n + 1):
        counts[i] = sum(counts[c] * counts[i - 1 - c] for c in range(i))
    return counts[n]


def _left_depth(node: BTNode | None) -> int:
    depth = 0
    while node is not None:
        depth += 1
        node = node.left
    return depth


def _right_depth(node: BTNode | None) -> int:
    depth = 0
    while node is not None:
        depth += 1
        node = node.right
    return depth


def count_nodes(head: BTNode | None) -> int:
    """Node count of a complete binary tree in less than linear time."""
    left = _left_depth(head)
    if left == _right_depth(head):
        return (1 << left) - 1
    return 1 + count_nodes(head.left) + count_nodes(head.right)