"""Routines on singly linked lists of :class:`ListNode`."""

from __future__ import annotations

from typing import Optional

from leetsolve.listnode import ListNode


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or ``None`` if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            fast = head
            while fast is not slow:
                fast = fast.next
                slow = slow.next
            return fast
    return None


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    if head_a is None or head_b is None:
        return None
    p, q = head_a, head_b
    while p is not q:
        p = p.next if p is not None else head_b
        q = q.next if q is not None else head_a
    return p


def find_nth_from_end(head: Optional[ListNode], k: int) -> ListNode:
    """Return the ``k``-th node counted from the end, 1 being the last."""
    if k < 1:
        raise ValueError("k must be at least 1")
    lead = head
    for _ in range(k):
        if lead is None:
            raise IndexError("k is larger than the list length")
        lead = lead.next
    trail = head
    while lead is not None:
        lead = lead.next
        trail = trail.next
    return trail


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    before = find_nth_from_end(dummy, n + 1)
    before.next = before.next.next
    return dummy.next


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant first."""
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    dummy = ListNode()
    tail = dummy
    carry = 0
    p, q = l1, l2
    while p is not None or q is not None:
        if p is not None:
            carry += p.val
            p = p.next
        if q is not None:
            carry += q.val
            q = q.next
        tail.next = ListNode(carry % 10)
        tail = tail.next
        carry //= 10
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def find_middle_previous(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node just before the node at index ``len // 2``.

    Returns ``None`` for lists of fewer than two nodes.
    """
    if head is None or head.next is None:
        return None
    if head.next.next is None:
        return head
    slow, fast = head, head.next.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``len // 2`` and return the head."""
    if head is None or head.next is None:
        return None
    before = find_middle_previous(head)
    before.next = before.next.next
    return head


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes."""
    dummy = ListNode()
    tail = dummy
    p, q = list1, list2
    while p is not None and q is not None:
        if p.val < q.val:
            tail.next, p = p, p.next
        else:
            tail.next, q = q, q.next
        tail = tail.next
    tail.next = p if p is not None else q
    return dummy.next


def pair_sum(head: Optional[ListNode]) -> int:
    """Largest sum of a node and its twin in a list of even length.

    The list is split and its second half reversed in the process.
    The result is never below 0.
    """
    if head is None or head.next is None:
        raise ValueError("the list needs at least two nodes")
    if head.next.next is None:
        return head.val + head.next.val
    before = find_middle_previous(head)
    second = before.next
    before.next = None
    best = 0
    for front, back in zip(head, reverse_list(second)):
        best = max(best, front.val + back.val)
    return best


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways.

    The list is split and its second half reversed in the process.
    """
    if head is None or head.next is None:
        return True
    before = find_middle_previous(head)
    second = before.next
    before.next = None
    return all(front.val == back.val for front, back in zip(head, reverse_list(second)))


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by shifting the following values onto it."""
    if node.next is None:
        raise ValueError("cannot delete the last node of a list")
    current = node
    while current.next.next is not None:
        current.val = current.next.val
        current = current.next
    current.val = current.next.val
    current.next = None


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    before = dummy
    first = head
    while first is not None and first.next is not None:
        second = first.next
        rest = second.next
        before.next = second
        second.next = first
        first.next = rest
        before = first
        first = rest
    return dummy.next


def _split(head: ListNode, goes_first) -> ListNode:
    first_dummy, second_dummy = ListNode(), ListNode()
    first_tail, second_tail = first_dummy, second_dummy
    for position, node in enumerate(list(head)):
        node.next = None
        if goes_first(position, node):
            first_tail.next = node
            first_tail = node
        else:
            second_tail.next = node
            second_tail = node
    first_tail.next = second_dummy.next
    return first_dummy.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Place nodes at odd positions (1-based) before those at even positions."""
    if head is None or head.next is None:
        return head
    return _split(head, lambda position, _node: position % 2 == 0)


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Place nodes below ``x`` before the others, keeping relative order."""
    if head is None or head.next is None:
        return head
    return _split(head, lambda _position, node: node.val < x)


def kth_to_last(head: Optional[ListNode], k: int) -> int:
    """Value of the ``k``-th node counted from the end, 1 being the last."""
    return find_nth_from_end(head, k).val