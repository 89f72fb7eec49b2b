"""Singly linked list node shared by the linked-list routines."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: int = 0, next: Optional[ListNode] = None) -> None:
        self.val = val
        self.next = next

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; ``None`` when empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[ListNode]:
        """Yield this node and every node after it."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def values(self) -> List[int]:
        """Values of this node and the nodes after it, in order."""
        return [node.val for node in self]

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def print_list(head: Optional[ListNode]) -> None:
    """Print the values of the list, each followed by a space, with no newline."""
    for node in head if head is not None else ():
        print(f"{node.val} ", end="")