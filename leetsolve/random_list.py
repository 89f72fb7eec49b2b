"""Deep copy of a linked list whose nodes also carry a random pointer."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional


class RandomNode:
    """A list node with an extra pointer to any node of the list, or ``None``."""

    __slots__ = ("val", "next", "random")

    def __init__(
        self,
        val: int = 0,
        next: Optional[RandomNode] = None,
        random: Optional[RandomNode] = None,
    ) -> None:
        self.val = val
        self.next = next
        self.random = random

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def _walk(head: Optional[RandomNode]) -> Iterator[RandomNode]:
    while head is not None:
        yield head
        head = head.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of the list; the original is left untouched."""
    if head is None:
        return None
    nodes = list(_walk(head))
    clones: Dict[RandomNode, RandomNode] = {node: RandomNode(node.val) for node in nodes}
    for node, clone in clones.items():
        clone.next = clones[node.next] if node.next is not None else None
        clone.random = clones[node.random] if node.random is not None else None
    return clones[head]


def build_random_list() -> RandomNode:
    """Build the sample list ``[[7,null],[13,0],[11,4],[10,2],[1,0]]``."""
    nodes = [RandomNode(val) for val in (7, 13, 11, 10, 1)]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    for index, target in ((1, 0), (2, 4), (3, 2), (4, 0)):
        nodes[index].random = nodes[target]
    return nodes[0]


def random_values(head: Optional[RandomNode]) -> List[Optional[int]]:
    """Value each node's random pointer refers to, ``None`` where it is unset."""
    return [node.random.val if node.random is not None else None for node in _walk(head)]