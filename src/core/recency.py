"""Recency order for LRU eviction.

Doubly linked list with head/tail sentinels plus a key -> node dict, so
touch, evict-oldest and remove are all O(1). The head side holds the most
recently used key, the tail side the least recently used one.

Not synchronized: the owning cache mutates it only while holding the same
lock that guards its entry table.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)


class _Node:
    __slots__ = ("key", "prev", "next")

    def __init__(self, key: object) -> None:
        self.key = key
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class RecencyIndex(Generic[K]):
    def __init__(self) -> None:
        self._nodes: Dict[K, _Node] = {}
        self._head = _Node(None)
        self._tail = _Node(None)
        self._head.next = self._tail
        self._tail.prev = self._head

    def touch(self, key: K) -> None:
        """Mark key as most recently used, inserting it if new."""
        node = self._nodes.get(key)
        if node is None:
            node = _Node(key)
            self._nodes[key] = node
        else:
            if self._head.next is node:
                return
            self._unlink(node)
        self._push_front(node)

    def evict_oldest(self) -> Optional[K]:
        """Remove and return the least recently used key, or None if empty."""
        node = self._tail.prev
        if node is self._head:
            return None
        self._unlink(node)
        del self._nodes[node.key]
        return node.key

    def remove(self, key: K) -> None:
        node = self._nodes.pop(key, None)
        if node is not None:
            self._unlink(node)

    def keys(self) -> List[K]:
        # Most recently used first
        out: List[K] = []
        node = self._head.next
        while node is not self._tail:
            out.append(node.key)
            node = node.next
        return out

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def _push_front(self, node: _Node) -> None:
        first = self._head.next
        node.prev = self._head
        node.next = first
        first.prev = node
        self._head.next = node

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None
