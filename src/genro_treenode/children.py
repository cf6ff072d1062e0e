# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Child collections for tree nodes.

A node keeps its children in a ChildCollection. Membership is always
decided by object identity, never by equality of the nodes or of their
payloads, so two nodes carrying the same data are distinct children.

Available collections:
    - IdentityOrderedSet: insertion ordered, O(1) membership (default)
    - ChildList: plain list backing, O(n) membership

ChildrenView wraps a collection and hands it out read-only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator


class ChildCollection(ABC):
    """Abstract duplicate-free collection of child nodes.

    Subclasses decide the iteration order. add() must return False
    without modifying the collection when the node is already present.
    """

    @abstractmethod
    def add(self, node: Any) -> bool:
        """Add node if not present. Return True if it was added."""

    @abstractmethod
    def discard(self, node: Any) -> bool:
        """Remove node if present. Return True if it was removed."""

    @abstractmethod
    def __contains__(self, node: object) -> bool: ...

    @abstractmethod
    def __iter__(self) -> Iterator[Any]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class IdentityOrderedSet(ChildCollection):
    """Insertion ordered set keyed by id().

    A removed node that is added again goes to the end.

    Example:
        >>> s = IdentityOrderedSet()
        >>> a, b = object(), object()
        >>> s.add(a), s.add(b), s.add(a)
        (True, True, False)
        >>> list(s) == [a, b]
        True
    """

    __slots__ = ('_items',)

    def __init__(self) -> None:
        self._items: dict[int, Any] = {}

    def add(self, node: Any) -> bool:
        key = id(node)
        if key in self._items:
            return False
        self._items[key] = node
        return True

    def discard(self, node: Any) -> bool:
        key = id(node)
        if key not in self._items:
            return False
        del self._items[key]
        return True

    def __contains__(self, node: object) -> bool:
        return id(node) in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)


class ChildList(ChildCollection):
    """List backed collection, linear identity scan on membership.

    Optionally wraps an existing list, which is then shared with the
    caller and mutated in place.
    """

    __slots__ = ('_items',)

    def __init__(self, items: list[Any] | None = None) -> None:
        self._items: list[Any] = items if items is not None else []

    def _index_of(self, node: object) -> int:
        for i, item in enumerate(self._items):
            if item is node:
                return i
        return -1

    def add(self, node: Any) -> bool:
        if self._index_of(node) >= 0:
            return False
        self._items.append(node)
        return True

    def discard(self, node: Any) -> bool:
        idx = self._index_of(node)
        if idx < 0:
            return False
        del self._items[idx]
        return True

    def __contains__(self, node: object) -> bool:
        return self._index_of(node) >= 0

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class ChildrenView:
    """Live, read-only view over a ChildCollection.

    The view follows later changes to the node's children. It offers
    no mutating methods.
    """

    __slots__ = ('_collection',)

    def __init__(self, collection: ChildCollection) -> None:
        self._collection = collection

    def __iter__(self) -> Iterator[Any]:
        return iter(self._collection)

    def __len__(self) -> int:
        return len(self._collection)

    def __bool__(self) -> bool:
        return len(self._collection) > 0

    def __contains__(self, node: object) -> bool:
        return node in self._collection

    def __repr__(self) -> str:
        return f"ChildrenView({list(self._collection)!r})"
