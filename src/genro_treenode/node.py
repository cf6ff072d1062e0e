# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeNode classes.

Two capability sets are defined here:

- TreeNode: read-only access to data, children and leaf status. It has
  no parent accessor, so it can be handed to consumers (serializers,
  renderers) that must not depend on how the tree was built.
- MutableTreeNode: TreeNode plus parent access and the mutation
  protocol (add, remove, set_parent, remove_from_parent, set_data).

DefaultMutableTreeNode is the concrete implementation. It keeps the
parent/children links of both ends consistent after every public call:
a node is listed among P's children if and only if its parent is P.

The four mutators call each other. Each one changes its own piece of
state before calling the counterpart, so the counterpart finds the work
already done and returns at once:

    add(child)            -> child.set_parent(self)
    set_parent(parent)    -> remove_from_parent(), parent.add(self)
    remove_from_parent()  -> old_parent.remove(self)
    remove(child)         -> child.remove_from_parent()

Example:
    >>> root = DefaultMutableTreeNode('root')
    >>> a, b = DefaultMutableTreeNode('A'), DefaultMutableTreeNode('B')
    >>> root.add(a).add(b)
    DefaultMutableTreeNode('root', children=2)
    >>> b.set_parent(a)
    DefaultMutableTreeNode('B', children=0)
    >>> [c.data for c in root.children]
    ['A']
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from .children import ChildCollection, ChildrenView, IdentityOrderedSet
from .exceptions import CycleError

logger = logging.getLogger(__name__)


class TreeNode(ABC):
    """Read-only node: data, children and leaf status.

    Parent access is deliberately missing: see MutableTreeNode.parent.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def data(self) -> Any:
        """The data object in this node."""

    @property
    @abstractmethod
    def children(self) -> ChildrenView:
        """Read-only live view of the children, in child order. Never None."""

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return len(self.children) == 0


class MutableTreeNode(TreeNode):
    """TreeNode with parent access and the mutation protocol."""

    __slots__ = ()

    @property
    @abstractmethod
    def parent(self) -> MutableTreeNode | None:
        """This node's parent, or None for a root."""

    @property
    @abstractmethod
    def mutable_children(self) -> ChildrenView:
        """Read-only live view of the children as MutableTreeNode."""

    @abstractmethod
    def set_parent(self, new_parent: MutableTreeNode | None) -> MutableTreeNode:
        """Move this node under new_parent (None detaches). Returns self."""

    @abstractmethod
    def remove_from_parent(self) -> None:
        """Detach this node from its parent. No-op for a root."""

    @abstractmethod
    def remove(self, child: MutableTreeNode) -> bool:
        """Remove child. Returns True if it was one of the children."""

    @abstractmethod
    def add(self, new_child: MutableTreeNode) -> MutableTreeNode:
        """Append new_child (if not present) and adopt it. Returns self."""

    @abstractmethod
    def set_data(self, new_data: Any) -> MutableTreeNode:
        """Replace the data object. Returns self."""


def _check_node(node: Any, name: str) -> None:
    if not isinstance(node, MutableTreeNode):
        raise TypeError(
            f"{name} must be a MutableTreeNode, not {type(node).__name__}"
        )


def _check_no_cycle(parent: MutableTreeNode, child: MutableTreeNode) -> None:
    """Raise CycleError if child is parent or one of its ancestors."""
    current: MutableTreeNode | None = parent
    while current is not None:
        if current is child:
            raise CycleError(parent, child)
        current = current.parent


class DefaultMutableTreeNode(MutableTreeNode):
    """General purpose mutable tree node.

    Children are kept in a ChildCollection, by default an
    IdentityOrderedSet, so iteration follows insertion order and a
    removed child that is added again goes to the end.

    Specialised subclasses change the collection either by overriding
    the children_factory class attribute or by passing a collection to
    the constructor. Neither is meant for plain callers.

    Args:
        data: The data object in this node.
        parent: Initial parent; the node is added to its children.
        children: Backing collection for the children (subclass use).

    Raises:
        CycleError: If a link would make a node its own ancestor.
        TypeError: If a parent or child is not a MutableTreeNode.

    Example:
        >>> root = DefaultMutableTreeNode('root')
        >>> child = DefaultMutableTreeNode('child', root)
        >>> child.parent is root
        True
        >>> root.is_leaf
        False
    """

    __slots__ = ('_data', '_parent', '_collection', '_view')

    children_factory: Callable[[], ChildCollection] = IdentityOrderedSet

    def __init__(
        self,
        data: Any = None,
        parent: MutableTreeNode | None = None,
        children: ChildCollection | None = None,
    ) -> None:
        self._data = data
        self._parent: MutableTreeNode | None = None
        if children is None:
            children = type(self).children_factory()
        self._set_collection(children)
        self.set_parent(parent)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._data!r}, "
            f"children={len(self._collection)})"
        )

    # ==================== Collection hooks ====================

    def _get_collection(self) -> ChildCollection:
        """Return the backing collection of the children."""
        return self._collection

    def _set_collection(self, collection: ChildCollection) -> None:
        """Replace the backing collection of the children.

        Existing children are not transferred; the caller is in charge
        of keeping the parent links consistent.
        """
        self._collection = collection
        self._view = ChildrenView(collection)

    # ==================== Read-only access ====================

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, new_data: Any) -> None:
        self._data = new_data

    @property
    def children(self) -> ChildrenView:
        return self._view

    @property
    def mutable_children(self) -> ChildrenView:
        return self._view

    @property
    def is_leaf(self) -> bool:
        return len(self._collection) == 0

    @property
    def parent(self) -> MutableTreeNode | None:
        return self._parent

    # ==================== Mutation protocol ====================

    def set_data(self, new_data: Any) -> DefaultMutableTreeNode:
        self._data = new_data
        return self

    def add(self, new_child: MutableTreeNode) -> DefaultMutableTreeNode:
        """Append new_child and make this node its parent.

        Adding a node that is already a child does nothing. A child
        owned by another node is moved here.

        Returns:
            self, so that root.add(a).add(b) attaches both to root.
        """
        _check_node(new_child, 'new_child')
        if new_child in self._collection:
            return self
        _check_no_cycle(self, new_child)
        # children first: the set_parent below calls add() again and
        # must find the child already present
        self._collection.add(new_child)
        logger.debug("added %r to %r", new_child, self)
        if new_child.parent is not self:
            new_child.set_parent(self)
        return self

    def set_parent(
        self, new_parent: MutableTreeNode | None
    ) -> DefaultMutableTreeNode:
        """Move this node under new_parent.

        The node leaves its current parent before joining the new one,
        so it never appears among the children of two nodes. Passing
        None detaches it.

        Returns:
            self.
        """
        if new_parent is not None:
            _check_node(new_parent, 'new_parent')
        if new_parent is self._parent:
            return self
        if new_parent is not None:
            _check_no_cycle(new_parent, self)
        self.remove_from_parent()
        self._parent = new_parent
        if new_parent is not None:
            new_parent.add(self)
        return self

    def remove_from_parent(self) -> None:
        """Detach from the parent. Does nothing on a root."""
        if self._parent is None:
            return
        old_parent = self._parent
        # cleared before the callback so that remove() -> remove_from_parent()
        # finds nothing left to do
        self._parent = None
        old_parent.remove(self)

    def remove(self, child: MutableTreeNode) -> bool:
        """Remove child from the children and clear its parent.

        Returns:
            True if child was one of the children, False otherwise.
        """
        _check_node(child, 'child')
        removed = self._collection.discard(child)
        if removed:
            logger.debug("removed %r from %r", child, self)
            child.remove_from_parent()
        return removed
