# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeNode exceptions."""

from __future__ import annotations


class TreeNodeError(Exception):
    """Base exception for TreeNode errors."""

    pass


class CycleError(TreeNodeError):
    """Raised when a link would make a node its own parent or ancestor.

    Attributes:
        parent: The node that was going to receive the child.
        child: The node that was going to be attached.
    """

    def __init__(self, parent: object, child: object) -> None:
        self.parent = parent
        self.child = child
        if parent is child:
            message = f"{child!r} cannot be its own parent"
        else:
            message = f"{child!r} is an ancestor of {parent!r}"
        super().__init__(message)
