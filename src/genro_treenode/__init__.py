# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeNode - Mutable tree nodes with consistent parent/child links.

A lightweight, zero-dependency library providing generic tree nodes
for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

import logging

from .children import ChildCollection, ChildList, ChildrenView, IdentityOrderedSet
from .exceptions import CycleError, TreeNodeError
from .node import DefaultMutableTreeNode, MutableTreeNode, TreeNode
from .serialization import as_dict, to_json

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "TreeNode",
    "MutableTreeNode",
    "DefaultMutableTreeNode",
    # Child collections
    "ChildCollection",
    "IdentityOrderedSet",
    "ChildList",
    "ChildrenView",
    # Serialization
    "as_dict",
    "to_json",
    # Exceptions
    "TreeNodeError",
    "CycleError",
]
