# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Structural projection of a tree to plain data and JSON.

Only the read-only TreeNode capability is used: the parent link and the
mutators never reach the output, and there is no way back from the
output to a mutable tree.

Example:
    >>> root = DefaultMutableTreeNode('root').add(DefaultMutableTreeNode('A'))
    >>> as_dict(root)
    {'data': 'root', 'leaf': False, 'children': [{'data': 'A', 'leaf': True, 'children': []}]}
"""

from __future__ import annotations

import json
from typing import Any

from .node import TreeNode


def as_dict(node: TreeNode) -> dict[str, Any]:
    """Convert node and its subtree to nested dicts.

    Each node becomes {'data': ..., 'leaf': ..., 'children': [...]}
    with children listed in child order. Data objects are not copied.

    The projection recurses once per level, so subtrees deeper than
    roughly the interpreter recursion limit (sys.getrecursionlimit(),
    about 1000 frames by default, in practice a few hundred levels)
    raise RecursionError.
    """
    if not isinstance(node, TreeNode):
        raise TypeError(f"node must be a TreeNode, not {type(node).__name__}")
    return {
        'data': node.data,
        'leaf': node.is_leaf,
        'children': [as_dict(child) for child in node.children],
    }


def to_json(node: TreeNode, **kwargs: Any) -> str:
    """Serialize node and its subtree to a JSON string.

    Args:
        node: Root of the subtree to serialize.
        **kwargs: Passed to json.dumps (indent, default, sort_keys, ...).

    Raises:
        TypeError: If a data object is not JSON serializable and no
            default= is given.
        RecursionError: If the subtree is deeper than as_dict or
            json.dumps can nest (a few hundred levels by default).
    """
    return json.dumps(as_dict(node), **kwargs)
