# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for as_dict and to_json."""

import json
import sys

import pytest

from genro_treenode import DefaultMutableTreeNode, as_dict, to_json


@pytest.fixture
def root_ab():
    """Root node with two leaf children A and B."""
    return (
        DefaultMutableTreeNode('root')
        .add(DefaultMutableTreeNode('A'))
        .add(DefaultMutableTreeNode('B'))
    )


class TestAsDict:
    """Tests for as_dict."""

    def test_leaf(self):
        """Test a single node projects to a leaf dict."""
        assert as_dict(DefaultMutableTreeNode('x')) == {
            'data': 'x', 'leaf': True, 'children': [],
        }

    def test_nested(self):
        """Test grandchildren are nested in child order."""
        root = DefaultMutableTreeNode('r')
        a = DefaultMutableTreeNode('a', root)
        DefaultMutableTreeNode('a1', a)
        DefaultMutableTreeNode('b', root)
        result = as_dict(root)
        assert [c['data'] for c in result['children']] == ['a', 'b']
        assert result['children'][0]['leaf'] is False
        assert result['children'][0]['children'][0]['data'] == 'a1'

    def test_no_parent_key(self, root_ab):
        """Test the parent link is not part of the projection."""
        child = next(iter(root_ab.children))
        assert set(as_dict(child)) == {'data', 'leaf', 'children'}

    def test_subtree_only(self, root_ab):
        """Test projecting a child ignores its parent."""
        child = next(iter(root_ab.children))
        assert as_dict(child) == {'data': 'A', 'leaf': True, 'children': []}

    def test_not_a_node_raises(self):
        """Test non-node input is rejected."""
        with pytest.raises(TypeError, match="TreeNode"):
            as_dict({'data': 'x'})


class TestToJson:
    """Tests for to_json."""

    def test_root_with_two_leaves(self, root_ab):
        """Test the root/A/B tree serializes to the expected document."""
        expected = (
            '{"data":"root","leaf":false,"children":['
            '{"data":"A","leaf":true,"children":[]},'
            '{"data":"B","leaf":true,"children":[]}]}'
        )
        assert json.loads(to_json(root_ab)) == json.loads(expected)

    def test_children_order_follows_insertion(self, root_ab):
        """Test children array order matches re-insertion order."""
        a = next(iter(root_ab.children))
        root_ab.remove(a)
        root_ab.add(a)
        doc = json.loads(to_json(root_ab))
        assert [c['data'] for c in doc['children']] == ['B', 'A']

    def test_kwargs_passed_to_dumps(self, root_ab):
        """Test json.dumps options are honoured."""
        compact = to_json(root_ab, separators=(',', ':'))
        assert compact.startswith('{"data":"root","leaf":false')

    def test_null_data(self):
        """Test None data serializes as null."""
        assert json.loads(to_json(DefaultMutableTreeNode()))['data'] is None

    def test_unserializable_data_raises(self):
        """Test non JSON data raises unless default= is given."""
        node = DefaultMutableTreeNode(object())
        with pytest.raises(TypeError):
            to_json(node)
        assert '"data": "obj"' in to_json(node, default=lambda o: 'obj')


class TestDepthLimit:
    """Tests for the documented nesting limit of the projection."""

    def test_too_deep_raises_recursion_error(self):
        """Test a chain deeper than the recursion limit is rejected."""
        # built bottom-up so that each add walks a single ancestor
        node = DefaultMutableTreeNode(0)
        for i in range(1, sys.getrecursionlimit() + 100):
            node = DefaultMutableTreeNode(i).add(node)
        with pytest.raises(RecursionError):
            as_dict(node)

    def test_moderate_depth_is_supported(self):
        """Test a chain of a hundred levels serializes."""
        node = DefaultMutableTreeNode(0)
        for i in range(1, 100):
            node = DefaultMutableTreeNode(i).add(node)
        doc = json.loads(to_json(node))
        assert doc['data'] == 99
        assert doc['children'][0]['data'] == 98
