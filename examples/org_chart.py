# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Org chart built and reorganised with DefaultMutableTreeNode."""

from genro_treenode import DefaultMutableTreeNode, to_json


def build():
    ceo = DefaultMutableTreeNode({'name': 'Ada', 'role': 'CEO'})
    cto = DefaultMutableTreeNode({'name': 'Linus', 'role': 'CTO'}, ceo)
    cfo = DefaultMutableTreeNode({'name': 'Grace', 'role': 'CFO'}, ceo)
    dev = DefaultMutableTreeNode({'name': 'Ken', 'role': 'Developer'}, cto)
    return ceo, cto, cfo, dev


if __name__ == '__main__':
    ceo, cto, cfo, dev = build()
    print(to_json(ceo, indent=2))

    # Ken moves to finance: he leaves the CTO and joins the CFO
    dev.set_parent(cfo)
    print(cto.is_leaf, [n.data['name'] for n in cfo.children])
