from easierccg.tree import Tree


def ptb_of(tree: Tree) -> str:
    """bracketed tree labelled with categories, a raised leaf shown as `NP>TS/(S\\NP)`.

    Args:
        tree (Tree): tree object

    Returns:
        str: tree string in the PTB style
    """

    def rec(node: Tree) -> str:
        if node.is_leaf:
            return f'({node.label} {node.token or "_"})'
        return '({} {})'.format(node.label, ' '.join(map(rec, node.children)))

    return f'(ROOT {rec(tree)})'
