from easierccg.tree import Tree


def auto_of(tree: Tree) -> str:
    """tree string in the auto format of CCGBank.
    As there are no POS tags, `POS` is printed in their place.

    Args:
        tree (Tree): tree object

    Returns:
        str: tree string in the auto format
    """

    def rec(node):
        if node.is_leaf:
            cat = node.label
            word = node.token or '_'
            return f'(<L {cat} POS POS {word} {cat}>)'
        else:
            cat = node.label
            children = ' '.join(rec(child) for child in node.children)
            num_children = len(node.children)
            head_is_left = 0 if node.head_is_left else 1
            return f'(<T {cat} {head_is_left} {num_children}> {children} )'

    return rec(tree)


def auto_extended_of(tree: Tree) -> str:
    """tree string in the extended auto format, which also names the rules.

    Args:
        tree (Tree): tree object

    Returns:
        str: tree string in the extended auto format
    """

    def rec(node):
        if node.is_leaf:
            cat = node.label
            word = node.token or '_'
            return f'(<L {cat} {word} {cat}>)'
        else:
            cat = node.label
            children = ' '.join(rec(child) for child in node.children)
            num_children = len(node.children)
            head_is_left = 0 if node.head_is_left else 1
            rule = node.op_string
            return f'(<T {cat} {rule} {head_is_left} {num_children}> {children} )'

    return rec(tree)
