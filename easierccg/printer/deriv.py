from typing import List
from easierccg.tree import Tree


def deriv_of(tree: Tree) -> str:
    """derivation drawn with a line of dashes under every combination,
    leaves on the first two lines and each rule below the span it covers.

         NP  (S\\NP)/NP    NP
         I     proved   Marcel
            ------------------>
                    S\\NP
        -----------------------<
                   S

    Args:
        tree (Tree): tree object

    Returns:
        str: derivation tree string
    """

    leaves = tree.leaves
    widths = [
        2 + max(len(leaf.label), len(leaf.token or '_'))
        for leaf in leaves
    ]
    offsets = [0]
    for width in widths:
        offsets.append(offsets[-1] + width)

    lines: List[str] = [
        ''.join(leaf.label.center(width) for leaf, width in zip(leaves, widths)),
        ''.join((leaf.token or '_').center(width) for leaf, width in zip(leaves, widths)),
    ]

    def rec(node: Tree, start: int) -> int:
        if node.is_leaf:
            return start + 1
        end = start
        for child in node.children:
            end = rec(child, end)
        indent, width = offsets[start], offsets[end] - offsets[start]
        symbol = node.op_symbol
        lines.append(' ' * indent + '-' * max(width - len(symbol), 1) + symbol)
        lines.append(' ' * indent + node.label.center(width))
        return end

    rec(tree, 0)
    return '\n'.join(line.rstrip() for line in lines) + '\n'
