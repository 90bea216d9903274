from typing import Dict, Any
from easierccg.tree import Tree, RaisedLeaf
from easierccg.cat import Category


def _json_of_category(category: Category) -> Dict[str, Any]:

    def rec(node):
        if node.is_functor:
            return {
                'direction': str(node.direction),
                'feature': node.feature.name,
                'result': rec(node.result),
                'argument': rec(node.argument)
            }
        elif node.is_variable:
            return {'variable': True}
        else:
            return {
                'base': str(node.base),
                'feature': str(node.feature) if node.feature is not None else None
            }

    return rec(category)


def json_of(
    tree: Tree,
    full: bool = False
) -> Dict[str, Any]:
    """a tree in Python dict object.

    Args:
        tree (Tree): tree object
        full (bool): whether to decompose categories into their components, i.e.,
            {
                'direction': '/',
                'feature': 'PERMISSIVE',
                'result': {'base': 'S', 'feature': 'dcl'},
                'argument': {'base': 'NP', 'feature': None},
            },
            or just as a string "S[dcl]/NP". A category that is not derived is None,
            and raised leaves also carry the `source` category.

    Returns:
        Dict[str, Any]: the tree
    """

    def cat_of(node: Tree):
        if node.cat is None:
            return None
        return _json_of_category(node.cat) if full else str(node.cat)

    def rec(node: Tree) -> Dict[str, Any]:
        result = {'cat': cat_of(node)}
        if isinstance(node, RaisedLeaf):
            result['source'] = _json_of_category(node.source) if full else str(node.source)
        if node.is_leaf:
            result['word'] = node.token
        else:
            result['type'] = node.op_string
            result['children'] = [rec(child) for child in node.children]
        return result

    return rec(tree)
