from typing import List
import itertools
from lxml import etree
from easierccg.tree import Tree, RaisedLeaf, ScoredTree, UNDERIVED


def _cat_of(node: Tree) -> str:
    return UNDERIVED if node.cat is None else str(node.cat)


def _ccg_element(tree: Tree) -> etree.Element:
    positions = itertools.count()

    def rec(node: Tree) -> etree.Element:
        if node.is_leaf:
            element = etree.Element(
                'lf',
                start=str(next(positions)),
                span='1',
                cat=_cat_of(node),
                word=node.token or '_',
            )
        else:
            element = etree.Element('rule', type=node.op_string, cat=_cat_of(node))
            element.extend(rec(child) for child in node.children)
        if isinstance(node, RaisedLeaf):
            element.set('source', str(node.source))
            element.set('neighbor', str(node.neighbor))
        return element

    result = etree.Element('ccg')
    result.append(rec(tree))
    return result


def xml_of(
    nbest_trees: List[List[ScoredTree]],
) -> etree.Element:
    """parsing results in the XML format of the C&C parser, one `ccg` element
    per tree with its sentence number, rank and score.

    Args:
        nbest_trees (List[List[ScoredTree]]): parsing results

    Returns:
        etree.Element: XML object
    """

    candc_node = etree.Element('candc')
    for sentence_index, trees in enumerate(nbest_trees, 1):
        for rank, (tree, score) in enumerate(trees, 1):
            element = _ccg_element(tree)
            element.set('sentence', str(sentence_index))
            element.set('id', str(rank))
            element.set('score', f'{score:.8f}')
            candc_node.append(element)

    return candc_node
