from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Iterable
import logging

from easierccg.cat import Category
from easierccg.grammar import apply_rules, raise_against
from easierccg.tree import Tree, Leaf, RaisedLeaf, Node
from easierccg.types import CombinatorResult, Rule

logger = logging.getLogger(__name__)

Span = Tuple[int, int]
RuleCache = Dict[Tuple[Category, Category], List[CombinatorResult]]


class Chart(object):
    """triangular table of derivations, indexed by spans (i, j) with 0 <= i < j <= size."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._cells: Dict[Span, Dict[Tree, None]] = {}

    def _check(self, span: Span) -> None:
        i, j = span
        if not 0 <= i < j <= self.size:
            raise IndexError(f'invalid span {span} for a chart of size {self.size}')

    def __getitem__(self, span: Span) -> List[Tree]:
        self._check(span)
        return list(self._cells.get(span, ()))

    def add(self, span: Span, trees: Iterable[Tree]) -> int:
        """add trees to the cell, ignoring the ones already there.

        Returns:
            int: the number of newly added trees
        """
        self._check(span)
        cell = self._cells.setdefault(span, {})
        size = len(cell)
        for tree in trees:
            cell[tree] = None
        return len(cell) - size

    @property
    def root(self) -> List[Tree]:
        if self.size == 0:
            return []
        return self[0, self.size]

    def __len__(self) -> int:
        return sum(len(cell) for cell in self._cells.values())


def _lexical_categories(
    lexicon: Mapping[str, Sequence[Category]],
    word: str,
) -> Sequence[Category]:
    categories = lexicon.get(word, ())
    if len(categories) == 0:
        logger.info('no lexical entry for word: %s', word)
    return categories


def construct_parents(
    left: Tree,
    right: Tree,
    cache: Optional[RuleCache] = None,
) -> List[Tree]:
    """all the derivations combining `left` and `right` licensed by the grammar,
    including type raising `left` to compose it with `right`.
    """
    lcat, rcat = left.cat, right.cat
    if lcat is None or rcat is None:
        return []

    results = [
        Node(left, right, result.rule)
        for result in apply_rules(lcat, rcat, cache)
    ]
    if raise_against(lcat, rcat) is not None:
        raised = Node(RaisedLeaf(lcat, rcat, left), right, Rule.FORWARD_COMPOSE)
        if raised.cat is not None:
            results.append(raised)
    return results


def construct_parent(
    left: Tree,
    right: Tree,
    cache: Optional[RuleCache] = None,
) -> Optional[Tree]:
    """deterministic version of `construct_parents`.
    When several rules apply, the first one in `BINARY_RULES` wins;
    type raising is only tried when no rule applies.
    """
    lcat, rcat = left.cat, right.cat
    if lcat is None or rcat is None:
        return None

    results = apply_rules(lcat, rcat, cache)
    if len(results) > 0:
        if len(results) > 1:
            logger.debug(
                'ambiguous combination of %s and %s: choosing %s over %s',
                lcat, rcat, results[0].rule.name,
                ', '.join(result.rule.name for result in results[1:])
            )
        return Node(left, right, results[0].rule)

    if raise_against(lcat, rcat) is not None:
        raised = Node(RaisedLeaf(lcat, rcat, left), right, Rule.FORWARD_COMPOSE)
        if raised.cat is not None:
            return raised
    return None


def parse(
    words: Sequence[str],
    lexicon: Mapping[str, Sequence[Category]],
) -> List[Tree]:
    """enumerate all the derivations of a sentence with CKY.

    Args:
        words (Sequence[str]): tokenized sentence
        lexicon (Mapping[str, Sequence[Category]]): mapping from a word to its categories

    Returns:
        List[Tree]: all derivations spanning the whole sentence, without duplicates.
        the list is empty if the sentence has no derivation.
    """
    size = len(words)
    chart = Chart(size)
    cache: RuleCache = {}

    for k, word in enumerate(words):
        chart.add(
            (k, k + 1),
            (Leaf(cat, word) for cat in _lexical_categories(lexicon, word))
        )

    for length in range(2, size + 1):
        for i in range(0, size - length + 1):
            j = i + length
            for k in range(i + 1, j):
                for left in chart[i, k]:
                    for right in chart[k, j]:
                        chart.add((i, j), construct_parents(left, right, cache))
            logger.debug('span (%d, %d): %d derivations', i, j, len(chart[i, j]))

    return chart.root


def parse_deterministic(
    words: Sequence[str],
    lexicon: Mapping[str, Sequence[Category]],
) -> Optional[Tree]:
    """CKY keeping a single derivation per span (except for the lexical ones).
    A span takes the first derivation found, trying split points from left to right
    and lexical categories in the order the lexicon lists them.

    Args:
        words (Sequence[str]): tokenized sentence
        lexicon (Mapping[str, Sequence[Category]]): mapping from a word to its categories

    Returns:
        Optional[Tree]: a derivation of the sentence, or None.
    """
    size = len(words)
    if size == 0:
        return None

    chart = Chart(size)
    cache: RuleCache = {}

    def first_parent(lefts: List[Tree], rights: List[Tree]) -> Optional[Tree]:
        for left in lefts:
            for right in rights:
                tree = construct_parent(left, right, cache)
                if tree is not None:
                    return tree
        return None

    for k, word in enumerate(words):
        chart.add(
            (k, k + 1),
            (Leaf(cat, word) for cat in _lexical_categories(lexicon, word))
        )

    for length in range(2, size + 1):
        for i in range(0, size - length + 1):
            j = i + length
            for k in range(i + 1, j):
                tree = first_parent(chart[i, k], chart[k, j])
                if tree is not None:
                    chart.add((i, j), [tree])
                    break

    root = chart.root
    return root[0] if len(root) > 0 else None
