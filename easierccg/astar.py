"""Best-first (A*) parsing over the agenda.

Each lexical category of a word is scored with a log probability, and a
derivation costs the negated sum of the scores of its leaves, plus a
penalty for every use of type raising. Agenda items are ordered by the
cost of the derivation plus the best achievable cost of the words outside
of its span, which never overestimates the cost of completing it, so that
complete derivations come off the agenda from the best one.
"""

from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple
import logging
import numpy

from easierccg.agenda import Agenda, AgendaItem
from easierccg.cat import Category
from easierccg.chart import construct_parents, RuleCache
from easierccg.tree import Leaf, RaisedLeaf, Node, ScoredTree, Tree

logger = logging.getLogger(__name__)

Scorer = Callable[[int, str, Category], float]


def uniform_scorer(position: int, word: str, cat: Category) -> float:
    return 0.0


def scorer_of_matrix(
    tag_scores: numpy.ndarray,
    categories: Sequence[Category],
) -> Scorer:
    """scorer looking up log probabilities in a (sentence length, number of categories) matrix,
    as output by supertaggers. Categories not in `categories` are never chosen.

    Args:
        tag_scores (numpy.ndarray): log probabilities of categories for each word
        categories (Sequence[Category]): categories corresponding to the matrix columns

    Returns:
        Scorer: scoring function
    """
    if tag_scores.ndim != 2 or tag_scores.shape[1] != len(categories):
        raise RuntimeError(
            ('invalid shape of the tag score matrix:\n'
             f'Expected: (*, {len(categories)}), Actual: {tag_scores.shape}')
        )
    category_ids = {cat: index for index, cat in enumerate(categories)}

    def scorer(position: int, word: str, cat: Category) -> float:
        if cat not in category_ids:
            return -numpy.inf
        return float(tag_scores[position, category_ids[cat]])

    return scorer


def compute_outside_scores(best_scores: numpy.ndarray) -> numpy.ndarray:
    """the best log probability of the words outside of each span.

    Args:
        best_scores (numpy.ndarray): the best lexical score of each word

    Returns:
        numpy.ndarray: (n + 1, n + 1) matrix whose (i, j) element is the sum
        of best_scores outside of [i, j), defined for i <= j.
    """
    cumulative = numpy.concatenate([[0.0], numpy.cumsum(best_scores)])
    total = cumulative[-1]
    return total - (cumulative[None, :] - cumulative[:, None])


def _num_raised(tree: Tree) -> int:
    if isinstance(tree, Node) and isinstance(tree.left, RaisedLeaf):
        return 1
    return 0


def parse_best(
    words: Sequence[str],
    lexicon: Mapping[str, Sequence[Category]],
    scorer: Optional[Scorer] = None,
    nbest: int = 1,
    root_categories: Optional[Sequence[Category]] = None,
    raise_penalty: float = 0.1,
    max_step: int = 10000000,
) -> List[ScoredTree]:
    """n-best derivations of a sentence, best first.

    Args:
        words (Sequence[str]): tokenized sentence
        lexicon (Mapping[str, Sequence[Category]]): mapping from a word to its categories
        scorer (Optional[Scorer], optional): log probability of a category for
        the word at a position. Defaults to `uniform_scorer`.
        nbest (int, optional): the number of derivations to find. Defaults to 1.
        root_categories (Optional[Sequence[Category]], optional): if given,
        only derivations with one of these categories are returned.
        raise_penalty (float, optional): cost of type raising. Defaults to 0.1.
        max_step (int, optional): give up after popping the agenda this many times.

    Returns:
        List[ScoredTree]: derivations with their log scores, best first.
    """
    size = len(words)
    if size == 0:
        return []
    if raise_penalty < 0:
        raise ValueError('raise_penalty must not be negative')

    scorer = scorer or uniform_scorer

    leaves: List[List[Tuple[Leaf, float]]] = []
    for position, word in enumerate(words):
        scored = [
            (Leaf(cat, word), scorer(position, word, cat))
            for cat in lexicon.get(word, ())
        ]
        scored = [(leaf, score) for leaf, score in scored if numpy.isfinite(score)]
        if len(scored) == 0:
            logger.info('no lexical entry for word: %s', word)
            return []
        leaves.append(scored)

    best_scores = numpy.array([max(score for _, score in scored) for scored in leaves])
    outside_costs = -compute_outside_scores(best_scores)

    agenda: Agenda[AgendaItem] = Agenda(
        AgendaItem(-score + outside_costs[k, k + 1], leaf, -score, k, k + 1)
        for k, scored in enumerate(leaves)
        for leaf, score in scored
    )

    chart: Dict[Tuple[int, int], Dict[Category, List[Tree]]] = {}
    by_start: List[List[AgendaItem]] = [[] for _ in range(size + 1)]
    by_end: List[List[AgendaItem]] = [[] for _ in range(size + 1)]
    cache: RuleCache = {}
    results: List[ScoredTree] = []

    def push_parents(left: AgendaItem, right: AgendaItem) -> None:
        start, end = left.start, right.end
        for tree in construct_parents(left.tree, right.tree, cache):
            cost = left.cost + right.cost + raise_penalty * _num_raised(tree)
            agenda.insert(
                AgendaItem(cost + outside_costs[start, end], tree, cost, start, end)
            )

    step = 0
    while not agenda.is_empty and len(results) < nbest:
        if step >= max_step:
            logger.warning('giving up parsing after %d steps', step)
            break
        step += 1

        item = agenda.remove_min()
        cell = chart.setdefault(item.span, {})
        trees = cell.setdefault(item.tree.cat, [])
        if len(trees) >= nbest or item.tree in trees:
            continue
        trees.append(item.tree)

        if item.span == (0, size):
            if root_categories is None or item.tree.cat in root_categories:
                results.append(ScoredTree(item.tree, -item.cost))
            continue

        by_start[item.start].append(item)
        by_end[item.end].append(item)
        for right in list(by_start[item.end]):
            push_parents(item, right)
        for left in list(by_end[item.start]):
            push_parents(left, item)

    logger.debug('found %d derivations in %d steps', len(results), step)
    return results
