from typing import List, TypeVar, Tuple, Dict, Optional
from easierccg.types import CombinatorResult
from easierccg.cat import Category
from easierccg.grammar.combinators import (
    apply_binary_rules,
    apply_unary_rules,
    combine,
    raise_against,
    type_raise,
    BASIC_RULES,
    BINARY_RULES,
    COMBINATORS,
    UNARY_RULES,
)

X = TypeVar('X')
Pair = Tuple[X, X]


def apply_rules(
    left: Category,
    right: Category,
    cache: Optional[Dict[Pair[Category], List[CombinatorResult]]] = None,
) -> List[CombinatorResult]:
    """all the binary rules licensed for the pair, memoised in `cache`."""
    if cache is None:
        return apply_binary_rules(left, right)

    cats = (left, right)
    if cats in cache:
        return cache[cats]

    results = apply_binary_rules(left, right)
    cache[cats] = results
    return results
