from typing import Optional, List, Dict, Tuple

from easierccg.cat import (
    Category, Functor, Variable, Direction, CombinatorFeature, S, N, NP, PP
)
from easierccg.types import Combinator, CombinatorResult, Rule, UnaryResult, UnaryRule

_X = Variable()


def _is_raised_skeleton(x: Category, direction: Direction) -> bool:
    # ((X\X)/X) for forward, ((X/X)\X) for backward
    return (
        x.is_functor
        and x.direction is direction
        and x.argument.is_variable
        and x.result.is_functor
        and x.result.direction is direction.inverse
        and x.result.result.is_variable
        and x.result.argument.is_variable
    )


def _harmonic(x: Functor, y: Functor) -> bool:
    return x.feature.is_harmonic and y.feature.is_harmonic


def _crossing(x: Functor, y: Functor) -> bool:
    return (
        x.feature is CombinatorFeature.PERMUTATION_LIMITING
        and y.feature is CombinatorFeature.PERMUTATION_LIMITING
    )


def forward_application(x: Category, y: Category) -> Optional[Category]:
    """X/Y  Y  =>  X
    The open raised skeleton ((X\\X)/X) applied to a closed category C
    resolves to C\\C.
    """
    if not x.is_functor or x.direction is not Direction.FORWARD:
        return None
    if x.argument == y:
        return x.result
    if _is_raised_skeleton(x, Direction.FORWARD) and not y.contains_variable:
        return Functor(y, Direction.BACKWARD, CombinatorFeature.APPLICATION_ONLY, y)
    return None


def backward_application(x: Category, y: Category) -> Optional[Category]:
    """Y  X\\Y  =>  X"""
    if not y.is_functor or y.direction is not Direction.BACKWARD:
        return None
    if y.argument == x:
        return y.result
    if _is_raised_skeleton(y, Direction.BACKWARD) and not x.contains_variable:
        return Functor(x, Direction.FORWARD, CombinatorFeature.APPLICATION_ONLY, x)
    return None


def forward_composition(x: Category, y: Category) -> Optional[Category]:
    """X/Y  Y/Z  =>  X/Z"""
    if not (x.is_functor and y.is_functor):
        return None
    if (
        x.direction is Direction.FORWARD
        and y.direction is Direction.FORWARD
        and x.argument == y.result
        and _harmonic(x, y)
    ):
        return Functor(x.result, Direction.FORWARD, y.feature, y.argument)
    return None


def backward_composition(x: Category, y: Category) -> Optional[Category]:
    """X\\Y  Y\\Z  =>  X\\Z
    The left operand is the one whose argument is consumed, and the result
    takes its feature.
    """
    if not (x.is_functor and y.is_functor):
        return None
    if (
        x.direction is Direction.BACKWARD
        and y.direction is Direction.BACKWARD
        and x.argument == y.result
        and _harmonic(x, y)
    ):
        return Functor(x.result, Direction.BACKWARD, x.feature, y.argument)
    return None


def forward_crossed_composition(x: Category, y: Category) -> Optional[Category]:
    """X/Y  Y\\Z  =>  X\\Z"""
    if not (x.is_functor and y.is_functor):
        return None
    if (
        x.direction is Direction.FORWARD
        and y.direction is Direction.BACKWARD
        and x.argument == y.result
        and _crossing(x, y)
    ):
        return Functor(x.result, Direction.BACKWARD, y.feature, y.argument)
    return None


def backward_crossed_composition(x: Category, y: Category) -> Optional[Category]:
    """Y/Z  X\\Y  =>  X/Z"""
    if not (x.is_functor and y.is_functor):
        return None
    if (
        x.direction is Direction.FORWARD
        and y.direction is Direction.BACKWARD
        and y.argument == x.result
        and _crossing(x, y)
    ):
        return Functor(y.result, Direction.FORWARD, x.feature, x.argument)
    return None


def type_raise(
    x: Category,
    direction: Direction = Direction.FORWARD,
    target: Optional[Category] = None,
) -> Category:
    """type raising of `x` against a meta variable.
    forward:  x  =>  X/(X\\x)
    backward: x  =>  X\\(X/x)

    Args:
        x (Category): category to raise
        direction (Direction, optional): direction of the raised functor.
        target (Optional[Category], optional): if given, the meta variables
        are replaced with this category. Defaults to None.

    Returns:
        Category: the raised category
    """
    raised = Functor(
        _X,
        direction,
        CombinatorFeature.VARIABLE,
        Functor(_X, direction.inverse, CombinatorFeature.VARIABLE, x)
    )
    if target is not None:
        return raised.replacing_variables(target)
    return raised


def raise_against(x: Category, neighbor: Category) -> Optional[Category]:
    """type raising of an atomic `x` so that it composes with `neighbor`
    on its right, which must be of the form (X|Y)|W with Y == x.
    The result is X/(X|Y), the inner slash and its feature kept as is.
    """
    if not x.is_atomic or x.is_variable:
        return None
    if not (neighbor.is_functor and neighbor.result.is_functor):
        return None
    inner = neighbor.result
    if inner.argument != x:
        return None
    return Functor(inner.result, Direction.FORWARD, inner.feature, inner)


def bare_noun_raising(x: Category) -> Optional[Category]:
    """N  =>  NP"""
    if x == N:
        return NP
    return None


def np_raised_to_sentence(x: Category) -> Optional[Category]:
    """NP  =>  S/(S\\NP)"""
    if x == NP:
        return S / (S | NP)
    return None


def np_raised_to_verb_phrase(x: Category) -> Optional[Category]:
    """NP  =>  (S\\NP)/((S\\NP)/NP)"""
    if x == NP:
        return (S | NP) / ((S | NP) / NP)
    return None


def np_raised_to_pp(x: Category) -> Optional[Category]:
    """NP  =>  (S\\NP)/((S\\NP)/PP)"""
    if x == NP:
        return (S | NP) / ((S | NP) / PP)
    return None


COMBINATORS: Dict[Rule, Combinator] = {
    Rule.FORWARD_APPLY: forward_application,
    Rule.BACKWARD_APPLY: backward_application,
    Rule.FORWARD_COMPOSE: forward_composition,
    Rule.BACKWARD_COMPOSE: backward_composition,
    Rule.FORWARD_CROSS_COMPOSE: forward_crossed_composition,
    Rule.BACKWARD_CROSS_COMPOSE: backward_crossed_composition,
}

BASIC_RULES: Tuple[Rule, ...] = (
    Rule.FORWARD_APPLY,
    Rule.BACKWARD_APPLY,
    Rule.FORWARD_COMPOSE,
    Rule.BACKWARD_COMPOSE,
)

BINARY_RULES: Tuple[Rule, ...] = BASIC_RULES + (
    Rule.FORWARD_CROSS_COMPOSE,
    Rule.BACKWARD_CROSS_COMPOSE,
)


def combine(rule: Rule, x: Category, y: Category) -> Optional[Category]:
    if rule not in COMBINATORS:
        return None
    return COMBINATORS[rule](x, y)


def apply_binary_rules(
    x: Category,
    y: Category,
    rules: Tuple[Rule, ...] = BINARY_RULES,
) -> List[CombinatorResult]:
    results = []
    for rule in rules:
        result = COMBINATORS[rule](x, y)
        if result is not None:
            results.append(CombinatorResult(result, rule))
    return results


# not used by the chart parsers, which only raise against a neighbor
UNARY_RULES: Tuple[UnaryRule, ...] = (
    bare_noun_raising,
    np_raised_to_sentence,
    np_raised_to_verb_phrase,
    np_raised_to_pp,
)


def apply_unary_rules(
    x: Category,
    rules: Tuple[UnaryRule, ...] = UNARY_RULES,
) -> List[UnaryResult]:
    results = []
    for rule in rules:
        result = rule(x)
        if result is not None:
            type_raised = result.is_functor
            results.append(UnaryResult(result, 'tr' if type_raised else 'lex'))
    return results
