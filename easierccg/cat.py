from typing import Optional, Callable
from dataclasses import dataclass
from enum import Enum


class Primitive(Enum):
    SENTENCE = 'S'
    NOUN = 'N'
    PREPOSITION = 'P'
    VERB = 'V'
    NOUN_PHRASE = 'NP'
    PREPOSITIONAL_PHRASE = 'PP'
    VERB_PHRASE = 'VP'

    def __str__(self) -> str:
        return self.value


class SentenceFeature(Enum):
    """Features attached to sentence categories, e.g., S[dcl].
    Clausal features describe the type of a clause, while lexical features
    describe the form of the verb heading it (S[ng]\\NP, S[to]\\NP, etc.).
    The subjunctive clause and the bare infinitive are both written `b`
    but remain distinct values.
    """

    DECLARATIVE = ('dcl', False)
    WH_QUESTION = ('wq', False)
    YES_NO_QUESTION = ('q', False)
    EMBEDDED_QUESTION = ('qem', False)
    EMBEDDED_SENTENCE = ('em', False)
    SUBJUNCTIVE_EMBEDDED_SENTENCE = ('bem', False)
    SUBJUNCTIVE_SENTENCE = ('b', False)
    FRAGMENT = ('frg', False)
    FOR_CLAUSE = ('for', False)
    INTERJECTION = ('intj', False)
    ELLIPTICAL_INVERSION = ('inv', False)

    ADJECTIVE = ('adj', True)
    BARE_INFINITIVE = ('b', True)
    TO_INFINITIVE = ('to', True)
    PASSIVE_PAST_PARTICIPLE = ('pss', True)
    ACTIVE_PAST_PARTICIPLE = ('pt', True)
    PRESENT_PARTICIPLE = ('ng', True)

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def is_lexical(self) -> bool:
        return self.value[1]

    def __str__(self) -> str:
        return self.symbol


class Direction(Enum):
    FORWARD = '/'
    BACKWARD = '\\'

    @property
    def inverse(self) -> 'Direction':
        if self is Direction.FORWARD:
            return Direction.BACKWARD
        return Direction.FORWARD

    def __str__(self) -> str:
        return self.value


class CombinatorFeature(Enum):
    """Slash modalities restricting the rules a functor can take part in.
    APPLICATION_ONLY blocks any composition, ORDER_PRESERVING and PERMISSIVE
    allow harmonic composition, PERMUTATION_LIMITING allows crossing
    composition only.
    """

    APPLICATION_ONLY = '★'
    ORDER_PRESERVING = '◇'
    PERMUTATION_LIMITING = '×'
    PERMISSIVE = ''
    VARIABLE = '𝑖'

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_harmonic(self) -> bool:
        return self in (
            CombinatorFeature.PERMISSIVE,
            CombinatorFeature.ORDER_PRESERVING,
        )

    def __repr__(self) -> str:
        return f'CombinatorFeature.{self.name}'


class Category(object):
    @property
    def is_functor(self) -> bool:
        return not self.is_atomic

    @property
    def is_atomic(self) -> bool:
        return not self.is_functor

    @property
    def is_variable(self) -> bool:
        return False

    def __repr__(self) -> str:
        return str(self)

    def __truediv__(self, other: 'Category') -> 'Category':
        return Functor(self, Direction.FORWARD, CombinatorFeature.PERMISSIVE, other)

    def __or__(self, other: 'Category') -> 'Category':
        return Functor(self, Direction.BACKWARD, CombinatorFeature.PERMISSIVE, other)

    @property
    def contains_variable(self) -> bool:
        raise NotImplementedError()

    def replacing_variables(self, target: 'Category') -> 'Category':
        """the result of replacing every occurrence of `Variable` with `target`.

        Args:
            target (Category): the category substituted for variables

        Returns:
            Category: a new category without variables (if `target` has none)
        """
        raise NotImplementedError()

    @classmethod
    def parse(cls, text: str) -> 'Category':
        from easierccg.notation import parse_category
        return parse_category(text)


@dataclass(frozen=True, repr=False)
class Atom(Category):
    base: Primitive
    feature: Optional[SentenceFeature] = None

    def __post_init__(self):
        if self.feature is not None and self.base is not Primitive.SENTENCE:
            raise ValueError(
                f'only sentence categories carry a feature: {self.base}[{self.feature}]'
            )

    def __str__(self) -> str:
        if self.feature is None:
            return str(self.base)
        return f'{self.base}[{self.feature}]'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        elif not isinstance(other, Atom):
            return False
        return (
            self.base == other.base
            and self.feature == other.feature
        )

    @property
    def is_atomic(self) -> bool:
        return True

    @property
    def contains_variable(self) -> bool:
        return False

    def replacing_variables(self, target: Category) -> Category:
        return self


@dataclass(frozen=True, repr=False)
class Variable(Category):
    """meta variable category `X`, only found in type-raised skeletons."""

    def __str__(self) -> str:
        return 'X'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return other == 'X'
        return isinstance(other, Variable)

    @property
    def is_atomic(self) -> bool:
        return True

    @property
    def is_variable(self) -> bool:
        return True

    @property
    def contains_variable(self) -> bool:
        return True

    def replacing_variables(self, target: Category) -> Category:
        return target


@dataclass(frozen=True, repr=False)
class Functor(Category):
    result: Category
    direction: Direction
    feature: CombinatorFeature
    argument: Category

    def __str__(self) -> str:
        def _str(cat):
            if isinstance(cat, Functor):
                return f'({cat})'
            return str(cat)
        return (
            _str(self.result)
            + str(self.direction)
            + self.feature.symbol
            + _str(self.argument)
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        elif not isinstance(other, Functor):
            return False
        return (
            self.result == other.result
            and self.direction == other.direction
            and self.feature == other.feature
            and self.argument == other.argument
        )

    @property
    def functor(self) -> Callable[[Category, Category], Category]:
        return lambda x, y: Functor(x, self.direction, self.feature, y)

    @property
    def is_functor(self) -> bool:
        return True

    @property
    def is_forward(self) -> bool:
        return self.direction is Direction.FORWARD

    @property
    def is_backward(self) -> bool:
        return self.direction is Direction.BACKWARD

    @property
    def nargs(self) -> int:
        if isinstance(self.result, Functor):
            return 1 + self.result.nargs
        return 1

    @property
    def contains_variable(self) -> bool:
        return self.result.contains_variable or self.argument.contains_variable

    def replacing_variables(self, target: Category) -> Category:
        return self.functor(
            self.result.replacing_variables(target),
            self.argument.replacing_variables(target),
        )


S = Atom(Primitive.SENTENCE)
N = Atom(Primitive.NOUN)
P = Atom(Primitive.PREPOSITION)
V = Atom(Primitive.VERB)
NP = Atom(Primitive.NOUN_PHRASE)
PP = Atom(Primitive.PREPOSITIONAL_PHRASE)
VP = Atom(Primitive.VERB_PHRASE)
