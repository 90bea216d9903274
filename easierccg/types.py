from typing import Optional, NamedTuple, Callable
from enum import Enum

from easierccg.cat import Category


class Rule(Enum):
    FORWARD_APPLY = ('fa', '>')
    BACKWARD_APPLY = ('ba', '<')
    FORWARD_COMPOSE = ('fc', '>B')
    BACKWARD_COMPOSE = ('bc', '<B')
    FORWARD_CROSS_COMPOSE = ('fx', '>Bx')
    BACKWARD_CROSS_COMPOSE = ('bx', '<Bx')
    FORWARD_TYPE_RAISE = ('ftr', '>T')
    BACKWARD_TYPE_RAISE = ('btr', '<T')

    @property
    def op_string(self) -> str:
        return self.value[0]

    @property
    def op_symbol(self) -> str:
        return self.value[1]

    @property
    def is_forward(self) -> bool:
        return self.op_symbol.startswith('>')

    @property
    def head_is_left(self) -> bool:
        return self.is_forward

    def __str__(self) -> str:
        return self.op_symbol


class CombinatorResult(NamedTuple):
    cat: Category
    rule: Rule

    @property
    def op_string(self) -> str:
        return self.rule.op_string

    @property
    def op_symbol(self) -> str:
        return self.rule.op_symbol

    @property
    def head_is_left(self) -> bool:
        return self.rule.head_is_left


Combinator = Callable[[Category, Category], Optional[Category]]


class UnaryResult(NamedTuple):
    cat: Category
    op_string: str

    @property
    def op_symbol(self) -> str:
        return '<un>'

    @property
    def head_is_left(self) -> bool:
        return True


UnaryRule = Callable[[Category], Optional[Category]]
