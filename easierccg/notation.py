"""Reading categories written in the usual CCG notation.

    >>> parse_category('(S[dcl]\\NP)/NP')
    (S[dcl]\\NP)/NP

Slashes associate to the left, so `S\\NP/NP` reads as `(S\\NP)/NP`.
A slash may be immediately followed by a feature symbol restricting the
rules the functor takes part in (see `CombinatorFeature`); ASCII aliases
are accepted for each of them.
"""

import re
from typing import Dict, Optional

from easierccg.cat import (
    Category, Atom, Variable, Functor,
    Primitive, SentenceFeature, Direction, CombinatorFeature
)

name_pattern = re.compile(r'[A-Z]+')
feature_pattern = re.compile(r'[a-z]+')

PRIMITIVES: Dict[str, Primitive] = {
    primitive.value: primitive for primitive in Primitive
}

# clausal features come first so that `b` reads as the subjunctive clause
SENTENCE_FEATURES: Dict[str, SentenceFeature] = {}
for _feature in sorted(SentenceFeature, key=lambda f: f.is_lexical):
    SENTENCE_FEATURES.setdefault(_feature.symbol, _feature)

FEATURE_SYMBOLS = [
    ('<>', CombinatorFeature.ORDER_PRESERVING),
    ('◇', CombinatorFeature.ORDER_PRESERVING),
    ('★', CombinatorFeature.APPLICATION_ONLY),
    ('*', CombinatorFeature.APPLICATION_ONLY),
    ('×', CombinatorFeature.PERMUTATION_LIMITING),
    ('x', CombinatorFeature.PERMUTATION_LIMITING),
    ('𝑖', CombinatorFeature.VARIABLE),
    ('i', CombinatorFeature.VARIABLE),
]


class CategoryParseError(ValueError):
    def __init__(self, message: str, text: str, position: int) -> None:
        super().__init__(f'{message} at position {position}: {text!r}')
        self.text = text
        self.position = position


class _CategoryReader(object):
    def __init__(self, text: str) -> None:
        self.text = text
        self.index = 0

    def error(self, message: str) -> CategoryParseError:
        return CategoryParseError(message, self.text, self.index)

    def skip_spaces(self) -> None:
        while self.index < len(self.text) and self.text[self.index].isspace():
            self.index += 1

    def peek(self) -> Optional[str]:
        self.skip_spaces()
        if self.index < len(self.text):
            return self.text[self.index]
        return None

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise self.error(f'expected "{char}"')
        self.index += 1

    def read(self) -> Category:
        result = self.read_functor()
        if self.peek() is not None:
            raise self.error('unexpected trailing input')
        return result

    def read_functor(self) -> Category:
        result = self.read_term()
        while self.peek() in ('/', '\\'):
            direction = Direction(self.text[self.index])
            self.index += 1
            feature = self.read_feature_symbol()
            argument = self.read_term()
            result = Functor(result, direction, feature, argument)
        return result

    def read_feature_symbol(self) -> CombinatorFeature:
        for symbol, feature in FEATURE_SYMBOLS:
            if self.text.startswith(symbol, self.index):
                self.index += len(symbol)
                return feature
        return CombinatorFeature.PERMISSIVE

    def read_term(self) -> Category:
        char = self.peek()
        if char is None:
            raise self.error('unexpected end of input')
        if char == '(':
            self.index += 1
            result = self.read_functor()
            self.expect(')')
            return result
        return self.read_atom()

    def read_atom(self) -> Category:
        match = name_pattern.match(self.text, self.index)
        if match is None:
            raise self.error('expected a category')
        name = match.group()
        if name == 'X':
            self.index = match.end()
            return Variable()
        if name not in PRIMITIVES:
            raise self.error(f'unknown atomic category "{name}"')
        self.index = match.end()
        primitive = PRIMITIVES[name]

        if self.index < len(self.text) and self.text[self.index] == '[':
            if primitive is not Primitive.SENTENCE:
                raise self.error(f'"{name}" does not take a feature')
            self.index += 1
            match = feature_pattern.match(self.text, self.index)
            if match is None or match.group() not in SENTENCE_FEATURES:
                raise self.error('unknown sentence feature')
            self.index = match.end()
            if self.index >= len(self.text) or self.text[self.index] != ']':
                raise self.error('expected "]"')
            self.index += 1
            return Atom(primitive, SENTENCE_FEATURES[match.group()])

        return Atom(primitive)


def parse_category(text: str) -> Category:
    """parse a category expression such as `(S[dcl]\\NP)/NP`.

    Args:
        text (str): category expression

    Raises:
        CategoryParseError: if the expression is malformed

    Returns:
        Category: the category
    """
    return _CategoryReader(text).read()
