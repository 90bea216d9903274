from typing import NamedTuple, List, Optional
from dataclasses import dataclass
from functools import cached_property

from easierccg.cat import Category
from easierccg.types import Rule
from easierccg.grammar import combine, raise_against

UNDERIVED = '?'


class Tree(object):
    """A derivation. Subclasses are `Leaf`, `RaisedLeaf` and `Node`,
    and all of them expose the derived category as `cat`, which is None
    when the derivation does not denote any category.
    """

    @property
    def children(self) -> List['Tree']:
        return []

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    @property
    def is_unary(self) -> bool:
        return len(self.children) == 1

    @property
    def head(self) -> 'Tree':
        return self

    @property
    def leaves(self) -> List['Tree']:

        def rec(node):
            if node.is_leaf:
                result.append(node)
            else:
                for child in node.children:
                    rec(child)

        result = []
        rec(self)
        return result

    @property
    def words(self) -> List[Optional[str]]:
        return [leaf.token for leaf in self.leaves]

    @property
    def token(self) -> Optional[str]:
        return None

    @property
    def word(self) -> str:
        return ' '.join(word or '_' for word in self.words)

    @property
    def left_child(self) -> 'Tree':
        assert not self.is_leaf, "This node is leaf and does not have any child!"
        return self.children[0]

    @property
    def right_child(self) -> 'Tree':
        assert not self.is_leaf, "This node is leaf and does not have any child!"
        assert not self.is_unary, "This node does not have right child!"
        return self.children[1]

    @property
    def label(self) -> str:
        """the category as printed, `?` if the derivation denotes none."""
        return UNDERIVED if self.cat is None else str(self.cat)

    def __len__(self) -> int:
        return len(self.leaves)

    def __str__(self) -> str:
        if self.is_leaf:
            return self.label
        children = ';'.join(str(child) for child in self.children)
        return f'({children}--{self.op_symbol}{self.label})'


@dataclass(frozen=True, repr=False)
class Leaf(Tree):
    cat: Category
    word: Optional[str] = None

    @property
    def token(self) -> Optional[str]:
        return self.word

    @property
    def op_string(self) -> str:
        return 'lex'

    @property
    def op_symbol(self) -> str:
        return '<lex>'

    @property
    def head_is_left(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f'Leaf({self.cat}, {self.word!r})'


@dataclass(frozen=True, repr=False)
class RaisedLeaf(Tree):
    """`source` type-raised so that it composes with `neighbor` on its right.
    `child`, if any, is the derivation whose category is `source`.
    """

    source: Category
    neighbor: Category
    child: Optional[Tree] = None

    @cached_property
    def cat(self) -> Optional[Category]:
        return raise_against(self.source, self.neighbor)

    @property
    def children(self) -> List[Tree]:
        return [] if self.child is None else [self.child]

    @property
    def op_string(self) -> str:
        return Rule.FORWARD_TYPE_RAISE.op_string

    @property
    def op_symbol(self) -> str:
        return Rule.FORWARD_TYPE_RAISE.op_symbol

    @property
    def label(self) -> str:
        raised = UNDERIVED if self.cat is None else str(self.cat)
        return f'{self.source}{self.op_symbol}{raised}'

    def __str__(self) -> str:
        return self.label

    @property
    def head_is_left(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f'RaisedLeaf({self.source}, {self.neighbor})'


@dataclass(frozen=True, repr=False)
class Node(Tree):
    left: Tree
    right: Tree
    rule: Rule

    @cached_property
    def cat(self) -> Optional[Category]:
        left, right = self.left.cat, self.right.cat
        if left is None or right is None:
            return None
        return combine(self.rule, left, right)

    @property
    def children(self) -> List[Tree]:
        return [self.left, self.right]

    @property
    def head(self) -> Tree:
        if self.rule in (
            Rule.FORWARD_APPLY,
            Rule.FORWARD_COMPOSE,
            Rule.FORWARD_CROSS_COMPOSE,
        ):
            return self.left
        elif self.rule in (
            Rule.BACKWARD_APPLY,
            Rule.BACKWARD_COMPOSE,
            Rule.BACKWARD_CROSS_COMPOSE,
        ):
            return self.right
        return self

    @property
    def op_string(self) -> str:
        return self.rule.op_string

    @property
    def op_symbol(self) -> str:
        return self.rule.op_symbol

    @property
    def head_is_left(self) -> bool:
        return self.rule.head_is_left

    def __repr__(self) -> str:
        return f'Node({self.left!r}, {self.right!r}, {self.rule.name})'


class ScoredTree(NamedTuple):
    tree: Tree
    score: float
