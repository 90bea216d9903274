from .cat import (
    Category, Atom, Variable, Functor,
    Primitive, SentenceFeature, Direction, CombinatorFeature
)
from .types import Rule
from .tree import Tree, Leaf, RaisedLeaf, Node, ScoredTree
from .lexicon import Lexicon, read_lexicon
from .chart import parse, parse_deterministic
from .astar import parse_best
from .agenda import Agenda
