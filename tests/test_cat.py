import pytest
from pathlib import Path
from easierccg.cat import (
    Category, Atom, Variable, Functor,
    Primitive, SentenceFeature, Direction, CombinatorFeature,
    S, NP, N, PP
)
from easierccg.notation import parse_category, CategoryParseError

here = Path(__file__).parent

categories = [
    (Category.parse(text.strip()), text.strip())
    for text in open(here / 'cats.txt', encoding='utf-8')
    if len(text.strip()) > 0
]

PERMISSIVE = CombinatorFeature.PERMISSIVE
FORWARD = Direction.FORWARD
BACKWARD = Direction.BACKWARD


@pytest.mark.parametrize("result, expect", categories)
def test_parse_many(result, expect):
    assert str(result) == expect


@pytest.mark.parametrize("result, expect", categories)
def test_equality_is_reflexive_and_symmetric(result, expect):
    other = Category.parse(expect)
    assert result == result
    assert result == other
    assert other == result
    assert hash(result) == hash(other)


def test_parse():
    assert Category.parse("NP") == Atom(Primitive.NOUN_PHRASE)
    assert Category.parse("(NP)") == Atom(Primitive.NOUN_PHRASE)
    assert Category.parse("X") == Variable()
    assert Category.parse("S/NP") == Functor(S, FORWARD, PERMISSIVE, NP)
    assert Category.parse("( S / NP )") == Functor(S, FORWARD, PERMISSIVE, NP)
    assert Category.parse("S[dcl]/NP") == Functor(
        Atom(Primitive.SENTENCE, SentenceFeature.DECLARATIVE), FORWARD, PERMISSIVE, NP)

    # left associative
    assert Category.parse("S\\NP/NP") == Category.parse("(S\\NP)/NP")
    assert Category.parse("S\\NP/NP") != Category.parse("S\\(NP/NP)")

    # combinator features, with their ascii aliases
    assert Category.parse("S/★NP").feature is CombinatorFeature.APPLICATION_ONLY
    assert Category.parse("S/*NP").feature is CombinatorFeature.APPLICATION_ONLY
    assert Category.parse("S/◇NP").feature is CombinatorFeature.ORDER_PRESERVING
    assert Category.parse("S/<>NP").feature is CombinatorFeature.ORDER_PRESERVING
    assert Category.parse("S\\×NP").feature is CombinatorFeature.PERMUTATION_LIMITING
    assert Category.parse("S\\xNP").feature is CombinatorFeature.PERMUTATION_LIMITING
    assert Category.parse("X/iX").feature is CombinatorFeature.VARIABLE
    assert Category.parse("S/NP").feature is CombinatorFeature.PERMISSIVE


def test_subjunctive_and_bare_infinitive():
    # both are written "b", which reads as the clausal feature
    assert Category.parse("S[b]") == Atom(
        Primitive.SENTENCE, SentenceFeature.SUBJUNCTIVE_SENTENCE)
    bare = Atom(Primitive.SENTENCE, SentenceFeature.BARE_INFINITIVE)
    assert str(bare) == "S[b]"
    assert bare != Category.parse("S[b]")
    assert SentenceFeature.BARE_INFINITIVE.is_lexical
    assert not SentenceFeature.SUBJUNCTIVE_SENTENCE.is_lexical


@pytest.mark.parametrize("text", [
    "",
    "(",
    "S/",
    "S/NP)",
    "(S/NP",
    "Q",
    "NP[dcl]",
    "S[xyz]",
    "S[dcl",
    "S NP",
    "S//NP",
])
def test_parse_error(text):
    with pytest.raises(CategoryParseError):
        parse_category(text)


def test_parse_error_position():
    with pytest.raises(CategoryParseError) as e:
        parse_category("S/(NP")
    assert e.value.text == "S/(NP"
    assert e.value.position == 5


def test_binop():
    assert S / NP == Category.parse("S/NP")
    assert S | NP == Category.parse("S\\NP")
    assert S | (S / NP) == Category.parse("S\\(S/NP)")
    assert (S | NP) / NP == Category.parse("(S\\NP)/NP")

    assert S / NP == "S/NP"
    assert S | NP == "S\\NP"
    assert (S | NP) / NP == "(S\\NP)/NP"
    assert "(S\\NP)/NP" == (S | NP) / NP


def test_atom_equality():
    dcl = Atom(Primitive.SENTENCE, SentenceFeature.DECLARATIVE)
    wq = Atom(Primitive.SENTENCE, SentenceFeature.WH_QUESTION)
    assert dcl == Atom(Primitive.SENTENCE, SentenceFeature.DECLARATIVE)
    assert dcl != wq
    # no feature is a value of its own
    assert S != dcl
    assert S == Atom(Primitive.SENTENCE, None)
    assert NP != N
    assert NP != Variable()


def test_functor_equality():
    x = Functor(S, FORWARD, PERMISSIVE, NP)
    assert x == Functor(S, FORWARD, PERMISSIVE, NP)
    assert x != Functor(S, BACKWARD, PERMISSIVE, NP)
    assert x != Functor(S, FORWARD, CombinatorFeature.ORDER_PRESERVING, NP)
    assert x != Functor(S, FORWARD, PERMISSIVE, PP)
    assert x != Functor(NP, FORWARD, PERMISSIVE, NP)
    assert x != S


def test_feature_only_on_sentences():
    with pytest.raises(ValueError):
        Atom(Primitive.NOUN_PHRASE, SentenceFeature.DECLARATIVE)


def test_contains_variable():
    assert not NP.contains_variable
    assert Variable().contains_variable
    assert not Category.parse("(S\\NP)/NP").contains_variable
    assert Category.parse("(S\\X)/NP").contains_variable
    assert Category.parse("S/(S\\(NP/X))").contains_variable


def test_replacing_variables():
    assert NP.replacing_variables(S) == NP
    assert Variable().replacing_variables(NP) == NP
    assert Category.parse("X/(X\\NP)").replacing_variables(S) == Category.parse("S/(S\\NP)")
    assert Category.parse("X/(X\\NP)").replacing_variables(S | NP) == \
        Category.parse("(S\\NP)/((S\\NP)\\NP)")
    # features and directions are kept
    assert Category.parse("X/×(X\\◇NP)").replacing_variables(S) == Category.parse("S/×(S\\◇NP)")
    assert not Category.parse("X/(X\\X)").replacing_variables(NP).contains_variable


def test_nargs():
    assert Category.parse("S\\NP").nargs == 1
    assert Category.parse("((S\\NP)/PP)/NP").nargs == 3


def test_equality_is_transitive():
    cats = [result for result, _ in categories]
    copies = [Category.parse(str(cat)) for cat in cats]
    for x, y, z in zip(cats, copies, [Category.parse(expect) for _, expect in categories]):
        assert x == y and y == z and x == z
    for x in cats:
        for y in cats:
            if x != y:
                continue
            for z in cats:
                if y == z:
                    assert x == z
    # a string stands for the category it renders
    assert NP == "NP" and "NP" == Atom(Primitive.NOUN_PHRASE) and NP == Atom(Primitive.NOUN_PHRASE)
