import pytest

from easierccg.lexicon import Lexicon


@pytest.fixture
def lexicon():
    return Lexicon.from_dict({
        'I': ['NP'],
        'proved': ['(S\\NP)/NP'],
        'Marcel': ['NP'],
        'slept': ['S\\NP'],
        'quickly': ['(S\\NP)\\(S\\NP)'],
        'the': ['NP/N'],
        'cat': ['N'],
    })
