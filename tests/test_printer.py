import json
import pytest
from lxml import etree

from easierccg.chart import parse
from easierccg.astar import parse_best
from easierccg.printer import to_string, FORMATS
from easierccg.printer.auto import auto_of, auto_extended_of
from easierccg.printer.deriv import deriv_of
from easierccg.printer.my_json import json_of
from easierccg.printer.ptb import ptb_of
from easierccg.cat import NP
from easierccg.tree import ScoredTree, Leaf, RaisedLeaf, Node
from easierccg.types import Rule


@pytest.fixture
def tree(lexicon):
    [(tree, _)] = parse_best('I proved Marcel'.split(), lexicon)
    return tree


@pytest.fixture
def raised_tree(lexicon):
    [tree] = [
        tree for tree in parse('I proved Marcel'.split(), lexicon)
        if not tree.left_child.is_leaf
    ]
    return tree


def test_auto(tree):
    assert auto_of(tree) == (
        '(<T S 1 2> (<L NP POS POS I NP>) '
        '(<T S\\NP 0 2> (<L (S\\NP)/NP POS POS proved (S\\NP)/NP>) '
        '(<L NP POS POS Marcel NP>) ) )'
    )
    assert auto_extended_of(tree) == (
        '(<T S ba 1 2> (<L NP I NP>) '
        '(<T S\\NP fa 0 2> (<L (S\\NP)/NP proved (S\\NP)/NP>) '
        '(<L NP Marcel NP>) ) )'
    )


def test_ptb(tree, raised_tree):
    assert ptb_of(tree) == '(ROOT (S (NP I) (S\\NP ((S\\NP)/NP proved) (NP Marcel))))'
    assert ptb_of(raised_tree) == (
        '(ROOT (S (S/NP (NP>TS/(S\\NP) (NP I)) ((S\\NP)/NP proved)) (NP Marcel)))'
    )


def test_deriv(tree):
    lines = deriv_of(tree).rstrip('\n').split('\n')
    assert lines[0].split() == ['NP', '(S\\NP)/NP', 'NP']
    assert lines[1].split() == ['I', 'proved', 'Marcel']
    assert lines[2].strip().endswith('>')
    assert lines[3].strip() == 'S\\NP'
    assert lines[4].strip().endswith('<')
    assert lines[5].strip() == 'S'


def test_json(tree):
    result = json_of(tree)
    assert result['type'] == 'ba'
    assert result['cat'] == 'S'
    assert result['children'][0] == {'word': 'I', 'cat': 'NP'}

    result = json_of(tree, full=True)
    assert result['children'][1]['children'][0]['cat'] == {
        'direction': '/',
        'feature': 'PERMISSIVE',
        'result': {
            'direction': '\\',
            'feature': 'PERMISSIVE',
            'result': {'base': 'S', 'feature': None},
            'argument': {'base': 'NP', 'feature': None},
        },
        'argument': {'base': 'NP', 'feature': None},
    }


def test_xml(tree):
    root = etree.fromstring(to_string([ScoredTree(tree, -0.5)], format='xml').encode('utf-8'))
    assert root.tag == 'candc'
    [ccg] = root
    assert ccg.get('sentence') == '1'
    assert ccg.get('score') == '-0.50000000'
    leaves = ccg.findall('.//lf')
    assert [leaf.get('word') for leaf in leaves] == ['I', 'proved', 'Marcel']
    assert [leaf.get('start') for leaf in leaves] == ['0', '1', '2']
    assert ccg[0].get('type') == 'ba'


def test_to_string(tree, raised_tree):
    results = [[ScoredTree(tree, 0.0), ScoredTree(raised_tree, -0.1)], []]
    for format in FORMATS:
        assert len(to_string(results, format=format)) > 0

    output = to_string(results, format='ptb')
    assert output.startswith('ID=1, log probability=0.00000000\n(ROOT')
    assert 'ID=1, log probability=-0.10000000' in output
    assert 'ID=2' not in output

    output = json.loads(to_string(results, format='json'))
    assert output['1'][1]['log_prob'] == pytest.approx(-0.1)
    assert output['2'] == []

    with pytest.raises(KeyError):
        to_string(results, format='conll')
    with pytest.raises(RuntimeError):
        to_string([tree])


def test_raised_and_underived_labels(raised_tree):
    raised = raised_tree.left_child.left_child
    assert isinstance(raised, RaisedLeaf)

    result = json_of(raised_tree)
    assert result['children'][0]['children'][0]['cat'] == 'S/(S\\NP)'
    assert result['children'][0]['children'][0]['source'] == 'NP'

    root = etree.fromstring(
        to_string([ScoredTree(raised_tree, -0.1)], format='xml').encode('utf-8'))
    [element] = root.findall('.//rule[@type="ftr"]')
    assert element.get('cat') == 'S/(S\\NP)'
    assert element.get('source') == 'NP'
    assert element.get('neighbor') == '(S\\NP)/NP'

    lines = deriv_of(raised_tree).split('\n')
    assert any(line.strip().endswith('>T') for line in lines)
    assert 'NP>TS/(S\\NP)' in [line.strip() for line in lines]

    underived = Node(Leaf(NP, 'I'), Leaf(NP, 'Marcel'), Rule.FORWARD_APPLY)
    assert ptb_of(underived) == '(ROOT (? (NP I) (NP Marcel)))'
    assert json_of(underived)['cat'] is None
    assert auto_of(underived).startswith('(<T ? 0 2>')
    assert ptb_of(RaisedLeaf(NP, NP)) == '(ROOT (NP>T? _))'


def test_json_full_categories(tree):
    output = json.loads(to_string([ScoredTree(tree, 0.0)], format='json', full=True))
    assert output['1'][0]['cat'] == {'base': 'S', 'feature': None}
    output = json.loads(to_string([ScoredTree(tree, 0.0)], format='json'))
    assert output['1'][0]['cat'] == 'S'
