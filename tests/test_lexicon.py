import json
import pytest

from easierccg.cat import Category, NP
from easierccg.lexicon import Lexicon, read_lexicon
from easierccg.notation import CategoryParseError

verb = Category.parse("(S\\NP)/NP")


def test_lexicon():
    lexicon = Lexicon()
    assert lexicon.add_entry('I', 'NP')
    assert lexicon.add_entry('proved', verb)
    assert not lexicon.add_entry('I', NP)
    assert lexicon.add_entry('I', 'N')
    assert lexicon['I'] == [NP, Category.parse('N')]
    assert len(lexicon) == 2
    assert 'I' in lexicon
    assert 'Marcel' not in lexicon
    assert lexicon.get('Marcel', ()) == ()
    with pytest.raises(KeyError):
        lexicon['Marcel']
    assert lexicon.categories == [NP, Category.parse('N'), verb]


def test_entries_are_not_shared():
    lexicon = Lexicon.from_dict({'I': 'NP'})
    lexicon['I'].append(verb)
    assert lexicon['I'] == [NP]


def test_read_json(tmp_path):
    path = tmp_path / 'lexicon.json'
    path.write_text(json.dumps({
        'I': ['NP'],
        'proved': ['(S\\NP)/NP'],
    }), encoding='utf-8')
    lexicon = read_lexicon(str(path))
    assert lexicon['I'] == [NP]
    assert lexicon['proved'] == [verb]
    assert Lexicon.from_file(str(path)) == lexicon


def test_read_text(tmp_path):
    path = tmp_path / 'lexicon.txt'
    path.write_text(
        '# a small lexicon\n'
        'I NP\n'
        '\n'
        'proved (S\\NP)/NP  # transitive\n'
        'proved S\\NP\n',
        encoding='utf-8'
    )
    lexicon = read_lexicon(str(path))
    assert lexicon['I'] == [NP]
    assert lexicon['proved'] == [verb, Category.parse('S\\NP')]


def test_read_errors(tmp_path):
    path = tmp_path / 'lexicon.txt'
    path.write_text('I NP\nproved (S\\NP/NP\n', encoding='utf-8')
    with pytest.raises(CategoryParseError) as e:
        read_lexicon(str(path))
    assert 'lexicon.txt:2' in str(e.value)

    path.write_text('I NP\nproved\n', encoding='utf-8')
    with pytest.raises(RuntimeError):
        read_lexicon(str(path))

    path = tmp_path / 'lexicon.json'
    path.write_text('["NP"]', encoding='utf-8')
    with pytest.raises(RuntimeError):
        read_lexicon(str(path))
