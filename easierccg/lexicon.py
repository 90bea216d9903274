from typing import Dict, Iterator, List, Mapping, Sequence, Union
from collections.abc import Mapping as MappingABC
import json
import logging

from easierccg.cat import Category
from easierccg.notation import parse_category, CategoryParseError
from easierccg.utils import is_json, read_lines

logger = logging.getLogger(__name__)

CategoryLike = Union[str, Category]


def _as_category(cat: CategoryLike) -> Category:
    return parse_category(cat) if isinstance(cat, str) else cat


class Lexicon(MappingABC):
    """mapping from a word to its categories, in the order they were added.
    Parsers only read it, so the same lexicon can be shared by many parses.

    >>> lexicon = Lexicon.from_dict({'I': ['NP'], 'slept': ['S\\\\NP']})
    >>> lexicon['slept']
    [S\\NP]
    """

    def __init__(self) -> None:
        self.entries: Dict[str, List[Category]] = {}

    def __getitem__(self, word: str) -> List[Category]:
        return list(self.entries[word])

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f'Lexicon({len(self)} words)'

    def add_entry(self, word: str, cat: CategoryLike) -> bool:
        """add a category to the word unless it already has it.

        Returns:
            bool: whether the category has been added
        """
        cat = _as_category(cat)
        categories = self.entries.setdefault(word, [])
        if cat in categories:
            return False
        categories.append(cat)
        return True

    @property
    def categories(self) -> List[Category]:
        results = []
        for categories in self.entries.values():
            for cat in categories:
                if cat not in results:
                    results.append(cat)
        return results

    @classmethod
    def from_dict(cls, entries: Mapping[str, Sequence[CategoryLike]]) -> 'Lexicon':
        lexicon = cls()
        for word, cats in entries.items():
            if isinstance(cats, (str, Category)):
                cats = [cats]
            for cat in cats:
                lexicon.add_entry(word, cat)
        return lexicon

    @classmethod
    def from_file(cls, file_path: str) -> 'Lexicon':
        return read_lexicon(file_path)


def read_lexicon(file_path: str) -> Lexicon:
    """read a lexicon either from a JSON object mapping words to lists of categories:

        {"I": ["NP"], "proved": ["(S\\\\NP)/NP"]}

    or from a text file with a word and a category on each line:

        I NP
        proved (S\\NP)/NP  # comment

    Args:
        file_path (str): path to the lexicon file

    Raises:
        CategoryParseError: if a category is malformed
        RuntimeError: if the file is in neither of the formats

    Returns:
        Lexicon: the lexicon
    """
    if is_json(file_path):
        with open(file_path, encoding='utf-8') as f:
            entries = json.load(f)
        if not isinstance(entries, dict):
            raise RuntimeError(f'expected a JSON object in {file_path}')
        try:
            lexicon = Lexicon.from_dict(entries)
        except CategoryParseError as e:
            raise CategoryParseError(
                f'{file_path}: invalid category', e.text, e.position
            ) from e
    else:
        lexicon = Lexicon()
        for line_number, line in read_lines(file_path):
            items = line.split(None, 1)
            if len(items) != 2:
                raise RuntimeError(
                    f'{file_path}:{line_number}: expected a word and a category: {line}'
                )
            word, cat = items
            try:
                lexicon.add_entry(word, cat)
            except CategoryParseError as e:
                raise CategoryParseError(
                    f'{file_path}:{line_number}: invalid category', e.text, e.position
                ) from e

    logger.info('loaded %d words from %s', len(lexicon), file_path)
    return lexicon
