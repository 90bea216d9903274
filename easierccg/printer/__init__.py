from typing import List, Union
import json
from io import StringIO
from lxml import etree

from easierccg.tree import ScoredTree
from easierccg.printer.xml import xml_of
from easierccg.printer.my_json import json_of
from easierccg.printer.deriv import deriv_of
from easierccg.printer.ptb import ptb_of
from easierccg.printer.auto import auto_of, auto_extended_of


def _process_xml(xml_node):
    return etree \
        .tostring(xml_node, encoding='utf-8', pretty_print=True) \
        .decode('utf-8')


_formatters = {
    'auto': auto_of,
    'auto_extended': auto_extended_of,
    'deriv': deriv_of,
    'ptb': ptb_of,
}

FORMATS = ['auto', 'auto_extended', 'deriv', 'ptb', 'json', 'xml']


def _normalize(
    nbest_trees: List[Union[List[ScoredTree], ScoredTree]],
) -> List[List[ScoredTree]]:
    if all(isinstance(trees, ScoredTree) for trees in nbest_trees):
        return [nbest_trees]
    elif all(
        isinstance(trees, list)
        and all(isinstance(tree, ScoredTree) for tree in trees)
        for trees in nbest_trees
    ):
        return nbest_trees
    raise RuntimeError('invalid argument type for stringifying trees')


def to_string(
    nbest_trees: List[Union[List[ScoredTree], ScoredTree]],
    format: str = 'auto',
    full: bool = False,
) -> str:
    """convert parsing results into one string representation

    Args:
        nbest_trees (List[Union[List[ScoredTree], ScoredTree]]):
            parsed results for multiple sentences, or a list of trees for one sentence
        format (str, optional): format type. Defaults to 'auto'.
        available options are: 'auto', 'auto_extended', 'deriv', 'ptb', 'json', 'xml'.
        full (bool, optional): decompose categories in the json format. Defaults to False.

    Raises:
        KeyError: if the format option is not supported, this error occurs.
        RuntimeError: if nbest_trees is not made of ScoredTree objects.

    Returns:
        str: string in the target format
    """
    nbest_trees = _normalize(nbest_trees)

    header = 'ID={}, log probability={:.8f}'

    if format == 'xml':
        return _process_xml(xml_of(nbest_trees))

    elif format == 'json':
        results = {}
        for sentence_index, trees in enumerate(nbest_trees, 1):
            results[sentence_index] = []
            for tree, log_prob in trees:
                tree_dict = json_of(tree, full=full)
                tree_dict['log_prob'] = log_prob
                results[sentence_index].append(tree_dict)
        return json.dumps(results, indent=4)

    try:
        formatter = _formatters[format]
    except KeyError:
        raise KeyError(
            f'unsupported format type: {format}'
        )

    with StringIO() as file:
        for sentence_index, trees in enumerate(nbest_trees, 1):
            for tree, log_prob in trees:
                print(header.format(sentence_index, log_prob), file=file)
                print(formatter(tree), file=file)

        return file.getvalue()


def print_(
    nbest_trees: List[Union[List[ScoredTree], ScoredTree]],
    format: str = 'auto',
    full: bool = False,
    **kwargs,
) -> None:
    """print parsing results into one string representation

    Args:
        nbest_trees (List[Union[List[ScoredTree], ScoredTree]]):
            parsed results for multiple sentences
        format (str, optional): format type. Defaults to 'auto'.
        available options are: 'auto', 'auto_extended', 'deriv', 'ptb', 'json', 'xml'.
        full (bool, optional): decompose categories in the json format.

    other keyword arguments for Python 'print' function are also available.

    Raises:
        KeyError: if the format option is not supported, this error occurs.
    """

    print(
        to_string(
            nbest_trees,
            format=format,
            full=full,
        ),
        **kwargs,
    )
