import sys
import logging

from easierccg.astar import parse_best
from easierccg.chart import parse, parse_deterministic
from easierccg.lexicon import read_lexicon
from easierccg.notation import parse_category, CategoryParseError
from easierccg.printer import print_
from easierccg.tree import ScoredTree
from easierccg.argparse import parse_args

logger = logging.getLogger(__name__)


def parse_sentence(words, lexicon, args, root_categories):
    if args.mode == 'best':
        return parse_best(
            words,
            lexicon,
            nbest=args.nbest,
            root_categories=root_categories,
            raise_penalty=args.raise_penalty,
            max_step=args.max_step,
        )

    if args.mode == 'deterministic':
        tree = parse_deterministic(words, lexicon)
        trees = [] if tree is None else [tree]
    else:
        trees = parse(words, lexicon)

    return [
        ScoredTree(tree, 0.0) for tree in trees
        if root_categories is None or tree.cat in root_categories
    ]


def main(args):
    logging.basicConfig(
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        level=logging.CRITICAL if args.silent else logging.INFO
    )

    try:
        lexicon = read_lexicon(args.lexicon)
        root_categories = None
        if args.root_cats is not None:
            root_categories = [
                parse_category(category)
                for category in args.root_cats.split('|')
            ]
    except (CategoryParseError, RuntimeError) as e:
        print(e, file=sys.stderr)
        return 1

    if args.input is not None:
        with open(args.input, encoding='utf-8') as f:
            sentences = [line.split() for line in f]
    else:
        sentences = [line.split() for line in sys.stdin]
    sentences = [words for words in sentences if len(words) > 0]

    logger.info('parsing %d sentences', len(sentences))
    results = []
    for words in sentences:
        trees = parse_sentence(words, lexicon, args, root_categories)
        if len(trees) == 0:
            logger.info('no derivation for: %s', ' '.join(words))
        results.append(trees)

    print_(results, format=args.format, full=args.full_categories)
    return 0


def show_categories(args):
    status = 0
    for expression in args.EXPRESSION:
        try:
            print(parse_category(expression))
        except CategoryParseError as e:
            print(e, file=sys.stderr)
            status = 1
    return status


def cli():
    sys.exit(parse_args(main, show_categories))


if __name__ == '__main__':
    cli()
