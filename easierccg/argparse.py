import argparse
from easierccg.printer import FORMATS


def add_parse_arguments(parser, main_fun):
    parser.add_argument(
        '-l',
        '--lexicon',
        required=True,
        help='lexicon file, either JSON mapping words to categories or "word category" lines')
    parser.add_argument(
        '-i',
        '--input',
        default=None,
        help='a file with tokenized sentences in each line (defaults to stdin)')
    parser.add_argument(
        '-f',
        '--format',
        default='deriv',
        choices=FORMATS,
        help='output format')
    parser.add_argument(
        '--mode',
        default='exhaustive',
        choices=['exhaustive', 'deterministic', 'best'],
        help=('"exhaustive" prints every derivation, "deterministic" a single one, '
              'and "best" the N best ones by best-first search'))
    parser.add_argument(
        '--nbest',
        type=int,
        default=1,
        help='output N best parses (with --mode best)')
    parser.add_argument(
        '--raise-penalty',
        default=0.1,
        type=float,
        help='penalty to use type raising (with --mode best)')
    parser.add_argument(
        '--max-step',
        default=10000000,
        type=int,
        help=('give up parsing when the number of times'
              ' of popping agenda items exceeds this value (with --mode best)'))
    parser.add_argument(
        '--root-cats',
        default=None,
        help=('"|" separated list of categories '
              'allowed to be at the root of a tree.'))
    parser.add_argument(
        '--full-categories',
        action='store_true',
        help='decompose categories into their components (with --format json)')
    parser.add_argument(
        '--silent',
        action='store_true')
    parser.set_defaults(func=main_fun)


def parse_args(main_fun, category_fun, args=None):
    parser = argparse.ArgumentParser('easierccg')
    parser.set_defaults(func=lambda _: parser.print_help())
    subparsers = parser.add_subparsers()

    parse_parser = subparsers.add_parser(
        'parse', help='parse sentences with a lexicon')
    add_parse_arguments(parse_parser, main_fun)

    category_parser = subparsers.add_parser(
        'category', help='read category expressions and print them')
    category_parser.add_argument(
        'EXPRESSION',
        nargs='+',
        help='category expression, e.g., "(S\\NP)/NP"')
    category_parser.set_defaults(func=category_fun)

    args = parser.parse_args(args)
    return args.func(args)
