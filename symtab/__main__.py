import argparse
import logging
import sys

import symtab.config
import symtab.frequency
import symtab.redblack


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='symtab-freq',
        description='Count the most frequent words in the input with a symbol table.')
    parser.add_argument('-c', '--config', type=argparse.FileType('r'),
                        help='configuration file')
    parser.add_argument('-n', '--top', type=int, default=1,
                        help='number of words to print (default: 1)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log debugging output')
    parser.add_argument('files', nargs='*', type=argparse.FileType('r'),
                        help='input files (default: standard input)')
    args = parser.parse_args(argv)

    if args.config:
        with args.config:
            config = symtab.config.parse_config(args.config)
    else:
        config = symtab.config.parse_config()

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.logging.level)
    symtab.redblack._CHECK_INVARIANTS = config.frequency.check_invariants

    files = args.files or [sys.stdin]
    table = symtab.frequency.IMPLEMENTATIONS[config.frequency.implementation]()
    logging.info('counting with %s' % type(table).__name__)
    try:
        symtab.frequency.count_words(table, symtab.frequency.read_words(files),
                                     config.frequency.min_length)
    finally:
        for f in args.files:
            if f is not sys.stdin:
                f.close()

    for word, count in symtab.frequency.most_frequent(table, args.top):
        print(word, count)
    print('distinct = %d' % len(table))
    return 0


if __name__ == '__main__':
    sys.exit(main())
