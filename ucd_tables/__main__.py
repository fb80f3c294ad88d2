import argparse
import sys

import requests

from ucd_tables.errors import CorpusError
from ucd_tables.generate import generate_tables
from ucd_tables.mood import make_mood_print


def parse_arguments(argv=None):
    description = "Builds the Unicode character tables used by the " \
            "JavaScript lexer and regular expression matcher."
    parser = argparse.ArgumentParser(prog="ucd_tables", description=description)
    parser.add_argument("-d", "--data-dir", default=None,
            help="directory holding (or caching) the Unicode data files",
            dest="data_dir")
    parser.add_argument("-q", "--quiet", action="store_true",
            help="don't print anything", dest="quiet")
    return parser.parse_args(argv)


def main(argv=None):
    arguments = parse_arguments(argv)
    mood_print = make_mood_print(arguments.quiet)

    try:
        tables = generate_tables(arguments.data_dir, mood_print)
    except (CorpusError, requests.RequestException) as error:
        print("ucd_tables: error: {}".format(error), file=sys.stderr)
        return 1

    mood_print("BMP: {} unique character infos, {} bytes split."
            .format(len(tables.bmp.table), tables.bmp_split.byte_size()))
    mood_print("Case folding: {} unique deltas, {} bytes split."
            .format(len(tables.case_folding.bmp_folding_table),
                tables.bmp_folding_split.byte_size()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
