"""The set of code points JavaScript treats as white space."""

from ucd_tables.constants import LINE_TERMINATOR, MAX_BMP, WHITE_SPACE
from ucd_tables.errors import expect


def compute_white_space(code_point_table):
    """Every code point matching the WhiteSpace or LineTerminator productions.

    WhiteSpace includes the whole Zs (Space_Separator) category.
    """
    space_set = set()
    for code_point in code_point_table:
        code = code_point.code
        if (code_point.category == "Zs" or code in WHITE_SPACE
                or code in LINE_TERMINATOR):
            expect(code <= MAX_BMP,
                    "U+{:04X} is a non-BMP space character".format(code))
            space_set.add(code)
    return space_set
