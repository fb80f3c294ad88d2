"""Case mappings and flags for code points in the Basic Multilingual Plane.

See `ucd_tables.non_bmp` for the code points outside it.
"""

from collections import namedtuple

from ucd_tables.constants import (COMPATIBILITY_IDENTIFIER_PART,
        LINE_TERMINATOR, MAX_BMP, WHITE_SPACE)
from ucd_tables.errors import expect
from ucd_tables.types import (CaseDelta, FLAG_SPACE, FLAG_UNICODE_ID_CONTINUE_ONLY,
        FLAG_UNICODE_ID_START, Flags, MappedCodePoint)


class CharacterInfo(namedtuple("CharacterInfo",
        ["lower_delta", "upper_delta", "flags"])):
    """Everything the tables record about one BMP code point.

    `lower_delta` added to the code point (modulo 2**16) gives its lowercase
    form, e.g. CaseDelta(0x61 - 0x41) for U+0041 LATIN CAPITAL LETTER A.
    `upper_delta` does the same for the uppercase form.  `flags` is a Flags
    value.  Equal records share one slot in BMPInfo.table.
    """

    __slots__ = ()

    @classmethod
    def all_zeroes(cls):
        return cls(CaseDelta(0), CaseDelta(0), Flags(0))

    def apply(self, code):
        return MappedCodePoint(
            lower=self.lower_delta.apply(code),
            upper=self.upper_delta.apply(code),
            flags=self.flags,
        )


class BMPInfo:
    """Unique CharacterInfo records in `table`, and for every BMP code point
    `c` the position of its record in `index[c]`.

    `table[0]` is CharacterInfo.all_zeroes(), the record of every unassigned
    code point.
    """

    def __init__(self, table, index):
        self.table = table
        self.index = index

    def character_info(self, code):
        return self.table[self.index[code]]

    def case_info(self, code):
        return self.character_info(code).apply(code)


def character_flags(code, category, derived_properties):
    flags = 0
    if category == "Zs" or code in WHITE_SPACE or code in LINE_TERMINATOR:
        flags |= FLAG_SPACE

    if code in derived_properties.id_start:
        flags |= FLAG_UNICODE_ID_START
    elif (code in derived_properties.id_continue
            or code in COMPATIBILITY_IDENTIFIER_PART):
        flags |= FLAG_UNICODE_ID_CONTINUE_ONLY
    return Flags(flags)


def generate_bmp_info(code_point_table, derived_properties):
    table = [CharacterInfo.all_zeroes()]
    index = [0] * (MAX_BMP + 1)
    # Position in `table` of every record seen so far.
    cache = {table[0]: 0}

    for code_point in code_point_table:
        code = code_point.code
        if code > MAX_BMP:
            continue
        expect(code_point.lowercase <= MAX_BMP and code_point.uppercase <= MAX_BMP,
                "U+{:04X} has a non-BMP case mapping".format(code))

        item = CharacterInfo(
            lower_delta=CaseDelta.between(code, code_point.lowercase),
            upper_delta=CaseDelta.between(code, code_point.uppercase),
            flags=character_flags(code, code_point.category, derived_properties),
        )

        i = cache.get(item)
        if i is None:
            i = len(table)
            cache[item] = i
            table.append(item)
        index[code] = i

    return BMPInfo(table, index)
