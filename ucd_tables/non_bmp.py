"""Case mappings and property sets for code points outside the BMP.

See `ucd_tables.bmp` for BMP code point information.
"""

from ucd_tables.constants import MAX_BMP
from ucd_tables.errors import expect


class NonBMPInfo:
    """Sparse maps and sets over non-BMP code points.

    The case maps omit identity mappings.  `space_set` holds the Zs code
    points and must stay empty: the runtime's space test only looks at BMP
    code points.
    """

    def __init__(self):
        self.lowercase_map = {}
        self.uppercase_map = {}
        self.space_set = set()
        self.id_start_set = set()
        self.id_continue_set = set()


def generate_non_bmp_info(code_point_table, derived_properties):
    info = NonBMPInfo()

    for code_point in code_point_table:
        code = code_point.code
        if code <= MAX_BMP:
            continue

        lower = code_point.lowercase
        if lower != code:
            expect(lower > MAX_BMP,
                    "U+{:04X} lowercases to BMP code point U+{:04X}"
                    .format(code, lower))
            info.lowercase_map[code] = lower

        upper = code_point.uppercase
        if upper != code:
            expect(upper > MAX_BMP,
                    "U+{:04X} uppercases to BMP code point U+{:04X}"
                    .format(code, upper))
            info.uppercase_map[code] = upper

        if code_point.category == "Zs":
            info.space_set.add(code)
        if code in derived_properties.id_start:
            info.id_start_set.add(code)
        if code in derived_properties.id_continue:
            info.id_continue_set.add(code)

    expect(not info.space_set,
            "non-BMP space characters found: {}".format(", ".join(
                "U+{:04X}".format(code) for code in sorted(info.space_set))))
    return info
