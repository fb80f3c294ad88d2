"""The central code point registry, built from UnicodeData.txt."""

from ucd_tables.data import UNICODE_DATA_TXT, load_text
from ucd_tables.readers import UnicodeDataReader


class CodePointTable:
    """Information on every assigned code point, keyed by code.

    Each entry is a CodePoint with `code`, `name`, `category` (e.g. "Zs"),
    `alias` (possibly empty), `uppercase` and `lowercase`; the case fields are
    the code point itself when it has no other case form.
    """

    def __init__(self, code_point_map):
        self.map = code_point_map

    def __contains__(self, code):
        return code in self.map

    def __len__(self):
        return len(self.map)

    def __iter__(self):
        return iter(self.map.values())

    def __getitem__(self, code):
        return self.map[code]

    def get(self, code, default=None):
        return self.map.get(code, default)

    def items(self):
        return self.map.items()

    def name(self, code):
        """The name of the code point, followed by its alias in parentheses
        if it has one: "ZERO WIDTH NO-BREAK SPACE (BYTE ORDER MARK)"."""
        code_point = self.map[code]
        if code_point.alias:
            return "{} ({})".format(code_point.name, code_point.alias)
        return code_point.name

    def full_name(self, code):
        """The code and name of the code point: "U+0041 LATIN CAPITAL LETTER A"."""
        return "U+{:04X} {}".format(code, self.name(code))


def generate_code_point_table(text=None):
    if text is None:
        text = load_text(UNICODE_DATA_TXT)
    code_point_map = {}
    for code_point in UnicodeDataReader(text):
        code_point_map[code_point.code] = code_point
    return CodePointTable(code_point_map)
