"""Value types shared by the BMP, non-BMP and case folding tables."""

from collections import namedtuple


# Flag indicating a code point is treated as a JavaScript spacing character.
FLAG_SPACE = 1 << 0

# Flag indicating a code point may appear at the start of an identifier.
FLAG_UNICODE_ID_START = 1 << 1

# Flag indicating a code point may appear in an identifier only after the
# first code point in the identifier.
FLAG_UNICODE_ID_CONTINUE_ONLY = 1 << 2


class Flags(int):
    """A bitwise-or of zero or more of the FLAG_* values."""

    def is_space(self):
        return self & FLAG_SPACE != 0

    def is_unicode_id_start(self):
        return self & FLAG_UNICODE_ID_START != 0

    def is_unicode_id_continue_only(self):
        return self & FLAG_UNICODE_ID_CONTINUE_ONLY != 0

    def set_space(self):
        return Flags(self | FLAG_SPACE)

    def set_unicode_id_start(self):
        return Flags(self | FLAG_UNICODE_ID_START)

    def set_unicode_id_continue_only(self):
        return Flags(self | FLAG_UNICODE_ID_CONTINUE_ONLY)

    def __repr__(self):
        return "Flags({:#04x})".format(int(self))


class CaseDelta(namedtuple("CaseDelta", ["value"])):
    """`(mapping - code) mod 2**16` for a BMP `code -> mapping` pair."""

    __slots__ = ()

    @classmethod
    def between(cls, code, mapping):
        return cls((mapping - code) & 0xFFFF)

    def apply(self, code):
        return (code + self.value) & 0xFFFF


MappedCodePoint = namedtuple("MappedCodePoint", ["lower", "upper", "flags"])
