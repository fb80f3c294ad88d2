"""Code point constants and small code point sets used across the tables."""

# The largest code point representable in a single UTF-16 code unit.
MAX_BMP = 0xFFFF

CHARACTER_TABULATION = 0x0009
LINE_FEED = 0x000A
LINE_TABULATION = 0x000B
FORM_FEED = 0x000C
CARRIAGE_RETURN = 0x000D
SPACE = 0x0020
LATIN_CAPITAL_LETTER_S = 0x0053
LATIN_SMALL_LETTER_I = 0x0069
NO_BREAK_SPACE = 0x00A0
LATIN_SMALL_LETTER_SHARP_S = 0x00DF
LATIN_CAPITAL_LETTER_I_WITH_DOT_ABOVE = 0x0130
COMBINING_DOT_ABOVE = 0x0307
GREEK_CAPITAL_LETTER_SIGMA = 0x03A3
GREEK_SMALL_LETTER_FINAL_SIGMA = 0x03C2
GREEK_SMALL_LETTER_SIGMA = 0x03C3
ZERO_WIDTH_NON_JOINER = 0x200C
ZERO_WIDTH_JOINER = 0x200D
LINE_SEPARATOR = 0x2028
PARAGRAPH_SEPARATOR = 0x2029
IDEOGRAPHIC_SPACE = 0x3000
ZERO_WIDTH_NO_BREAK_SPACE = 0xFEFF

# Code points matching the ECMAScript WhiteSpace production, besides the
# members of the Zs category.
WHITE_SPACE = (
    CHARACTER_TABULATION,
    LINE_TABULATION,
    FORM_FEED,
    SPACE,
    NO_BREAK_SPACE,
    ZERO_WIDTH_NO_BREAK_SPACE,
)

# Code points matching the ECMAScript LineTerminator production.
LINE_TERMINATOR = (
    LINE_FEED,
    CARRIAGE_RETURN,
    LINE_SEPARATOR,
    PARAGRAPH_SEPARATOR,
)

# Code points allowed in IdentifierPart that are not ID_Continue.
COMPATIBILITY_IDENTIFIER_PART = (
    ZERO_WIDTH_NON_JOINER,
    ZERO_WIDTH_JOINER,
)
