"""Special casing overrides, from SpecialCasing.txt.

Only the two unconditional mappings are used by the runtime.  The conditional
and language-dependent buckets are kept so that the assumptions the runtime
makes about them can be checked on every generation.
"""

from ucd_tables.constants import (COMBINING_DOT_ABOVE, GREEK_CAPITAL_LETTER_SIGMA,
        GREEK_SMALL_LETTER_FINAL_SIGMA, LATIN_CAPITAL_LETTER_I_WITH_DOT_ABOVE,
        LATIN_CAPITAL_LETTER_S, LATIN_SMALL_LETTER_I, LATIN_SMALL_LETTER_SHARP_S,
        MAX_BMP)
from ucd_tables.data import SPECIAL_CASING_TXT, load_text
from ucd_tables.errors import expect
from ucd_tables.readers import SpecialCasingReader


MAX_ASCII = 0x7F
MAX_LATIN1 = 0xFF

MAX_REPLACEMENT_LENGTH = 3

KNOWN_LANGUAGES = ("az", "lt", "tr")

# See Unicode §3.13 Default Case Algorithms.
KNOWN_CONTEXTS = (
    "After_I",
    "After_Soft_Dotted",
    "Final_Sigma",
    "More_Above",
    "Not_Before_Dot",
)


class SpecialCasingData:
    """Casing mappings computed from SpecialCasing.txt.

    Every mapping is a dict ordered by code point.  The unconditional ones map
    a code to its replacement sequence, the conditional ones to a
    `(sequence, context)` pair, and the language-conditional ones map a
    language to such a dict, where the context may be None.
    """

    def __init__(self):
        self.unconditional_tolower = {}
        self.unconditional_toupper = {}
        self.conditional_tolower = {}
        self.conditional_toupper = {}
        self.lang_conditional_tolower = {}
        self.lang_conditional_toupper = {}

    def sort(self):
        for name in ("unconditional_tolower", "unconditional_toupper",
                "conditional_tolower", "conditional_toupper"):
            setattr(self, name, _sorted_by_key(getattr(self, name)))
        for name in ("lang_conditional_tolower", "lang_conditional_toupper"):
            by_language = getattr(self, name)
            setattr(self, name, {language: _sorted_by_key(by_language[language])
                    for language in sorted(by_language)})


def _sorted_by_key(mapping):
    return dict(sorted(mapping.items()))


def _hex_codes(codes):
    return "[{}]".format(", ".join("U+{:04X}".format(code) for code in codes))


def process_special_casing(bmp, text=None):
    """Sort every SpecialCasing.txt entry into its bucket, keeping only the
    sides that differ from the default casing in `bmp`, and check the result
    with check_special_casing."""
    if text is None:
        text = load_text(SPECIAL_CASING_TXT)
    data = SpecialCasingData()

    for special in SpecialCasingReader(text):
        code = special.code
        expect(code <= MAX_BMP,
                "special casing for non-BMP code point U+{:04X}".format(code))

        default = bmp.case_info(code)
        lower = list(special.lower)
        upper = list(special.upper)
        has_special_lower = lower != [default.lower]
        has_special_upper = upper != [default.upper]

        # Code points with default casing have special casing entries that
        # differ from the code point itself.
        expect(code == default.lower or lower != [code],
                "U+{:04X} lowercases to itself despite a default lowercase"
                .format(code))
        expect(code == default.upper or upper != [code],
                "U+{:04X} uppercases to itself despite a default uppercase"
                .format(code))

        language = special.languages[0] if special.languages else None
        context = special.contexts[0] if special.contexts else None

        if language is None and context is None:
            if has_special_lower:
                data.unconditional_tolower[code] = lower
            if has_special_upper:
                data.unconditional_toupper[code] = upper
        elif language is None:
            if has_special_lower:
                data.conditional_tolower[code] = (lower, context)
            if has_special_upper:
                data.conditional_toupper[code] = (upper, context)
        else:
            if has_special_lower:
                data.lang_conditional_tolower.setdefault(language, {})[code] = \
                        (lower, context)
            if has_special_upper:
                data.lang_conditional_toupper.setdefault(language, {})[code] = \
                        (upper, context)

    data.sort()
    check_special_casing(data)
    return data


def check_special_casing(data):
    """Raise CorpusError unless `data` has the shape the runtime relies on."""
    language_mappings = [mapping
            for by_language in (data.lang_conditional_tolower,
                data.lang_conditional_toupper)
            for mapping in by_language.values()]
    # Language-dependent mappings such as Turkish dotless i do cover ASCII.
    language_independent_keys = [code
            for mapping in (data.unconditional_tolower,
                data.unconditional_toupper, data.conditional_tolower,
                data.conditional_toupper)
            for code in mapping]

    expect(all(code > MAX_ASCII for code in language_independent_keys),
            "ASCII code points have language-independent special casing")

    expect(all(code > MAX_LATIN1 for code in data.unconditional_tolower)
            and all(code > MAX_LATIN1 for code in data.conditional_tolower),
            "Latin-1 code points have special lowercasing")

    expect(all(code > MAX_LATIN1 for code in data.conditional_toupper),
            "Latin-1 code points have conditional special uppercasing")

    latin1_toupper = [code for code in data.unconditional_toupper
            if code <= MAX_LATIN1]
    expect(latin1_toupper == [LATIN_SMALL_LETTER_SHARP_S],
            "U+00DF should be the only Latin-1 code point with special "
            "uppercasing, found {}".format(_hex_codes(latin1_toupper)))
    expect(data.unconditional_toupper[LATIN_SMALL_LETTER_SHARP_S]
            == [LATIN_CAPITAL_LETTER_S, LATIN_CAPITAL_LETTER_S],
            "U+00DF should uppercase to [U+0053, U+0053]")

    expect(list(data.unconditional_tolower)
            == [LATIN_CAPITAL_LETTER_I_WITH_DOT_ABOVE],
            "U+0130 should be the only code point with special lowercasing, "
            "found {}".format(_hex_codes(data.unconditional_tolower)))
    expect(data.unconditional_tolower[LATIN_CAPITAL_LETTER_I_WITH_DOT_ABOVE]
            == [LATIN_SMALL_LETTER_I, COMBINING_DOT_ABOVE],
            "U+0130 should lowercase to [U+0069, U+0307]")

    expect(not data.conditional_toupper,
            "language-independent conditional uppercasing found for {}"
            .format(_hex_codes(data.conditional_toupper)))

    expect(list(data.conditional_tolower) == [GREEK_CAPITAL_LETTER_SIGMA],
            "U+03A3 should be the only code point with language-independent "
            "conditional lowercasing, found {}"
            .format(_hex_codes(data.conditional_tolower)))
    expect(data.conditional_tolower[GREEK_CAPITAL_LETTER_SIGMA]
            == ([GREEK_SMALL_LETTER_FINAL_SIGMA], "Final_Sigma"),
            "U+03A3 should lowercase to [U+03C2] in the Final_Sigma context")

    languages = set(data.lang_conditional_tolower) \
            | set(data.lang_conditional_toupper)
    expect(languages <= set(KNOWN_LANGUAGES),
            "unexpected casing languages: {}".format(
                ", ".join(sorted(languages - set(KNOWN_LANGUAGES)))))

    sequences = list(data.unconditional_tolower.values()) \
            + list(data.unconditional_toupper.values())
    contexts = []
    for mapping in [data.conditional_tolower, data.conditional_toupper] \
            + language_mappings:
        for sequence, context in mapping.values():
            sequences.append(sequence)
            if context is not None:
                contexts.append(context)

    expect(all(len(sequence) <= MAX_REPLACEMENT_LENGTH for sequence in sequences),
            "replacement sequences longer than {} code points".format(
                MAX_REPLACEMENT_LENGTH))

    unknown = set(contexts) - set(KNOWN_CONTEXTS)
    expect(not unknown,
            "unknown casing contexts: {}".format(", ".join(sorted(unknown))))
