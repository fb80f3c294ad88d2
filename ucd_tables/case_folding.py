"""Simple and common case folding, from CaseFolding.txt.

Case folding maps code points to a canonical folded form.  JavaScript uses it
for case-insensitive `/foo/iu` regular expressions, which depend only on the
"common" and "simple" foldings, so the "full" and "Turkish" ones are
discarded while reading.  Across Unicode the folded form is not consistently
lowercase or uppercase; see Unicode §5.18 Case Mappings.

Equivalents are recorded for the whole code point range, but only BMP code
points get folding tables.
"""

from ucd_tables.constants import MAX_BMP
from ucd_tables.data import CASE_FOLDING_TXT, load_text
from ucd_tables.errors import expect
from ucd_tables.readers import CaseFoldingReader
from ucd_tables.types import CaseDelta


class Delta(CaseDelta):
    """`delta` in `code + delta == mapping` for a BMP folding."""

    __slots__ = ()


class CaseFoldingData:
    """Data resulting from processing CaseFolding.txt.

    `all_codes_with_equivalents` is a list of `(code, [equivalents])` for
    every code that takes part in non-identity case folding, ordered by code.
    Given the mappings A -> C and B -> C it would be

        [(A, [B, C]), (B, [A, C]), (C, [A, B])]

    `bmp_folding_table` holds unique Delta values, starting with Delta(0), and
    `bmp_folding_index[c]` is the position in it of the delta for BMP code
    point `c`.  Since CaseFolding.txt maps U+0041 to U+0061,
    `bmp_folding_table[bmp_folding_index[0x41]] == Delta(0x20)`.
    """

    def __init__(self, folding_map, all_codes_with_equivalents,
            bmp_folding_table, bmp_folding_index):
        self.folding_map = folding_map
        self.all_codes_with_equivalents = all_codes_with_equivalents
        self.bmp_folding_table = bmp_folding_table
        self.bmp_folding_index = bmp_folding_index
        self._equivalents = dict(all_codes_with_equivalents)

    def equivalents_of(self, code):
        return list(self._equivalents.get(code, ()))

    def fold(self, code):
        return self.folding_map.get(code, code)

    def bmp_delta(self, code):
        return self.bmp_folding_table[self.bmp_folding_index[code]]


def compute_equivalents(folding_map, reverse_folding_map):
    all_codes_with_equivalents = []
    for code in sorted(folding_map.keys() | reverse_folding_map.keys()):
        mapping = folding_map.get(code)
        if mapping is not None:
            equivalents = [mapping]
            equivalents.extend(c for c in reverse_folding_map[mapping]
                    if c != code)
        else:
            equivalents = list(reverse_folding_map[code])
        all_codes_with_equivalents.append((code, sorted(equivalents)))
    return all_codes_with_equivalents


def process_case_folding(text=None):
    if text is None:
        text = load_text(CASE_FOLDING_TXT)

    # code -> folded code, for all common and simple foldings.
    folding_map = {}
    # folded code -> [codes]; both U+03A3 and U+03C2 fold to U+03C3.
    reverse_folding_map = {}
    for entry in CaseFoldingReader(text):
        folding_map[entry.code] = entry.mapping
        reverse_folding_map.setdefault(entry.mapping, []).append(entry.code)

    all_codes_with_equivalents = compute_equivalents(folding_map,
            reverse_folding_map)

    bmp_folding_table = [Delta(0)]
    bmp_folding_cache = {Delta(0): 0}
    # Entries stay 0, folding to self, unless CaseFolding.txt says otherwise.
    bmp_folding_index = [0] * (MAX_BMP + 1)

    for code, mapping in sorted(folding_map.items()):
        if code > MAX_BMP:
            continue
        expect(mapping <= MAX_BMP,
                "U+{:04X} folds to non-BMP code point U+{:04X}"
                .format(code, mapping))

        delta = Delta.between(code, mapping)
        index = bmp_folding_cache.get(delta)
        if index is None:
            index = len(bmp_folding_table)
            bmp_folding_cache[delta] = index
            bmp_folding_table.append(delta)
        bmp_folding_index[code] = index

    return CaseFoldingData(folding_map, all_codes_with_equivalents,
            bmp_folding_table, bmp_folding_index)
