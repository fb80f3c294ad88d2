"""Build every table from the pinned Unicode data files."""

from functools import partial

from ucd_tables.bmp import generate_bmp_info
from ucd_tables.case_folding import process_case_folding
from ucd_tables.code_point_table import generate_code_point_table
from ucd_tables.data import (CASE_FOLDING_TXT, DERIVED_CORE_PROPERTIES_TXT,
        SPECIAL_CASING_TXT, UNICODE_DATA_TXT, load_text)
from ucd_tables.derived_core_properties import (process_derived_core_properties,
        unicode_version)
from ucd_tables.mood import stderr_print
from ucd_tables.multi_stage_table import split_table
from ucd_tables.non_bmp import generate_non_bmp_info
from ucd_tables.spaces import compute_white_space
from ucd_tables.special_casing import process_special_casing


class UnicodeTables:
    def __init__(self, version, code_point_table, derived_properties, bmp,
            non_bmp, white_space, case_folding, special_casing, bmp_split,
            bmp_folding_split):
        self.version = version
        self.code_point_table = code_point_table
        self.derived_properties = derived_properties
        self.bmp = bmp
        self.non_bmp = non_bmp
        self.white_space = white_space
        self.case_folding = case_folding
        self.special_casing = special_casing
        self.bmp_split = bmp_split
        self.bmp_folding_split = bmp_folding_split


def generate_tables(data_dir=None, mood_print=stderr_print):
    load = partial(load_text, data_dir=data_dir, mood_print=mood_print)

    derived_text = load(DERIVED_CORE_PROPERTIES_TXT)
    version = unicode_version(derived_text)
    mood_print("Unicode version {}.".format(version))

    code_point_table = generate_code_point_table(load(UNICODE_DATA_TXT))
    derived_properties = process_derived_core_properties(derived_text)
    bmp = generate_bmp_info(code_point_table, derived_properties)
    non_bmp = generate_non_bmp_info(code_point_table, derived_properties)
    white_space = compute_white_space(code_point_table)
    case_folding = process_case_folding(load(CASE_FOLDING_TXT))
    special_casing = process_special_casing(bmp, load(SPECIAL_CASING_TXT))

    mood_print("Splitting the BMP character info index.")
    bmp_split = split_table(bmp.index, mood_print)
    mood_print("Splitting the BMP case folding index.")
    bmp_folding_split = split_table(case_folding.bmp_folding_index, mood_print)

    return UnicodeTables(version, code_point_table, derived_properties, bmp,
            non_bmp, white_space, case_folding, special_casing, bmp_split,
            bmp_folding_split)
