import os.path

import pytest
import requests

from ucd_tables.bmp import generate_bmp_info
from ucd_tables.code_point_table import generate_code_point_table
from ucd_tables.derived_core_properties import process_derived_core_properties
from ucd_tables.generate import generate_tables
from ucd_tables.mood import silent_print


UNICODE_DATA = """\
0000;<control>;Cc;0;BN;;;;;N;NULL;;;;
0009;<control>;Cc;0;S;;;;;N;CHARACTER TABULATION;;;;
000A;<control>;Cc;0;B;;;;;N;LINE FEED (LF);;;;
0020;SPACE;Zs;0;WS;;;;;N;;;;;
0024;DOLLAR SIGN;Sc;0;ET;;;;;N;;;;;
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
0042;LATIN CAPITAL LETTER B;Lu;0;L;;;;;N;;;;0062;
0049;LATIN CAPITAL LETTER I;Lu;0;L;;;;;N;;;;0069;
005F;LOW LINE;Pc;0;ON;;;;;N;SPACING UNDERSCORE;;;;
0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;0041
0062;LATIN SMALL LETTER B;Ll;0;L;;;;;N;;;0042;;0042
0069;LATIN SMALL LETTER I;Ll;0;L;;;;;N;;;0049;;0049
00A0;NO-BREAK SPACE;Zs;0;CS;<noBreak> 0020;;;;N;NON-BREAKING SPACE;;;;
00DF;LATIN SMALL LETTER SHARP S;Ll;0;L;;;;;N;;;;;
0130;LATIN CAPITAL LETTER I WITH DOT ABOVE;Lu;0;L;0049 0307;;;;N;LATIN CAPITAL LETTER I DOT;;;0069;
0131;LATIN SMALL LETTER DOTLESS I;Ll;0;L;;;;;N;;;0049;;0049
0307;COMBINING DOT ABOVE;Mn;230;NSM;;;;;N;NON-SPACING DOT ABOVE;;;;
0345;COMBINING GREEK YPOGEGRAMMENI;Mn;240;NSM;;;;;N;GREEK NON-SPACING IOTA BELOW;;0399;;0399
0399;GREEK CAPITAL LETTER IOTA;Lu;0;L;;;;;N;;;;03B9;
03A3;GREEK CAPITAL LETTER SIGMA;Lu;0;L;;;;;N;;;;03C3;
03B9;GREEK SMALL LETTER IOTA;Ll;0;L;;;;;N;;;0399;;0399
03C2;GREEK SMALL LETTER FINAL SIGMA;Ll;0;L;;;;;N;;;03A3;;03A3
03C3;GREEK SMALL LETTER SIGMA;Ll;0;L;;;;;N;;;03A3;;03A3
1FBE;GREEK PROSGEGRAMMENI;Ll;0;L;03B9;;;;N;;;0399;;0399
200C;ZERO WIDTH NON-JOINER;Cf;0;BN;;;;;N;;;;;
200D;ZERO WIDTH JOINER;Cf;0;BN;;;;;N;;;;;
2028;LINE SEPARATOR;Zl;0;WS;;;;;N;;;;;
3000;IDEOGRAPHIC SPACE;Zs;0;WS;<wide> 0020;;;;N;;;;;
4E00;<CJK Ideograph, First>;Lo;0;L;;;;;N;;;;;
9FFC;<CJK Ideograph, Last>;Lo;0;L;;;;;N;;;;;
D800;<Non Private Use High Surrogate, First>;Cs;0;L;;;;;N;;;;;
DB7F;<Non Private Use High Surrogate, Last>;Cs;0;L;;;;;N;;;;;
FEFF;ZERO WIDTH NO-BREAK SPACE;Cf;0;BN;;;;;N;BYTE ORDER MARK;;;;
10403;DESERET CAPITAL LETTER LONG AH;Lu;0;L;;;;;N;;;;1042B;
1042B;DESERET SMALL LETTER LONG AH;Ll;0;L;;;;;N;;;10403;;10403
103C8;OLD PERSIAN SIGN AURAMAZDAA;Lo;0;L;;;;;N;;;;;
1F4A9;PILE OF POO;So;0;ON;;;;;N;;;;;
"""

DERIVED_CORE_PROPERTIES = """\
# DerivedCoreProperties-13.0.0.txt
# Date: 2020-01-22, 00:07:19 GMT

# ================================================

# Derived Property: Math

002B          ; Math # Sm       PLUS SIGN

# Total code points: 1

# ================================================

# Derived Property: ID_Start

0041..0042    ; ID_Start # L&   [2] LATIN CAPITAL LETTER A..LATIN CAPITAL LETTER B
0049          ; ID_Start # L&       LATIN CAPITAL LETTER I
0061..0062    ; ID_Start # L&   [2] LATIN SMALL LETTER A..LATIN SMALL LETTER B
0069          ; ID_Start # L&       LATIN SMALL LETTER I
00DF          ; ID_Start # L&       LATIN SMALL LETTER SHARP S
0130..0131    ; ID_Start # L&   [2] LATIN CAPITAL LETTER I WITH DOT ABOVE..LATIN SMALL LETTER DOTLESS I
0399          ; ID_Start # L&       GREEK CAPITAL LETTER IOTA
03A3          ; ID_Start # L&       GREEK CAPITAL LETTER SIGMA
03B9          ; ID_Start # L&       GREEK SMALL LETTER IOTA
03C2..03C3    ; ID_Start # L&   [2] GREEK SMALL LETTER FINAL SIGMA..GREEK SMALL LETTER SIGMA
1FBE          ; ID_Start # L&       GREEK PROSGEGRAMMENI
4E00..9FFC    ; ID_Start # Lo [20989] CJK UNIFIED IDEOGRAPH-4E00..CJK UNIFIED IDEOGRAPH-9FFC
10403         ; ID_Start # L&       DESERET CAPITAL LETTER LONG AH
1042B         ; ID_Start # L&       DESERET SMALL LETTER LONG AH
103C8         ; ID_Start # Lo       OLD PERSIAN SIGN AURAMAZDAA

# Total code points: 21007

# ================================================

# Derived Property: ID_Continue

0041..0042    ; ID_Continue # L&   [2] LATIN CAPITAL LETTER A..LATIN CAPITAL LETTER B
0049          ; ID_Continue # L&       LATIN CAPITAL LETTER I
005F          ; ID_Continue # Pc       LOW LINE
0061..0062    ; ID_Continue # L&   [2] LATIN SMALL LETTER A..LATIN SMALL LETTER B
0069          ; ID_Continue # L&       LATIN SMALL LETTER I
00DF          ; ID_Continue # L&       LATIN SMALL LETTER SHARP S
0130..0131    ; ID_Continue # L&   [2] LATIN CAPITAL LETTER I WITH DOT ABOVE..LATIN SMALL LETTER DOTLESS I
0307          ; ID_Continue # Mn       COMBINING DOT ABOVE
0345          ; ID_Continue # Mn       COMBINING GREEK YPOGEGRAMMENI
0399          ; ID_Continue # L&       GREEK CAPITAL LETTER IOTA
03A3          ; ID_Continue # L&       GREEK CAPITAL LETTER SIGMA
03B9          ; ID_Continue # L&       GREEK SMALL LETTER IOTA
03C2..03C3    ; ID_Continue # L&   [2] GREEK SMALL LETTER FINAL SIGMA..GREEK SMALL LETTER SIGMA
1FBE          ; ID_Continue # L&       GREEK PROSGEGRAMMENI
4E00..9FFC    ; ID_Continue # Lo [20989] CJK UNIFIED IDEOGRAPH-4E00..CJK UNIFIED IDEOGRAPH-9FFC
10403         ; ID_Continue # L&       DESERET CAPITAL LETTER LONG AH
1042B         ; ID_Continue # L&       DESERET SMALL LETTER LONG AH
103C8         ; ID_Continue # Lo       OLD PERSIAN SIGN AURAMAZDAA

# Total code points: 21010

# EOF
"""

CASE_FOLDING = """\
# CaseFolding-13.0.0.txt
# Date: 2019-09-08, 23:30:59 GMT
#
# <code>; <status>; <mapping>; # <name>

0041; C; 0061; # LATIN CAPITAL LETTER A
0042; C; 0062; # LATIN CAPITAL LETTER B
0049; C; 0069; # LATIN CAPITAL LETTER I
0049; T; 0131; # LATIN CAPITAL LETTER I
00DF; F; 0073 0073; # LATIN SMALL LETTER SHARP S
0130; F; 0069 0307; # LATIN CAPITAL LETTER I WITH DOT ABOVE
0130; T; 0069; # LATIN CAPITAL LETTER I WITH DOT ABOVE
0345; C; 03B9; # COMBINING GREEK YPOGEGRAMMENI
0399; C; 03B9; # GREEK CAPITAL LETTER IOTA
03A3; C; 03C3; # GREEK CAPITAL LETTER SIGMA
03C2; C; 03C3; # GREEK SMALL LETTER FINAL SIGMA
1E9E; F; 0073 0073; # LATIN CAPITAL LETTER SHARP S
1E9E; S; 00DF; # LATIN CAPITAL LETTER SHARP S
1FBE; C; 03B9; # GREEK PROSGEGRAMMENI
10403; C; 1042B; # DESERET CAPITAL LETTER LONG AH
#
# EOF
"""

SPECIAL_CASING = """\
# SpecialCasing-13.0.0.txt
# Date: 2019-09-08, 23:31:24 GMT
#
# Format is:
# <code>; <lower>; <title>; <upper>; (<condition_list>;)? # <comment>

# The German es-zed is special--the normal mapping is to SS.

00DF; 00DF; 0053 0073; 0053 0053; # LATIN SMALL LETTER SHARP S

# Preserve canonical equivalence for I with dot. Turkic is handled below.

0130; 0069 0307; 0130; 0130; # LATIN CAPITAL LETTER I WITH DOT ABOVE

# Ligatures

FB00; FB00; 0046 0066; 0046 0046; # LATIN SMALL LIGATURE FF
0390; 0390; 0399 0308 0301; 0399 0308 0301; # GREEK SMALL LETTER IOTA WITH DIALYTIKA AND TONOS

# Special case for final form of sigma

03A3; 03C2; 03A3; 03A3; Final_Sigma; # GREEK CAPITAL LETTER SIGMA

# Lithuanian

0307; 0307; ; ; lt After_Soft_Dotted; # COMBINING DOT ABOVE
0049; 0069 0307; 0049; 0049; lt More_Above; # LATIN CAPITAL LETTER I

# Turkish and Azeri

0130; 0069; 0130; 0130; tr; # LATIN CAPITAL LETTER I WITH DOT ABOVE
0130; 0069; 0130; 0130; az; # LATIN CAPITAL LETTER I WITH DOT ABOVE
0307; ; 0307; 0307; tr After_I; # COMBINING DOT ABOVE
0307; ; 0307; 0307; az After_I; # COMBINING DOT ABOVE
0049; 0131; 0049; 0049; tr Not_Before_Dot; # LATIN CAPITAL LETTER I
0049; 0131; 0049; 0049; az Not_Before_Dot; # LATIN CAPITAL LETTER I
0069; 0069; 0130; 0130; tr; # LATIN SMALL LETTER I
0069; 0069; 0130; 0130; az; # LATIN SMALL LETTER I

# EOF
"""


@pytest.fixture
def unicode_data_text():
    return UNICODE_DATA


@pytest.fixture
def derived_core_properties_text():
    return DERIVED_CORE_PROPERTIES


@pytest.fixture
def case_folding_text():
    return CASE_FOLDING


@pytest.fixture
def special_casing_text():
    return SPECIAL_CASING


@pytest.fixture
def code_point_table():
    return generate_code_point_table(UNICODE_DATA)


@pytest.fixture
def derived_properties():
    return process_derived_core_properties(DERIVED_CORE_PROPERTIES)


@pytest.fixture
def bmp(code_point_table, derived_properties):
    return generate_bmp_info(code_point_table, derived_properties)


@pytest.fixture
def data_dir(tmp_path):
    """A directory holding the sample files under their real names."""
    for filename, text in (
            ("UnicodeData.txt", UNICODE_DATA),
            ("DerivedCoreProperties.txt", DERIVED_CORE_PROPERTIES),
            ("CaseFolding.txt", CASE_FOLDING),
            ("SpecialCasing.txt", SPECIAL_CASING)):
        with open(os.path.join(tmp_path, filename), "w", encoding="utf-8") as file:
            file.write(text)
    return str(tmp_path)


@pytest.fixture(scope="session")
def tables():
    """Tables built from the real Unicode data files.

    Skips when the files are neither cached nor downloadable.
    """
    try:
        return generate_tables(mood_print=silent_print)
    except (requests.RequestException, OSError) as error:
        pytest.skip("Unicode data files unavailable: {}".format(error))
