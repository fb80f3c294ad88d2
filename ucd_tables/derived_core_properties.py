"""ID_Start and ID_Continue sets from DerivedCoreProperties.txt."""

from ucd_tables.data import DERIVED_CORE_PROPERTIES_TXT, load_text
from ucd_tables.errors import CorpusError
from ucd_tables.readers import DerivedCorePropertiesReader


VERSION_PREFIX = "# DerivedCoreProperties-"
VERSION_SUFFIX = ".txt"


class DerivedCorePropertyData:
    """Code point sets for the derived properties used by identifiers.

    Note that U+0024 DOLLAR SIGN and U+005F LOW LINE may start an ECMAScript
    identifier although neither is ID_Start, and U+0024 may continue one
    although it is not ID_Continue.  Neither set includes them.
    """

    def __init__(self, id_start, id_continue):
        self.id_start = id_start
        self.id_continue = id_continue


def process_derived_core_properties(text=None):
    if text is None:
        text = load_text(DERIVED_CORE_PROPERTIES_TXT)
    id_start = set()
    id_continue = set()
    for entry in DerivedCorePropertiesReader(text):
        if entry.property == "ID_Start":
            id_start.add(entry.code_point)
        elif entry.property == "ID_Continue":
            id_continue.add(entry.code_point)
    return DerivedCorePropertyData(frozenset(id_start), frozenset(id_continue))


def unicode_version(text=None):
    """The Unicode version named by the first line of DerivedCoreProperties.txt,
    e.g. "13.0.0" for "# DerivedCoreProperties-13.0.0.txt"."""
    if text is None:
        text = load_text(DERIVED_CORE_PROPERTIES_TXT)
    first_line = text.split("\n", 1)[0].strip()
    if not (first_line.startswith(VERSION_PREFIX)
            and first_line.endswith(VERSION_SUFFIX)):
        raise CorpusError("{}:1: no version header: {!r}".format(
                DERIVED_CORE_PROPERTIES_TXT, first_line))
    return first_line[len(VERSION_PREFIX):-len(VERSION_SUFFIX)]
