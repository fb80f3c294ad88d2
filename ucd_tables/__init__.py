"""Parse the Unicode Character Database into compact tables for a JavaScript
engine's lexer and regular expression matcher."""

from ucd_tables.data import UCD_VERSION
from ucd_tables.errors import CorpusError
from ucd_tables.generate import UnicodeTables, generate_tables
