"""Streaming readers for the Unicode Character Database text files.

Each reader is constructed from the full text of its file and iterates lazily
over structured records.  Range notation is expanded while iterating, so a
single line may produce tens of thousands of records.
"""

from collections import namedtuple

from ucd_tables.data import (CASE_FOLDING_TXT, DERIVED_CORE_PROPERTIES_TXT,
        SPECIAL_CASING_TXT, UNICODE_DATA_TXT)
from ucd_tables.errors import CorpusError


CodePoint = namedtuple("CodePoint",
        ["code", "name", "category", "alias", "uppercase", "lowercase"])

CodePointAndProperty = namedtuple("CodePointAndProperty",
        ["code_point", "property"])

CaseFolding = namedtuple("CaseFolding", ["code", "status", "mapping"])

SpecialCase = namedtuple("SpecialCase",
        ["code", "lower", "title", "upper", "languages", "contexts"])


class UcdReader:
    """Shared line handling: comments, blank lines, fields and hex codes."""

    filename = None

    def __init__(self, text):
        self.text = text

    def __iter__(self):
        raise NotImplementedError

    def _lines(self):
        """Yield (line_number, line, content) for every non-blank line, where
        content is the part of the line before any '#'."""
        for number, line in enumerate(self.text.splitlines(), 1):
            content = line.split("#", 1)[0]
            if not content.strip():
                continue
            yield number, line, content

    def _error(self, number, line, message):
        return CorpusError("{}:{}: {}: {!r}".format(
                self.filename, number, message, line))

    def _fields(self, number, line, content, counts):
        fields = [field.strip() for field in content.split(";")]
        if len(fields) not in counts:
            raise self._error(number, line, "expected {} fields, found {}"
                    .format(" or ".join(str(c) for c in counts), len(fields)))
        return fields

    def _hex(self, number, line, field):
        try:
            return int(field, 16)
        except ValueError:
            raise self._error(number, line,
                    "bad hexadecimal value {!r}".format(field)) from None

    def _hex_sequence(self, number, line, field):
        if not field:
            return ()
        return tuple(self._hex(number, line, code) for code in field.split())

    def _get_interval(self, number, line, interval_or_codepoint):
        dotdot = interval_or_codepoint.find("..")
        if dotdot != -1:
            first = interval_or_codepoint[:dotdot]
            second = interval_or_codepoint[dotdot+2:]
            return (self._hex(number, line, first),
                    self._hex(number, line, second))
        codepoint = self._hex(number, line, interval_or_codepoint)
        return (codepoint, codepoint)


class UnicodeDataReader(UcdReader):
    """Read UnicodeData.txt, yielding a CodePoint per assigned code point.

    A consecutive pair of lines may describe a range of code points, e.g.

        D800;<Non Private Use High Surrogate, First>;Cs;0;L;;;;;N;;;;;
        DB7F;<Non Private Use High Surrogate, Last>;Cs;0;L;;;;;N;;;;;

    in which case every code point of the range is yielded with the name
    "Non Private Use High Surrogate".
    """

    filename = UNICODE_DATA_TXT
    field_count = 15

    def __iter__(self):
        lines = self._lines()
        for number, line, content in lines:
            fields = self._fields(number, line, content, (self.field_count,))
            code_point = self._decode(number, line, fields)
            name = code_point.name
            if not (name.startswith("<") and name.endswith("First>")):
                yield code_point
                continue

            last = next(lines, None)
            if last is None:
                raise self._error(number, line,
                        "range start without a following Last> line")
            last_number, last_line, last_content = last
            last_fields = self._fields(last_number, last_line, last_content,
                    (self.field_count,))
            if not last_fields[1].endswith("Last>"):
                raise self._error(last_number, last_line,
                        "expected the Last> line of the range")
            last_code = self._hex(last_number, last_line, last_fields[0])
            if last_code < code_point.code:
                raise self._error(last_number, last_line,
                        "range ends before it starts")

            # Remove "<" and ", First>" to get the name shared by the range.
            info = code_point._replace(name=name[1:-len(", First>")])
            # Empty case fields map each code of the range to itself.
            for code in range(code_point.code, last_code + 1):
                yield info._replace(
                    code=code,
                    uppercase=self._to_case(number, line, fields[12], code),
                    lowercase=self._to_case(number, line, fields[13], code),
                )

    def _decode(self, number, line, fields):
        code = self._hex(number, line, fields[0])
        return CodePoint(
            code=code,
            name=fields[1],
            category=fields[2],
            alias=fields[10],
            uppercase=self._to_case(number, line, fields[12], code),
            lowercase=self._to_case(number, line, fields[13], code),
        )

    def _to_case(self, number, line, case_field, code):
        if not case_field:
            return code
        return self._hex(number, line, case_field)


class DerivedCorePropertiesReader(UcdReader):
    """Read DerivedCoreProperties.txt, yielding a CodePointAndProperty for
    every code point of every listed range.

    Each property section ends with a "# Total code points: N" comment, which
    is checked against the number of code points yielded for the section.
    """

    filename = DERIVED_CORE_PROPERTIES_TXT
    total_prefix = "# Total code points:"

    def __iter__(self):
        section_count = 0
        for number, line in enumerate(self.text.splitlines(), 1):
            if line.startswith(self.total_prefix):
                total = line[len(self.total_prefix):].strip()
                if not total.isdigit() or int(total) != section_count:
                    raise self._error(number, line,
                            "section has {} code points".format(section_count))
                section_count = 0
                continue

            content = line.split("#", 1)[0]
            if not content.strip():
                continue
            interval_or_codepoint, property_name = self._fields(number, line,
                    content, (2,))
            first, last = self._get_interval(number, line, interval_or_codepoint)
            for code_point in range(first, last + 1):
                yield CodePointAndProperty(code_point, property_name)
            section_count += last + 1 - first


class CaseFoldingReader(UcdReader):
    """Read CaseFolding.txt, yielding the (C)ommon and (S)imple foldings.

    (F)ull and (T)urkish foldings are skipped; any other status is an error.
    """

    filename = CASE_FOLDING_TXT
    accepted_statuses = ("C", "S")
    discarded_statuses = ("F", "T")

    def __iter__(self):
        for number, line, content in self._lines():
            # <code>; <status>; <mapping>; # <name>
            code, status, mapping, _ = self._fields(number, line, content, (4,))
            if status in self.discarded_statuses:
                continue
            if status not in self.accepted_statuses:
                raise self._error(number, line,
                        "unknown status {!r}".format(status))
            yield CaseFolding(self._hex(number, line, code), status,
                    self._hex(number, line, mapping))


class SpecialCasingReader(UcdReader):
    """Read SpecialCasing.txt, yielding a SpecialCase per entry.

    Condition tokens starting with a lowercase letter are languages, others
    are casing contexts.  At most one of each is allowed per entry.
    """

    filename = SPECIAL_CASING_TXT

    def __iter__(self):
        for number, line, content in self._lines():
            # <code>; <lower>; <title>; <upper>; (<condition_list>;)? # <comment>
            fields = self._fields(number, line, content, (5, 6))
            if len(fields) == 6 and fields[5]:
                raise self._error(number, line, "unexpected trailing field")

            languages = []
            contexts = []
            for condition in fields[4].split():
                if condition[0].islower():
                    languages.append(condition)
                else:
                    contexts.append(condition)
            if len(languages) > 1:
                raise self._error(number, line, "more than one language")
            if len(contexts) > 1:
                raise self._error(number, line, "more than one casing context")

            yield SpecialCase(
                code=self._hex(number, line, fields[0]),
                lower=self._hex_sequence(number, line, fields[1]),
                title=self._hex_sequence(number, line, fields[2]),
                upper=self._hex_sequence(number, line, fields[3]),
                languages=tuple(languages),
                contexts=tuple(contexts),
            )
