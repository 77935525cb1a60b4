"""
Serializers for extracted LDIF attribute values.

Each writer takes whole records and writes the rows (or, for JSON, the
object) derived from them to a binary file object. Write errors are
not caught here.
"""

import json

from zope.interface import implementer

from ldifget import extract, interfaces
from ldifget._encoder import to_bytes

TSV = "tsv"
CSV = "csv"
JSON = "json"
OUTPUT_FORMATS = (TSV, CSV, JSON)


class InvalidOutputFormatError(Exception):
    """Invalid output format"""

    def __str__(self):
        return "{}: {}".format(self.__doc__, ", ".join(str(a) for a in self.args))


class _EntryWriter:
    def __init__(self, specs, dest):
        self.specs = list(specs)
        self.dest = dest

    def flush(self):
        self.dest.flush()


@implementer(interfaces.IEntryWriter)
class TSVEntryWriter(_EntryWriter):
    """
    One line per row, fields separated by tabs. The record separator is
    a newline, or a NUL byte in null-delimit mode.
    """

    fieldSeparator = b"\t"
    recordSeparator = b"\n"

    def __init__(self, specs, dest, nullDelimit=False):
        super().__init__(specs, dest)
        if nullDelimit:
            self.recordSeparator = b"\0"

    def writeEntry(self, entry):
        count = 0
        for row in extract.extractRows(entry, self.specs):
            self.dest.write(self.fieldSeparator.join(row) + self.recordSeparator)
            count += 1
        return count


def csvEscape(field):
    """
    Quote field if it contains a comma, a double quote or a line break,
    doubling embedded double quotes.
    """
    if any(c in field for c in (b",", b'"', b"\r", b"\n")):
        return b'"' + field.replace(b'"', b'""') + b'"'
    return field


@implementer(interfaces.IEntryWriter)
class CSVEntryWriter(_EntryWriter):
    """
    CSV with a header line of the spec names, written before the
    first record.
    """

    recordSeparator = b"\n"

    def __init__(self, specs, dest):
        super().__init__(specs, dest)
        self.writeHeader = True

    def _writeRecord(self, fields):
        self.dest.write(b",".join(csvEscape(f) for f in fields) + self.recordSeparator)

    def writeEntry(self, entry):
        if self.writeHeader:
            self._writeRecord([to_bytes(spec.name) for spec in self.specs])
            self.writeHeader = False

        count = 0
        for row in extract.extractRows(entry, self.specs):
            self._writeRecord(row)
            count += 1
        return count


@implementer(interfaces.IEntryWriter)
class JSONEntryWriter(_EntryWriter):
    """
    One JSON object per record starting with a DN, mapping attribute
    names to arrays of string values.
    """

    recordSeparator = b"\n"

    def writeEntry(self, entry):
        if not extract.entryStartsWithDN(entry):
            return 0
        fields = extract.jsonFields(entry, self.specs)
        self.dest.write(
            json.dumps(fields, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
            + self.recordSeparator
        )
        return 1


def writerFor(outputFormat, specs, dest, nullDelimit=False):
    """
    Build the writer for outputFormat, one of OUTPUT_FORMATS.

    Null-delimit mode only applies to the tsv format.
    """
    if outputFormat == TSV:
        return TSVEntryWriter(specs, dest, nullDelimit=nullDelimit)
    elif outputFormat == CSV:
        return CSVEntryWriter(specs, dest)
    elif outputFormat == JSON:
        return JSONEntryWriter(specs, dest)
    raise InvalidOutputFormatError(outputFormat)
