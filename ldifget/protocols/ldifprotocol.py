import binascii
import collections
import sys

from twisted.internet import protocol
from twisted.protocols import basic

from ldifget import entry
from ldifget._encoder import from_base64, to_unicode


class LDIFParseError(Exception):
    """Error parsing LDIF"""

    def __str__(self):
        s = self.__doc__
        if self.args:
            s = ": ".join([s] + [str(arg) for arg in self.args])
        return s + "."


class LDIFLineWithoutColonError(LDIFParseError):
    """LDIF line without colon seen"""


class LDIFEntryStartsWithSpaceError(LDIFParseError):
    """LDIF continuation line has no line to continue"""


class LDIFBase64Error(LDIFParseError):
    """Invalid base64 value in LDIF"""


def _where(lineNumber):
    return "line %d" % (lineNumber,)


class LDIF(basic.LineReceiver):
    """
    Reassemble LDIF records from raw bytes.

    Feed data with dataReceived() and finish with connectionLost();
    every record that has at least one attribute is passed to
    gotEntry().
    """

    delimiter = b"\n"
    MAX_LENGTH = sys.maxsize

    data = None
    lastLine = None
    lastLineNumber = 0
    lineNumber = 0

    def logicalLineReceived(self, line):
        if line.startswith(b"#"):
            # comments are allowed everywhere
            return
        if line == b"":
            self.entryFinished()
            return

        key, val = self._parseLine(line)
        if self.data is None:
            self.data = entry.Entry()
        self.data.addValue(key, val)

    def lineReceived(self, line):
        self.lineNumber += 1
        if line.endswith(b"\r"):
            line = line[:-1]

        if line.startswith(b" "):
            if self.lastLine is None:
                raise LDIFEntryStartsWithSpaceError(_where(self.lineNumber))
            self.lastLine.append(line[1:])
        else:
            self._flushLastLine()
            if line == b"":
                self.logicalLineReceived(line)
            else:
                self.lastLine = [line]
                self.lastLineNumber = self.lineNumber

    def _flushLastLine(self):
        if self.lastLine is not None:
            line = b"".join(self.lastLine)
            self.lastLine = None
            self.logicalLineReceived(line)

    def parseValue(self, val):
        if val.startswith(b":"):
            try:
                return from_base64(val[1:].strip(b" "))
            except binascii.Error as e:
                raise LDIFBase64Error(_where(self.lastLineNumber), e)
        return val.lstrip(b" ")

    def _parseLine(self, line):
        try:
            key, val = line.split(b":", 1)
        except ValueError:
            # unpack list of wrong size
            # -> invalid input data
            raise LDIFLineWithoutColonError(_where(self.lastLineNumber), line)
        val = self.parseValue(val)
        return to_unicode(key), val

    def entryFinished(self):
        o, self.data = self.data, None
        if o:
            self.gotEntry(o)

    def gotEntry(self, obj):
        pass

    def connectionLost(self, reason=protocol.connectionDone):
        rest = self.clearLineBuffer()
        if rest:
            self.lineReceived(rest)
        self._flushLastLine()
        self.entryFinished()


class LDIFReader(LDIF):
    """
    Read LDIF records from a binary file object, one at a time.

        for entry in LDIFReader(sys.stdin.buffer):
            ...

    Input is consumed one physical line at a time, so only the record
    being assembled is held in memory.
    """

    def __init__(self, inputFile):
        self.inputFile = inputFile
        self.exhausted = False
        self._completed = collections.deque()

    def gotEntry(self, obj):
        self._completed.append(obj)

    def nextEntry(self):
        """
        Return the next record, or None at end of input.
        """
        while not self._completed:
            if self.exhausted:
                return None
            data = self.inputFile.readline()
            if data:
                self.dataReceived(data)
            else:
                self.exhausted = True
                self.connectionLost()
        return self._completed.popleft()

    def __iter__(self):
        return self

    def __next__(self):
        o = self.nextEntry()
        if o is None:
            raise StopIteration
        return o
