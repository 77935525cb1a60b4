"""
Test cases for the ldifget and ldapescape command line tools.
"""

import sys
from io import BytesIO, StringIO

from twisted.trial import unittest

from ldifget import attrspec, config, escape
from ldifget._scripts import ldapescape
from ldifget._scripts import ldifget as ldifget_script

LDIF = b"""\
version: 1

# foo, example.com
dn: cn=foo,dc=example,dc=com
cn: foo
member: cn=a,dc=example,dc=com
member: cn=b,dc=example,dc=com
description:: IGxlYWRpbmcgc3BhY2U=

"""


class BrokenOutput:
    def write(self, data):
        raise OSError("No space left on device")

    def flush(self):
        pass


class ClosedPipeOutput:
    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self):
        pass


class FakeStdout:
    def fileno(self):
        return 101


class StderrMixin:
    def captureStderr(self):
        self.stderr = StringIO()
        self.patch(sys, "stderr", self.stderr)


class LDIFGetMainTests(unittest.TestCase, StderrMixin):
    def setUp(self):
        self.captureStderr()

    def run_main(self, texts, outputFormat="tsv", nullDelimit=False, data=LDIF):
        out = BytesIO()
        status = ldifget_script.main(
            attrspec.parseAll(texts), outputFormat, nullDelimit, BytesIO(data), out
        )
        return status, out.getvalue()

    def test_members(self):
        status, output = self.run_main(["dn", "member"])

        self.assertEqual(status, 0)
        self.assertEqual(
            output,
            b"cn=foo,dc=example,dc=com\tcn=a,dc=example,dc=com\n"
            b"cn=foo,dc=example,dc=com\tcn=b,dc=example,dc=com\n",
        )

    def test_default(self):
        status, output = self.run_main(["dn", "manager:-no-manager"])

        self.assertEqual(output, b"cn=foo,dc=example,dc=com\tno-manager\n")

    def test_base64(self):
        status, output = self.run_main(["description", "description.base64"])

        self.assertEqual(output, b" leading space\tIGxlYWRpbmcgc3BhY2U=\n")

    def test_csv(self):
        status, output = self.run_main(["dn", "cn"], outputFormat="csv")

        self.assertEqual(output, b'dn,cn\n"cn=foo,dc=example,dc=com",foo\n')

    def test_json(self):
        status, output = self.run_main(["dn", "cn"], outputFormat="json")

        self.assertEqual(output, b'{"dn":["cn=foo,dc=example,dc=com"],"cn":["foo"]}\n')

    def test_parse_error(self):
        status, output = self.run_main(["dn"], data=b"dn: cn=foo\ncn:: ****\n\n")

        self.assertEqual(status, 1)
        self.assertEqual(output, b"")
        self.assertIn("Invalid base64 value in LDIF: line 2", self.stderr.getvalue())

    def test_write_error(self):
        status = ldifget_script.main(
            attrspec.parseAll(["dn"]), "tsv", False, BytesIO(LDIF), BrokenOutput()
        )

        self.assertEqual(status, 1)
        self.assertIn("No space left on device", self.stderr.getvalue())

    def test_broken_pipe(self):
        """
        When the reader of the output goes away, standard output is
        pointed at the null device and the exit status is 1.
        """
        opened = []
        duplicated = []
        self.patch(ldifget_script.os, "open", lambda *a: opened.append(a) or 7)
        self.patch(ldifget_script.os, "dup2", lambda *a: duplicated.append(a))
        self.patch(sys, "stdout", FakeStdout())

        status = ldifget_script.main(
            attrspec.parseAll(["dn"]), "tsv", False, BytesIO(LDIF), ClosedPipeOutput()
        )

        self.assertEqual(status, 1)
        self.assertEqual(opened, [(ldifget_script.os.devnull, ldifget_script.os.O_WRONLY)])
        self.assertEqual(duplicated, [(7, 101)])
        self.assertIn("broken pipe", self.stderr.getvalue())


class LDIFGetOptionsTests(unittest.TestCase):
    def setUp(self):
        config.loadConfig(configFiles=[], reload=True)
        self.addCleanup(config.loadConfig, configFiles=[], reload=True)

    def test_attributes(self):
        sut = ldifget_script.MyOptions()

        sut.parseOptions(options=["-c", "dn", "manager:-none", "jpegPhoto.base64"])

        self.assertEqual(sut.opts["output-format"], "csv")
        self.assertEqual(
            sut.opts["attributes"],
            [
                attrspec.AttributeSpec("dn"),
                attrspec.AttributeSpec("manager", "none"),
                attrspec.AttributeSpec("jpegPhoto", None, True),
            ],
        )

    def test_no_attributes(self):
        self.assertRaises(
            ldifget_script.usage.UsageError, ldifget_script.MyOptions().parseOptions, options=["-j"]
        )


class LDAPEscapeMainTests(unittest.TestCase, StderrMixin):
    def setUp(self):
        self.captureStderr()

    def test_escape(self):
        out = BytesIO()

        status = ldapescape.main(
            escape.escapeFilterValue, BytesIO(b"a*b\n(c)\n"), out
        )

        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(), b"a\\2ab\n\\28c\\29\n")

    def test_unescape(self):
        out = BytesIO()

        status = ldapescape.main(
            escape.unescapeFilterValue, BytesIO(b"a\\2ab\n\\28c\\29"), out
        )

        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(), b"a*b\n(c)")

    def test_unescape_invalid(self):
        status = ldapescape.main(
            escape.unescapeFilterValue, BytesIO(b"a\\x1\n"), BytesIO()
        )

        self.assertEqual(status, 1)
        self.assertIn("invalid hexadecimal digit 0x78", self.stderr.getvalue())
