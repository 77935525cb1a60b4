import os
import sys

from twisted.python import log

from ldifget import attrspec, usage, pipeline, writers
from ldifget.protocols import ldifprotocol


def main(specs, outputFormat, nullDelimit, inputFile, outputFile):
    """
    Extract specs from the LDIF on inputFile and write them to outputFile.

    @return: process exit status.
    """
    writer = writers.writerFor(outputFormat, specs, outputFile, nullDelimit=nullDelimit)
    log.msg("Writing %s output for %s" % (outputFormat, ", ".join(s.name for s in specs)))
    reader = ldifprotocol.LDIFReader(inputFile)
    try:
        pipeline.run(reader, writer)
    except ldifprotocol.LDIFParseError as e:
        print("{}: {}".format(sys.argv[0], e), file=sys.stderr)
        return 1
    except BrokenPipeError:
        # Nobody reads what is still buffered; keep the interpreter from
        # failing again when it flushes stdout at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        print("{}: broken pipe".format(sys.argv[0]), file=sys.stderr)
        return 1
    except OSError as e:
        print("{}: {}".format(sys.argv[0], e), file=sys.stderr)
        return 1
    return 0


class MyOptions(
    usage.Options,
    usage.Options_output,
    usage.Options_verbose,
    usage.Options_config,
):
    """LDIF attribute extraction utility"""

    synopsis = "Usage: ldifget [options] ATTRIBUTE [ATTRIBUTE ...]"
    longdesc = """Write the values of the given attribute types for each entry of the
    LDIF read from standard input. ATTRIBUTE:-DEFAULT supplies a value
    for entries lacking the attribute; a trailing .base64 writes the
    values base64 encoded. Entries with multiple values produce one
    record per combination of values."""

    def parseArgs(self, *attributes):
        if not attributes:
            raise usage.UsageError("at least one attribute type must be given")
        self.opts["attributes"] = attrspec.parseAll(attributes)


def console_script():
    try:
        opts = MyOptions()
        opts.parseOptions()
    except usage.UsageError as ue:
        sys.stderr.write("{}: {}\n".format(sys.argv[0], ue))
        sys.exit(1)

    if opts["verbose"]:
        log.startLogging(sys.stderr, setStdout=0)

    sys.exit(
        main(
            opts["attributes"],
            opts["output-format"],
            opts["null-delimit"],
            sys.stdin.buffer,
            sys.stdout.buffer,
        )
    )


if __name__ == "__main__":
    sys.exit(console_script())
