import sys

from ldifget import escape, usage


def main(transform, inputFile, outputFile):
    try:
        for line in inputFile:
            outputFile.write(transform(line))
        outputFile.flush()
    except escape.InvalidEscapeError as e:
        print("{}: {}".format(sys.argv[0], e), file=sys.stderr)
        return 1
    except OSError as e:
        print("{}: {}".format(sys.argv[0], e), file=sys.stderr)
        return 1
    return 0


class MyOptions(usage.Options):
    """Escape standard input for use as an LDAP search filter value"""

    optFlags = (("reverse", "r", "Reverse the escaping."),)


def console_script():
    try:
        opts = MyOptions()
        opts.parseOptions()
    except usage.UsageError as ue:
        sys.stderr.write("{}: {}\n".format(sys.argv[0], ue))
        sys.exit(1)

    if opts["reverse"]:
        transform = escape.unescapeFilterValue
    else:
        transform = escape.escapeFilterValue
    sys.exit(main(transform, sys.stdin.buffer, sys.stdout.buffer))


if __name__ == "__main__":
    sys.exit(console_script())
