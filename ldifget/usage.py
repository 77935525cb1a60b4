"""
Command line argument/options available to the ldifget tools.
"""
import os.path

from twisted.python import usage, reflect
from twisted.python.usage import UsageError

import ldifget
from ldifget import config, writers

__all__ = [
    "Options",
    "Options_config",
    "Options_output",
    "Options_verbose",
    "UsageError",
]


class Options(usage.Options):
    optParameters = ()

    def postOptions(self):
        postOpt = {}
        reflect.addMethodNamesToDict(self.__class__, postOpt, "postOptions_")
        for name in postOpt.keys():
            method = getattr(self, "postOptions_" + name)
            method()

    def opt_version(self):
        """Display version and exit."""
        print("{} {}".format(ldifget.__title__, ldifget.__version__))
        raise SystemExit(0)


class Options_config:
    """
    Mixin for providing the --config option.
    """

    def opt_config(self, value):
        """Read configuration from this file instead of the default ones"""
        if not os.path.isfile(value):
            raise usage.UsageError("config file not found: %s" % (value,))
        self.opts["config"] = value
        config.loadConfig(configFiles=[value], reload=True)


class Options_output:
    """
    Mixin for choosing the output format. Without --csv or --json the
    format comes from the configuration files.
    """

    optFlags = (
        ("null-delimit", "0",
         "Terminate output records with null bytes (0x00) instead of newlines."),
        ("json", "j",
         "Write the attributes of each entry as a JSON object with string array values."),
        ("csv", "c",
         "Write values using the CSV format, including a header."),
    )

    def postOptions_output(self):
        chosen = [
            name for name in (writers.CSV, writers.JSON) if self.opts[name]
        ]
        if len(chosen) > 1:
            raise usage.UsageError("options specify mutually exclusive output formats")

        cfg = config.LDIFGetConfig(
            outputFormat=chosen[0] if chosen else None,
            nullDelimit=True if self.opts["null-delimit"] else None,
        )
        try:
            self.opts["output-format"] = cfg.getOutputFormat()
            self.opts["null-delimit"] = cfg.getNullDelimit()
        except (writers.InvalidOutputFormatError,
                config.InvalidNullDelimitError) as e:
            raise usage.UsageError(str(e))


class Options_verbose:
    optFlags = (
        ("verbose", "v", "Log progress to standard error."),
    )
