import configparser
import os.path

from ldifget import writers


class LDIFGetConfig:
    """
    Output settings, from the command line or the configuration files.

    Values given to the constructor win over the configuration files.
    """

    outputFormat = None
    nullDelimit = None

    def __init__(self, outputFormat=None, nullDelimit=None):
        if outputFormat is not None:
            self.outputFormat = _checkOutputFormat(outputFormat)
        if nullDelimit is not None:
            self.nullDelimit = nullDelimit

    def getOutputFormat(self):
        if self.outputFormat is not None:
            return self.outputFormat

        cfg = loadConfig()
        return _checkOutputFormat(cfg.get("output", "format"))

    def getNullDelimit(self):
        if self.nullDelimit is not None:
            return self.nullDelimit

        cfg = loadConfig()
        try:
            return cfg.getboolean("output", "null-delimit")
        except ValueError as e:
            raise InvalidNullDelimitError(e)


class InvalidNullDelimitError(Exception):
    """Configuration option null-delimit must be a boolean"""

    def __str__(self):
        return self.__doc__


def _checkOutputFormat(value):
    value = value.strip().lower()
    if value not in writers.OUTPUT_FORMATS:
        raise writers.InvalidOutputFormatError(value)
    return value


DEFAULTS = {
    "output": {
        "format": writers.TSV,
        "null-delimit": "no",
    },
}

CONFIG_FILES = [
    "/etc/ldifget/global.cfg",
    os.path.expanduser("~/.ldifget/global.cfg"),
]

__config = None


def loadConfig(configFiles=None, reload=False):
    """
    Load configuration file.
    """
    global __config
    if __config is None or reload:
        x = configparser.ConfigParser()

        for section, options in DEFAULTS.items():
            x.add_section(section)
            for option, value in options.items():
                x.set(section, option, value)

        if configFiles is None:
            configFiles = CONFIG_FILES
        x.read(configFiles)
        __config = x
    return __config
