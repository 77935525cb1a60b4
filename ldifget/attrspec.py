"""
Attribute specifications given on the command line.

An attribute specification names the attribute type to extract,
optionally followed by ``:-`` and a default value used when the record
has no value for it. A trailing ``.base64`` asks for the values to be
written base64 encoded::

    member
    manager:-no-manager
    jpegPhoto.base64

The ``.base64`` suffix is always removed from the whole text before the
default is split off, so in ``title:-none.base64`` the default is
``none`` and output is base64 encoded.
"""

BASE64_SUFFIX = ".base64"
DEFAULT_SEPARATOR = ":-"


class AttributeSpec:
    """An attribute type to extract, with its default and output encoding."""

    def __init__(self, name, default=None, encodeOutputBase64=False):
        self.name = name
        self.default = default
        self.encodeOutputBase64 = encodeOutputBase64

    def hasDefault(self):
        return self.default is not None

    def __eq__(self, other):
        if not isinstance(other, AttributeSpec):
            return NotImplemented
        return (self.name, self.default, self.encodeOutputBase64) == (
            other.name,
            other.default,
            other.encodeOutputBase64,
        )

    def __hash__(self):
        return hash((self.name, self.default, self.encodeOutputBase64))

    def __repr__(self):
        return "{}(name={!r}, default={!r}, encodeOutputBase64={!r})".format(
            self.__class__.__name__, self.name, self.default, self.encodeOutputBase64
        )


def parse(text):
    """
    Parse one attribute specification. Never fails.

    @param text: the specification as given on the command line.
    @type text: str

    @rtype: AttributeSpec
    """
    encodeOutputBase64 = False
    if text.endswith(BASE64_SUFFIX):
        encodeOutputBase64 = True
        text = text[: -len(BASE64_SUFFIX)]

    name, separator, default = text.partition(DEFAULT_SEPARATOR)
    if not separator:
        default = None
    return AttributeSpec(name, default, encodeOutputBase64)


def parseAll(texts):
    return [parse(text) for text in texts]
