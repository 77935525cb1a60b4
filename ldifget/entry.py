from twisted.python.util import InsensitiveDict
from zope.interface import implementer

from ldifget import interfaces
from ldifget._encoder import to_unicode


@implementer(interfaces.ILDIFEntry)
class Entry:
    """
    One LDIF record as read from the input.

    Attribute types map to the list of their raw values, in the order
    they were seen. Attribute types are matched without regard to case;
    the spelling seen first is the one reported by keys().
    """

    firstAttribute = None

    def __init__(self, attributes=()):
        """

        Initialize the object.

        @param attributes: Initial attributes of the object, an iterable
        of (attribute type, values) pairs. Repeated attribute types
        accumulate their values.

        """
        self._attributes = InsensitiveDict()
        for key, values in attributes:
            for value in values:
                self.addValue(key, value)

    def addValue(self, key, value):
        key = to_unicode(key)
        if self.firstAttribute is None:
            self.firstAttribute = key
        self._attributes.setdefault(key, []).append(value)

    def __getitem__(self, key):
        return self._attributes[to_unicode(key)]

    def get(self, key, default=None):
        key = to_unicode(key)
        if key in self._attributes:
            return self._attributes[key]
        return default

    def __contains__(self, key):
        return to_unicode(key) in self._attributes

    def __iter__(self):
        return iter(self.keys())

    def __len__(self):
        return len(self._attributes)

    def __bool__(self):
        return len(self._attributes) > 0

    def keys(self):
        return list(self._attributes.keys())

    def items(self):
        return [(key, self._attributes[key]) for key in self.keys()]

    def __eq__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.items())
