from zope.interface import Interface, Attribute


class ILDIFEntry(Interface):
    """

    A record read from an LDIF stream: attribute types mapped to the
    list of their raw (bytes) values.

    >>> o=Entry([('dn', [b'cn=foo,dc=example,dc=com']),
    ...     ('member', [b'cn=a', b'cn=b'])])
    >>> o['member']
    [b'cn=a', b'cn=b']

    """

    firstAttribute = Attribute(
        "The attribute type of the first line of the record, or None.")

    def __getitem__(key):
        """

        Get all values of an attribute.

        >>> o['MEMBER']
        [b'cn=a', b'cn=b']

        """

    def get(key, default=None):
        """

        Get all values of an attribute.

        >>> o.get('member')
        [b'cn=a', b'cn=b']
        >>> o.get('foo')
        >>> o.get('foo', [])
        []

        """

    def __contains__(key):
        """Whether the record has a value for the attribute type."""

    def keys():
        """Attribute types in the order they were first seen."""

    def items():
        """(attribute type, values) pairs in the order of keys()."""


class IEntryWriter(Interface):
    """
    Serialize the requested attributes of LDIF records to a byte stream.
    """

    specs = Attribute("The AttributeSpecs to write, in output order.")

    def writeEntry(entry):
        """
        Write the output for one record.

        @param entry: the record.
        @type entry: ILDIFEntry provider.

        @return: the number of output records written; 0 if the record was
        dropped.
        """

    def flush():
        """
        Push buffered output to the destination.
        """
