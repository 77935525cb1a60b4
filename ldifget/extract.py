"""
Turn LDIF records into output rows.

For every AttributeSpec a list of values is resolved from the record.
A record yields rows only if every spec resolves; the rows are then the
cartesian product of the resolved lists, the first spec varying slowest.
"""

import itertools

from ldifget._encoder import to_base64, to_bytes, to_unicode

DN = "dn"


def resolveValues(entry, spec):
    """
    Resolve the values of one spec for a record.

    @return: the record's values for spec.name, base64 encoded if the
    spec asks for it; else a one element list holding the spec's
    default, which is never base64 encoded; else None.
    """
    values = entry.get(spec.name)
    if values:
        if spec.encodeOutputBase64:
            return [to_base64(value) for value in values]
        return list(values)
    if spec.hasDefault():
        return [to_bytes(spec.default)]
    return None


def resolveAll(entry, specs):
    """
    Resolve every spec, stopping at the first one that does not
    resolve.

    @return: list of value lists aligned to specs, or None.
    """
    resolved = []
    for spec in specs:
        values = resolveValues(entry, spec)
        if values is None:
            return None
        resolved.append(values)
    return resolved


def extractRows(entry, specs):
    """
    Yield the output rows for a record, as tuples of bytes aligned to
    specs. Nothing is yielded when a spec has neither a value nor a
    default in the record.
    """
    resolved = resolveAll(entry, specs)
    if not resolved:
        return
    yield from itertools.product(*resolved)


def entryStartsWithDN(entry):
    """
    Whether the first attribute of the record is the DN.

    Headers such as a lone C{version: 1} record fail this test.
    """
    first = entry.firstAttribute
    return first is not None and first.lower() == DN


def jsonFields(entry, specs):
    """
    Map each resolved spec name to its values as text, in spec order.
    Specs that resolve to nothing are left out.
    """
    fields = {}
    for spec in specs:
        values = resolveValues(entry, spec)
        if values is not None:
            fields[spec.name] = [to_unicode(value) for value in values]
    return fields
