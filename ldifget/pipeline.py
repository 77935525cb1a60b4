"""
Drive records from an LDIF reader into an entry writer.
"""

from twisted.python import log


def run(reader, writer):
    """
    Write every record of reader with writer, one record at a time.

    @param reader: iterable of ILDIFEntry providers, e.g. an LDIFReader.
    @param writer: IEntryWriter provider.

    @return: (records read, output records written)
    """
    entries = written = dropped = 0
    for entry in reader:
        entries += 1
        count = writer.writeEntry(entry)
        if count:
            written += count
        else:
            dropped += 1
    writer.flush()

    log.msg(
        "Read %d entries, wrote %d records, dropped %d entries"
        % (entries, written, dropped)
    )
    return entries, written
