# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections.abc    import  Sequence
from collections        import  namedtuple
from logging            import  getLogger

from ...exceptions      import  InvalidByteOrderMarker,                \
                                InvalidMagicNumber,                    \
                                UnsupportedFieldType,                  \
                                InvalidAsciiValue, OutOfBounds, IFDLoop
from ..buffer_reader    import  BufferReader
from ..byte_order       import  ByteOrder
from ..container        import  find_tiff_header
from .tags              import  Directory, lookup_tag, pointer_directory
from .values            import  LongValue, decode_value, is_inline

log = getLogger(__name__)

# Each IFD entry is exactly this many bytes: tag, type, count, value.
ENTRY_SIZE      = 12

TiffHeader      = namedtuple("TiffHeader", ("byte_order",
                                            "magic",
                                            "first_ifd_offset"))

def read_tiff_header (data, magic_check_number = 42,
                      expected_byte_orders = ByteOrder.markers):
    """Read the eight-byte header at the start of a TIFF block.

    Args:
        data (bytes):                   The TIFF, starting at its
                                        byte-order marker.
        magic_check_number (int):       What the magic number has to be.
        expected_byte_orders (dict):    Markers I'll accept.

    Returns:
        TiffHeader:     The byte order, the magic number, and where the
                        first IFD is.

    Raises:
        TruncatedData:          If there aren't eight bytes.
        InvalidByteOrderMarker: If the marker is neither II nor MM.
        InvalidMagicNumber:     If the magic number isn't 42.

    Examples:
        >>> read_tiff_header(b"MM\\x00\\x2a\\x00\\x00\\x00\\x08")
        TiffHeader(byte_order=<ByteOrder big>, magic=42, first_ifd_offset=8)

    """
    tiff    = BufferReader(data)
    marker  = tiff.read(2)

    if marker not in expected_byte_orders:
        tiff.error(InvalidByteOrderMarker, -2, marker)

    tiff.byte_order = ByteOrder(expected_byte_orders[marker])
    magic           = tiff.read_u16()

    if magic != magic_check_number:
        tiff.error(InvalidMagicNumber, -2, magic_check_number, magic)

    return TiffHeader(tiff.byte_order, magic, tiff.read_u32())

class IFDEntry (namedtuple("IFDEntry", ("tag", "field_type", "count",
                                        "value", "offset", "position"))):
    """One resolved IFD entry.

    The offset is where the value was found, or None if it fit in the
    entry itself. The position is where the 12-byte entry starts.
    """

    __slots__ = ()

    def get_sub_ifd_offset (self):
        """Get the IFD offset this entry points at, if it's a pointer.

        Only a single unsigned LONG counts.
        """
        if self.tag.is_sub_ifd_pointer                  \
                and type(self.value) is LongValue       \
                and len(self.value) == 1:
            return self.value[0]

        return None

class IFD (Sequence):
    """Image File Directory

    A read-only sequence of IFDEntry objects in the order they were
    stored, minus any sub-IFD pointers.
    """

    def __init__ (self, directory, offset, entries):
        self.directory  = directory
        self.offset     = offset
        self.entries    = tuple(entries)

    def __getitem__ (self, key):
        return self.entries[key]

    def __len__ (self):
        return len(self.entries)

    def __repr__ (self):
        return "<{} {} at 0x{:08x}: {:d} entries>".format(
                self.__class__.__name__, self.directory, self.offset,
                len(self))

    def items (self):
        """Iterate over (tag, value) pairs."""
        for entry in self.entries:
            yield entry.tag, entry.value

    def get (self, code, default = None):
        """Get the value for a tag code, if it's here"""
        for entry in self.entries:
            if entry.tag.code == code:
                return entry.value

        return default

class Exif (Sequence):
    """Exif Container

    Once initialized, this is little more than a non-mutable sequence of
    IFDs. It takes in the TIFF block (everything from the byte-order
    marker onward), reads what it can, and becomes that sequence (or
    raises a FileReadError if it can't).

    The chain of IFDs is read from the first one on. Any Exif, GPS, or
    Interoperability pointer in a chained IFD is followed once, and the
    IFD it points to comes before the IFD that pointed to it.

    Args:
        data (bytes):   The TIFF block.
        strict (bool):  If False, an offset-addressed value that runs
                        outside the data costs only its own entry.
                        Otherwise it costs the whole parse.
    """

    # The first two bytes of the tiff must be in here.
    expected_byte_orders    = ByteOrder.markers

    # The second two bytes of the tiff must be this integer.
    magic_check_number      = 42

    def __init__ (self, data, strict = True):
        self.tiff           = BufferReader(data)
        self.strict         = strict

        self.header         = self.read_header()
        self.byte_order     = self.header.byte_order

        # Everything after the header uses the byte order it named.
        self.tiff.byte_order = self.byte_order

        self.ifds           = self.read_ifds(self.header.first_ifd_offset)

    def __getitem__ (self, key):
        """Get an IFD"""
        return self.ifds[key]

    def __len__ (self):
        """Get a count of IFDs"""
        return len(self.ifds)

    def __repr__ (self):
        return "<{} {} {!r}>".format(self.__class__.__name__,
                                     self.byte_order.marker.decode(),
                                     list(self.ifds))

    def read_header (self):
        return read_tiff_header(self.tiff.data, self.magic_check_number,
                                self.expected_byte_orders)


    def read_ifds (self, ifd_offset):
        """Follow the IFD chain and any pointers along the way"""
        ifds    = [ ]
        seen    = set()

        while ifd_offset != 0:
            if ifd_offset in seen:
                # The offset we just read points back at an IFD we've
                # already been through.
                self.tiff.error(IFDLoop, -4, ifd_offset)

            seen.add(ifd_offset)
            log.debug("Reading IFD at 0x%08x", ifd_offset)

            owner_offset    = ifd_offset
            entries         = self.read_entries(ifd_offset,
                                                Directory.IMAGE)

            # The next offset comes right after the entries, so it has
            # to be read before we go anywhere else.
            ifd_offset      = self.tiff.read_u32()

            for entry in entries:
                sub_ifd_offset = entry.get_sub_ifd_offset()

                if sub_ifd_offset is not None:
                    ifds.append(self.read_sub_ifd(
                            sub_ifd_offset,
                            pointer_directory(entry.tag.code)))

                elif entry.tag.is_sub_ifd_pointer:
                    log.warning("Ignoring %s with a %s value (0x%08x)",
                                entry.tag, type(entry.value).__name__,
                                entry.position)

            ifds.append(self.make_ifd(Directory.IMAGE, owner_offset,
                                      entries))

        return ifds

    def read_sub_ifd (self, ifd_offset, directory):
        """Read an IFD some pointer led to.

        Its own pointers aren't followed. Its next offset has to be
        there, but it isn't followed either.
        """
        log.debug("Following pointer to %s at 0x%08x", directory,
                  ifd_offset)

        entries = self.read_entries(ifd_offset, directory)
        self.tiff.ensure_available(4)

        return self.make_ifd(directory, ifd_offset, entries)

    def make_ifd (self, directory, ifd_offset, entries):
        """Make an IFD, leaving out any pointer entries"""
        return IFD(directory, ifd_offset,
                   (e for e in entries if not e.tag.is_sub_ifd_pointer))

    def read_entries (self, ifd_offset, directory):
        """Read an IFD's entry table.

        This leaves the position right after the table, where the next
        IFD offset is.
        """
        self.tiff.seek(ifd_offset)
        entry_count = self.tiff.read_u16()

        # Check the whole table before reading any of it.
        self.tiff.ensure_available(ENTRY_SIZE * entry_count)

        entries = [ ]

        for i in range(entry_count):
            entry = self.read_entry(directory)

            if entry is not None:
                entries.append(entry)

        return entries

    def read_entry (self, directory):
        """Read and resolve one 12-byte entry (or None to drop it)"""
        position    = self.tiff.tell()
        code        = self.tiff.read_u16()
        field_type  = self.tiff.read_u16()
        count       = self.tiff.read_u32()
        raw         = self.tiff.read(4)
        tag         = lookup_tag(code, directory)

        try:
            value = decode_value(self.tiff.data, raw, count, field_type,
                                 self.byte_order, position)

        except (UnsupportedFieldType, InvalidAsciiValue) as e:
            log.warning("Dropping %s in %s: %s", tag, directory, e)
            return None

        except OutOfBounds as e:
            if self.strict:
                raise

            log.warning("Dropping %s in %s: %s", tag, directory, e)
            return None

        if is_inline(count, field_type):
            offset  = None

        else:
            offset  = self.byte_order.read_int(raw)

        return IFDEntry(tag, field_type, count, value, offset, position)

def parse (data, strict = True):
    """Read every IFD in a TIFF block.

    Args:
        data (bytes):   The TIFF block, starting at its byte-order
                        marker.
        strict (bool):  See Exif.

    Returns:
        list:           The IFDs, sub-IFDs before their owners.
    """
    return list(Exif(data, strict))

def read_exif (image_bytes, strict = True):
    """Find and read the Exif in a JPEG or PNG image"""
    return Exif(find_tiff_header(image_bytes), strict)
