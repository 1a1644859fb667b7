# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from ..exceptions   import  InvalidByteOrderMarker, TruncatedData
from ..internal     import  bytes_to_int

class ByteOrder:
    """TIFF Byte Order

    A TIFF block opens with two bytes naming its byte order: "II" for
    Intel (little-endian) or "MM" for Motorola (big-endian). Every
    integer after that, in the header and in every IFD entry, is read
    through one of these.

        >>> order = ByteOrder.from_marker(b"MM")
        >>> value, rest = order.u16(b"\\x00\\x2a\\x00\\x00\\x00\\x08")
        >>> value, rest
        (42, b'\\x00\\x00\\x00\\x08')
        >>> order.u32(rest)
        (8, b'')

    Each reader consumes its width from the front of the slice and
    hands back the value along with whatever's left.
    """

    # The two markers I know about.
    markers = {
        b"II":  "little",
        b"MM":  "big",
    }

    def __init__ (self, name):
        if name not in ("little", "big"):
            raise ValueError("Expected 'little' or 'big'; got {!r}".format(
                    name))

        self.name   = name

    @classmethod
    def from_marker (cls, marker, position = 0):
        """Read the byte order from the first two bytes of a TIFF."""
        marker = bytes(marker[:2])

        if marker not in cls.markers:
            raise InvalidByteOrderMarker(position, marker)

        return cls(cls.markers[marker])

    @property
    def is_little_endian (self):
        return self.name == "little"

    @property
    def marker (self):
        return b"II" if self.is_little_endian else b"MM"

    def __eq__ (self, other):
        if not isinstance(other, ByteOrder):
            return NotImplemented

        return self.name == other.name

    def __hash__ (self):
        return hash(self.name)

    def __repr__ (self):
        return "<{} {}>".format(self.__class__.__name__, self.name)

    def read_int (self, bytestring, signed = False):
        """Convert a whole bytestring to an int in this byte order."""
        return bytes_to_int(bytestring, self.name, signed)

    def take (self, data, width, signed = False):
        """Read a `width`-byte int from the front of data.

        Returns:
            tuple:  The int and the remaining bytes.
        """
        if len(data) < width:
            # Positions aren't known at this level, so the error points
            # at zero. Callers with a position should check first.
            raise TruncatedData(0, width, len(data))

        return self.read_int(data[:width], signed), data[width:]

    def u8 (self, data):
        return self.take(data, 1)

    def i8 (self, data):
        return self.take(data, 1, signed = True)

    def u16 (self, data):
        return self.take(data, 2)

    def i16 (self, data):
        return self.take(data, 2, signed = True)

    def u32 (self, data):
        return self.take(data, 4)

    def i32 (self, data):
        return self.take(data, 4, signed = True)

# These are the only two there'll ever be.
ByteOrder.LITTLE    = ByteOrder("little")
ByteOrder.BIG       = ByteOrder("big")
