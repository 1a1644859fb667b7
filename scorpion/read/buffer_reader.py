# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from ..exceptions   import  TruncatedData
from .byte_order    import  ByteOrder

class BufferReader:
    """Buffer Reader

    This wraps an in-memory bytestring and tracks a position inside it,
    the way a file object would. Unlike slicing, every read is checked:
    running off the end raises TruncatedData rather than quietly
    returning fewer bytes.

    Args:
        data (bytes):               The buffer we're reading.
        byte_order (ByteOrder):     How to read integers. Defaults to
                                    big-endian, which is what JPEG and
                                    PNG use.

    Examples:
        >>> reader = BufferReader(b"\\xff\\xd8\\xff\\xe1")
        >>> reader.read(2)
        b'\\xff\\xd8'
        >>> reader.read_int(2)
        65505
        >>> reader.read(1)
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        TruncatedData: Unexpected end of data: needed 1 bytes, 0 left. (0x00000004)

    """

    # By default, we're big endian.
    default_byte_order  = ByteOrder.BIG

    def __init__ (self, data, byte_order = None):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("Expected bytes; got {}".format(
                    type(data).__name__))

        self.data           = bytes(data)
        self.position       = 0

        if byte_order is None:
            byte_order      = self.default_byte_order

        self.byte_order     = byte_order

    def __len__ (self):
        return len(self.data)

    def tell (self):
        return self.position

    def seek (self, pos):
        if pos < 0:
            raise ValueError("Can't seek to a negative position")

        self.position = pos

    def skip (self, length):
        """Move forward, asserting we don't pass the end"""
        self.ensure_available(length)
        self.position += length

    def available (self):
        return max(len(self.data) - self.position, 0)

    def at_end (self):
        return self.available() == 0

    def ensure_available (self, length):
        if length > self.available():
            self.error(TruncatedData, 0, length, self.available())

    def read (self, length = None):
        """Read, asserting we don't pass the end"""
        if length is None:
            length = self.available()

        self.ensure_available(length)

        result          = self.data[self.position:self.position + length]
        self.position  += length

        return result

    def peek (self, length):
        """Look ahead without moving or asserting anything"""
        return self.data[self.position:self.position + length]

    def read_int (self, length, signed = False):
        """Read an int using our byte order"""
        return self.byte_order.read_int(self.read(length), signed)

    def read_u8 (self):
        return self.read_int(1)

    def read_u16 (self):
        return self.read_int(2)

    def read_u32 (self):
        return self.read_int(4)

    def error (self, error_class, altered_position = 0, *args):
        """Shortcut to raising an exception based on this position"""
        if altered_position <= 0:
            pos = self.position + altered_position

        else:
            pos = altered_position

        raise error_class(pos, *args)
