# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections import namedtuple
from zlib import crc32

from scorpion.internal import int_to_bytes

# An entry whose 4-byte value field is given exactly as-is.
RawField = namedtuple("RawField", ("field",))

class IFDBuilder:

    def __init__ (self, chained):
        self.chained = chained
        self.entries = [ ]
        self.offset = None

    def add (self, code, field_type, count, data):
        """Add an entry with its encoded value bytes.

        Values of four bytes or fewer go inline; anything longer goes
        after the IFDs with an offset pointing at it.
        """
        self.entries.append((code, field_type, count, data))
        return self

    def add_raw (self, code, field_type, count, field):
        self.entries.append((code, field_type, count, RawField(field)))
        return self

    def add_pointer (self, code, target):
        self.entries.append((code, 4, 1, target))
        return self

    def size (self):
        return 2 + 12 * len(self.entries) + 4

class TiffBuilder:
    """Lay out a TIFF block: header, then IFDs, then long values."""

    def __init__ (self, byte_order = "little"):
        self.byte_order = byte_order
        self.ifds = [ ]

    def add_ifd (self, chained = True):
        ifd = IFDBuilder(chained)
        self.ifds.append(ifd)
        return ifd

    @property
    def marker (self):
        return b"II" if self.byte_order == "little" else b"MM"

    def ints (self, length, values, signed = False):
        return b"".join(int_to_bytes(v, length, self.byte_order, signed)
                        for v in values)

    def u16s (self, *values):
        return self.ints(2, values)

    def u32s (self, *values):
        return self.ints(4, values)

    def i16s (self, *values):
        return self.ints(2, values, signed = True)

    def i32s (self, *values):
        return self.ints(4, values, signed = True)

    def rationals (self, *pairs):
        return self.u32s(*(x for pair in pairs for x in pair))

    def srationals (self, *pairs):
        return self.i32s(*(x for pair in pairs for x in pair))

    def build (self):
        offset = 8

        for ifd in self.ifds:
            ifd.offset = offset
            offset += ifd.size()

        chain = [ifd for ifd in self.ifds if ifd.chained]
        next_offsets = { }

        for this_ifd, next_ifd in zip(chain, chain[1:]):
            next_offsets[id(this_ifd)] = next_ifd.offset

        body = b""
        values = b""

        for ifd in self.ifds:
            body += self.u16s(len(ifd.entries))

            for code, field_type, count, data in ifd.entries:
                if isinstance(data, IFDBuilder):
                    field = self.u32s(data.offset)

                elif isinstance(data, RawField):
                    field = data.field

                elif len(data) <= 4:
                    field = data.ljust(4, b"\0")

                else:
                    field = self.u32s(offset + len(values))
                    values += data

                    if len(values) % 2:
                        # Keep values on word boundaries.
                        values += b"\0"

                body += self.u16s(code, field_type) + self.u32s(count) \
                        + field

            body += self.u32s(next_offsets.get(id(ifd), 0))

        first_offset = chain[0].offset if chain else 0

        return self.marker + self.u16s(42) + self.u32s(first_offset) \
                + body + values

def segment (marker, payload):
    return bytes((0xff, marker)) \
            + int_to_bytes(len(payload) + 2, 2, "big") + payload

def app1_exif (tiff):
    return segment(0xe1, b"Exif\0\0" + tiff)

def start_of_scan ():
    return segment(0xda, b"\x00\x0c\x03\x01\x00\x02\x11\x03\x11\x00\x3f") \
            + b"\x12\x34\x56\xff\xd9"

def jpeg (*segments):
    return b"\xff\xd8" + b"".join(segments)

def chunk (chunk_type, data):
    return int_to_bytes(len(data), 4, "big") + chunk_type + data \
            + int_to_bytes(crc32(chunk_type + data), 4, "big")

def png_header (width = 1, height = 1):
    return chunk(b"IHDR", int_to_bytes(width, 4, "big")
                          + int_to_bytes(height, 4, "big")
                          + b"\x08\x02\x00\x00\x00")

def png (*chunks):
    return b"\x89PNG\r\n\x1a\n" + b"".join(chunks) + chunk(b"IEND", b"")

def camera_tiff (byte_order = "little"):
    """Build a small, realistic TIFF block.

    IFD0 has Make, Model, XResolution, ResolutionUnit, and a pointer to
    an Exif IFD with ExposureTime, FNumber, ISO, and ExifVersion.
    """
    tiff = TiffBuilder(byte_order)
    ifd0 = tiff.add_ifd()
    exif = tiff.add_ifd(chained = False)

    ifd0.add(0x010f, 2, 6, b"Canon\0")
    ifd0.add(0x0110, 2, 4, b"EOS\0")
    ifd0.add(0x011a, 5, 1, tiff.rationals((72, 1)))
    ifd0.add(0x0128, 3, 1, tiff.u16s(2))
    ifd0.add_pointer(0x8769, exif)

    exif.add(0x829a, 5, 1, tiff.rationals((1, 250)))
    exif.add(0x829d, 5, 1, tiff.rationals((28, 10)))
    exif.add(0x8827, 3, 1, tiff.u16s(400))
    exif.add(0x9000, 7, 4, b"0231")

    return tiff.build()
