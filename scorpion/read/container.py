# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from logging        import  getLogger

from ..exceptions   import  UnrecognizedFormat, UnsupportedFormat,     \
                            NoStartOfImage, NoMarkerFound,             \
                            InvalidSegmentLength, ExifNotFound
from .buffer_reader import  BufferReader

log = getLogger(__name__)

class ContainerFormat:
    """Image containers by name"""
    JPEG    = "JPEG"
    PNG     = "PNG"
    GIF     = "GIF"
    BMP     = "BMP"

# Magic numbers, longest first. The first one to match wins, so the
# ordering is what makes the longest applicable prefix the match.
ContainerSignatures = (
    (b"\x89PNG\r\n\x1a\n",  ContainerFormat.PNG),
    (b"GIF87a",             ContainerFormat.GIF),
    (b"GIF89a",             ContainerFormat.GIF),
    (b"\xff\xd8\xff",       ContainerFormat.JPEG),
    (b"BM",                 ContainerFormat.BMP),
)

class JpegMarker:
    """JPEG marker types by name"""
    TEM     = 0x01
    RST0    = 0xd0
    RST7    = 0xd7
    SOI     = 0xd8
    EOI     = 0xd9
    SOS     = 0xda
    APP1    = 0xe1

    # This always comes before the marker type.
    prefix  = 0xff

    @classmethod
    def has_length (cls, marker):
        """Check whether a marker is followed by a length field"""
        return not (cls.RST0 <= marker <= cls.RST7 or marker == cls.TEM)

    @classmethod
    def ends_metadata (cls, marker):
        """Check whether a marker means no more metadata can follow"""
        return marker in (cls.EOI, cls.SOS)

# EXIF in a JPEG lives in an APP1 segment that opens with this.
EXIF_HEADER         = b"Exif\0\0"
PNG_SIGNATURE       = ContainerSignatures[0][0]
JPEG_SOI            = b"\xff\xd8"

def identify_format (data):
    """Identify an image container from its leading magic bytes.

    Args:
        data (bytes):           The full image file.

    Returns:
        str:                    One of the ContainerFormat values.

    Raises:
        UnrecognizedFormat:     If no signature matches.
    """

    for signature, container_format in ContainerSignatures:
        if data[:len(signature)] == signature:
            return container_format

    raise UnrecognizedFormat(0)

def find_tiff_header (data, container_format = None):
    """Find the TIFF block embedded in an image.

    Args:
        data (bytes):               The full image file.
        container_format (str):     Skip detection and treat the data
                                    as this format.

    Returns:
        bytes:                      Everything from the TIFF byte-order
                                    marker onward. Offsets inside the
                                    TIFF are relative to its start.
    """

    if container_format is None:
        container_format = identify_format(data)

    finder = TiffHeaderFinders.get(container_format)

    if finder is None:
        # GIF and BMP get recognized, but that's as far as it goes.
        raise UnsupportedFormat(0, container_format)

    return finder(BufferReader(data))

def find_tiff_header_in_jpeg (reader):
    """Walk JPEG marker segments until an APP1/Exif segment turns up."""
    if reader.peek(2) != JPEG_SOI:
        reader.error(NoStartOfImage)

    reader.skip(2)

    while True:
        prefix = reader.peek(1)

        if prefix != bytes((JpegMarker.prefix,)):
            # Either we've run out of data or the stream is mangled.
            # Both mean there's no marker where there has to be one.
            reader.error(NoMarkerFound, 0,
                         "0x{:02x}".format(prefix[0]) if prefix
                         else "end of data")

        reader.skip(1)

        if reader.at_end():
            reader.error(NoMarkerFound, 0, "end of data")

        marker = reader.read_u8()

        if JpegMarker.ends_metadata(marker):
            # Once we're at the image data, there won't be any more
            # metadata segments.
            reader.error(ExifNotFound, -2, "marker 0x{:02x}".format(marker))

        if not JpegMarker.has_length(marker):
            continue

        segment_start   = reader.tell() - 2
        length          = reader.read_u16()

        if length < 2:
            # The length counts itself, so it can't be less than two.
            reader.error(InvalidSegmentLength, -2, marker, length)

        if marker == JpegMarker.APP1:
            payload = reader.read(length - 2)

            if payload.startswith(EXIF_HEADER):
                log.debug("Found Exif APP1 segment at 0x%08x",
                          segment_start)
                return payload[len(EXIF_HEADER):]

            log.debug("Skipping non-Exif APP1 segment at 0x%08x",
                      segment_start)

        else:
            log.debug("Skipping segment 0x%02x (%d bytes) at 0x%08x",
                      marker, length, segment_start)
            reader.skip(length - 2)

def find_tiff_header_in_png (reader):
    """Walk PNG chunks until an eXIf chunk turns up."""
    if reader.peek(len(PNG_SIGNATURE)) != PNG_SIGNATURE:
        reader.error(UnrecognizedFormat)

    reader.skip(len(PNG_SIGNATURE))

    while True:
        chunk_start = reader.tell()
        length      = reader.read_u32()
        chunk_type  = reader.read(4)
        chunk_data  = reader.read(length)

        # There's a CRC here. I'm not checking it, but it does have to
        # be there.
        reader.skip(4)

        if chunk_type == b"eXIf":
            log.debug("Found eXIf chunk at 0x%08x", chunk_start)
            return chunk_data

        if chunk_type == b"IEND":
            raise ExifNotFound(chunk_start, "IEND chunk")

        log.debug("Skipping %s chunk (%d bytes) at 0x%08x",
                  chunk_type.decode("latin-1"), length, chunk_start)

TiffHeaderFinders = {
    ContainerFormat.JPEG:   find_tiff_header_in_jpeg,
    ContainerFormat.PNG:    find_tiff_header_in_png,
}
