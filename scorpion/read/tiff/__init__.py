# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .reader    import  TiffHeader, IFDEntry, IFD, Exif, read_tiff_header, \
                        parse, read_exif
from .tags      import  Tag, Directory, TagCategory, lookup_tag,       \
                        is_sub_ifd_pointer, pointer_directory
from .values    import  TiffType, Rational, Value, type_size,          \
                        decode_inline, decode_at_offset, decode_value

__all__ = [
    "TiffHeader",
    "IFDEntry",
    "IFD",
    "Exif",
    "read_tiff_header",
    "parse",
    "read_exif",

    # Tags
    "Tag",
    "Directory",
    "TagCategory",
    "lookup_tag",
    "is_sub_ifd_pointer",
    "pointer_directory",

    # Values
    "TiffType",
    "Rational",
    "Value",
    "type_size",
    "decode_inline",
    "decode_at_offset",
    "decode_value",
]
