# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .exceptions    import  ScorpionBaseError, FileReadError, TruncatedData
from .read          import  ByteOrder, ContainerFormat, identify_format, \
                            find_tiff_header, Exif, parse, read_exif

__all__ = [
    "read",
    "ByteOrder",
    "ContainerFormat",
    "identify_format",
    "find_tiff_header",
    "Exif",
    "parse",
    "read_exif",

    # Exceptions
    "ScorpionBaseError",
    "FileReadError",
    "TruncatedData",
]
