# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .byte_order    import  ByteOrder
from .container     import  ContainerFormat, identify_format, find_tiff_header
from .tiff          import  Exif, parse, read_exif

__all__ = [
    "ByteOrder",
    "ContainerFormat",
    "identify_format",
    "find_tiff_header",
    "Exif",
    "parse",
    "read_exif",
]
