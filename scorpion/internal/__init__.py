# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .backways_map  import make_backways_map
from .byte_handlers import int_to_bytes, bytes_to_int, hex_to_bytes, \
                           bytes_to_hex
from .deflatten     import deflatten

__all__ = [
    "make_backways_map",
    "int_to_bytes",
    "bytes_to_int",
    "hex_to_bytes",
    "bytes_to_hex",
    "deflatten",
]
