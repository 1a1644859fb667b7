# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

def int_to_bytes (integer, length, byte_order, signed = False):
    return integer.to_bytes(length, byte_order, signed = signed)

def bytes_to_int (bytestring, byte_order, signed = False):
    return int.from_bytes(bytestring, byte_order, signed = signed)

def hex_to_bytes (hexstring):
    # Whitespace is allowed anywhere between byte pairs, which lets
    # fixtures be laid out in columns.
    return bytes.fromhex(" ".join(hexstring.split()))

def bytes_to_hex (bytestring, separator = " "):
    """Render bytes as spaced hex pairs.

        >>> bytes_to_hex(b"0220")
        '30 32 32 30'
    """
    return separator.join("{:02x}".format(b) for b in bytestring)
