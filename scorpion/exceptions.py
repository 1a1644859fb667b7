# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class ScorpionBaseError (Exception):
    """Root for all Scorpion errors.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Examples:
        For the sake of clarity, all child exceptions default to showing
        the docstring if ever converted to strings.

        >>> class MyScorpionError (ScorpionBaseError):
        ...     '''Quick description of this subclass.'''
        ...     pass
        ...
        >>> raise MyScorpionError
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        MyScorpionError: Quick description of this subclass.

    """

    def __repr__ (self):
        return "{}({})".format(self.__class__.__name__, repr(str(self)))

    def __str__ (self):
        # By default, let's just keep our docstrings short.
        return self.__doc__

class FileReadError (ScorpionBaseError):
    """File Read Error

    Something unexpected has happened while reading a buffer.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Args:
        position (int):     The byte in the buffer.

    Examples:
        >>> short = TruncatedData(256, 4, 2)
        >>> short
        TruncatedData('Unexpected end of data: needed 4 bytes, 2 left. (0x00000100)')
        >>> raise short
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        TruncatedData: Unexpected end of data: needed 4 bytes, 2 left. (0x00000100)

        The message is set by the child class; the output contains an
        eight-digit hexadecimal pointing to the byte in the buffer
        where the problem occurred.

    """

    def __init__ (self, position, *args):
        # All I want to actually take in is a position; the message
        # should be set by the child class.
        self.position   = position
        self.args       = args

    def __str__ (self):
        return "{} (0x{:08x})".format(self.__doc__.format(*(self.args)),
                                      self.position)

class TruncatedData (FileReadError):
    """Unexpected end of data: needed {:d} bytes, {:d} left."""
    pass

class OutOfBounds (TruncatedData):
    """Range [0x{:x}, 0x{:x}) is outside a buffer of {:d} bytes."""
    pass

class ContainerError (FileReadError):
    """Catch-all for image container errors."""
    pass

class UnrecognizedFormat (ContainerError):
    """No known image signature."""
    pass

class UnsupportedFormat (ContainerError):
    """{} images carry no embedded TIFF block."""
    pass

class NoStartOfImage (ContainerError):
    """JPEG data doesn't begin with an SOI marker."""
    pass

class NoMarkerFound (ContainerError):
    """Expected a JPEG marker prefix; found {}."""
    pass

class InvalidSegmentLength (ContainerError):
    """Segment 0x{:02x} claims a length of {:d}, less than its own length field."""
    pass

class ExifNotFound (ContainerError):
    """Reached {} without finding EXIF data."""
    pass

class TiffError (FileReadError):
    """Catch-all for tiff errors."""
    pass

class InvalidByteOrderMarker (TiffError):
    """Unknown byte order: {!r}"""
    pass

class InvalidMagicNumber (TiffError):
    """Wrong magic number: expected {:d}; found {:d}"""
    pass

class UnsupportedFieldType (TiffError):
    """Field type {:d} isn't one I know how to decode."""
    pass

class InvalidAsciiValue (TiffError):
    """ASCII value of {:d} bytes isn't valid UTF-8."""
    pass

class IFDLoop (TiffError):
    """IFD at 0x{:08x} was already read; the IFD chain loops."""
    pass
