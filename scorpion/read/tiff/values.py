# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple
from fractions      import  Fraction

from ...exceptions  import  UnsupportedFieldType, InvalidAsciiValue,   \
                            OutOfBounds
from ...internal    import  bytes_to_hex, deflatten

# This is kinda an enumeration of TIFF data types.
class TiffType:
    """IFD value types by name"""
    # Everything really should be one of these five types.
    BYTE        = 1
    ASCII       = 2
    SHORT       = 3
    LONG        = 4
    RATIONAL    = 5

    # But each of these is also possible.
    SBYTE       = 6
    UNDEFINED   = 7
    SSHORT      = 8
    SLONG       = 9
    SRATIONAL   = 10
    FLOAT       = 11
    DOUBLE      = 12

# Whatever fits in an entry's own value field is stored there.
INLINE_SIZE     = 4

class Rational (namedtuple("Rational", ("numerator", "denominator"))):
    """Unreduced TIFF rational.

    A Fraction would reduce 2/4 to 1/2, and we want to show what's
    actually stored.

        >>> str(Rational(72, 1))
        '72'
        >>> str(Rational(2, 4))
        '2/4'
        >>> float(Rational(1, 4))
        0.25
    """

    __slots__ = ()

    def __str__ (self):
        if self.denominator == 1:
            return str(self.numerator)

        return "{:d}/{:d}".format(self.numerator, self.denominator)

    def __float__ (self):
        return float(self.as_fraction())

    def as_fraction (self):
        """Convert to a Fraction (ZeroDivisionError if there's no
        denominator)"""
        return Fraction(self.numerator, self.denominator)

class Value:
    """Decoded IFD value.

    Every value is a sequence of elements of a single kind. Subclasses
    pin down the kind (and with it the TIFF field type), how many bytes
    each element takes, and how elements are shown.

    One element displays as a scalar; more than one displays as a list
    joined by the class's separator.
    """

    field_type      = None
    element_size    = None
    signed          = False
    separator       = " "

    def __init__ (self, elements):
        self.elements = tuple(elements)

    @classmethod
    def from_bytes (cls, data, count, byte_order, strict = True):
        """Decode `count` elements from the front of data."""
        elements = [ ]

        for i in range(count):
            element, data = byte_order.take(data, cls.element_size,
                                            cls.signed)
            elements.append(element)

        return cls(elements)

    def __len__ (self):
        return len(self.elements)

    def __iter__ (self):
        return iter(self.elements)

    def __getitem__ (self, key):
        return self.elements[key]

    def __eq__ (self, other):
        if not isinstance(other, Value):
            return NotImplemented

        return type(self) is type(other) and \
                self.elements == other.elements

    def __hash__ (self):
        return hash((type(self), self.elements))

    def __repr__ (self):
        return "<{} {!r}>".format(self.__class__.__name__,
                                  list(self.elements))

    def __str__ (self):
        if len(self.elements) == 1:
            return self.render(self.elements[0])

        return self.render_list(self.elements)

    def render (self, element):
        return str(element)

    def render_list (self, elements):
        return self.separator.join(self.render(e) for e in elements)

class ByteValue (Value):
    field_type      = TiffType.BYTE
    element_size    = 1

    def render_list (self, elements):
        return "[{}]".format(", ".join(self.render(e) for e in elements))

class SignedByteValue (ByteValue):
    field_type      = TiffType.SBYTE
    signed          = True

class AsciiValue (Value):
    """ASCII text.

    This holds one element: the text, with trailing NULs trimmed. Text
    stored inline is decoded leniently (bad bytes get replaced), while
    text stored at an offset has to be valid UTF-8 or it's rejected.
    """

    field_type      = TiffType.ASCII
    element_size    = 1

    def __init__ (self, elements):
        if isinstance(elements, str):
            elements = (elements,)

        super().__init__(elements)

    @classmethod
    def from_bytes (cls, data, count, byte_order, strict = True):
        raw = data[:count]

        try:
            text = raw.decode("utf-8", "strict" if strict else "replace")

        except UnicodeDecodeError:
            raise InvalidAsciiValue(0, len(raw))

        return cls(text.rstrip("\0"))

    @property
    def text (self):
        return self.elements[0] if self.elements else ""

    def __str__ (self):
        return self.text

class ShortValue (Value):
    field_type      = TiffType.SHORT
    element_size    = 2

class SignedShortValue (ShortValue):
    field_type      = TiffType.SSHORT
    signed          = True

class LongValue (Value):
    field_type      = TiffType.LONG
    element_size    = 4

class SignedLongValue (LongValue):
    field_type      = TiffType.SLONG
    signed          = True

class RationalValue (Value):
    field_type      = TiffType.RATIONAL
    element_size    = 8
    separator       = ", "

    @classmethod
    def from_bytes (cls, data, count, byte_order, strict = True):
        # Numerators and denominators alternate, so read twice as many
        # 32-bit ints and pair them up.
        halves = (SignedLongValue if cls.signed else LongValue).from_bytes(
                data, 2 * count, byte_order)

        return cls(Rational(n, d) for n, d in deflatten(halves))

class SignedRationalValue (RationalValue):
    field_type      = TiffType.SRATIONAL
    signed          = True

class RawValue (Value):
    """Undefined bytes.

    Maker notes, version strings and other opaque blobs end up here.
    They're kept as-is and shown as hex.
    """

    field_type      = TiffType.UNDEFINED
    element_size    = 1

    def __init__ (self, elements):
        super().__init__(bytes(elements))

    @classmethod
    def from_bytes (cls, data, count, byte_order, strict = True):
        return cls(data[:count])

    @property
    def raw (self):
        return bytes(self.elements)

    def __str__ (self):
        return bytes_to_hex(self.elements)

# Here's the type code for each value class.
ValueClasses = { }

for kind in (ByteValue, AsciiValue, ShortValue, LongValue, RationalValue,
             SignedByteValue, RawValue, SignedShortValue, SignedLongValue,
             SignedRationalValue):
    ValueClasses[kind.field_type] = kind

def value_class (field_type, position = 0):
    try:
        return ValueClasses[field_type]

    except KeyError:
        raise UnsupportedFieldType(position, field_type)

def type_size (field_type, position = 0):
    """Get the byte width of one element of a field type.

    Raises:
        UnsupportedFieldType:   If I don't know the type.
    """
    return value_class(field_type, position).element_size

def is_inline (count, field_type, position = 0):
    """Check whether a value fits in its entry's own 4-byte field"""
    return count * type_size(field_type, position) <= INLINE_SIZE

def decode_inline (raw, count, field_type, byte_order, position = 0):
    """Decode a value stored in an entry's 4-byte value field.

    The field is reinterpreted as `count` elements in stored byte
    order. ASCII decoding here is lossy.
    """
    return value_class(field_type, position).from_bytes(
            raw, count, byte_order, strict = False)

def decode_at_offset (data, offset, count, field_type, byte_order):
    """Decode a value stored elsewhere in the TIFF.

    Args:
        data (bytes):           The whole TIFF, starting at its header.
        offset (int):           Where the value starts.
        count (int):            How many elements to read.
        field_type (int):       The TIFF field type.
        byte_order (ByteOrder): How to read ints.

    Raises:
        UnsupportedFieldType:   If I don't know the type.
        OutOfBounds:            If the value runs outside the data.
        InvalidAsciiValue:      If ASCII bytes aren't valid UTF-8.
    """
    cls     = value_class(field_type, offset)
    stop    = offset + count * cls.element_size

    if stop > len(data):
        raise OutOfBounds(offset, offset, stop, len(data))

    try:
        return cls.from_bytes(data[offset:stop], count, byte_order,
                              strict = True)

    except InvalidAsciiValue as e:
        # Point at where the text actually is.
        e.position = offset
        raise

def decode_value (data, raw, count, field_type, byte_order, position = 0):
    """Decode an entry's value, inline or offset-addressed as needed.

    Args:
        data (bytes):           The whole TIFF, starting at its header.
        raw (bytes):            The entry's 4-byte value field.
        count (int):            How many elements there are.
        field_type (int):       The TIFF field type.
        byte_order (ByteOrder): How to read ints.
        position (int):         Where the entry is, for errors.
    """
    if is_inline(count, field_type, position):
        return decode_inline(raw, count, field_type, byte_order, position)

    offset = byte_order.u32(raw)[0]
    return decode_at_offset(data, offset, count, field_type, byte_order)
