# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .read.tiff.tags    import  IFDTag, ExifTag, GPSTag, IFDResolutionUnit, \
                                TagCategory
from .read.tiff.values  import  ShortValue, RationalValue

# Labels get padded out to this many columns.
LABEL_WIDTH     = 32

ResolutionUnitNames = {
    IFDResolutionUnit.NoUnit:       "None",
    IFDResolutionUnit.Inch:         "inches",
    IFDResolutionUnit.Centimeter:   "cm",
}

def format_resolution_unit (value):
    if type(value) is ShortValue and len(value) == 1:
        return ResolutionUnitNames.get(value[0], str(value))

    return str(value)

def format_coordinate (value):
    """Show a GPS latitude or longitude in degrees, minutes, seconds.

        >>> from scorpion.read.tiff.values import Rational
        >>> format_coordinate(RationalValue((Rational(40, 1),
        ...                                  Rational(26, 1),
        ...                                  Rational(4632, 100))))
        '40 deg 26\\' 46.32"'

    Anything other than three rationals is shown as-is.
    """
    if type(value) is not RationalValue or len(value) != 3:
        return str(value)

    try:
        degrees, minutes, seconds = (float(r) for r in value)

    except ZeroDivisionError:
        return str(value)

    return "{:d} deg {:d}' {:.2f}\"".format(int(degrees), int(minutes),
                                            seconds)

# Tags that read better with a little interpretation. GPS codes overlap
# with Interoperability codes, so these are keyed on category too.
TagFormatters = {
    (TagCategory.TIFF, IFDTag.ResolutionUnit):
            format_resolution_unit,
    (TagCategory.EXIF, ExifTag.FocalPlaneResolutionUnit):
            format_resolution_unit,
    (TagCategory.GPS, GPSTag.GPSLatitude):
            format_coordinate,
    (TagCategory.GPS, GPSTag.GPSLongitude):
            format_coordinate,
}

def format_value_for_tag (tag, value):
    """Render a value the way a person would want to read it.

    Args:
        tag (Tag):      The tag the value belongs to.
        value (Value):  The decoded value.

    Returns:
        str:            The text to show.
    """
    formatter = TagFormatters.get((tag.category, tag.code), str)
    return formatter(value)

def describe_byte_order (byte_order):
    if byte_order.is_little_endian:
        return "Little-endian (Intel, II)"

    return "Big-endian (Motorola, MM)"

def format_field (label, text):
    """Line up a label and its text.

        >>> format_field("Make", "Canon")
        'Make                            : Canon'
    """
    return "{:<{width}}: {}".format(str(label), text, width = LABEL_WIDTH)
