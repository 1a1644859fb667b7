# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple
from re             import  compile as re_compile

from ...internal    import  make_backways_map

class IFDTag:
    """Baseline TIFF tags by name"""
    NewSubfileType              = 0x00fe
    SubfileType                 = 0x00ff

    ImageWidth                  = 0x0100
    ImageLength                 = 0x0101
    BitsPerSample               = 0x0102
    Compression                 = 0x0103
    PhotometricInterpretation   = 0x0106
    Thresholding                = 0x0107

    CellWidth                   = 0x0108
    CellLength                  = 0x0109
    FillOrder                   = 0x010a
    DocumentName                = 0x010d
    ImageDescription            = 0x010e
    Make                        = 0x010f

    Model                       = 0x0110
    StripOffsets                = 0x0111
    Orientation                 = 0x0112
    SamplesPerPixel             = 0x0115
    RowsPerStrip                = 0x0116
    StripByteCounts             = 0x0117

    MinSampleValue              = 0x0118
    MaxSampleValue              = 0x0119
    XResolution                 = 0x011a
    YResolution                 = 0x011b
    PlanarConfiguration         = 0x011c
    PageName                    = 0x011d
    XPosition                   = 0x011e
    YPosition                   = 0x011f

    GrayResponseUnit            = 0x0122
    GrayResponseCurve           = 0x0123
    ResolutionUnit              = 0x0128
    PageNumber                  = 0x0129
    TransferFunction            = 0x012d

    Software                    = 0x0131
    DateTime                    = 0x0132

    Artist                      = 0x013b
    HostComputer                = 0x013c
    Predictor                   = 0x013d
    WhitePoint                  = 0x013e
    PrimaryChromaticities       = 0x013f

    ColorMap                    = 0x0140
    TileWidth                   = 0x0142
    TileLength                  = 0x0143
    TileOffsets                 = 0x0144
    TileByteCounts              = 0x0145

    ExtraSamples                = 0x0152
    SampleFormat                = 0x0153

    JPEGInterchangeFormat       = 0x0201
    JPEGInterchangeFormatLength = 0x0202

    YCbCrCoefficients           = 0x0211
    YCbCrSubSampling            = 0x0212
    YCbCrPositioning            = 0x0213
    ReferenceBlackWhite         = 0x0214

    XMP                         = 0x02bc
    Rating                      = 0x4746
    RatingPercent               = 0x4749
    Copyright                   = 0x8298
    IPTC                        = 0x83bb
    Photoshop                   = 0x8649
    ICCProfile                  = 0x8773

    XPTitle                     = 0x9c9b
    XPComment                   = 0x9c9c
    XPAuthor                    = 0x9c9d
    XPKeywords                  = 0x9c9e
    XPSubject                   = 0x9c9f
    PrintIM                     = 0xc4a5

class IFDPointer:
    """Sub-IFD pointer tags by name"""
    ExifIFD                     = 0x8769
    GPSInfoIFD                  = 0x8825
    InteroperabilityIFD         = 0xa005

class ExifTag:
    """Exif IFD tags by name"""
    ExposureTime                = 0x829a
    FNumber                     = 0x829d
    ExposureProgram             = 0x8822
    SpectralSensitivity         = 0x8824
    ISO                         = 0x8827
    OECF                        = 0x8828
    SensitivityType             = 0x8830
    StandardOutputSensitivity   = 0x8831
    RecommendedExposureIndex    = 0x8832
    ISOSpeed                    = 0x8833

    ExifVersion                 = 0x9000
    DateTimeOriginal            = 0x9003
    DateTimeDigitized           = 0x9004
    OffsetTime                  = 0x9010
    OffsetTimeOriginal          = 0x9011
    OffsetTimeDigitized         = 0x9012
    ComponentsConfiguration     = 0x9101
    CompressedBitsPerPixel      = 0x9102

    ShutterSpeedValue           = 0x9201
    ApertureValue               = 0x9202
    BrightnessValue             = 0x9203
    ExposureBiasValue           = 0x9204
    MaxApertureValue            = 0x9205
    SubjectDistance             = 0x9206
    MeteringMode                = 0x9207
    LightSource                 = 0x9208
    Flash                       = 0x9209
    FocalLength                 = 0x920a
    SubjectArea                 = 0x9214
    MakerNote                   = 0x927c
    UserComment                 = 0x9286

    SubSecTime                  = 0x9290
    SubSecTimeOriginal          = 0x9291
    SubSecTimeDigitized         = 0x9292
    AmbientTemperature          = 0x9400
    Humidity                    = 0x9401
    Pressure                    = 0x9402

    FlashpixVersion             = 0xa000
    ColorSpace                  = 0xa001
    PixelXDimension             = 0xa002
    PixelYDimension             = 0xa003
    RelatedSoundFile            = 0xa004
    FlashEnergy                 = 0xa20b
    SpatialFrequencyResponse    = 0xa20c
    FocalPlaneXResolution       = 0xa20e
    FocalPlaneYResolution       = 0xa20f
    FocalPlaneResolutionUnit    = 0xa210
    SubjectLocation             = 0xa214
    ExposureIndex               = 0xa215
    SensingMethod               = 0xa217

    FileSource                  = 0xa300
    SceneType                   = 0xa301
    CFAPattern                  = 0xa302
    CustomRendered              = 0xa401
    ExposureMode                = 0xa402
    WhiteBalance                = 0xa403
    DigitalZoomRatio            = 0xa404
    FocalLengthIn35mmFormat     = 0xa405
    SceneCaptureType            = 0xa406
    GainControl                 = 0xa407
    Contrast                    = 0xa408
    Saturation                  = 0xa409
    Sharpness                   = 0xa40a
    DeviceSettingDescription    = 0xa40b
    SubjectDistanceRange        = 0xa40c

    ImageUniqueID               = 0xa420
    CameraOwnerName             = 0xa430
    BodySerialNumber            = 0xa431
    LensSpecification           = 0xa432
    LensMake                    = 0xa433
    LensModel                   = 0xa434
    LensSerialNumber            = 0xa435
    CompositeImage              = 0xa460
    Gamma                       = 0xa500
    Padding                     = 0xea1c

class GPSTag:
    """GPS IFD tags by name"""
    GPSVersionID                = 0x0000
    GPSLatitudeRef              = 0x0001
    GPSLatitude                 = 0x0002
    GPSLongitudeRef             = 0x0003
    GPSLongitude                = 0x0004
    GPSAltitudeRef              = 0x0005
    GPSAltitude                 = 0x0006
    GPSTimeStamp                = 0x0007

    GPSSatellites               = 0x0008
    GPSStatus                   = 0x0009
    GPSMeasureMode              = 0x000a
    GPSDOP                      = 0x000b
    GPSSpeedRef                 = 0x000c
    GPSSpeed                    = 0x000d
    GPSTrackRef                 = 0x000e
    GPSTrack                    = 0x000f

    GPSImgDirectionRef          = 0x0010
    GPSImgDirection             = 0x0011
    GPSMapDatum                 = 0x0012
    GPSDestLatitudeRef          = 0x0013
    GPSDestLatitude             = 0x0014
    GPSDestLongitudeRef         = 0x0015
    GPSDestLongitude            = 0x0016
    GPSDestBearingRef           = 0x0017

    GPSDestBearing              = 0x0018
    GPSDestDistanceRef          = 0x0019
    GPSDestDistance             = 0x001a
    GPSProcessingMethod         = 0x001b
    GPSAreaInformation          = 0x001c
    GPSDateStamp                = 0x001d
    GPSDifferential             = 0x001e
    GPSHPositioningError        = 0x001f

class InteropTag:
    """Interoperability IFD tags by name"""
    InteroperabilityIndex       = 0x0001
    InteroperabilityVersion     = 0x0002
    RelatedImageFileFormat      = 0x1000
    RelatedImageWidth           = 0x1001
    RelatedImageLength          = 0x1002

class IFDResolutionUnit:
    """IFDTag.ResolutionUnit values"""
    NoUnit              = 1
    Inch                = 2
    Centimeter          = 3

class TagCategory:
    """Where a tag is defined"""
    TIFF                = "TIFF"
    EXIF                = "Exif"
    GPS                 = "GPS"
    INTEROPERABILITY    = "Interoperability"
    POINTER             = "Pointer"
    UNKNOWN             = "Unknown"

class Directory:
    """IFD kinds, each with its own space of tag codes"""
    IMAGE               = "IFD"
    EXIF                = "ExifIFD"
    GPS                 = "GPS"
    INTEROPERABILITY    = "InteropIFD"

class Tag (namedtuple("Tag", ("code", "name", "label", "category"))):
    """A tag code along with what it means.

        >>> model = lookup_tag(0x0110)
        >>> model
        Tag(0x0110, 'Model', 'Camera Model Name', 'TIFF')
        >>> str(model)
        'Camera Model Name'
    """

    __slots__ = ()

    def __str__ (self):
        return self.label

    def __repr__ (self):
        return "Tag(0x{:04x}, {!r}, {!r}, {!r})".format(*self)

    @property
    def is_sub_ifd_pointer (self):
        return self.category == TagCategory.POINTER

    @property
    def is_known (self):
        return self.category != TagCategory.UNKNOWN

# Most labels just come from splitting the names up, but these read
# better with a little help.
TagLabels = {
    IFDTag.ImageLength:                 "Image Height",
    IFDTag.Model:                       "Camera Model Name",
    IFDTag.DateTime:                    "Modify Date",
    IFDTag.YCbCrSubSampling:            "Y Cb Cr Sub Sampling",
    IFDTag.YCbCrPositioning:            "Y Cb Cr Positioning",
    IFDTag.YCbCrCoefficients:           "Y Cb Cr Coefficients",
    IFDPointer.GPSInfoIFD:              "GPS Info IFD Pointer",
    IFDPointer.ExifIFD:                 "Exif IFD Pointer",
    IFDPointer.InteroperabilityIFD:     "Interoperability IFD Pointer",
    ExifTag.DateTimeOriginal:           "Date/Time Original",
    ExifTag.DateTimeDigitized:          "Create Date",
    ExifTag.ExposureBiasValue:          "Exposure Compensation",
    ExifTag.PixelXDimension:            "Exif Image Width",
    ExifTag.PixelYDimension:            "Exif Image Height",
    ExifTag.FocalLengthIn35mmFormat:    "Focal Length In 35mm Format",
    ExifTag.LensSpecification:          "Lens Info",
    GPSTag.GPSHPositioningError:        "GPS Horizontal Positioning Error",
}

# "GPSDestLatitude" -> "GPS Dest Latitude"
RE_WORD_BOUNDARY = re_compile(r"(?<=[a-z0-9])(?=[A-Z])"
                              r"|(?<=[A-Z])(?=[A-Z][a-z])")

def label_for (code, name):
    if code in TagLabels:
        return TagLabels[code]

    return RE_WORD_BOUNDARY.sub(" ", name)

def build_tag_map (enum_class, category):
    """Make a code-to-Tag dictionary out of a class of tag names."""
    return {code: Tag(code, name, label_for(code, name), category)
            for code, name in make_backways_map(enum_class).items()}

PointerTags         = build_tag_map(IFDPointer, TagCategory.POINTER)

# The main IFDs and the Exif IFD share a code space (cameras aren't
# always careful about which tag goes where), while GPS and
# Interoperability IFDs reuse small codes for their own purposes.
ImageTags           = build_tag_map(IFDTag, TagCategory.TIFF)
ImageTags.update(build_tag_map(ExifTag, TagCategory.EXIF))
ImageTags.update(PointerTags)

TagTables = {
    Directory.IMAGE:            ImageTags,
    Directory.EXIF:             ImageTags,
    Directory.GPS:              dict(PointerTags),
    Directory.INTEROPERABILITY: dict(PointerTags),
}

TagTables[Directory.GPS].update(build_tag_map(GPSTag, TagCategory.GPS))
TagTables[Directory.INTEROPERABILITY].update(
        build_tag_map(InteropTag, TagCategory.INTEROPERABILITY))

# Which directory each pointer leads to.
PointerDirectories = {
    IFDPointer.ExifIFD:             Directory.EXIF,
    IFDPointer.GPSInfoIFD:          Directory.GPS,
    IFDPointer.InteroperabilityIFD: Directory.INTEROPERABILITY,
}

def unknown_tag (code):
    return Tag(code, "Unknown", "Unknown", TagCategory.UNKNOWN)

def lookup_tag (code, directory = Directory.IMAGE):
    """Get the Tag for a code.

    Args:
        code (int):         The 16-bit tag code.
        directory (str):    Which kind of IFD the code was found in.
                            This matters for GPS and Interoperability
                            IFDs, whose codes overlap with each other.

    Returns:
        Tag:                The tag. Codes I don't know come back with
                            an "Unknown" label rather than an error.
    """
    table = TagTables.get(directory, ImageTags)

    try:
        return table[code]

    except KeyError:
        return unknown_tag(code)

def is_sub_ifd_pointer (code):
    return code in PointerDirectories

def pointer_directory (code):
    """Get the kind of IFD a pointer tag leads to (or None)"""
    return PointerDirectories.get(code)
