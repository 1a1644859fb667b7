# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
import unittest

from scorpion.exceptions import InvalidByteOrderMarker,             \
                                InvalidMagicNumber, TruncatedData,  \
                                OutOfBounds, IFDLoop, ExifNotFound
from scorpion.internal import hex_to_bytes
from scorpion.read.byte_order import ByteOrder
from scorpion.read.tiff import Exif, Directory, TiffType,           \
                               read_tiff_header, parse, read_exif
from .builders import TiffBuilder, camera_tiff, jpeg, app1_exif,   \
                      start_of_scan, png, png_header, chunk
from .matchers import an_entry, an_ifd, evaluates_to

def shown_values (ifd):
    return [str(value) for tag, value in ifd.items()]

class TiffHeaderTest (unittest.TestCase):

    def test_intel_header (self):
        header = read_tiff_header(hex_to_bytes("49 49 2a 00 08 00 00 00"))

        assert_that(header.byte_order, is_(equal_to(ByteOrder.LITTLE)))
        assert_that(header.magic, is_(equal_to(42)))
        assert_that(header.first_ifd_offset, is_(equal_to(8)))

    def test_motorola_header (self):
        header = read_tiff_header(hex_to_bytes("4d 4d 00 2a 00 00 01 00"))

        assert_that(header.byte_order, is_(equal_to(ByteOrder.BIG)))
        assert_that(header.first_ifd_offset, is_(equal_to(256)))

    def test_bad_byte_order (self):
        assert_that(calling(read_tiff_header).with_args(
                            hex_to_bytes("49 4d 2a 00 08 00 00 00")),
                    raises(InvalidByteOrderMarker, matching =
                           has_properties(position = 0)))

    def test_bad_magic_number (self):
        assert_that(calling(read_tiff_header).with_args(
                            hex_to_bytes("49 49 2b 00 08 00 00 00")),
                    raises(InvalidMagicNumber, matching =
                           has_properties(position = 2)))

        # Magic numbers have to be read in the right byte order too.
        assert_that(calling(read_tiff_header).with_args(
                            hex_to_bytes("4d 4d 2a 00 00 00 00 08")),
                    raises(InvalidMagicNumber))

    def test_short_headers (self):
        for hex_header in ("", "49", "49 49 2a", "49 49 2a 00 08 00"):
            assert_that(calling(read_tiff_header).with_args(
                                hex_to_bytes(hex_header)),
                        raises(TruncatedData))

class GivenLittleEndianCameraTiff (unittest.TestCase):

    byte_order = "little"

    def setUp (self):
        self.exif = Exif(camera_tiff(self.byte_order))

    def test_exif_ifd_comes_before_ifd0 (self):
        assert_that(self.exif, contains_exactly(
                an_ifd(Directory.EXIF, "ExposureTime", "FNumber", "ISO",
                       "ExifVersion"),
                an_ifd(Directory.IMAGE, "Make", "Model", "XResolution",
                       "ResolutionUnit")))

    def test_values (self):
        assert_that(self.exif[0], contains_exactly(
                an_entry("ExposureTime",    "1/250"),
                an_entry("FNumber",         "28/10"),
                an_entry("ISO",             "400"),
                an_entry("ExifVersion",     "30 32 33 31")))
        assert_that(self.exif[1], contains_exactly(
                an_entry("Make",            "Canon"),
                an_entry("Model",           "EOS"),
                an_entry("XResolution",     "72"),
                an_entry("ResolutionUnit",  "2")))

    def test_byte_order (self):
        assert_that(self.exif.byte_order.name,
                    is_(equal_to(self.byte_order)))
        assert_that(self.exif.header.magic, is_(equal_to(42)))

    def test_pointer_entry_is_left_out (self):
        for ifd in self.exif:
            for tag, value in ifd.items():
                assert_that(tag.is_sub_ifd_pointer, is_(equal_to(False)))

    def test_entries_know_where_they_came_from (self):
        ifd0 = self.exif[1]

        assert_that(ifd0.offset, is_(equal_to(8)))
        assert_that(self.exif[0].offset, is_(equal_to(74)))

        # Make didn't fit in its entry; Model did.
        assert_that(ifd0[0].position, is_(equal_to(10)))
        assert_that(ifd0[0].offset, is_(equal_to(128)))
        assert_that(ifd0[0].field_type, is_(equal_to(TiffType.ASCII)))
        assert_that(ifd0[0].count, is_(equal_to(6)))
        assert_that(ifd0[1].offset, is_(none()))

    def test_ifds_can_look_up_codes (self):
        assert_that(self.exif[1].get(0x010f), is_(equal_to(
                self.exif[1][0].value)))
        assert_that(self.exif[1].get(0x829a), is_(none()))

    def test_parse_gives_the_same_list (self):
        ifds = parse(camera_tiff(self.byte_order))

        assert_that(ifds, has_length(2))
        assert_that([ifd.directory for ifd in ifds],
                    is_(equal_to([Directory.EXIF, Directory.IMAGE])))

class GivenBigEndianCameraTiff (GivenLittleEndianCameraTiff):

    byte_order = "big"

class GivenEveryFieldTypeLittleEndian (unittest.TestCase):

    byte_order = "little"

    def setUp (self):
        tiff = TiffBuilder(self.byte_order)
        ifd = tiff.add_ifd()

        ifd.add(0xc001, TiffType.BYTE, 3, tiff.ints(1, [1, 2, 3]))
        ifd.add(0xc002, TiffType.BYTE, 6, tiff.ints(1, range(1, 7)))
        ifd.add(0xc003, TiffType.ASCII, 3, b"ab\0")
        ifd.add(0xc004, TiffType.ASCII, 6, b"Hello\0")
        ifd.add(0xc005, TiffType.SHORT, 2, tiff.u16s(640, 480))
        ifd.add(0xc006, TiffType.SHORT, 3, tiff.u16s(1, 2, 3))
        ifd.add(0xc007, TiffType.LONG, 1, tiff.u32s(70000))
        ifd.add(0xc008, TiffType.LONG, 2, tiff.u32s(70000, 80000))
        ifd.add(0xc009, TiffType.RATIONAL, 1, tiff.rationals((1, 3)))
        ifd.add(0xc00a, TiffType.RATIONAL, 2,
                tiff.rationals((72, 1), (5, 2)))
        ifd.add(0xc00b, TiffType.SBYTE, 1, tiff.ints(1, [-5], True))
        ifd.add(0xc00c, TiffType.UNDEFINED, 4, b"0220")
        ifd.add(0xc00d, TiffType.UNDEFINED, 6, b"\x00\x01\x02\xfd\xfe\xff")
        ifd.add(0xc00e, TiffType.SSHORT, 2, tiff.i16s(-300, 300))
        ifd.add(0xc00f, TiffType.SLONG, 1, tiff.i32s(-70000))
        ifd.add(0xc010, TiffType.SRATIONAL, 1, tiff.srationals((-1, 3)))

        self.ifds = parse(tiff.build())

    def test_one_ifd (self):
        assert_that(self.ifds, has_length(1))

    def test_every_value (self):
        assert_that(shown_values(self.ifds[0]), is_(equal_to([
                "[1, 2, 3]",
                "[1, 2, 3, 4, 5, 6]",
                "ab",
                "Hello",
                "640 480",
                "1 2 3",
                "70000",
                "70000 80000",
                "1/3",
                "72, 5/2",
                "-5",
                "30 32 32 30",
                "00 01 02 fd fe ff",
                "-300 300",
                "-70000",
                "-1/3"])))

    def test_unknown_tags_are_kept (self):
        for tag, value in self.ifds[0].items():
            assert_that(tag, has_property("label", "Unknown"))

class GivenEveryFieldTypeBigEndian (GivenEveryFieldTypeLittleEndian):

    byte_order = "big"

class GivenChainedIFDs (unittest.TestCase):

    def setUp (self):
        self.tiff = TiffBuilder("big")
        self.ifd0 = self.tiff.add_ifd()
        self.ifd1 = self.tiff.add_ifd()

        self.ifd0.add(0x0100, TiffType.LONG, 1, self.tiff.u32s(4000))
        self.ifd1.add(0x0100, TiffType.LONG, 1, self.tiff.u32s(160))

    def test_chain_is_followed_in_order (self):
        exif = Exif(self.tiff.build())

        assert_that(exif, contains_exactly(
                an_ifd(Directory.IMAGE, "ImageWidth"),
                an_ifd(Directory.IMAGE, "ImageWidth")))
        assert_that(shown_values(exif[0]), is_(equal_to(["4000"])))
        assert_that(shown_values(exif[1]), is_(equal_to(["160"])))

    def test_sub_ifds_come_right_before_their_owner (self):
        exif_ifd = self.tiff.add_ifd(chained = False)
        exif_ifd.add(0x8827, TiffType.SHORT, 1, self.tiff.u16s(100))
        self.ifd1.add_pointer(0x8769, exif_ifd)

        assert_that(Exif(self.tiff.build()), contains_exactly(
                an_ifd(Directory.IMAGE, "ImageWidth"),
                an_ifd(Directory.EXIF, "ISO"),
                an_ifd(Directory.IMAGE, "ImageWidth")))

class GivenSubIFDs (unittest.TestCase):

    def setUp (self):
        self.tiff = TiffBuilder("little")
        self.ifd0 = self.tiff.add_ifd()
        self.exif_ifd = self.tiff.add_ifd(chained = False)
        self.gps_ifd = self.tiff.add_ifd(chained = False)

        self.ifd0.add(0x010f, TiffType.ASCII, 4, b"Sony")
        self.ifd0.add_pointer(0x8769, self.exif_ifd)
        self.ifd0.add_pointer(0x8825, self.gps_ifd)

        self.exif_ifd.add(0x9204, TiffType.SRATIONAL, 1,
                          self.tiff.srationals((-2, 3)))

        self.gps_ifd.add(0x0001, TiffType.ASCII, 2, b"N\0")
        self.gps_ifd.add(0x0002, TiffType.RATIONAL, 3,
                         self.tiff.rationals((40, 1), (26, 1), (4632, 100)))

    def test_pointers_are_followed_in_order (self):
        exif = Exif(self.tiff.build())

        assert_that(exif, contains_exactly(
                an_ifd(Directory.EXIF, "ExposureBiasValue"),
                an_ifd(Directory.GPS, "GPSLatitudeRef", "GPSLatitude"),
                an_ifd(Directory.IMAGE, "Make")))

    def test_gps_values (self):
        gps = Exif(self.tiff.build())[1]

        assert_that(gps, contains_exactly(
                an_entry("GPSLatitudeRef",  "N"),
                an_entry("GPSLatitude",     "40, 26, 4632/100")))

    def test_pointers_in_sub_ifds_are_not_followed (self):
        interop_ifd = self.tiff.add_ifd(chained = False)
        interop_ifd.add(0x0001, TiffType.ASCII, 4, b"R98\0")
        self.exif_ifd.add_pointer(0xa005, interop_ifd)

        exif = Exif(self.tiff.build())

        assert_that(exif, has_length(3))
        assert_that(exif[0], contains_exactly(
                an_entry("ExposureBiasValue", "-2/3")))

    def test_pointers_must_be_single_longs (self):
        tiff = TiffBuilder("little")
        ifd0 = tiff.add_ifd()
        ifd0.add(0x8769, TiffType.SHORT, 1, tiff.u16s(26))
        ifd0.add(0x0100, TiffType.SHORT, 1, tiff.u16s(1))

        with self.assertLogs("scorpion.read.tiff.reader", "WARNING"):
            exif = Exif(tiff.build())

        assert_that(exif, contains_exactly(
                an_ifd(Directory.IMAGE, "ImageWidth")))

    def test_sub_ifds_must_be_inside_the_data (self):
        tiff = TiffBuilder("little")
        tiff.add_ifd().add(0x8769, TiffType.LONG, 1, tiff.u32s(0x1000))

        for strict in (True, False):
            assert_that(calling(Exif).with_args(tiff.build(), strict),
                        raises(TruncatedData))

    def test_sub_ifds_need_their_next_offset (self):
        # The Exif IFD at 0x1a has one entry and then the data stops.
        data = hex_to_bytes("""49 49 2a 00 08 00 00 00
                               01 00
                               69 87 04 00 01 00 00 00 1a 00 00 00
                               00 00 00 00
                               01 00
                               27 88 03 00 01 00 00 00 90 01 00 00""")

        for strict in (True, False):
            assert_that(calling(Exif).with_args(data, strict),
                        raises(TruncatedData, matching = has_properties(
                                position = 40)))

        assert_that(Exif(data + b"\0\0\0\0"), contains_exactly(
                an_ifd(Directory.EXIF, "ISO"),
                an_ifd(Directory.IMAGE)))

class GivenBrokenEntries (unittest.TestCase):

    def setUp (self):
        self.tiff = TiffBuilder("little")
        self.ifd0 = self.tiff.add_ifd()

        self.ifd0.add(0x0100, TiffType.SHORT, 1, self.tiff.u16s(640))

    def build_with (self, code, field_type, count, field):
        self.ifd0.add_raw(code, field_type, count, field)
        self.ifd0.add(0x0101, TiffType.SHORT, 1, self.tiff.u16s(480))

        return self.tiff.build()

    def test_unknown_field_types_only_cost_their_entry (self):
        for field_type in (TiffType.FLOAT, TiffType.DOUBLE, 0, 13):
            self.setUp()
            data = self.build_with(0x0131, field_type, 1, b"\0\0\0\0")

            with self.assertLogs("scorpion.read.tiff.reader", "WARNING"):
                exif = Exif(data)

            assert_that(exif, contains_exactly(
                    an_ifd(Directory.IMAGE, "ImageWidth", "ImageLength")))

    def test_invalid_offset_text_only_costs_its_entry (self):
        self.ifd0.add(0x010e, TiffType.ASCII, 6, b"\xff\xfe\xfd\xfc\xfb\0")
        self.ifd0.add(0x0101, TiffType.SHORT, 1, self.tiff.u16s(480))

        with self.assertLogs("scorpion.read.tiff.reader", "WARNING") as log:
            exif = Exif(self.tiff.build())

        assert_that(exif[0], contains_exactly(
                an_entry("ImageWidth",  "640"),
                an_entry("ImageLength", "480")))
        assert_that(log.output[0], contains_string("Image Description"))

    def test_strict_parsing_fails_on_bad_offsets (self):
        data = self.build_with(0x010f, TiffType.ASCII, 10,
                               b"\x00\x10\x00\x00")

        assert_that(calling(Exif).with_args(data),
                    raises(OutOfBounds, matching = has_properties(
                            position = 0x1000)))

    def test_lenient_parsing_drops_bad_offsets (self):
        data = self.build_with(0x010f, TiffType.ASCII, 10,
                               b"\x00\x10\x00\x00")

        with self.assertLogs("scorpion.read.tiff.reader", "WARNING"):
            exif = Exif(data, strict = False)

        assert_that(exif[0], contains_exactly(
                an_entry("ImageWidth",  "640"),
                an_entry("ImageLength", "480")))

    def test_huge_counts_are_out_of_bounds (self):
        data = self.build_with(0x0111, TiffType.LONG, 0xffffffff,
                               b"\x08\x00\x00\x00")

        assert_that(calling(Exif).with_args(data), raises(OutOfBounds))

    def test_truncated_entry_tables_always_fail (self):
        data = self.tiff.build()

        for strict in (True, False):
            assert_that(calling(Exif).with_args(data[:-6], strict),
                        raises(TruncatedData))

class IFDChainEdgeTest (unittest.TestCase):

    def test_no_ifds (self):
        exif = Exif(hex_to_bytes("49 49 2a 00 00 00 00 00"))

        assert_that(exif, has_length(0))
        assert_that(exif, evaluates_to(False))

    def test_empty_ifd (self):
        exif = Exif(hex_to_bytes("""4d 4d 00 2a 00 00 00 08
                                    00 00
                                    00 00 00 00"""))

        assert_that(exif, contains_exactly(an_ifd(Directory.IMAGE)))

    def test_first_ifd_outside_the_data (self):
        assert_that(calling(Exif).with_args(
                            hex_to_bytes("49 49 2a 00 00 01 00 00")),
                    raises(TruncatedData))

    def test_missing_next_offset (self):
        assert_that(calling(Exif).with_args(
                            hex_to_bytes("49 49 2a 00 08 00 00 00 00 00")),
                    raises(TruncatedData))

    def test_looping_chains_are_caught (self):
        data = hex_to_bytes("""49 49 2a 00 08 00 00 00
                               01 00
                               00 01 03 00 01 00 00 00 10 00 00 00
                               08 00 00 00""")

        assert_that(calling(Exif).with_args(data),
                    raises(IFDLoop, matching = has_properties(
                            position = 22)))

class ReadExifTest (unittest.TestCase):

    def test_from_jpeg (self):
        exif = read_exif(jpeg(app1_exif(camera_tiff("big")),
                              start_of_scan()))

        assert_that(exif, has_length(2))
        assert_that(exif.byte_order, is_(equal_to(ByteOrder.BIG)))

    def test_from_png (self):
        exif = read_exif(png(png_header(),
                             chunk(b"eXIf", camera_tiff("little"))))

        assert_that(exif[1], has_item(an_entry("Make", "Canon")))

    def test_without_exif (self):
        assert_that(calling(read_exif).with_args(jpeg(start_of_scan())),
                    raises(ExifNotFound))

    def test_class_attributes_configure_the_header (self):
        class PickyExif (Exif):
            expected_byte_orders = {b"MM": "big"}

        assert_that(calling(PickyExif).with_args(camera_tiff("little")),
                    raises(InvalidByteOrderMarker))
        assert_that(PickyExif(camera_tiff("big")), has_length(2))
