# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from argparse       import  ArgumentParser
from logging        import  getLogger, basicConfig, DEBUG, WARNING
import sys

from .display       import  describe_byte_order, format_field,         \
                            format_value_for_tag
from .exceptions    import  ScorpionBaseError, ExifNotFound,           \
                            UnrecognizedFormat, UnsupportedFormat
from .file_info     import  FileInfo
from .read.tiff     import  read_exif

log = getLogger(__name__)

SEPARATOR   = "=" * 40

# These mean the image is fine; it just has no Exif for us.
NO_EXIF_ERRORS = (ExifNotFound, UnrecognizedFormat, UnsupportedFormat)

def make_argument_parser ():
    parser = ArgumentParser(
            prog = "scorpion",
            description = "Extract EXIF metadata from image files.")

    parser.add_argument("files", metavar = "FILE", nargs = "+",
                        help = "JPEG or PNG image to read")
    parser.add_argument("-v", "--verbose", action = "store_true",
                        help = "log what the parser is doing")
    parser.add_argument("--lenient", action = "store_true",
                        help = "skip entries whose values point outside "
                               "the Exif block instead of giving up on "
                               "the file")

    return parser

def print_file (path, strict = True, out = None):
    """Print everything we can find out about one file.

    Returns:
        bool:   True unless the file couldn't be read.
    """
    if out is None:
        out = sys.stdout

    try:
        info = FileInfo.from_path(path)

        with open(path, "rb") as image:
            data = image.read()

    except OSError as e:
        log.error("Can't read %s: %s", path, e)
        return False

    for label, text in info.fields():
        print(format_field(label, text), file = out)

    try:
        exif = read_exif(data, strict)

    except NO_EXIF_ERRORS as e:
        log.info("No Exif in %s: %s", path, e)
        return True

    except ScorpionBaseError as e:
        log.error("Can't parse Exif in %s: %s", path, e)
        return False

    print(format_field("Exif Byte Order",
                       describe_byte_order(exif.byte_order)), file = out)

    for ifd in exif:
        for tag, value in ifd.items():
            print(format_field(tag, format_value_for_tag(tag, value)),
                  file = out)

    return True

def main (argv = None, out = None):
    """Run the command line program.

    Returns:
        int:    0 if every file was read, otherwise 1.
    """
    args = make_argument_parser().parse_args(argv)

    basicConfig(level = DEBUG if args.verbose else WARNING,
                format = "%(levelname)s: %(name)s: %(message)s")

    all_read = True

    for i, path in enumerate(args.files):
        if i > 0:
            print(SEPARATOR, file = out)

        if not print_file(path, not args.lenient, out):
            all_read = False

    return 0 if all_read else 1

if __name__ == "__main__":
    sys.exit(main())
