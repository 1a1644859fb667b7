# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from datetime   import  datetime
from mimetypes  import  guess_type
from os         import  stat as os_stat
from os.path    import  basename, dirname, splitext
from stat       import  filemode

# Container names by lowercase file extension.
FileTypes = {
    "jpg":  "JPEG",
    "jpeg": "JPEG",
    "png":  "PNG",
    "gif":  "GIF",
    "bmp":  "BMP",
}

UNKNOWN_MIME_TYPE   = "application/octet-stream"
TIMESTAMP_FORMAT    = "%Y:%m:%d %H:%M:%S%z"

def format_timestamp (timestamp):
    """Show a POSIX timestamp in local time, with a colon in the offset.

    The result looks like "2024:05:17 09:30:12+02:00".
    """
    text = datetime.fromtimestamp(timestamp).astimezone().strftime(
            TIMESTAMP_FORMAT)

    return text[:-2] + ":" + text[-2:]

class FileInfo:
    """What the filesystem knows about an image.

    Build one with from_path(); everything is read once up front.
    """

    def __init__ (self, file_name, directory, size, modified, accessed,
                  changed, permissions, file_type, file_extension,
                  mime_type):
        self.file_name      = file_name
        self.directory      = directory
        self.size           = size
        self.modified       = modified
        self.accessed       = accessed
        self.changed        = changed
        self.permissions    = permissions
        self.file_type      = file_type
        self.file_extension = file_extension
        self.mime_type      = mime_type

    @classmethod
    def from_path (cls, path):
        """Stat a file.

        Raises:
            OSError:    If the file can't be stat'd.
        """
        status      = os_stat(path)
        extension   = splitext(path)[1][1:].lower()

        return cls(file_name        = basename(path),
                   directory        = dirname(path) or ".",
                   size             = status.st_size,
                   modified         = format_timestamp(status.st_mtime),
                   accessed         = format_timestamp(status.st_atime),
                   changed          = format_timestamp(status.st_ctime),
                   permissions      = filemode(status.st_mode),
                   file_type        = FileTypes.get(extension, "Unknown"),
                   file_extension   = extension,
                   mime_type        = guess_type(path)[0]
                                      or UNKNOWN_MIME_TYPE)

    def format_size (self):
        """Show the size in bytes, kB, or MB.

            >>> FileInfo("a.jpg", ".", 2560, None, None, None, "",
            ...          "JPEG", "jpg", "image/jpeg").format_size()
            '2.5 kB'
        """
        if self.size < 1024:
            return "{:d} bytes".format(self.size)

        if self.size < 1024 * 1024:
            return "{:.1f} kB".format(self.size / 1024)

        return "{:.1f} MB".format(self.size / (1024 * 1024))

    def fields (self):
        """Iterate over (label, text) pairs for display."""
        yield "File Name",                      self.file_name
        yield "Directory",                      self.directory
        yield "File Size",                      self.format_size()
        yield "File Modification Date/Time",    self.modified
        yield "File Access Date/Time",          self.accessed
        yield "File Inode Change Date/Time",    self.changed
        yield "File Permissions",               self.permissions
        yield "File Type",                      self.file_type
        yield "File Type Extension",            self.file_extension
        yield "MIME Type",                      self.mime_type

    def __repr__ (self):
        return "<{} {!r}>".format(self.__class__.__name__, self.file_name)
