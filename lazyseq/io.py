import gzip
import lzma
import bz2
import builtins

from lazyseq.pipeline import create_sequence


class ReusableFile(object):
    """
    Class which emulates the builtin file except that calling iter() on it will return separate
    iterators on different file handlers (which are automatically closed when iteration stops). This
    is what allows a file backed Sequence to be iterated over multiple times while keeping
    evaluation lazy.
    """

    # pylint: disable=too-many-instance-attributes
    def __init__(
        self,
        path,
        mode="r",
        buffering=-1,
        encoding=None,
        errors=None,
        newline=None,
    ):
        """
        Constructor arguments are passed directly to builtins.open
        :param path: passed to open
        :param mode: passed to open
        :param buffering: passed to open
        :param encoding: passed to open
        :param errors: passed to open
        :param newline: passed to open
        :return: ReusableFile from the arguments
        """
        self.path = path
        self.mode = mode
        self.buffering = buffering
        self.encoding = encoding
        self.errors = errors
        self.newline = newline

    def _open(self):
        return builtins.open(
            self.path,
            mode=self.mode,
            buffering=self.buffering,
            encoding=self.encoding,
            errors=self.errors,
            newline=self.newline,
        )

    def __iter__(self):
        """
        Returns a new iterator over the file using the arguments from the constructor. Each call
        to __iter__ returns a new iterator independent of all others
        :return: iterator over file
        """
        with self._open() as file_content:
            for line in file_content:
                yield line

    def read(self):
        with self._open() as file_content:
            return file_content.read()


class CompressedFile(ReusableFile):
    magic_bytes = None

    def __init__(
        self,
        path,
        mode="rt",
        buffering=-1,
        encoding=None,
        errors=None,
        newline=None,
    ):
        super(CompressedFile, self).__init__(
            path,
            mode=mode,
            buffering=buffering,
            encoding=encoding,
            errors=errors,
            newline=newline,
        )

    @classmethod
    def is_compressed(cls, data):
        return data.startswith(cls.magic_bytes)

    def _text_options(self):
        if "b" in self.mode:
            return {}
        return {"encoding": self.encoding, "errors": self.errors, "newline": self.newline}


class GZFile(CompressedFile):
    magic_bytes = b"\x1f\x8b\x08"

    def _open(self):
        return gzip.open(self.path, mode=self.mode, **self._text_options())


class BZ2File(CompressedFile):
    magic_bytes = b"\x42\x5a\x68"

    def _open(self):
        return bz2.open(self.path, mode=self.mode, **self._text_options())


class XZFile(CompressedFile):
    magic_bytes = b"\xfd\x37\x7a\x58\x5a\x00"

    def _open(self):
        return lzma.open(self.path, mode=self.mode, **self._text_options())


COMPRESSION_CLASSES = [GZFile, BZ2File, XZFile]
N_COMPRESSION_CHECK_BYTES = max(len(cls.magic_bytes) for cls in COMPRESSION_CLASSES)


def get_read_function(filename, disable_compression):
    if disable_compression:
        return ReusableFile
    with open(filename, "rb") as f:
        start_bytes = f.read(N_COMPRESSION_CHECK_BYTES)
        for cls in COMPRESSION_CLASSES:
            if cls.is_compressed(start_bytes):
                return cls
        return ReusableFile


def reusable_file(path, mode="r", encoding=None, errors=None, newline=None, disable_compression=False):
    """
    Picks the ReusableFile class fitting the compression of path.
    :return: ReusableFile or one of its compressed variants
    """
    if "b" not in mode and "t" not in mode:
        mode += "t"
    read_function = get_read_function(path, disable_compression)
    return read_function(path, mode=mode, encoding=encoding, errors=errors, newline=newline)


def open_lines(path, mode="r", encoding=None, errors=None, newline=None, disable_compression=False):
    """
    Sequence of the lines of a file. The file is opened anew each time the sequence is iterated and
    closed once that iteration stops. gzip, bz2 and xz compression is detected from the leading
    bytes of the file unless disable_compression is set.

    :param path: path of the file
    :param mode: text ("r") or binary ("rb") read mode
    :param encoding: passed to open
    :param errors: passed to open
    :param newline: passed to open
    :param disable_compression: read compressed files as they are
    :return: Sequence of lines
    """
    file_content = reusable_file(
        path,
        mode=mode,
        encoding=encoding,
        errors=errors,
        newline=newline,
        disable_compression=disable_compression,
    )
    return create_sequence(file_content.__iter__)
