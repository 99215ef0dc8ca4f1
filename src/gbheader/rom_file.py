import logging

from .errors import IoError
from .header import CartridgeHeader


def read_file(filename: str) -> bytes:
    """
    Read the whole ROM image.

    Raises:
        IoError: If the file can't be read.
    """
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as e:
        raise IoError(filename, e.strerror or str(e)) from e
    logging.debug("Read %d bytes from '%s'", len(data), filename)
    return data


def load_file(filename: str, encoding: str = "utf-8") -> CartridgeHeader:
    """
    Read a ROM file and extract its header.

    Raises:
        IoError: If the file can't be read.
        FormatError: If the file is too small to contain a header.
        TextDecodeError: If a text field can't be decoded.
    """
    data = read_file(filename)
    return CartridgeHeader.parse(data, encoding)
