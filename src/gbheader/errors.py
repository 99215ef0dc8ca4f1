class RomLoadError(ValueError):
    """Raised when a ROM image can't be turned into a cartridge header."""


class IoError(RomLoadError):
    """The ROM image can't be read."""

    def __init__(self, filename: str, reason: str):
        RomLoadError.__init__(self, f"Can't read ROM file '{filename}': {reason}")
        self.filename = filename


class FormatError(RomLoadError):
    """The ROM image is too small to contain a header."""

    def __init__(self, size: int, min_size: int):
        RomLoadError.__init__(self, f"ROM image of {size} bytes is smaller than the header ({min_size} bytes)")
        self.size = size


class TextDecodeError(RomLoadError):
    """A text field of the header is not valid text."""

    def __init__(self, field: str, offset: int, reason: str):
        RomLoadError.__init__(self, f"Field '{field}' at 0x{offset:04X} is not valid text: {reason}")
        self.field = field
        self.offset = offset
