"""
Layout of the Game Boy cartridge header.

The header is located at 0x0100..0x014F of the ROM image.

See https://gbdev.io/pandocs/The_Cartridge_Header.html
"""

import enum
import dataclasses


HEADER_OFFSET = 0x0100

HEADER_END = 0x0150

MIN_IMAGE_SIZE = HEADER_END
"""Smallest image which can contain the whole header (336 bytes)."""


class FieldKind(enum.Enum):
    RAW = enum.auto()
    """Bytes kept as they are"""

    TEXT = enum.auto()
    """Fixed-width text, padding included"""

    U8 = enum.auto()
    """Single byte"""

    U16_BIG = enum.auto()
    """16 bits unsigned, high byte first"""


@dataclasses.dataclass(frozen=True)
class FieldDesc:
    offset: int
    length: int
    kind: FieldKind
    label: str

    @property
    def end(self) -> int:
        return self.offset + self.length

    def slice(self, data: bytes) -> bytes:
        return bytes(data[self.offset:self.end])


class HeaderField(enum.Enum):
    ENTRY_POINT = FieldDesc(0x0100, 4, FieldKind.RAW, "Entry point")
    """Usually a `nop` followed by a `jp` to the main program."""

    NINTENDO_LOGO = FieldDesc(0x0104, 48, FieldKind.RAW, "Nintendo logo")
    """Bitmap checked by the boot ROM."""

    TITLE = FieldDesc(0x0134, 11, FieldKind.TEXT, "Title")

    MANUFACTURER_CODE = FieldDesc(0x013F, 4, FieldKind.TEXT, "Manufacturer code")

    CGB_FLAG = FieldDesc(0x0143, 1, FieldKind.U8, "CGB flag")

    NEW_LICENSEE_CODE = FieldDesc(0x0144, 2, FieldKind.TEXT, "New licensee code")
    """Only used when the old licensee code is 0x33."""

    SGB_FLAG = FieldDesc(0x0146, 1, FieldKind.U8, "SGB flag")

    CARTRIDGE_TYPE = FieldDesc(0x0147, 1, FieldKind.U8, "Cartridge type")
    """Mapper and additional hardware."""

    ROM_SIZE_FLAG = FieldDesc(0x0148, 1, FieldKind.U8, "ROM size flag")

    RAM_SIZE_FLAG = FieldDesc(0x0149, 1, FieldKind.U8, "RAM size flag")

    DESTINATION_CODE = FieldDesc(0x014A, 1, FieldKind.U8, "Destination code")

    OLD_LICENSEE_CODE = FieldDesc(0x014B, 1, FieldKind.U8, "Old licensee code")

    MASK_ROM_VERSION_NUMBER = FieldDesc(0x014C, 1, FieldKind.U8, "Mask ROM version number")

    HEADER_CHECKSUM = FieldDesc(0x014D, 1, FieldKind.U8, "Header checksum")

    GLOBAL_CHECKSUM = FieldDesc(0x014E, 2, FieldKind.U16_BIG, "Global checksum")

    @property
    def attribute(self) -> str:
        """Name of the matching `CartridgeHeader` attribute."""
        return self.name.lower()


HEADER_CHECKSUM_RANGE = range(HeaderField.TITLE.value.offset, HeaderField.HEADER_CHECKSUM.value.offset)
"""Bytes covered by the header checksum, 0x0134..0x014C."""

GLOBAL_CHECKSUM_SKIPPED = range(HeaderField.GLOBAL_CHECKSUM.value.offset, HeaderField.GLOBAL_CHECKSUM.value.end)
"""Bytes excluded from the global checksum: the checksum itself."""
