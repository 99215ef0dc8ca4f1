import typing

from . import checksum
from . import logo
from . import model
from .errors import FormatError, TextDecodeError
from .layout import HeaderField, FieldKind, MIN_IMAGE_SIZE, HEADER_OFFSET


def _as_struct(data: bytes, base: int, description: list[tuple[int, str]]) -> list[tuple[int, bytes, str]]:
    pos = base
    result: list[tuple[int, bytes, str]] = []
    for desc in description:
        d = data[pos:pos + desc[0]]
        result.append((pos, d, desc[1]))
        pos += desc[0]
    return result


def format_entry_point(memory: bytes) -> str:
    """
    Display the entry point as readable assembler.

    Here we assume it's a jump, optionally preceded by a `nop`.
    """
    if memory[0] == 0x00 and memory[1] == 0xC3:
        address = int.from_bytes(memory[2:4], byteorder='little', signed=False)
        return f"nop; jp 0x{address:04X}"
    if memory[0] == 0xC3:
        address = int.from_bytes(memory[1:3], byteorder='little', signed=False)
        return f"jp 0x{address:04X}"
    return "?"


def check_encoding(encoding: str):
    """
    Check that `encoding` names a codec decoding bytes into text.

    Raises:
        LookupError: If the codec is unknown, or is a bytes-to-bytes or
            text-to-text codec such as `hex` or `rot13`.
    """
    # An empty input would skip the codec lookup
    try:
        b"\x00\x00\x00\x00".decode(encoding)
    except UnicodeDecodeError:
        pass


def _read_field(data: bytes, field: HeaderField, encoding: str):
    desc = field.value
    if desc.kind == FieldKind.U8:
        return data[desc.offset]
    raw = desc.slice(data)
    if desc.kind == FieldKind.U16_BIG:
        return int.from_bytes(raw, byteorder='big', signed=False)
    if desc.kind == FieldKind.TEXT:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise TextDecodeError(field.attribute, desc.offset, e.reason) from e
    return raw


class CartridgeHeader(typing.NamedTuple):
    entry_point: bytes
    nintendo_logo: bytes
    title: str
    manufacturer_code: str
    cgb_flag: int
    new_licensee_code: str
    sgb_flag: int
    cartridge_type: int
    rom_size_flag: int
    ram_size_flag: int
    destination_code: int
    old_licensee_code: int
    mask_rom_version_number: int
    header_checksum: int
    global_checksum: int
    full_image: bytes

    @staticmethod
    def parse(data: bytes, encoding: str = "utf-8") -> "CartridgeHeader":
        """
        Extract the header from a whole ROM image.

        Text fields are decoded with `encoding` and keep their padding.

        Raises:
            LookupError: If `encoding` is not a text encoding.
            FormatError: If the image is too small to contain a header.
            TextDecodeError: If a text field can't be decoded.
        """
        check_encoding(encoding)
        image = bytes(data)
        if len(image) < MIN_IMAGE_SIZE:
            raise FormatError(len(image), MIN_IMAGE_SIZE)
        values = {f.attribute: _read_field(image, f, encoding) for f in HeaderField}
        return CartridgeHeader(full_image=image, **values)

    def is_header_checksum_valid(self) -> bool:
        return checksum.is_header_checksum_valid(self)

    def is_global_checksum_valid(self) -> bool:
        return checksum.is_global_checksum_valid(self)

    def is_logo_valid(self) -> bool:
        return logo.is_logo_valid(self)

    @property
    def display_title(self) -> str:
        """Title without the padding."""
        return self.title.rstrip("\x00")

    @property
    def rom_size(self) -> int | None:
        return model.rom_size(self.rom_size_flag)

    @property
    def ram_size(self) -> int | None:
        return model.ram_size(self.ram_size_flag)

    @property
    def licensee(self) -> str | None:
        return model.licensee_name(self.old_licensee_code, self.new_licensee_code)

    def parse_struct(self) -> list[tuple[int, bytes, str]]:
        """
        Describe the header as a list of `(offset, bytes, description)`.
        """
        cartridgeType = model.cartridge_type_name(self.cartridge_type) or "unknown"
        destination = model.destination_name(self.destination_code) or "unknown"
        description = [
            # Address 0100h
            (4, f"Entry point: {format_entry_point(self.entry_point)}"),
            # 48 bytes...
            (16, f"Nintendo logo: {'valid' if self.is_logo_valid() else 'invalid'}"),
            (16, ""),
            (16, ""),
            # Address 0134h
            (11, f"Title: {self.display_title}"),
            (4, f"Manufacturer code: {self.manufacturer_code.rstrip(chr(0))}"),
            (1, f"CGB flag: {model.CgbSupport.from_flag(self.cgb_flag).name.lower()}"),
            (2, f"New licensee code: {self.new_licensee_code.rstrip(chr(0))}"),
            (1, f"SGB flag: {model.SgbSupport.from_flag(self.sgb_flag).name.lower()}"),
            (1, f"Cartridge type: {cartridgeType}"),
            (1, f"ROM size: {model.format_size(self.rom_size)}"),
            (1, f"RAM size: {model.format_size(self.ram_size)}"),
            (1, f"Destination: {destination}"),
            (1, f"Old licensee code: {self.licensee or 'unknown'}"),
            (1, f"Mask ROM version number: {self.mask_rom_version_number}"),
            (1, f"Header checksum: {'valid' if self.is_header_checksum_valid() else 'invalid'}"),
            # Address 014Eh
            (2, f"Global checksum: {'valid' if self.is_global_checksum_valid() else 'invalid'}"),
        ]
        return _as_struct(self.full_image, HEADER_OFFSET, description)


def parse(data: bytes, encoding: str = "utf-8") -> CartridgeHeader:
    return CartridgeHeader.parse(data, encoding)
