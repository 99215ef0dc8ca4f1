import sys
import codecs
import logging
import argparse
import rtoml
from importlib.metadata import version

from . import model
from .checksum import compute_header_checksum, compute_global_checksum
from .errors import RomLoadError
from .header import CartridgeHeader, check_encoding, format_entry_point
from .rom_file import load_file


def _encoding(name: str) -> str:
    try:
        check_encoding(name)
        return codecs.lookup(name).name
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown text encoding '{name}'")


def format_text(header: CartridgeHeader) -> str:
    """Human readable description of the header, one field per line."""
    lines = [
        f"Title: {header.display_title}",
        f"Manufacturer code: {header.manufacturer_code.rstrip(chr(0))}",
        f"CGB flag: 0x{header.cgb_flag:X}",
        f"New licensee code: {header.new_licensee_code.rstrip(chr(0))}",
        f"SGB flag: 0x{header.sgb_flag:X}",
        f"Cartridge type: 0x{header.cartridge_type:X} ({model.cartridge_type_name(header.cartridge_type) or 'unknown'})",
        f"ROM size flag: 0x{header.rom_size_flag:X} ({model.format_size(header.rom_size)})",
        f"RAM size flag: 0x{header.ram_size_flag:X} ({model.format_size(header.ram_size)})",
        f"Destination code: 0x{header.destination_code:X} ({model.destination_name(header.destination_code) or 'unknown'})",
        f"Old licensee code: 0x{header.old_licensee_code:X} ({header.licensee or 'unknown'})",
        f"Mask ROM version number: 0x{header.mask_rom_version_number:X}",
        f"Entry point: {header.entry_point.hex(' ').upper()} ({format_entry_point(header.entry_point)})",
        f"Nintendo logo: {'valid' if header.is_logo_valid() else 'invalid'}",
        f"Header checksum: 0x{header.header_checksum:X} (valid: {header.is_header_checksum_valid()})",
        f"Global checksum: 0x{header.global_checksum:X} (valid: {header.is_global_checksum_valid()})",
    ]
    return "\n".join(lines)


def format_toml(header: CartridgeHeader) -> str:
    data = {
        "header": {
            "entry_point": header.entry_point.hex(),
            "nintendo_logo": header.nintendo_logo.hex(),
            "title": header.display_title,
            "manufacturer_code": header.manufacturer_code.rstrip("\x00"),
            "cgb_flag": header.cgb_flag,
            "new_licensee_code": header.new_licensee_code.rstrip("\x00"),
            "sgb_flag": header.sgb_flag,
            "cartridge_type": header.cartridge_type,
            "rom_size_flag": header.rom_size_flag,
            "ram_size_flag": header.ram_size_flag,
            "destination_code": header.destination_code,
            "old_licensee_code": header.old_licensee_code,
            "mask_rom_version_number": header.mask_rom_version_number,
            "header_checksum": header.header_checksum,
            "global_checksum": header.global_checksum,
            "image_size": len(header.full_image),
        },
        "validation": {
            "logo": header.is_logo_valid(),
            "header_checksum": header.is_header_checksum_valid(),
            "computed_header_checksum": compute_header_checksum(header.full_image),
            "global_checksum": header.is_global_checksum_valid(),
            "computed_global_checksum": compute_global_checksum(header.full_image),
        },
    }
    return rtoml.dumps(data)


def show_gui(header: CartridgeHeader, filename: str) -> int:
    from PyQt5 import Qt
    app = Qt.QApplication([])

    from .widgets.header_view import CartridgeHeaderView
    win = CartridgeHeaderView()
    win.setWindowTitle(f"{header.display_title} - {filename}")
    win.setHeader(header)
    win.resize(640, 480)
    win.show()
    return app.exec()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='gbheader',
        description='Display the cartridge header of Game Boy ROMs',
    )

    parser.add_argument(
        "filename",
        help="A .gb or .gbc ROM file"
    )
    parser.add_argument(
        "--encoding",
        type=_encoding,
        default="utf-8",
        help="Encoding of the text fields (default: utf-8)"
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--toml",
        action="store_true",
        help="Dump the header as a TOML document"
    )
    output.add_argument(
        "--gui",
        action="store_true",
        help="Display the header in a window"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Display debug messages"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {version('gbheader')}"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        header = load_file(args.filename, args.encoding)
    except RomLoadError as e:
        logging.error("Failed to load ROM file: %s", e, exc_info=args.verbose)
        return 1

    if args.gui:
        return show_gui(header, args.filename)

    if args.toml:
        print(format_toml(header), end="")
    else:
        print(format_text(header))
    return 0


if __name__ == "__main__":
    sys.exit(main())
