"""
Meaning of the flag bytes stored in the cartridge header.

See https://gbdev.io/pandocs/The_Cartridge_Header.html
"""

import enum


class CgbSupport(enum.Enum):
    NONE = enum.auto()
    """Original Game Boy game"""

    COMPATIBLE = enum.auto()
    """Works on Game Boy, enhanced on Game Boy Color (0x80)"""

    ONLY = enum.auto()
    """Only works on Game Boy Color (0xC0)"""

    @staticmethod
    def from_flag(flag: int) -> "CgbSupport":
        if flag == 0xC0:
            return CgbSupport.ONLY
        if flag & 0x80:
            return CgbSupport.COMPATIBLE
        return CgbSupport.NONE


class SgbSupport(enum.Enum):
    NONE = enum.auto()

    SUPPORTED = enum.auto()
    """Super Game Boy functions are enabled (0x03)"""

    @staticmethod
    def from_flag(flag: int) -> "SgbSupport":
        if flag == 0x03:
            return SgbSupport.SUPPORTED
        return SgbSupport.NONE


CARTRIDGE_TYPES = {
    0x00: "ROM ONLY",
    0x01: "MBC1",
    0x02: "MBC1+RAM",
    0x03: "MBC1+RAM+BATTERY",
    0x05: "MBC2",
    0x06: "MBC2+BATTERY",
    0x08: "ROM+RAM",
    0x09: "ROM+RAM+BATTERY",
    0x0B: "MMM01",
    0x0C: "MMM01+RAM",
    0x0D: "MMM01+RAM+BATTERY",
    0x0F: "MBC3+TIMER+BATTERY",
    0x10: "MBC3+TIMER+RAM+BATTERY",
    0x11: "MBC3",
    0x12: "MBC3+RAM",
    0x13: "MBC3+RAM+BATTERY",
    0x19: "MBC5",
    0x1A: "MBC5+RAM",
    0x1B: "MBC5+RAM+BATTERY",
    0x1C: "MBC5+RUMBLE",
    0x1D: "MBC5+RUMBLE+RAM",
    0x1E: "MBC5+RUMBLE+RAM+BATTERY",
    0x20: "MBC6",
    0x22: "MBC7+SENSOR+RUMBLE+RAM+BATTERY",
    0xFC: "POCKET CAMERA",
    0xFD: "BANDAI TAMA5",
    0xFE: "HuC3",
    0xFF: "HuC1+RAM+BATTERY",
}

RAM_SIZES = {
    0x00: 0,
    0x01: 2 * 1024,
    0x02: 8 * 1024,
    0x03: 32 * 1024,
    0x04: 128 * 1024,
    0x05: 64 * 1024,
}

DESTINATIONS = {
    0x00: "Japan",
    0x01: "Overseas only",
}

USE_NEW_LICENSEE_CODE = 0x33

# Most common publishers only
OLD_LICENSEES = {
    0x00: "None",
    0x01: "Nintendo",
    0x08: "Capcom",
    0x09: "HOT-B",
    0x0A: "Jaleco",
    0x0B: "Coconuts Japan",
    0x0C: "Elite Systems",
    0x13: "EA (Electronic Arts)",
    0x18: "Hudson Soft",
    0x19: "ITC Entertainment",
    0x1A: "Yanoman",
    0x1D: "Japan Clary",
    0x1F: "Virgin Games",
    0x24: "PCM Complete",
    0x25: "San-X",
    0x28: "Kemco",
    0x29: "SETA Corporation",
    0x30: "Infogrames",
    0x31: "Nintendo",
    0x32: "Bandai",
    0x34: "Konami",
    0x35: "HectorSoft",
    0x38: "Capcom",
    0x39: "Banpresto",
    0x41: "Ubi Soft",
    0x42: "Atlus",
    0x44: "Malibu Interactive",
    0x46: "Angel",
    0x47: "Spectrum HoloByte",
    0x49: "Irem",
    0x4A: "Virgin Games",
    0x4D: "Malibu Interactive",
    0x4F: "U.S. Gold",
    0x50: "Absolute",
    0x51: "Acclaim Entertainment",
    0x52: "Activision",
    0x53: "Sammy USA Corporation",
    0x54: "GameTek",
    0x55: "Park Place",
    0x56: "LJN",
    0x57: "Matchbox",
    0x59: "Milton Bradley Company",
    0x5A: "Mindscape",
    0x5B: "Romstar",
    0x5C: "Naxat Soft",
    0x5D: "Tradewest",
    0x60: "Titus Interactive",
    0x61: "Virgin Games",
    0x67: "Ocean Software",
    0x69: "EA (Electronic Arts)",
    0x6E: "Elite Systems",
    0x6F: "Electro Brain",
    0x70: "Infogrames",
    0x71: "Interplay Entertainment",
    0x72: "Broderbund",
    0x78: "THQ",
    0x79: "Accolade",
    0x7C: "Microprose",
    0x7F: "Kemco",
    0x8B: "Bullet-Proof Software",
    0x8C: "Vic Tokai",
    0x8F: "I'Max",
    0x91: "Chunsoft Co.",
    0x92: "Video System",
    0x97: "Kaneko",
    0x99: "Arc",
    0x9A: "Nihon Bussan",
    0x9B: "Tecmo",
    0x9C: "Imagineer",
    0x9D: "Banpresto",
    0xA4: "Konami (Yu-Gi-Oh!)",
    0xA7: "Takara",
    0xAF: "Namco",
    0xB0: "Acclaim Entertainment",
    0xB1: "ASCII Corporation or Nexsoft",
    0xB2: "Bandai",
    0xB4: "Square Enix",
    0xB6: "HAL Laboratory",
    0xB7: "SNK",
    0xBB: "Sunsoft",
    0xBF: "Sammy Corporation",
    0xC0: "Taito",
    0xC2: "Kemco",
    0xC3: "Square",
    0xC5: "Data East",
    0xCE: "Pony Canyon",
    0xD1: "Sofel",
    0xD3: "Sigma Entertainment",
    0xDA: "Tomy",
    0xDB: "LJN",
    0xE0: "Jaleco",
    0xE7: "Athena",
    0xE8: "Asmik Ace Entertainment",
    0xE9: "Natsume",
    0xEB: "Atlus",
    0xEC: "Epic/Sony Records",
    0xEE: "IGS",
    0xF0: "A Wave",
    0xF3: "Extreme Entertainment",
    0xFF: "LJN",
}

NEW_LICENSEES = {
    "00": "None",
    "01": "Nintendo Research & Development 1",
    "08": "Capcom",
    "13": "EA (Electronic Arts)",
    "18": "Hudson Soft",
    "19": "B-AI",
    "20": "KSS",
    "22": "Planning Office WADA",
    "24": "PCM Complete",
    "25": "San-X",
    "28": "Kemco",
    "29": "SETA Corporation",
    "30": "Viacom",
    "31": "Nintendo",
    "32": "Bandai",
    "33": "Ocean Software/Acclaim Entertainment",
    "34": "Konami",
    "35": "HectorSoft",
    "37": "Taito",
    "38": "Hudson Soft",
    "39": "Banpresto",
    "41": "Ubi Soft",
    "42": "Atlus",
    "44": "Malibu Interactive",
    "46": "Angel",
    "47": "Bullet-Proof Software",
    "49": "Irem",
    "50": "Absolute",
    "51": "Acclaim Entertainment",
    "52": "Activision",
    "53": "Sammy USA Corporation",
    "54": "Konami",
    "55": "Hi Tech Expressions",
    "56": "LJN",
    "57": "Matchbox",
    "58": "Mattel",
    "59": "Milton Bradley Company",
    "60": "Titus Interactive",
    "61": "Virgin Games Ltd.",
    "64": "Lucasfilm Games",
    "67": "Ocean Software",
    "69": "EA (Electronic Arts)",
    "70": "Infogrames",
    "71": "Interplay Entertainment",
    "72": "Broderbund",
    "73": "Sculptured Software",
    "75": "The Sales Curve Limited",
    "78": "THQ",
    "79": "Accolade",
    "80": "Misawa Entertainment",
    "83": "lozc",
    "86": "Tokuma Shoten",
    "87": "Tsukuda Original",
    "91": "Chunsoft Co.",
    "92": "Video System",
    "93": "Ocean Software/Acclaim Entertainment",
    "95": "Varie",
    "96": "Yonezawa/s'pal",
    "97": "Kaneko",
    "99": "Pack-In-Video",
    "9H": "Bottom Up",
    "A4": "Konami (Yu-Gi-Oh!)",
    "BL": "MTO",
    "DK": "Kodansha",
}


def cartridge_type_name(value: int) -> str | None:
    return CARTRIDGE_TYPES.get(value)


def destination_name(value: int) -> str | None:
    return DESTINATIONS.get(value)


def rom_size(flag: int) -> int | None:
    """
    Return the size of the ROM in bytes.

    The ROM is made of `2 << flag` banks of 16 KiB.
    """
    if 0 <= flag <= 8:
        return (32 * 1024) << flag
    return None


def ram_size(flag: int) -> int | None:
    """Return the size of the external RAM in bytes."""
    return RAM_SIZES.get(flag)


def licensee_name(old_code: int, new_code: str) -> str | None:
    """
    Return the name of the publisher.

    The 2 characters new licensee code is only used when the old one
    is 0x33.
    """
    if old_code == USE_NEW_LICENSEE_CODE:
        return NEW_LICENSEES.get(new_code)
    return OLD_LICENSEES.get(old_code)


def format_size(size: int | None) -> str:
    if size is None:
        return "unknown"
    if size >= 1024 * 1024:
        return f"{size // (1024 * 1024)} MiB"
    return f"{size // 1024} KiB"
