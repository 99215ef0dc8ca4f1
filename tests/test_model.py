import pytest
from gbheader import model


@pytest.mark.parametrize(
    "flag,expected",
    (
        (0x00, model.CgbSupport.NONE),
        (0x80, model.CgbSupport.COMPATIBLE),
        (0xC0, model.CgbSupport.ONLY),
        (0x41, model.CgbSupport.NONE),
    ),
)
def test_cgb_support(flag, expected):
    assert model.CgbSupport.from_flag(flag) == expected


def test_sgb_support():
    assert model.SgbSupport.from_flag(0x03) == model.SgbSupport.SUPPORTED
    assert model.SgbSupport.from_flag(0x00) == model.SgbSupport.NONE


@pytest.mark.parametrize(
    "flag,expected",
    (
        (0x00, 32 * 1024),
        (0x01, 64 * 1024),
        (0x08, 8 * 1024 * 1024),
        (0x52, None),
    ),
)
def test_rom_size(flag, expected):
    assert model.rom_size(flag) == expected


def test_ram_size():
    assert model.ram_size(0x00) == 0
    assert model.ram_size(0x05) == 64 * 1024
    assert model.ram_size(0x06) is None


def test_licensee_name():
    assert model.licensee_name(0x01, "\x00\x00") == "Nintendo"
    assert model.licensee_name(0x33, "01") == "Nintendo Research & Development 1"
    assert model.licensee_name(0x33, "ZZ") is None


def test_cartridge_type_name():
    assert model.cartridge_type_name(0x00) == "ROM ONLY"
    assert model.cartridge_type_name(0x1B) == "MBC5+RAM+BATTERY"
    assert model.cartridge_type_name(0x04) is None


def test_format_size():
    assert model.format_size(None) == "unknown"
    assert model.format_size(32 * 1024) == "32 KiB"
    assert model.format_size(2 * 1024 * 1024) == "2 MiB"
