import pytest
from gbheader.header import parse
from gbheader.logo import NINTENDO_LOGO, is_logo_valid


def create_image(logo: bytes) -> bytearray:
    image = bytearray(0x150)
    image[0x104:0x134] = logo
    return image


def test_reference_size():
    assert len(NINTENDO_LOGO) == 48
    assert NINTENDO_LOGO[:4] == b"\xce\xed\x66\x66"
    assert NINTENDO_LOGO[-4:] == b"\xbb\xb9\x33\x3e"


def test_valid_logo():
    header = parse(create_image(NINTENDO_LOGO))
    assert is_logo_valid(header)
    assert header.is_logo_valid()


def test_zero_logo():
    header = parse(create_image(bytes(48)))
    assert not is_logo_valid(header)


@pytest.mark.parametrize("index", [0, 1, 23, 47])
def test_single_byte_perturbation(index):
    logo = bytearray(NINTENDO_LOGO)
    logo[index] ^= 0x01
    header = parse(create_image(logo))
    assert not is_logo_valid(header)


def test_swapped_bytes():
    logo = bytearray(NINTENDO_LOGO)
    logo[0], logo[1] = logo[1], logo[0]
    header = parse(create_image(logo))
    assert not header.is_logo_valid()
