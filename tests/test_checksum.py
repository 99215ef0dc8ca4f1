import pytest
import numpy
from gbheader.header import parse
from gbheader.checksum import (
    compute_header_checksum,
    compute_global_checksum,
    is_header_checksum_valid,
    is_global_checksum_valid,
)


def reference_header_checksum(image):
    x = 0
    for i in range(0x134, 0x14D):
        x = (x - image[i] - 1) & 0xFFFF
    return x & 0xFF


def reference_global_checksum(image):
    x = 0
    for i, b in enumerate(image):
        if i not in (0x14E, 0x14F):
            x = (x + b) & 0xFFFF
    return x


def random_image(seed, size):
    rng = numpy.random.default_rng(seed)
    return bytearray(rng.integers(0, 256, size, dtype=numpy.uint8).tobytes())


def test_zero_image_header_checksum():
    image = bytearray(0x150)
    assert compute_header_checksum(image) == 0xE7
    image[0x14D] = 0xE7
    header = parse(image)
    assert is_header_checksum_valid(header)
    assert header.is_header_checksum_valid()


def test_zero_image_global_checksum():
    image = bytearray(0x150)
    image[0x14D] = 0xE7
    header = parse(image)
    assert compute_global_checksum(image) == 0xE7
    assert not is_global_checksum_valid(header)
    image[0x14F] = 0xE7
    assert is_global_checksum_valid(parse(image))


def test_header_checksum_mismatch():
    image = bytearray(0x150)
    image[0x14D] = 0xE6
    assert not is_header_checksum_valid(parse(image))


def test_header_checksum_ignores_outside_range():
    image = bytearray(0x150)
    image[0x133] = 0x55
    image[0x14E] = 0x55
    assert compute_header_checksum(image) == 0xE7


@pytest.mark.parametrize("seed,size", [(0, 0x150), (1, 0x8000), (2, 0x10000), (3, 1234)])
def test_header_checksum_matches_wrapping_formula(seed, size):
    image = random_image(seed, size)
    assert compute_header_checksum(image) == reference_header_checksum(image)


@pytest.mark.parametrize("seed,size", [(0, 0x150), (1, 0x8000), (2, 0x10000), (3, 1234)])
def test_global_checksum_matches_wrapping_formula(seed, size):
    image = random_image(seed, size)
    assert compute_global_checksum(image) == reference_global_checksum(image)


def test_global_checksum_wraps():
    image = bytearray(b"\xff" * 0x8000)
    image[0x134:0x143] = b"A" * 15
    image[0x144:0x146] = b"00"
    expected = (0xFF * (0x8000 - 2 - 17) + 0x41 * 15 + 0x30 * 2) & 0xFFFF
    assert compute_global_checksum(image) == expected
    image[0x14E] = expected >> 8
    image[0x14F] = expected & 0xFF
    assert is_global_checksum_valid(parse(image))


def test_global_checksum_is_big_endian():
    image = bytearray(0x400)
    image[0x300:0x312] = b"\xff" * 18
    value = compute_global_checksum(image)
    assert value == 0x11EE
    image[0x14E] = 0xEE
    image[0x14F] = 0x11
    assert not is_global_checksum_valid(parse(image))
    image[0x14E] = 0x11
    image[0x14F] = 0xEE
    assert is_global_checksum_valid(parse(image))
