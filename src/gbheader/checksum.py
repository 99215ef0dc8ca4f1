from __future__ import annotations
import typing
import numpy

from .layout import HEADER_CHECKSUM_RANGE, GLOBAL_CHECKSUM_SKIPPED

if typing.TYPE_CHECKING:
    from .header import CartridgeHeader


def _byte_sum(data: bytes, start: int = 0, stop: int | None = None) -> int:
    array = numpy.frombuffer(data, dtype=numpy.uint8)
    return int(array[start:stop].sum(dtype=numpy.uint64))


def compute_header_checksum(image: bytes) -> int:
    """
    Compute the header checksum of a ROM image.

    It is the result of `x = x - byte - 1` for each byte in 0x0134..0x014C,
    starting from 0, with wrapping arithmetic, truncated to 8 bits.

    Wrapping at 16 then at 8 bits is the same as computing the value
    modulo 256 in a single step.
    """
    start, stop = HEADER_CHECKSUM_RANGE.start, HEADER_CHECKSUM_RANGE.stop
    total = _byte_sum(image, start, stop) + len(HEADER_CHECKSUM_RANGE)
    return -total & 0xFF


def compute_global_checksum(image: bytes) -> int:
    """
    Compute the global checksum of a ROM image.

    It is the sum of every bytes of the image, except the 2 bytes of the
    stored checksum, truncated to 16 bits.
    """
    total = _byte_sum(image)
    for i in GLOBAL_CHECKSUM_SKIPPED:
        total -= image[i]
    return total & 0xFFFF


def is_header_checksum_valid(header: CartridgeHeader) -> bool:
    return compute_header_checksum(header.full_image) == header.header_checksum


def is_global_checksum_valid(header: CartridgeHeader) -> bool:
    return compute_global_checksum(header.full_image) == header.global_checksum
