from __future__ import annotations
import typing

if typing.TYPE_CHECKING:
    from .header import CartridgeHeader


NINTENDO_LOGO = b"\
\xce\xed\x66\x66\xcc\x0d\x00\x0b\x03\x73\x00\x83\x00\x0c\x00\x0d\
\x00\x08\x11\x1f\x88\x89\x00\x0e\xdc\xcc\x6e\xe6\xdd\xdd\xd9\x99\
\xbb\xbb\x67\x63\x6e\x0e\xec\xcc\xdd\xdc\x99\x9f\xbb\xb9\x33\x3e"
"""Bitmap the boot ROM expects at 0x0104."""


def is_logo_valid(header: CartridgeHeader) -> bool:
    """True if the logo of the header is exactly the reference bitmap."""
    return header.nintendo_logo == NINTENDO_LOGO
