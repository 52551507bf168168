# -*- coding: utf-8 -*-
"""Turn recovered integers back into text under the legacy code page."""

from typing import Iterable

from Crypto.Util.number import long_to_bytes

from .errors import InvalidEncoding

# the target ciphertexts were produced from Windows-1251 text
LEGACY_ENCODING = "cp1251"


def decode_block(m: int, index=None) -> str:
    # minimal big-endian form, no padding
    raw = long_to_bytes(m)
    try:
        return raw.decode(LEGACY_ENCODING)
    except UnicodeDecodeError as ex:
        raise InvalidEncoding(m, index, reason=f"byte 0x{raw[ex.start]:02x} at offset {ex.start}") from ex


def decode_blocks(values: Iterable[int]) -> str:
    """Decode blocks in order; the first undecodable block fails the lot."""
    return "".join(decode_block(m, index=i) for i, m in enumerate(values))
