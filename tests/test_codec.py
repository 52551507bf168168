"""
Tests for the legacy code page decoder.
"""

import pytest

from weakrsa.codec import LEGACY_ENCODING, decode_block, decode_blocks
from weakrsa.errors import InvalidEncoding


def as_int(text):
    return int.from_bytes(text.encode(LEGACY_ENCODING), "big")


def test_decode_cyrillic_block():
    assert decode_block(0xC0E1) == "Аб"
    assert decode_block(as_int("мост")) == "мост"


def test_decode_uses_minimal_bytes():
    # no leading NUL padding
    assert decode_block(0x41) == "A"


def test_decode_zero():
    assert decode_block(0) == "\x00"


def test_undefined_byte_fails_closed():
    with pytest.raises(InvalidEncoding) as info:
        decode_block(0x98, index=3)
    assert info.value.index == 3
    assert info.value.value == 0x98
    assert "0x98" in str(info.value)


def test_decode_blocks_keeps_order():
    assert decode_blocks([as_int("пак"), as_int("еты")]) == "пакеты"


def test_decode_blocks_one_bad_block_fails_all():
    with pytest.raises(InvalidEncoding) as info:
        decode_blocks([as_int("ok"), 0x4198, as_int("ok")])
    assert info.value.index == 1
