"""UTF-8 decoding and whole-input validation.

Two decoders live here. `decode_codepoint` is permissive and only meant for
input that `validate_utf8` has already accepted. `decode_secure` applies the
full rule set: truncation, continuation bytes, overlong forms, the Unicode
range, surrogate halves and non-characters.
"""

from typing import Iterator, Optional

from safeslug.core.errors import InvalidEncodingError
from safeslug.core.models import DecodeResult


MAX_CODEPOINT = 0x10FFFF

# Smallest codepoint that legitimately needs a sequence of the given length.
MIN_CODEPOINT_FOR_LENGTH = {1: 0x0, 2: 0x80, 3: 0x800, 4: 0x10000}

# Payload bits carried by the lead byte, keyed by sequence length.
LEAD_MASK = {1: 0x7F, 2: 0x1F, 3: 0x0F, 4: 0x07}


def sequence_length(lead: int) -> int:
    """Declared sequence length from the lead byte's high bits; 0 if no valid pattern."""
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def is_continuation(b: int) -> bool:
    return b & 0xC0 == 0x80


def is_overlong(codepoint: int, length: int) -> bool:
    """True if `length` bytes is more than `codepoint` needs."""
    return codepoint < MIN_CODEPOINT_FOR_LENGTH[length]


def is_surrogate(codepoint: int) -> bool:
    return 0xD800 <= codepoint <= 0xDFFF


def is_noncharacter(codepoint: int) -> bool:
    """U+FDD0..U+FDEF and the last two codepoints of every plane."""
    return 0xFDD0 <= codepoint <= 0xFDEF or codepoint & 0xFFFE == 0xFFFE


def _accumulate(data: bytes, pos: int, length: int) -> int:
    codepoint = data[pos] & LEAD_MASK[length]
    for b in data[pos + 1:pos + length]:
        codepoint = (codepoint << 6) | (b & 0x3F)
    return codepoint


def decode_codepoint(data: bytes, pos: int) -> DecodeResult:
    """Decode the sequence at `pos` without security checks.

    A byte with no valid lead pattern is returned as itself with consumed=1
    and valid=False. Only call this on validated input.
    """
    length = sequence_length(data[pos])
    if length == 0:
        return DecodeResult(codepoint=data[pos], consumed=1, valid=False)
    return DecodeResult(codepoint=_accumulate(data, pos, length), consumed=length, valid=True)


def _check(data: bytes, pos: int) -> tuple[int, int, Optional[str]]:
    """Return (codepoint, length, reason) for the sequence at pos; reason is None when valid."""
    length = sequence_length(data[pos])
    if length == 0:
        return 0, 1, "invalid lead byte"
    if pos + length > len(data):
        return 0, len(data) - pos, "truncated"
    if not all(is_continuation(b) for b in data[pos + 1:pos + length]):
        return 0, length, "bad continuation"

    codepoint = _accumulate(data, pos, length)
    if is_overlong(codepoint, length):
        return codepoint, length, "overlong"
    if codepoint > MAX_CODEPOINT:
        return codepoint, length, "out of range"
    if is_surrogate(codepoint):
        return codepoint, length, "surrogate"
    if is_noncharacter(codepoint):
        return codepoint, length, "noncharacter"
    return codepoint, length, None


def decode_secure(data: bytes, pos: int) -> DecodeResult:
    """Decode the sequence at `pos`, flagging it invalid on any rule violation."""
    codepoint, length, reason = _check(data, pos)
    if reason is not None:
        return DecodeResult(codepoint=0, consumed=max(length, 1), valid=False)
    return DecodeResult(codepoint=codepoint, consumed=length, valid=True)


def validate_utf8(data: bytes) -> None:
    """Accept the whole input or raise InvalidEncodingError at the first bad sequence."""
    pos = 0
    while pos < len(data):
        _, length, reason = _check(data, pos)
        if reason is not None:
            raise InvalidEncodingError(pos, reason)
        pos += length


def is_valid_utf8(data: bytes) -> bool:
    try:
        validate_utf8(data)
    except InvalidEncodingError:
        return False
    return True


def iter_codepoints(data: bytes) -> Iterator[tuple[int, bytes]]:
    """Yield (codepoint, raw_bytes) for each sequence of validated input."""
    pos = 0
    while pos < len(data):
        result = decode_codepoint(data, pos)
        yield result.codepoint, data[pos:pos + result.consumed]
        pos += result.consumed
